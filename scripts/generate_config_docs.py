"""Autogenerate memory config documentation.

Walks ``MemoryConfig`` fields together with ``UI_HINTS`` and emits a
Markdown summary table to docs/Generated-Config.md. The test compares the
committed file with ``generate()`` to keep the two in sync.
"""
from __future__ import annotations

from pathlib import Path
from typing import get_args
import sys

# Ensure root on sys.path before importing project modules
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from memory_client.config import UI_HINTS, MemoryConfig  # noqa: E402

OUTPUT_PATH = ROOT / "docs" / "Generated-Config.md"


def _type_name(annotation) -> str:
    args = get_args(annotation)
    if type(None) in args:
        inner = [a for a in args if a is not type(None)][0]
        return f"Optional[{inner.__name__}]"
    return annotation.__name__


def _default(value) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def model_fields():
    for name, field in MemoryConfig.model_fields.items():
        alias = field.alias or name
        yield alias, _type_name(field.annotation), field.default, UI_HINTS[alias]


def generate() -> str:
    lines = [
        "# Generated Memory Config",
        "",
        "Autogenerated from MemoryConfig and UI_HINTS.",
        "",
        "| Field | Type | Default | Label | Sensitive | Advanced | Help |",
        "|-------|------|---------|-------|-----------|----------|------|",
    ]
    for alias, type_name, default, hint in model_fields():
        lines.append(
            f"| {alias} | {type_name} | {_default(default)} | {hint.label} "
            f"| {'yes' if hint.sensitive else ''} "
            f"| {'yes' if hint.advanced else ''} | {hint.help or ''} |"
        )
    for alias, _, _, hint in model_fields():
        if not hint.options:
            continue
        lines.append(f"\n## {alias} options\n")
        for opt in hint.options:
            lines.append(f"- `{opt.value}`: {opt.label}")
    return "\n".join(lines) + "\n"


def main():
    content = generate()
    OUTPUT_PATH.parent.mkdir(parents=True, exist_ok=True)
    OUTPUT_PATH.write_text(content, encoding="utf-8")
    print(f"[config-doc] written {OUTPUT_PATH}")  # noqa: T201


if __name__ == "__main__":  # pragma: no cover
    main()
