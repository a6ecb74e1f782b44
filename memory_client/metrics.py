"""Minimal in-memory metrics collector.

Purpose:
    - Counters for config validation failures and silent coercions.
    - Zero external deps; read back through snapshot() by hosts and tests.

Core API (intentionally tiny):
    inc(name, labels=None, value=1)
    snapshot() -> dict (copy for safe reading)

Thread-safety: coarse RLock; overhead negligible for low event volume.

Config metric names (documented for discoverability):
    - config_validation_errors_total{code}
    - config_field_coerced_total{field,reason}
    - env_placeholder_resolved_total{field}
    - config_file_loaded_total{file}
"""
from __future__ import annotations

from threading import RLock
from time import time
from typing import Dict, Tuple, Any

_COUNTERS: Dict[Tuple[str, Tuple[Tuple[str, str], ...]], float] = {}
_LOCK = RLock()


def _norm_labels(labels: dict[str, Any] | None) -> Tuple[Tuple[str, str], ...]:
    if not labels:
        return tuple()
    return tuple(sorted((str(k), str(v)) for k, v in labels.items()))


def inc(
    name: str,
    labels: dict[str, Any] | None = None,
    value: float = 1.0,
) -> None:
    key = (name, _norm_labels(labels))
    with _LOCK:
        _COUNTERS[key] = _COUNTERS.get(key, 0.0) + value


def snapshot() -> dict[str, Any]:
    with _LOCK:
        counters: dict[str, float] = {}
        for (name, labels), v in _COUNTERS.items():
            label_str = ""
            if labels:
                label_str = "{" + ",".join(f"{k}={v}" for k, v in labels) + "}"
            counters[name + label_str] = v
        return {
            "ts": time(),
            "counters": counters,
        }


def reset_for_tests() -> None:  # pragma: no cover
    with _LOCK:
        _COUNTERS.clear()


__all__ = [
    "inc",
    "snapshot",
    "reset_for_tests",
]
