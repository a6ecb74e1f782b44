"""Field metadata for config editing UIs.

Static, read-only table keyed by the camelCase field names ``normalize``
accepts. Checked against ``MEMORY_CONFIG_FIELDS`` at import.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .schemas.memory import (
    DEFAULT_MIN_SCORE,
    DEFAULT_RECALL_LIMIT,
    DEFAULT_SERVER_URL,
    DEFAULT_TIMEOUT,
    MEMORY_CONFIG_FIELDS,
    ExtractionStrategy,
)


class FieldOption(BaseModel):
    value: str
    label: str

    model_config = ConfigDict(frozen=True)


class FieldHint(BaseModel):
    """UI descriptor for one config field.

    ``sensitive`` asks the renderer to mask the value, ``advanced`` hides
    the field behind progressive disclosure, ``options`` lists enum choices
    in display order.
    """

    label: str
    placeholder: Optional[str] = None
    help: Optional[str] = None
    sensitive: bool = False
    advanced: bool = False
    multiline: bool = False
    options: Tuple[FieldOption, ...] = ()

    model_config = ConfigDict(frozen=True, extra="forbid")


_STRATEGY_LABELS = {
    ExtractionStrategy.DISCRETE: "Discrete (semantic & episodic memories)",
    ExtractionStrategy.SUMMARY: "Summary (running conversation summary)",
    ExtractionStrategy.PREFERENCES: "Preferences (user preferences)",
    ExtractionStrategy.CUSTOM: "Custom (use custom prompt)",
}

UI_HINTS: Mapping[str, FieldHint] = MappingProxyType({
    "serverUrl": FieldHint(
        label="Server URL",
        placeholder=DEFAULT_SERVER_URL,
        help=(
            "Base URL of the agent-memory-server "
            "(or use ${AGENT_MEMORY_SERVER_URL})"
        ),
    ),
    "apiKey": FieldHint(
        label="API Key",
        sensitive=True,
        placeholder="your-api-key",
        help=(
            "API key for authentication "
            "(optional, or use ${AGENT_MEMORY_API_KEY})"
        ),
    ),
    "bearerToken": FieldHint(
        label="Bearer Token",
        sensitive=True,
        placeholder="your-bearer-token",
        help="Bearer token for authentication (optional)",
        advanced=True,
    ),
    "namespace": FieldHint(
        label="Namespace",
        placeholder="default",
        help="Default namespace for organizing memories",
    ),
    "timeout": FieldHint(
        label="Timeout (ms)",
        placeholder=str(DEFAULT_TIMEOUT),
        advanced=True,
    ),
    "autoCapture": FieldHint(
        label="Auto-Capture",
        help="Automatically capture important information from conversations",
    ),
    "autoRecall": FieldHint(
        label="Auto-Recall",
        help="Automatically inject relevant memories into context",
    ),
    "minScore": FieldHint(
        label="Minimum Score",
        placeholder=str(DEFAULT_MIN_SCORE),
        help="Minimum similarity score for memory recall (0-1)",
        advanced=True,
    ),
    "recallLimit": FieldHint(
        label="Recall Limit",
        placeholder=str(DEFAULT_RECALL_LIMIT),
        help="Maximum number of memories to recall",
        advanced=True,
    ),
    "extractionStrategy": FieldHint(
        label="Extraction Strategy",
        placeholder=ExtractionStrategy.DISCRETE.value,
        help=(
            "How to extract memories: discrete (semantic/episodic), "
            "summary, preferences, or custom"
        ),
        options=tuple(
            FieldOption(value=s.value, label=_STRATEGY_LABELS[s])
            for s in ExtractionStrategy
        ),
    ),
    "customPrompt": FieldHint(
        label="Custom Extraction Prompt",
        placeholder=(
            "Extract action items and decisions from this conversation."
        ),
        help=(
            "Custom prompt for memory extraction "
            "(only used with 'custom' strategy)"
        ),
        multiline=True,
        advanced=True,
    ),
})

if set(UI_HINTS) != set(MEMORY_CONFIG_FIELDS):  # pragma: no cover
    raise RuntimeError(
        "UI hints out of sync with MemoryConfig fields: "
        f"{sorted(set(UI_HINTS) ^ set(MEMORY_CONFIG_FIELDS))}"
    )


def describe(field_name: str) -> Optional[FieldHint]:
    return UI_HINTS.get(field_name)
