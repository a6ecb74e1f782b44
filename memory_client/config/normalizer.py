"""Memory client config normalization.

Turns an untrusted, untyped host value into a strict ``MemoryConfig``.

Fatal (raise ``ConfigError`` subclass, counted in
``config_validation_errors_total{code}``):
  - input is not a mapping
  - unknown top-level keys (every offending key is named)
  - extractionStrategy string outside the allowed set
  - extractionStrategy == custom without a non-empty customPrompt
  - ``${NAME}`` placeholder referencing an unset/empty variable
Lenient (fall back to default or clamp, counted in
``config_field_coerced_total{field,reason}``):
  - wrong value type for any field
  - minScore outside [0, 1], recallLimit below 1 or fractional
"""
from __future__ import annotations

import logging
import math
import os
import re
from collections.abc import Mapping
from typing import Any, Dict, Optional

from memory_client import metrics
from memory_client.errors import (
    ConfigError,
    InvalidEnumError,
    InvalidShapeError,
    MissingCustomPromptError,
    MissingEnvVarError,
    UnknownFieldError,
)

from .schemas.memory import (
    DEFAULT_MIN_SCORE,
    DEFAULT_RECALL_LIMIT,
    DEFAULT_SERVER_URL,
    DEFAULT_TIMEOUT,
    MEMORY_CONFIG_FIELDS,
    VALID_STRATEGIES,
    ExtractionStrategy,
    MemoryConfig,
)

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")

CONFIG_LABEL = "memory config"


def _is_finite_number(value: Any) -> bool:
    # bool is an int subclass but never a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int beyond float range
        return False


def _coerced(field: str, reason: str) -> None:
    logger.debug("[config-coerce] field=%s reason=%s", field, reason)
    metrics.inc("config_field_coerced_total", {"field": field, "reason": reason})


def count_failure(err: ConfigError) -> ConfigError:
    """Log and count a fatal config error, returning it for ``raise``."""
    logger.warning("[config-invalid] code=%s msg=%s", err.code, err)
    metrics.inc("config_validation_errors_total", {"code": err.code})
    return err


def resolve_env_vars(
    value: str,
    env: Optional[Mapping[str, str]] = None,
    field: str = "",
) -> str:
    """Replace every ``${NAME}`` token with ``env[NAME]`` in a single pass.

    Substituted text is not rescanned. Unset or empty variables raise
    ``MissingEnvVarError``. A token needs a non-empty name: an empty
    ``${}`` is not a placeholder and is left as is.
    """
    source = os.environ if env is None else env

    def _sub(match: re.Match) -> str:
        name = match.group(1)
        resolved = source.get(name)
        if not resolved:
            raise count_failure(MissingEnvVarError(name))
        logger.debug("[config-env] field=%s var=%s value=***", field, name)
        metrics.inc("env_placeholder_resolved_total", {"field": field})
        return resolved

    return _PLACEHOLDER.sub(_sub, value)


def _assert_allowed_keys(cfg: Mapping[Any, Any]) -> None:
    unknown = [str(k) for k in cfg.keys() if k not in MEMORY_CONFIG_FIELDS]
    if unknown:
        raise count_failure(UnknownFieldError(unknown, CONFIG_LABEL))


def _string(cfg: Mapping[Any, Any], field: str) -> Optional[str]:
    value = cfg.get(field)
    if value is None or isinstance(value, str):
        return value
    _coerced(field, "type")
    return None


def _number(cfg: Mapping[Any, Any], field: str, default: float) -> float:
    value = cfg.get(field)
    if _is_finite_number(value):
        return value
    if field in cfg:
        _coerced(field, "type")
    return default


def _flag(cfg: Mapping[Any, Any], field: str) -> bool:
    # anything except a literal False keeps the feature on
    return cfg.get(field, True) is not False


def _strategy(cfg: Mapping[Any, Any]) -> Optional[ExtractionStrategy]:
    value = cfg.get("extractionStrategy")
    if value is None:
        return None
    if not isinstance(value, str):
        _coerced("extractionStrategy", "type")
        return None
    if value not in VALID_STRATEGIES:
        raise count_failure(
            InvalidEnumError("extractionStrategy", value, VALID_STRATEGIES)
        )
    return ExtractionStrategy(value)


def _clamp_score(value: float) -> float:
    clamped = max(0.0, min(1.0, float(value)))
    if clamped != value:
        _coerced("minScore", "range")
    return clamped


def _clamp_limit(value: float) -> int:
    limited = max(1, math.floor(value))
    if limited != value:
        _coerced("recallLimit", "range")
    return limited


def normalize(
    raw: Any, env: Optional[Mapping[str, str]] = None
) -> MemoryConfig:
    """Validate and default a raw memory config.

    ``env`` is the mapping placeholders resolve against (``os.environ``
    when omitted). Raises a ``ConfigError`` subclass instead of returning
    a partial result.
    """
    if not isinstance(raw, Mapping):
        raise count_failure(InvalidShapeError(f"{CONFIG_LABEL} required"))
    _assert_allowed_keys(raw)

    strategy = _strategy(raw)
    custom_prompt = _string(raw, "customPrompt")
    if strategy is ExtractionStrategy.CUSTOM and not custom_prompt:
        raise count_failure(MissingCustomPromptError())

    server_url = _string(raw, "serverUrl")
    if server_url is None:
        server_url = DEFAULT_SERVER_URL
    api_key = _string(raw, "apiKey")
    bearer_token = _string(raw, "bearerToken")

    values: Dict[str, Any] = {
        "server_url": resolve_env_vars(server_url, env, "serverUrl"),
        "api_key": (
            resolve_env_vars(api_key, env, "apiKey")
            if api_key is not None
            else None
        ),
        "bearer_token": (
            resolve_env_vars(bearer_token, env, "bearerToken")
            if bearer_token is not None
            else None
        ),
        "namespace": _string(raw, "namespace"),
        "timeout": int(_number(raw, "timeout", DEFAULT_TIMEOUT)),
        "auto_capture": _flag(raw, "autoCapture"),
        "auto_recall": _flag(raw, "autoRecall"),
        "min_score": _clamp_score(
            _number(raw, "minScore", DEFAULT_MIN_SCORE)
        ),
        "recall_limit": _clamp_limit(
            _number(raw, "recallLimit", DEFAULT_RECALL_LIMIT)
        ),
        "extraction_strategy": strategy,
        "custom_prompt": custom_prompt,
    }
    return MemoryConfig(**values)

