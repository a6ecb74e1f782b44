"""Config subsystem public API.

Provides:
    normalize(raw, env=None) -> MemoryConfig (strict, defaulted, env-resolved)
    load_memory_config()     -> MemoryConfig from layered YAML files
    describe(name)           -> FieldHint | None for config UIs
    UI_HINTS                 -> read-only mapping of every FieldHint
    ConfigError              -> base of every validation failure
"""

from memory_client.errors import (  # noqa: F401
    ConfigError,
    ConfigFileError,
    InvalidEnumError,
    InvalidShapeError,
    MissingCustomPromptError,
    MissingEnvVarError,
    UnknownFieldError,
)

from .loader import load_memory_config  # noqa: F401
from .normalizer import normalize, resolve_env_vars  # noqa: F401
from .schemas.memory import (  # noqa: F401
    DEFAULT_MIN_SCORE,
    DEFAULT_RECALL_LIMIT,
    DEFAULT_SERVER_URL,
    DEFAULT_TIMEOUT,
    MEMORY_CONFIG_FIELDS,
    VALID_STRATEGIES,
    ExtractionStrategy,
    MemoryConfig,
)
from .ui_hints import UI_HINTS, FieldHint, FieldOption, describe  # noqa: F401

__all__ = [
    "normalize",
    "resolve_env_vars",
    "load_memory_config",
    "describe",
    "UI_HINTS",
    "FieldHint",
    "FieldOption",
    "MemoryConfig",
    "ExtractionStrategy",
    "MEMORY_CONFIG_FIELDS",
    "VALID_STRATEGIES",
    "DEFAULT_SERVER_URL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_MIN_SCORE",
    "DEFAULT_RECALL_LIMIT",
    "ConfigError",
    "ConfigFileError",
    "InvalidShapeError",
    "UnknownFieldError",
    "InvalidEnumError",
    "MissingCustomPromptError",
    "MissingEnvVarError",
]
