"""Configuration core for clients of a remote agent memory server."""

from memory_client.config import (  # noqa: F401
    ConfigError,
    MemoryConfig,
    UI_HINTS,
    describe,
    load_memory_config,
    normalize,
)

__all__ = [
    "normalize",
    "load_memory_config",
    "describe",
    "UI_HINTS",
    "MemoryConfig",
    "ConfigError",
]
