"""Central error taxonomy for memory client configuration."""
from __future__ import annotations

from typing import Iterable, Tuple

_ALLOWED_ERROR_TYPES = {
    "config-invalid",
    # config.normalize
    "config-invalid-shape",
    "config-unknown-field",
    "config-invalid-enum",
    "config-missing-custom-prompt",
    "config-missing-env-var",
    # config.load
    "config-file-invalid",
}


def validate_error_type(code: str) -> str:
    assert (
        code in _ALLOWED_ERROR_TYPES
    ), f"Unknown error_type '{code}' (not in taxonomy)"
    return code


class ConfigError(Exception):
    """Base configuration error; ``code`` is a taxonomy entry."""

    code = "config-invalid"

    def __init__(self, message: str) -> None:
        validate_error_type(self.code)
        super().__init__(message)


class InvalidShapeError(ConfigError):
    """Raised when the raw config is not a key-value mapping."""

    code = "config-invalid-shape"


class UnknownFieldError(ConfigError):
    """Raised when the raw config carries keys outside the known field set."""

    code = "config-unknown-field"

    def __init__(self, keys: Iterable[str], label: str = "memory config"):
        self.keys: Tuple[str, ...] = tuple(keys)
        super().__init__(f"{label} has unknown keys: {', '.join(self.keys)}")


class InvalidEnumError(ConfigError):
    code = "config-invalid-enum"

    def __init__(self, field: str, value: str, allowed: Iterable[str]):
        self.field = field
        self.value = value
        self.allowed: Tuple[str, ...] = tuple(allowed)
        super().__init__(
            f"Invalid {field}: {value}. "
            f"Must be one of: {', '.join(self.allowed)}"
        )


class MissingCustomPromptError(ConfigError):
    code = "config-missing-custom-prompt"

    def __init__(self) -> None:
        super().__init__(
            'customPrompt is required when extractionStrategy is "custom"'
        )


class MissingEnvVarError(ConfigError):
    """Raised when a ``${NAME}`` placeholder names an unset variable."""

    code = "config-missing-env-var"

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"Environment variable {variable} is not set")


class ConfigFileError(ConfigError):
    """Raised when a YAML config file cannot be parsed or has a bad shape."""

    code = "config-file-invalid"


__all__ = [
    "validate_error_type",
    "ConfigError",
    "InvalidShapeError",
    "UnknownFieldError",
    "InvalidEnumError",
    "MissingCustomPromptError",
    "MissingEnvVarError",
    "ConfigFileError",
]
