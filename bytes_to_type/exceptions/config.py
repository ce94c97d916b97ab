"""Configuration-related exceptions for bytes-to-type."""

from pydantic import ValidationError

from bytes_to_type.exceptions.base import BytesToTypeError


class ConfigError(BytesToTypeError):
    """Base class for user-facing batch configuration errors."""


class ConfigValidationError(ConfigError):
    """Raised when Pydantic validation fails for a batch job entry.

    This exception is raised when a job in a batch configuration has the
    wrong field types, is missing required fields, or names a scalar type
    that is not supported.
    """

    def __init__(self, message: str, *, errors: ValidationError | None = None) -> None:
        super().__init__(message)
        self.errors = errors


class YAMLConfigError(ConfigValidationError):
    """Exception raised for YAML configuration file errors.

    This includes:
    - File not found
    - YAML parsing errors
    - Invalid structure (missing jobs list, wrong types)
    - Unsupported schema version
    """
    pass
