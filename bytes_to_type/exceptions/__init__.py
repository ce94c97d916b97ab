"""Exception hierarchy for bytes-to-type."""
from bytes_to_type.exceptions.base import BytesToTypeError
from bytes_to_type.exceptions.conversion import (
    ConversionError,
    LengthMismatchError,
    UnsupportedScalarTypeError,
)
from bytes_to_type.exceptions.config import (
    ConfigError,
    ConfigValidationError,
    YAMLConfigError,
)
from bytes_to_type.exceptions.source import ByteSourceError
from bytes_to_type.exceptions.output import OutputError

__all__ = [
    "BytesToTypeError",
    "ConversionError",
    "LengthMismatchError",
    "UnsupportedScalarTypeError",
    "ConfigError",
    "ConfigValidationError",
    "YAMLConfigError",
    "ByteSourceError",
    "OutputError",
]
