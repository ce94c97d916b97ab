"""Fixed-width byte-to-scalar conversion strategies."""
from bytes_to_type.config.enums import resolve_scalar_type
from bytes_to_type.converters.core import array_to_bytes, bytes_to_array
from bytes_to_type.converters.protocols import BytesConverter
from bytes_to_type.converters.scalar import ScalarConverter
from bytes_to_type.converters.factory import get_converter, make_converter

__all__ = [
    "BytesConverter",
    "ScalarConverter",
    "array_to_bytes",
    "bytes_to_array",
    "get_converter",
    "make_converter",
    "resolve_scalar_type",
]
