"""Convert raw little-endian byte buffers into NumPy arrays of fixed-width scalars."""
from bytes_to_type.constants import VERSION
from bytes_to_type.config.enums import ScalarType
from bytes_to_type.converters import (
    BytesConverter,
    ScalarConverter,
    array_to_bytes,
    bytes_to_array,
    get_converter,
    make_converter,
    resolve_scalar_type,
)
from bytes_to_type.converters.functions import (
    bytes_to_f16,
    bytes_to_f32,
    bytes_to_f64,
    bytes_to_i8,
    bytes_to_i16,
    bytes_to_i32,
    bytes_to_i64,
    bytes_to_u8,
    bytes_to_u16,
    bytes_to_u32,
    bytes_to_u64,
)
from bytes_to_type.exceptions import (
    BytesToTypeError,
    ConversionError,
    LengthMismatchError,
    UnsupportedScalarTypeError,
)
from bytes_to_type.sources import read_scalars

__version__ = VERSION

__all__ = [
    "ScalarType",
    "BytesConverter",
    "ScalarConverter",
    "array_to_bytes",
    "bytes_to_array",
    "get_converter",
    "make_converter",
    "resolve_scalar_type",
    "read_scalars",
    "bytes_to_u8",
    "bytes_to_u16",
    "bytes_to_u32",
    "bytes_to_u64",
    "bytes_to_i8",
    "bytes_to_i16",
    "bytes_to_i32",
    "bytes_to_i64",
    "bytes_to_f16",
    "bytes_to_f32",
    "bytes_to_f64",
    "BytesToTypeError",
    "ConversionError",
    "LengthMismatchError",
    "UnsupportedScalarTypeError",
]
