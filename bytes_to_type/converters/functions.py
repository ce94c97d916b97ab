"""Per-type conversion entry points.

Each function takes a byte buffer and returns a new NumPy array of the named
little-endian scalar type, or raises ``LengthMismatchError``.
"""

from bytes_to_type.config.enums import ScalarType
from bytes_to_type.converters.factory import make_converter

bytes_to_u8 = make_converter(ScalarType.U8)
bytes_to_u16 = make_converter(ScalarType.U16)
bytes_to_u32 = make_converter(ScalarType.U32)
bytes_to_u64 = make_converter(ScalarType.U64)
bytes_to_i8 = make_converter(ScalarType.I8)
bytes_to_i16 = make_converter(ScalarType.I16)
bytes_to_i32 = make_converter(ScalarType.I32)
bytes_to_i64 = make_converter(ScalarType.I64)
bytes_to_f16 = make_converter(ScalarType.F16)
bytes_to_f32 = make_converter(ScalarType.F32)
bytes_to_f64 = make_converter(ScalarType.F64)
