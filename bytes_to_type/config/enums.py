"""Configuration enums for bytes-to-type."""

from enum import Enum

import numpy as np
from numpy.typing import DTypeLike

from bytes_to_type.exceptions import UnsupportedScalarTypeError


class ScalarType(str, Enum):
    """Fixed-width scalar types a byte buffer can be converted into."""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    F16 = "f16"
    F32 = "f32"
    F64 = "f64"

    @property
    def numpy_dtype(self) -> np.dtype:
        """Return the least-significant-byte-first NumPy dtype for this type."""
        return np.dtype(_LITTLE_ENDIAN_CODES[self])

    @property
    def width(self) -> int:
        """Return the byte width of one scalar."""
        return self.numpy_dtype.itemsize

    @property
    def is_float(self) -> bool:
        return self.numpy_dtype.kind == "f"

    def __str__(self) -> str:  # pragma: no cover - convenience for Typer display
        return self.value


# Byte order is part of the type, never taken from the host.
_LITTLE_ENDIAN_CODES: dict[ScalarType, str] = {
    ScalarType.U8: "<u1",
    ScalarType.U16: "<u2",
    ScalarType.U32: "<u4",
    ScalarType.U64: "<u8",
    ScalarType.I8: "<i1",
    ScalarType.I16: "<i2",
    ScalarType.I32: "<i4",
    ScalarType.I64: "<i8",
    ScalarType.F16: "<f2",
    ScalarType.F32: "<f4",
    ScalarType.F64: "<f8",
}

_BY_KIND_AND_WIDTH: dict[tuple[str, int], ScalarType] = {
    (member.numpy_dtype.kind, member.width): member for member in ScalarType
}


def resolve_scalar_type(value: ScalarType | str | DTypeLike) -> ScalarType:
    """Normalise a scalar type request into a ``ScalarType``.

    Accepts a ``ScalarType``, a short type name (``"u32"``, ``"f64"``), a
    NumPy dtype name (``"uint32"``, ``"float64"``) or anything ``np.dtype``
    understands (``np.int16``, ``np.dtype("<f4")``). Short names win over
    NumPy's own character codes, so ``"u8"`` is the one-byte unsigned type.

    Args:
        value: The requested scalar type

    Returns:
        ScalarType: The matching supported type

    Raises:
        UnsupportedScalarTypeError: If the request does not name a supported
            fixed-width little-endian scalar
    """
    if isinstance(value, ScalarType):
        return value
    if isinstance(value, str):
        try:
            return ScalarType(value.strip().lower())
        except ValueError:
            pass
    # np.dtype(None) would silently mean float64.
    if value is None:
        raise UnsupportedScalarTypeError(value)
    try:
        dtype = np.dtype(value)
    except TypeError as e:
        raise UnsupportedScalarTypeError(value) from e

    # An explicit big-endian request contradicts the fixed byte order.
    if dtype.byteorder == ">":
        raise UnsupportedScalarTypeError(value)
    member = _BY_KIND_AND_WIDTH.get((dtype.kind, dtype.itemsize))
    if member is None:
        raise UnsupportedScalarTypeError(value)
    return member


class OutputFormat(str, Enum):
    """Selectable renderings for converted values."""

    TEXT = "text"
    JSON = "json"
    CSV = "csv"

    def __str__(self) -> str:  # pragma: no cover - convenience for Typer display
        return self.value
