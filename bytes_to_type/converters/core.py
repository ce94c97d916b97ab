"""Generic little-endian byte-to-scalar conversion.

Every per-type converter in this package delegates to ``bytes_to_array``.
The routine validates that the input length is a whole number of scalars,
reads the bytes as consecutive least-significant-byte-first groups and copies
them into a freshly allocated, aligned, host-native array. The input buffer is
never reinterpreted in place, so its alignment does not matter.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import DTypeLike

from bytes_to_type.config.enums import ScalarType, resolve_scalar_type
from bytes_to_type.exceptions import LengthMismatchError
from bytes_to_type.types import BytesLike


def bytes_to_array(data: BytesLike, scalar_type: ScalarType | str | DTypeLike) -> np.ndarray:
    """Convert a byte buffer into a new array of little-endian scalars.

    Args:
        data: Any C-contiguous or strided buffer (bytes, bytearray,
            memoryview, mmap, NumPy array); it is only read
        scalar_type: Target scalar type, in any form ``resolve_scalar_type``
            accepts

    Returns:
        np.ndarray: An owned, aligned, host-native 1-D array with
        ``len(data) // width`` elements, in input order

    Raises:
        LengthMismatchError: If the byte length is not a multiple of the
            scalar width
        UnsupportedScalarTypeError: If ``scalar_type`` is not supported
    """
    resolved = resolve_scalar_type(scalar_type)
    source_dtype = resolved.numpy_dtype
    native_dtype = source_dtype.newbyteorder("=")
    width = source_dtype.itemsize

    with memoryview(data) as view:
        if not view.c_contiguous:
            view = memoryview(view.tobytes())

        length = view.nbytes
        if length % width != 0:
            raise LengthMismatchError(length, width)
        if length == 0:
            return np.empty(0, dtype=native_dtype)

        # astype copies into an aligned buffer; the frombuffer view is
        # dropped before the memoryview is released.
        return np.frombuffer(view, dtype=source_dtype, count=length // width).astype(native_dtype)


def array_to_bytes(values: Iterable | np.ndarray, scalar_type: ScalarType | str | DTypeLike) -> bytes:
    """Serialise values as consecutive little-endian scalars.

    This is the inverse of ``bytes_to_array`` for values representable in the
    target type. No range or NaN checks are performed beyond NumPy's own
    casting rules.
    """
    resolved = resolve_scalar_type(scalar_type)
    if not isinstance(values, np.ndarray):
        values = np.fromiter(values, dtype=resolved.numpy_dtype)
    return np.ascontiguousarray(values, dtype=resolved.numpy_dtype).tobytes()
