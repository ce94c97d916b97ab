"""Converter protocols for bytes-to-type."""

from typing import Iterable, Protocol, runtime_checkable

import numpy as np

from bytes_to_type.config.enums import ScalarType
from bytes_to_type.types import BytesLike


@runtime_checkable
class BytesConverter(Protocol):
    """Protocol for fixed-width byte-to-scalar conversion strategies."""

    @property
    def scalar_type(self) -> ScalarType:
        """Return the scalar type this converter produces."""
        ...

    @property
    def width(self) -> int:
        """Return the byte width of one produced scalar."""
        ...

    @property
    def numpy_dtype(self) -> np.dtype:
        """Return the little-endian NumPy dtype the bytes are read as."""
        ...

    @property
    def function_name(self) -> str:
        """Return the name of the per-type entry point."""
        ...

    def convert(self, data: BytesLike) -> np.ndarray:
        """Convert raw bytes into a new array of scalars."""
        ...

    def encode(self, values: Iterable | np.ndarray) -> bytes:
        """Serialise scalars back into little-endian bytes."""
        ...
