"""Fixed-width scalar converter for bytes-to-type."""

from typing import Iterable

import numpy as np

from bytes_to_type.config.enums import ScalarType
from bytes_to_type.converters.core import array_to_bytes, bytes_to_array
from bytes_to_type.types import BytesLike


class ScalarConverter:
    """Converter for one fixed-width little-endian scalar type.

    Instances hold only immutable facts about their type, so a single
    instance can be shared between threads.
    """

    __slots__ = ("_scalar_type",)

    def __init__(self, scalar_type: ScalarType) -> None:
        self._scalar_type = scalar_type

    @property
    def scalar_type(self) -> ScalarType:
        return self._scalar_type

    @property
    def width(self) -> int:
        return self._scalar_type.width

    @property
    def numpy_dtype(self) -> np.dtype:
        return self._scalar_type.numpy_dtype

    @property
    def function_name(self) -> str:
        """Name of the per-type entry point, e.g. ``bytes_to_u32``."""
        return f"bytes_to_{self._scalar_type.value}"

    def convert(self, data: BytesLike) -> np.ndarray:
        """Convert raw bytes into a new array of this scalar type."""
        return bytes_to_array(data, self._scalar_type)

    def encode(self, values: Iterable | np.ndarray) -> bytes:
        """Serialise values of this scalar type into little-endian bytes."""
        return array_to_bytes(values, self._scalar_type)

    def __call__(self, data: BytesLike) -> np.ndarray:
        return self.convert(data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._scalar_type.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScalarConverter):
            return NotImplemented
        return self._scalar_type is other._scalar_type

    def __hash__(self) -> int:
        return hash(self._scalar_type)
