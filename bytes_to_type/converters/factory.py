"""Factory functions for scalar converters."""

from typing import Callable

import numpy as np
from numpy.typing import DTypeLike

from bytes_to_type.config.enums import ScalarType
from bytes_to_type.config.enums import resolve_scalar_type
from bytes_to_type.converters.protocols import BytesConverter
from bytes_to_type.converters.scalar import ScalarConverter
from bytes_to_type.types import BytesLike

_CONVERTERS: dict[ScalarType, ScalarConverter] = {
    scalar_type: ScalarConverter(scalar_type) for scalar_type in ScalarType
}


def get_converter(scalar_type: ScalarType | str | DTypeLike) -> BytesConverter:
    """Factory function to get the converter for the given scalar type.

    Args:
        scalar_type: The target scalar type, in any form
            ``resolve_scalar_type`` accepts

    Returns:
        BytesConverter: The shared converter instance for that type

    Raises:
        UnsupportedScalarTypeError: If the type is not supported
    """
    return _CONVERTERS[resolve_scalar_type(scalar_type)]


def make_converter(scalar_type: ScalarType | str | DTypeLike) -> Callable[[BytesLike], np.ndarray]:
    """Return a plain ``bytes_to_<type>`` function for the given scalar type.

    The returned function takes a byte buffer and returns a new array, raising
    ``LengthMismatchError`` when the buffer is not a whole number of scalars.
    """
    converter = get_converter(scalar_type)

    def convert(data: BytesLike) -> np.ndarray:
        return converter.convert(data)

    convert.__name__ = convert.__qualname__ = converter.function_name
    convert.__doc__ = (
        f"Convert little-endian bytes into a ``{converter.numpy_dtype.name}`` array.\n\n"
        f"Raises LengthMismatchError if the length is not a multiple of {converter.width}."
    )
    return convert
