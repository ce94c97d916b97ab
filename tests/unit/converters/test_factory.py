"""Unit tests for converter factory functions and per-type entry points."""

from __future__ import annotations

import numpy as np
import pytest

from bytes_to_type.config.enums import ScalarType
from bytes_to_type.converters import functions
from bytes_to_type.converters.factory import get_converter, make_converter
from bytes_to_type.converters.protocols import BytesConverter
from bytes_to_type.converters.scalar import ScalarConverter
from bytes_to_type.exceptions import LengthMismatchError, UnsupportedScalarTypeError


class TestConverterFactory:
    """Tests for get_converter and make_converter."""

    @pytest.mark.parametrize("scalar_type", list(ScalarType))
    def test_get_converter_returns_matching_converter(self, scalar_type: ScalarType) -> None:
        """Test that get_converter returns a converter for the requested type."""
        converter = get_converter(scalar_type)

        assert isinstance(converter, ScalarConverter)
        assert isinstance(converter, BytesConverter)
        assert converter.scalar_type is scalar_type
        assert converter.width == scalar_type.width

    def test_get_converter_shares_instances(self) -> None:
        """Test equivalent requests return the same converter instance."""
        assert get_converter("u32") is get_converter(ScalarType.U32)
        assert get_converter(np.uint32) is get_converter("uint32")

    def test_get_converter_unsupported(self) -> None:
        """Test get_converter rejects unsupported types."""
        with pytest.raises(UnsupportedScalarTypeError, match="Unsupported scalar type"):
            get_converter("u128")

    def test_make_converter_names_function(self) -> None:
        """Test the generated function is named after its type."""
        convert = make_converter(ScalarType.I16)

        assert convert.__name__ == "bytes_to_i16"
        assert "LengthMismatchError" in convert.__doc__
        assert convert(bytes([0xFF, 0xFF])).tolist() == [-1]

    def test_make_converter_keeps_length_policy(self) -> None:
        """Test the generated function rejects partial groups."""
        convert = make_converter("f32")
        with pytest.raises(LengthMismatchError):
            convert(b"\x00\x00\x80")


class TestScalarConverter:
    """Tests for ScalarConverter."""

    @pytest.fixture
    def converter(self) -> ScalarConverter:
        """Create a u32 ScalarConverter instance."""
        return ScalarConverter(ScalarType.U32)

    def test_numpy_dtype(self, converter: ScalarConverter) -> None:
        """Test numpy dtype property is little-endian."""
        assert converter.numpy_dtype == np.dtype("<u4")

    def test_function_name(self, converter: ScalarConverter) -> None:
        """Test the per-type entry point name."""
        assert converter.function_name == "bytes_to_u32"

    def test_convert_and_call(self, converter: ScalarConverter, sample_bytes: bytes) -> None:
        """Test convert and __call__ agree."""
        assert converter.convert(sample_bytes).tolist() == [67305985, 134678021]
        assert converter(sample_bytes).tolist() == [67305985, 134678021]

    def test_encode(self, converter: ScalarConverter, sample_bytes: bytes) -> None:
        """Test encode is the inverse of convert."""
        assert converter.encode(converter.convert(sample_bytes)) == sample_bytes

    def test_equality_and_repr(self, converter: ScalarConverter) -> None:
        """Test converters compare by scalar type."""
        assert converter == ScalarConverter(ScalarType.U32)
        assert converter != ScalarConverter(ScalarType.I32)
        assert hash(converter) == hash(ScalarConverter(ScalarType.U32))
        assert repr(converter) == "ScalarConverter('u32')"


class TestNamedFunctions:
    """Tests for the module-level bytes_to_<type> functions."""

    @pytest.mark.parametrize("scalar_type", list(ScalarType))
    def test_function_exists_for_every_type(self, scalar_type: ScalarType) -> None:
        """Test every supported type has a named entry point."""
        func = getattr(functions, f"bytes_to_{scalar_type.value}")
        assert func.__name__ == f"bytes_to_{scalar_type.value}"
        assert func(b"").dtype.itemsize == scalar_type.width

    def test_bytes_to_u32_example(self, sample_bytes: bytes) -> None:
        """Test the documented u32 example through the package namespace."""
        from bytes_to_type import bytes_to_u32

        assert bytes_to_u32(sample_bytes).tolist() == [67305985, 134678021]

    def test_bytes_to_u32_rejects_five_bytes(self) -> None:
        """Test the documented failure example through the package namespace."""
        from bytes_to_type import bytes_to_u32

        with pytest.raises(LengthMismatchError):
            bytes_to_u32(bytes([1, 2, 3, 4, 5]))
