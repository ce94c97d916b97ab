"""Conversion-related exceptions for bytes-to-type."""

from bytes_to_type.exceptions.base import BytesToTypeError


class ConversionError(BytesToTypeError):
    """Base class for failures while reinterpreting bytes as scalars."""


class LengthMismatchError(ConversionError):
    """Raised when the input length is not a multiple of the scalar width.

    The condition is deterministic: converting the same buffer again fails the
    same way. Callers either reject the input upstream or pad/truncate it
    explicitly. No partial output is ever produced.

    Attributes:
        length: Length of the rejected input in bytes
        width: Byte width of the requested scalar type
    """

    def __init__(self, length: int, width: int) -> None:
        super().__init__(f"Bytes length {length} is not a multiple of {width}")
        self.length = length
        self.width = width

    @property
    def remainder(self) -> int:
        """Number of trailing bytes that do not form a complete scalar."""
        return self.length % self.width


class UnsupportedScalarTypeError(BytesToTypeError, ValueError):
    """Raised when a requested type is not a supported fixed-width scalar."""

    def __init__(self, requested: object) -> None:
        super().__init__(f"Unsupported scalar type: {requested!r}")
        self.requested = requested
