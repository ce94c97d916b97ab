"""Byte source exceptions for bytes-to-type."""

from bytes_to_type.exceptions.base import BytesToTypeError


class ByteSourceError(BytesToTypeError):
    """Raised when a byte source cannot supply the requested window.

    This exception is raised for issues such as:
    - Missing input files or paths that are directories
    - Negative offsets or lengths
    - Windows that extend past the end of the file
    - Operating system errors while opening or mapping the file
    """
