"""Output exceptions for bytes-to-type."""

from bytes_to_type.exceptions.base import BytesToTypeError


class OutputError(BytesToTypeError):
    """Raised when converted values cannot be written to their destination.

    Wraps operating system errors such as a parent path that is a regular
    file, a read-only directory or a full disk.
    """
