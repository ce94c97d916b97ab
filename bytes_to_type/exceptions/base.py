"""Base exception classes for bytes-to-type."""


class BytesToTypeError(Exception):
    """Base class for every error raised by bytes-to-type.

    Callers that only want to report failures (the CLI, batch runners) catch
    this class; library code raises one of the narrower subclasses.
    """
