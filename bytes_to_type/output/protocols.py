"""Output handler protocols for bytes-to-type."""

from typing import Iterable, Protocol, runtime_checkable

from bytes_to_type.config.enums import ScalarType


@runtime_checkable
class OutputHandler(Protocol):
    """Protocol for output handling (console, logging, etc.)."""

    def print(self, message: str, **kwargs) -> None:
        """Print an informational message."""
        ...

    def info(self, message: str) -> None:
        """Print an informational message (alias for print)."""
        ...

    def warning(self, message: str) -> None:
        """Print a warning message."""
        ...

    def error(self, message: str) -> None:
        """Print an error message."""
        ...

    def success(self, message: str) -> None:
        """Print a success message."""
        ...

    def print_types_table(self, scalar_types: Iterable[ScalarType]) -> None:
        """Print a table describing the given scalar types."""
        ...
