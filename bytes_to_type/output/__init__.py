"""Output handling package for bytes-to-type."""
from bytes_to_type.output.protocols import OutputHandler
from bytes_to_type.output.console import ConsoleOutputHandler
from bytes_to_type.output.formatters import format_values, write_values

__all__ = [
    "OutputHandler",
    "ConsoleOutputHandler",
    "format_values",
    "write_values",
]
