"""Console-based output handler for bytes-to-type."""

from typing import Iterable

from rich.console import Console
from rich.table import Table

from bytes_to_type.config.enums import ScalarType
from bytes_to_type.converters.factory import get_converter


class ConsoleOutputHandler:
    """Rich Console-based output handler."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def print(self, message: str, **kwargs) -> None:
        """Print an informational message."""
        self.console.print(message, **kwargs)

    def info(self, message: str) -> None:
        """Print an informational message."""
        self.print(message)

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.print(f"[yellow]Warning:[/yellow] {message}")

    def error(self, message: str) -> None:
        """Print an error message."""
        self.print(f"[red]Error:[/red] {message}")

    def success(self, message: str) -> None:
        """Print a success message."""
        self.print(f"[green]✓[/green] {message}")

    def print_types_table(self, scalar_types: Iterable[ScalarType]) -> None:
        """Print the supported scalar types as a table.

        Args:
            scalar_types: Types to list, in display order
        """
        table = Table(title="Supported Scalar Types")
        table.add_column("Type", style="cyan")
        table.add_column("Width (bytes)", justify="right")
        table.add_column("NumPy dtype", style="green")
        table.add_column("Function")

        for scalar_type in scalar_types:
            table.add_row(
                scalar_type.value,
                str(scalar_type.width),
                scalar_type.numpy_dtype.str,
                get_converter(scalar_type).function_name,
            )

        self.console.print(table)
