"""CLI application definition for bytes-to-type."""

import typer

from bytes_to_type.cli.commands import convert, types, batch

app = typer.Typer(
    add_completion=False,
    help="Convert raw little-endian byte files into sequences of fixed-width scalars.",
    no_args_is_help=True,
)

# Register commands
app.command(name="convert", help="Convert one file into scalars")(convert)
app.command(name="types", help="List the supported scalar types")(types)
app.command(name="batch", help="Run the conversion jobs in a YAML file")(batch)
