"""Entry point for the bytes-to-type command-line interface.

This module exposes a Typer-powered CLI that converts raw byte files into
sequences of fixed-width little-endian scalars, either one file at a time or
as a batch described by a YAML configuration.
"""

from bytes_to_type.cli.app import app


if __name__ == "__main__":
    app()
