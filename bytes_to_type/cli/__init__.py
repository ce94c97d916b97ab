"""Command-line interface for bytes-to-type."""
