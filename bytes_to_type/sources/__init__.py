"""Byte sources for bytes-to-type."""
from bytes_to_type.sources.file import FileByteSource, read_scalars

__all__ = [
    "FileByteSource",
    "read_scalars",
]
