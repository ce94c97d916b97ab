"""Memory-mapped file source for bytes-to-type."""

import logging
import mmap
from pathlib import Path

import numpy as np
from numpy.typing import DTypeLike

from bytes_to_type.config.enums import ScalarType
from bytes_to_type.converters import get_converter
from bytes_to_type.exceptions import ByteSourceError

logger = logging.getLogger(__name__)


class FileByteSource:
    """Read a window of a file as scalars through a read-only memory map.

    The window starts at ``offset`` and spans ``length`` bytes, or runs to the
    end of the file when ``length`` is None. Offsets need not be aligned to
    the scalar width.

    Attributes:
        path: Path to the input file
        offset: First byte of the window
        length: Number of bytes in the window, or None for the rest of the file
    """

    def __init__(self, path: Path, *, offset: int = 0, length: int | None = None) -> None:
        """Initialize the file source.

        Args:
            path: Path to the input file
            offset: Byte offset of the window start
            length: Window length in bytes (None reads to end of file)

        Raises:
            ByteSourceError: If the path is not a readable file or the window
                is negative
        """
        if not path.exists():
            raise ByteSourceError(f"Input file not found: {path}")
        if not path.is_file():
            raise ByteSourceError(f"Input path is not a file: {path}")
        if offset < 0:
            raise ByteSourceError(f"Offset must be >= 0, got {offset}")
        if length is not None and length < 0:
            raise ByteSourceError(f"Length must be >= 0, got {length}")
        self.path = path
        self.offset = offset
        self.length = length

    @property
    def source_description(self) -> str:
        """Human-readable description of the byte window."""
        end = "EOF" if self.length is None else str(self.offset + self.length)
        return f"file: {self.path} [{self.offset}:{end}]"

    def _window_end(self, file_size: int) -> int:
        if self.offset > file_size:
            raise ByteSourceError(
                f"Offset {self.offset} is past the end of {self.path} ({file_size} bytes)"
            )
        if self.length is None:
            return file_size
        end = self.offset + self.length
        if end > file_size:
            raise ByteSourceError(
                f"Window [{self.offset}:{end}] runs past the end of {self.path} ({file_size} bytes)"
            )
        return end

    def read(self, scalar_type: ScalarType | str | DTypeLike) -> np.ndarray:
        """Convert the byte window into a new array of ``scalar_type``.

        Args:
            scalar_type: The target scalar type

        Returns:
            np.ndarray: Converted values; independent of the file mapping

        Raises:
            ByteSourceError: If the file cannot be opened or the window does
                not fit in the file
            LengthMismatchError: If the window is not a whole number of scalars
        """
        converter = get_converter(scalar_type)
        try:
            file_size = self.path.stat().st_size
            end = self._window_end(file_size)
            logger.debug("Reading %s as %s", self.source_description, converter.scalar_type.value)

            # mmap refuses zero-length files.
            if end == self.offset:
                return converter.convert(b"")

            with open(self.path, "rb") as f, mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ) as mapped:
                with memoryview(mapped) as whole:
                    window = whole[self.offset:end]
                    try:
                        return converter.convert(window)
                    finally:
                        window.release()
        except OSError as e:
            raise ByteSourceError(f"Failed to read {self.path}: {e}") from e


def read_scalars(
        path: Path | str,
        scalar_type: ScalarType | str | DTypeLike,
        *,
        offset: int = 0,
        length: int | None = None,
) -> np.ndarray:
    """Convert a file, or a window of it, into an array of ``scalar_type``."""
    return FileByteSource(Path(path), offset=offset, length=length).read(scalar_type)
