"""Rendering of converted scalar sequences."""

import csv
import io
import json
import logging
from pathlib import Path

import numpy as np

from bytes_to_type.config.enums import OutputFormat
from bytes_to_type.exceptions import OutputError

logger = logging.getLogger(__name__)


def format_values(values: np.ndarray, fmt: OutputFormat) -> str:
    """Render converted values as text.

    Args:
        values: 1-D array produced by a converter
        fmt: Output format

    Returns:
        str: ``text`` gives one value per line, ``json`` a JSON array on one
        line and ``csv`` a single ``value`` column with a header row
    """
    items = values.tolist()
    if fmt is OutputFormat.JSON:
        return json.dumps(items) + "\n"
    if fmt is OutputFormat.CSV:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(["value"])
        writer.writerows([item] for item in items)
        return buffer.getvalue()
    return "".join(f"{item}\n" for item in items)


def write_values(values: np.ndarray, path: Path, fmt: OutputFormat) -> None:
    """Render values and write them to ``path``, creating parent directories.

    Raises:
        OutputError: If the directory or file cannot be created or written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(format_values(values, fmt), encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Failed to write {path}: {e}") from e
    logger.debug("Wrote %d values to %s as %s", len(values), path, fmt.value)
