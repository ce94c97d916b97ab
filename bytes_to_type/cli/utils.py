"""CLI utility functions for bytes-to-type."""
from __future__ import annotations

import logging
from pathlib import Path


def _sanitize_path(path: Path) -> Path:
    """Return a normalized, absolute version of ``path``."""

    return path.expanduser().resolve()


def _configure_logging(verbose: bool) -> None:
    """Set the root log level from the ``--verbose`` flag."""

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger(__name__).debug("Verbose logging enabled")
    else:
        logging.getLogger().setLevel(logging.WARNING)
