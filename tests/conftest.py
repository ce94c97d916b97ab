"""Root-level pytest configuration and shared fixtures.

This module provides fixtures that are universally applicable across
all test modules. Fixtures here should be:
- Stateless or session-scoped
- Generic enough for reuse across different test categories
- Well-documented with clear purpose
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


# =============================================================================
# Byte Fixtures
# =============================================================================

@pytest.fixture
def sample_bytes() -> bytes:
    """Eight bytes that decode to [67305985, 134678021] as little-endian u32."""
    return bytes([1, 2, 3, 4, 5, 6, 7, 8])


@pytest.fixture
def write_bytes(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes raw bytes to a file under ``tmp_path``.

    Returns:
        Callable taking ``(data, name="data.bin")`` and returning the path.
    """
    def _write(data: bytes, name: str = "data.bin") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "pydantic: Tests for Pydantic validation")
