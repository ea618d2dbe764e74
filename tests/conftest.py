"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest

# Arbitrary fixed mtime so tests never depend on filesystem clock granularity
BASE_MTIME_NS = 1_700_000_000_000_000_000


@pytest.fixture
def class_dir(tmp_path: Path) -> Path:
    """An empty class output directory with a canonical (resolved) path."""
    directory = tmp_path.resolve() / "classes"
    directory.mkdir()
    return directory


@pytest.fixture
def make_class_file() -> Callable[..., Path]:
    """Factory creating a file (and parents) with an explicit mtime."""

    def _make(path: Path, mtime_ns: int = BASE_MTIME_NS) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\xca\xfe\xba\xbe")
        os.utime(path, ns=(mtime_ns, mtime_ns))
        return path

    return _make
