"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from simpledb import RecordStore, StoreConfig


@pytest.fixture
def data_path(tmp_path: Path) -> Path:
    """Path for a data file that does not exist yet."""
    return tmp_path / "data.bin"


@pytest.fixture
def store(data_path: Path) -> RecordStore:
    """Record store writing to a temporary file."""
    return RecordStore(StoreConfig(path=data_path))
