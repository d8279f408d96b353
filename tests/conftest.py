"""Shared fixtures for export tests."""

import io
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from collection_export import RecordCollection
from collection_export.utils import ProgressTracker


@pytest.fixture
def temp_output_dir():
    """Temporary output directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def people():
    """Two-record collection from the reference example."""
    return RecordCollection.from_dicts([
        {"id": "1", "name": "A"},
        {"id": "2", "name": "B"},
    ])


@pytest.fixture
def quiet_tracker():
    """Progress tracker rendering into a buffer."""
    return ProgressTracker(Console(file=io.StringIO()))
