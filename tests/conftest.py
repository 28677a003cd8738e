"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`frontline` package without requiring an editable install in CI.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from frontline.channels import RecordingChannel  # noqa: E402
from frontline.domain.grid import Grid  # noqa: E402


@pytest.fixture
def grid() -> Grid:
    """A 3x3 grid of default cells."""
    grid = Grid()
    grid.init(3, 3)
    return grid


@pytest.fixture
def channel() -> RecordingChannel:
    return RecordingChannel()
