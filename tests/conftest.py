"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from colorbits.models import Color


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_path(temp_dir):
    """Path for a config file that does not exist yet."""
    return temp_dir / "config.json"


@pytest.fixture
def pink():
    """Mixed color with a different bit pattern in every channel."""
    return Color(red=255, green=0b1010_1010, blue=0b1110_0001)
