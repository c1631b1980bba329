"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from colorconverter.models import RGBColor


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_file(temp_dir):
    """Settings file path inside the temporary directory (not created)."""
    return temp_dir / "config.json"


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, temp_dir):
    """Never read or write the real ~/.colorconverter settings."""
    monkeypatch.setenv("COLORCONVERTER_CONFIG", str(temp_dir / "default-config.json"))


@pytest.fixture
def primary_hexes():
    """Colors whose HEX -> HSL -> HEX round trip is exact."""
    return ["#FF0000", "#00FF00", "#0000FF", "#FFFFFF", "#000000"]


@pytest.fixture
def orange_rgb():
    """The #FF5733 orange used throughout the examples."""
    return RGBColor(red=255, green=87, blue=51)
