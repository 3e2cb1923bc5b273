"""Shared test fixtures for tritiler."""

import random
import tempfile
from pathlib import Path

import pytest

from tritiler.core import TileDefinition
from tritiler.generation import build_palette, load_base_tiles


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (skipped by default, run with --run-slow)")


def pytest_addoption(parser):
    """Add --run-slow option to pytest."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run slow tests (skipped by default)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is passed."""
    if config.getoption("--run-slow"):
        return

    skip_slow = pytest.mark.skip(reason="Slow test (use --run-slow to run)")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def temp_data_dir() -> Path:
    """Create a temporary data directory for tests."""
    with tempfile.TemporaryDirectory(prefix="tritiler_test_") as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def grass_tile() -> TileDefinition:
    """A base tile with grass on every edge."""
    return TileDefinition(id="grass", name="Grass", edges=("grass", "grass", "grass"))


@pytest.fixture
def road_bend_tile() -> TileDefinition:
    """A base tile with two road edges and one grass edge."""
    return TileDefinition(
        id="road_bend",
        name="Road Bend",
        edges=("road", "road", "grass"),
        metadata={"color": [0.4, 0.4, 0.4]},
    )


@pytest.fixture
def base_tiles() -> list[TileDefinition]:
    """The bundled grass/road catalog."""
    return load_base_tiles()


@pytest.fixture
def palette(base_tiles) -> list[TileDefinition]:
    """The bundled catalog with rotations."""
    return build_palette(base_tiles)


@pytest.fixture
def rng() -> random.Random:
    """A seeded random source."""
    return random.Random(1234)
