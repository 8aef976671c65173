"""Shared test fixtures for goldberg."""

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from goldberg.construction.seeds import SEEDS  # noqa: E402
from goldberg.model import Shape  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def cube_settings_path():
    """Return the path to the cube generation settings fixture."""
    return FIXTURES_DIR / "cube_settings.json"


@pytest.fixture(params=sorted(SEEDS))
def seed(request):
    """Each built-in seed in turn."""
    return SEEDS[request.param]()


@pytest.fixture
def octahedron():
    """A closed, consistently wound octahedron (4-valent, so not simple)."""
    vertices = np.array([
        [1.0, 0.0, 0.0], [-1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0], [0.0, -1.0, 0.0],
        [0.0, 0.0, 1.0], [0.0, 0.0, -1.0],
    ])
    faces = [
        (0, 2, 4), (1, 4, 2), (0, 4, 3), (1, 3, 4),
        (0, 5, 2), (1, 2, 5), (0, 3, 5), (1, 5, 3),
    ]
    return Shape(vertices, faces, arity=3)
