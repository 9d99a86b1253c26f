"""
Shared test fixtures for hotspot UV mapping tests.
"""
import sys
from pathlib import Path

import numpy as np
import pytest
import trimesh

# Add src/ to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hotspot_atlas import HotspotAtlas
from uv_primitives import RotateMode


class StubRng:
    """Stand-in for numpy Generator returning fixed draws.

    value may be a sequence; random() then returns its items in turn,
    cycling when exhausted.
    """

    def __init__(self, integer=0, value=0.0):
        self.integer = integer
        self.values = list(value) if isinstance(value, (list, tuple)) else [value]
        self.draws = 0

    def integers(self, low, high=None):
        return self.integer

    def random(self):
        value = self.values[self.draws % len(self.values)]
        self.draws += 1
        return value


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def unit_square_uvs():
    return np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])


@pytest.fixture
def wide_uvs():
    """A 4x1 rectangle with its minimum at the origin."""
    return np.array([[0.0, 0.0], [4.0, 0.0], [4.0, 1.0], [0.0, 1.0]])


@pytest.fixture
def wall_quad():
    """A 2x1 quad in the z=5 plane."""
    return np.array([
        [0.0, 0.0, 5.0],
        [2.0, 0.0, 5.0],
        [2.0, 1.0, 5.0],
        [0.0, 1.0, 5.0],
    ])


@pytest.fixture
def floor_quad():
    """A 2 (x) by 3 (z) quad in the y=0 plane, facing up."""
    return np.array([
        [0.0, 0.0, 0.0],
        [0.0, 0.0, 3.0],
        [2.0, 0.0, 3.0],
        [2.0, 0.0, 0.0],
    ])


@pytest.fixture
def atlas():
    """1024px atlas: a big square, a 2:1 strip and a 1:2 strip."""
    return HotspotAtlas.from_pixel_rects(
        [
            (0, 0, 512, 512),
            (512, 0, 512, 256),
            (512, 256, 256, 512),
        ],
        texture_size=(1024, 1024),
        rotate_mode=RotateMode.NONE,
    )


@pytest.fixture
def box_mesh():
    """A 64x64x64 box centred at the origin."""
    return trimesh.creation.box(extents=[64, 64, 64])


@pytest.fixture
def box_mesh_file(box_mesh, tmp_path):
    path = tmp_path / "box.stl"
    box_mesh.export(str(path))
    return str(path)
