"""
Core 2D types and helpers for hotspot UV mapping.

UV sets are (N, 2) float arrays, index-aligned with the polygon they were
projected from. Hotspot regions are (4, 2) arrays whose corner at index 3 is
the anchor used when fitting UVs into them.
"""
from enum import Enum
from typing import Sequence

import numpy as np


class RotateMode(Enum):
    """How projected UVs are pre-rotated before a hotspot is picked."""
    NONE = "none"
    RANDOM = "random"
    HORIZONTAL_TO_VERTICAL = "horizontal_to_vertical"
    VERTICAL_TO_HORIZONTAL = "vertical_to_horizontal"


# Corner index used as the translation origin when fitting into a region
ANCHOR_CORNER = 3


def as_uv_array(points) -> np.ndarray:
    """Coerce a sequence of 2D points to a float (N, 2) array."""
    arr = np.asarray(points, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected (N, 2) points, got shape {arr.shape}")
    return arr


def smallest_uv(uvs: np.ndarray) -> np.ndarray:
    """Componentwise minimum of a non-empty point set."""
    if len(uvs) == 0:
        raise ValueError("Cannot take bounds of an empty point set")
    return np.min(uvs, axis=0)


def largest_uv(uvs: np.ndarray) -> np.ndarray:
    """Componentwise maximum of a non-empty point set."""
    if len(uvs) == 0:
        raise ValueError("Cannot take bounds of an empty point set")
    return np.max(uvs, axis=0)


def uv_size(uvs: np.ndarray) -> np.ndarray:
    """Bounding-box width and height."""
    return largest_uv(uvs) - smallest_uv(uvs)


def uv_center(uvs: np.ndarray) -> np.ndarray:
    """Center of the bounding box."""
    return (smallest_uv(uvs) + largest_uv(uvs)) / 2.0


def rotate_points_2d(
    points: np.ndarray,
    angle_deg: float,
    pivot: Sequence[float],
) -> np.ndarray:
    """Rotate points in place about a pivot, counter-clockwise for angle > 0.

    Points must be a float array; integer arrays would truncate the result.
    """
    if not np.issubdtype(points.dtype, np.floating):
        raise ValueError(f"Cannot rotate points in place with dtype {points.dtype}")
    theta = np.radians(angle_deg)
    c, s = np.cos(theta), np.sin(theta)
    rot = np.array([[c, -s], [s, c]])
    pivot = np.asarray(pivot, dtype=float)
    points[:] = (points - pivot) @ rot.T + pivot
    return points


def region_from_bounds(
    min_uv: Sequence[float],
    max_uv: Sequence[float],
) -> np.ndarray:
    """Rectangle corners with the bounding-box minimum at the anchor index.

    Order is top-left, top-right, bottom-right, bottom-left (V up).
    """
    x0, y0 = float(min_uv[0]), float(min_uv[1])
    x1, y1 = float(max_uv[0]), float(max_uv[1])
    return np.array([
        [x0, y1],
        [x1, y1],
        [x1, y0],
        [x0, y0],
    ])
