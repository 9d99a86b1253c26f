"""
Orientation selection for projected UVs before hotspot lookup.

Rotations are about the UV set's own bounding-box center, in multiples of 90
degrees, so the result only ever keeps or swaps width and height.
"""
import logging
from typing import Optional

import numpy as np

from uv_primitives import RotateMode, rotate_points_2d, uv_center, uv_size

logger = logging.getLogger(__name__)

_DEFAULT_RNG = np.random.default_rng()


def rotate_uvs(uvs: np.ndarray, angle_deg: float = 90.0) -> np.ndarray:
    """Rotate a UV set in place about its bounding-box center."""
    return rotate_points_2d(uvs, angle_deg, uv_center(uvs))


def orient_uvs(
    uvs: np.ndarray,
    rotate_mode: RotateMode,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Apply the atlas rotation policy to a UV set in place.

    RANDOM picks 0/90/180/270 degrees. The two swap modes rotate by +-90
    degrees only when the set is wider than tall (or taller than wide).

    Returns:
        (2,) bounding-box size after any rotation.
    """
    if rng is None:
        rng = _DEFAULT_RNG

    size = uv_size(uvs)
    angle = None

    if rotate_mode == RotateMode.RANDOM:
        angle = float(rng.integers(0, 4) * 90)
    elif (
        (rotate_mode == RotateMode.HORIZONTAL_TO_VERTICAL and size[0] > size[1])
        or (rotate_mode == RotateMode.VERTICAL_TO_HORIZONTAL and size[1] > size[0])
    ):
        angle = -90.0 if rng.random() > 0.5 else 90.0

    if angle is None:
        return size

    rotate_uvs(uvs, angle)
    logger.debug("Rotated UVs by %.0f deg (%s)", angle, rotate_mode.value)
    return uv_size(uvs)
