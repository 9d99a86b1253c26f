"""
Fit a UV set into a hotspot region.

The UVs are moved to the origin, scaled uniformly so they do not overflow the
region on the tighter axis, anchored at corner 3 of the region and optionally
mirrored about the region's center.
"""
import logging
from typing import Optional

import numpy as np

from uv_primitives import ANCHOR_CORNER, as_uv_array, largest_uv, smallest_uv

logger = logging.getLogger(__name__)

_DEFAULT_RNG = np.random.default_rng()


def fit_uvs(
    uvs: np.ndarray,
    target,
    randomize: bool = True,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Rescale and reposition a UV set in place to occupy a region.

    Aspect is preserved: the scale is max(uv_w / target_w, uv_h / target_h),
    so one axis matches the region and the other may fall short.

    Args:
        uvs: (N, 2) UV points. Float arrays are modified in place; anything
            else is copied to a new float array first.
        target: 4 corner points of the hotspot region.
        randomize: Independently mirror U and V with 50% probability each.
        rng: Random generator for the mirror decisions.

    Returns:
        The fitted array (the input itself when it was a float array).
    """
    target = as_uv_array(target)
    if len(target) != 4:
        raise ValueError(f"Hotspot region needs 4 corners, got {len(target)}")

    if not (isinstance(uvs, np.ndarray) and np.issubdtype(uvs.dtype, np.floating)):
        uvs = as_uv_array(uvs)

    uvs -= smallest_uv(uvs)

    # Recomputed after the shift; uv min is now the origin
    uv_min = smallest_uv(uvs)
    target_min = smallest_uv(target)
    uv_max = largest_uv(uvs)
    target_max = largest_uv(target)

    width_scale = (uv_max[0] - uv_min[0]) / (target_max[0] - target_min[0])
    height_scale = (uv_max[1] - uv_min[1]) / (target_max[1] - target_min[1])
    scale = max(width_scale, height_scale)

    uvs /= scale
    uvs += target[ANCHOR_CORNER]

    if randomize:
        if rng is None:
            rng = _DEFAULT_RNG
        center = (target_min + target_max) / 2.0
        flip_x = rng.random() < 0.5
        flip_y = rng.random() < 0.5
        if flip_x:
            uvs[:, 0] = 2.0 * center[0] - uvs[:, 0]
        if flip_y:
            uvs[:, 1] = 2.0 * center[1] - uvs[:, 1]
        logger.debug("Mirror U=%s V=%s", flip_x, flip_y)

    return uvs
