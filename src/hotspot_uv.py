"""
Hotspot UV mapping entry point.

Projects a face onto its plane, orients the projection, asks the atlas for
the best-fitting hotspot and fits the UVs into it.
"""
import logging
from typing import Optional, Tuple

import numpy as np

from orientation import orient_uvs
from planar_projection import planar_project
from uv_fit import fit_uvs
from uv_primitives import uv_size

logger = logging.getLogger(__name__)

# World units to atlas UV units before the atlas's own scalar (1/32)
DEFAULT_SCALAR = 0.03125


def try_get_hotspot_uvs(
    face_verts,
    atlas,
    scalar: float = DEFAULT_SCALAR,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[bool, Optional[np.ndarray]]:
    """Compute hotspot UVs for one polygon face.

    Args:
        face_verts: (N, 3) face vertices in winding order.
        atlas: Object with rotate_mode, hotspot_scalar, fallback_threshold,
            enforce_fallback, exceeds_fallback() and get_best_uv_from_uvs().
            See hotspot_atlas.HotspotAtlas.
        scalar: Base multiplier applied with atlas.hotspot_scalar to the
            projected size before the hotspot lookup.
        rng: Random generator for rotation, hotspot and mirror choices.

    Returns:
        (success, uvs). uvs is None when the face has fewer than 3 vertices.
    """
    uvs = planar_project(face_verts)
    if uvs is None:
        return False, None

    approximate_size = orient_uvs(uvs, atlas.rotate_mode, rng=rng)

    requested = approximate_size * scalar * atlas.hotspot_scalar
    best_hotspot = atlas.get_best_uv_from_uvs(requested[0], requested[1], rng=rng)
    best_hotspot_size = uv_size(best_hotspot)

    if atlas.enforce_fallback and atlas.exceeds_fallback(requested, best_hotspot_size):
        logger.warning(
            "Hotspot %.4f x %.4f rejected for requested %.4f x %.4f (threshold %.2f)",
            best_hotspot_size[0], best_hotspot_size[1],
            requested[0], requested[1],
            atlas.fallback_threshold,
        )
        return False, uvs

    fit_uvs(uvs, best_hotspot, randomize=True, rng=rng)
    return True, uvs
