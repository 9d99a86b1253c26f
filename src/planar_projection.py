"""
Planar projection of a polygon face into 2D UV space.

The plane comes from the first three vertices. V follows world up unless the
face is closest to horizontal, in which case world right is used instead.
Axes are not normalized, so their lengths carry into the projected scale.
"""
import logging
from typing import Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)

WORLD_RIGHT = np.array([1.0, 0.0, 0.0])
WORLD_UP = np.array([0.0, 1.0, 0.0])
WORLD_FORWARD = np.array([0.0, 0.0, 1.0])


def plane_from_points(
    a: np.ndarray,
    b: np.ndarray,
    c: np.ndarray,
) -> Tuple[np.ndarray, float]:
    """Plane through three points as (unit normal, distance).

    The plane satisfies n . p + d = 0, so d = -n . a.
    """
    normal = np.cross(b - a, c - a)
    length = np.linalg.norm(normal)
    if length > 0:
        normal = normal / length
    distance = -float(np.dot(normal, a))
    return normal, distance


def closest_axis_to_normal(normal: np.ndarray) -> np.ndarray:
    """World axis with the largest absolute component of the normal."""
    nx, ny, nz = np.abs(normal)
    if nx >= ny and nx >= nz:
        return WORLD_RIGHT
    if ny >= nz:
        return WORLD_UP
    return WORLD_FORWARD


def planar_project(face_verts) -> Optional[np.ndarray]:
    """Project an ordered polygon onto its own plane.

    Args:
        face_verts: (N, 3) polygon vertices in winding order, N >= 3.

    Returns:
        (N, 2) UV array, or None if there are fewer than 3 vertices.
    """
    verts = np.asarray(face_verts, dtype=float)
    if verts.ndim != 2 or len(verts) < 3:
        logger.error("Cannot planar project for less than 3 vertices.")
        return None

    normal, distance = plane_from_points(verts[0], verts[1], verts[2])
    normal = normal * (1.0 if distance >= 0 else -1.0)

    if closest_axis_to_normal(normal) is WORLD_UP:
        v_axis = WORLD_RIGHT
    else:
        v_axis = WORLD_UP
    # TODO: for floor/ceiling faces derive U from the longest edge instead,
    # they currently get an arbitrary rotation.
    u_axis = np.cross(normal, v_axis)

    uvs = np.empty((len(verts), 2))
    uvs[:, 0] = verts @ u_axis
    uvs[:, 1] = verts @ v_axis
    return uvs
