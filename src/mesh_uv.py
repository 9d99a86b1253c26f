"""
Batch hotspot UV mapping over the triangles of a mesh.

Each triangle is mapped independently. The mesh itself is only read.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
import trimesh

from hotspot_uv import DEFAULT_SCALAR, try_get_hotspot_uvs

logger = logging.getLogger(__name__)


@dataclass
class MeshHotspotResult:
    """Per-corner UVs for every face of a mesh."""
    face_uvs: np.ndarray                 # (F, 3, 2)
    failed_faces: List[int] = field(default_factory=list)

    @property
    def face_count(self) -> int:
        return len(self.face_uvs)

    def to_dict(self) -> dict:
        return {
            "face_count": self.face_count,
            "failed_faces": list(self.failed_faces),
            "face_uvs": self.face_uvs.tolist(),
        }


def hotspot_mesh_faces(
    mesh: trimesh.Trimesh,
    atlas,
    scalar: float = DEFAULT_SCALAR,
    rng: Optional[np.random.Generator] = None,
) -> MeshHotspotResult:
    """Run hotspot UV mapping on every triangle of a mesh.

    Faces that fail keep zero UVs and are listed in failed_faces.
    """
    triangles = mesh.vertices[mesh.faces]  # (F, 3, 3)
    face_uvs = np.zeros((len(triangles), 3, 2))
    failed: List[int] = []

    for i, tri in enumerate(triangles):
        ok, uvs = try_get_hotspot_uvs(tri, atlas, scalar=scalar, rng=rng)
        if not ok:
            failed.append(i)
            continue
        face_uvs[i] = uvs

    logger.info(
        "Hotspot mapped %d faces (%d failed)",
        len(triangles) - len(failed),
        len(failed),
    )
    return MeshHotspotResult(face_uvs=face_uvs, failed_faces=failed)
