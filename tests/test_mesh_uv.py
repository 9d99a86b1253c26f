"""Tests for mesh_uv module."""
import numpy as np

from hotspot_atlas import HotspotAtlas
from mesh_uv import hotspot_mesh_faces
from uv_primitives import largest_uv, smallest_uv


class TestHotspotMeshFaces:
    """Test hotspot mapping over every triangle of a mesh."""

    def test_box_all_faces_mapped(self, box_mesh, atlas, rng):
        result = hotspot_mesh_faces(box_mesh, atlas, rng=rng)
        assert result.face_uvs.shape == (len(box_mesh.faces), 3, 2)
        assert result.failed_faces == []
        assert np.all(np.isfinite(result.face_uvs))

    def test_uvs_inside_single_hotspot(self, box_mesh, rng):
        atlas = HotspotAtlas.from_pixel_rects([(256, 256, 512, 512)], texture_size=(1024, 1024))
        result = hotspot_mesh_faces(box_mesh, atlas, rng=rng)
        corners = result.face_uvs.reshape(-1, 2)
        assert np.all(smallest_uv(corners) >= 0.25 - 1e-9)
        assert np.all(largest_uv(corners) <= 0.75 + 1e-9)

    def test_mesh_not_modified(self, box_mesh, atlas, rng):
        before = box_mesh.vertices.copy()
        hotspot_mesh_faces(box_mesh, atlas, rng=rng)
        np.testing.assert_array_equal(box_mesh.vertices, before)

    def test_failed_faces_reported(self, box_mesh, rng):
        tiny = HotspotAtlas.from_pixel_rects(
            [(0, 0, 1, 1)], texture_size=(1024, 1024), enforce_fallback=True,
        )
        result = hotspot_mesh_faces(box_mesh, tiny, rng=rng)
        assert result.failed_faces == list(range(len(box_mesh.faces)))
        assert np.all(result.face_uvs == 0.0)

    def test_to_dict(self, box_mesh, atlas, rng):
        data = hotspot_mesh_faces(box_mesh, atlas, rng=rng).to_dict()
        assert data["face_count"] == len(box_mesh.faces)
        assert data["failed_faces"] == []
        assert len(data["face_uvs"][0]) == 3
