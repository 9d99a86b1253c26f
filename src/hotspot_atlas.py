"""
In-memory hotspot atlas: a set of rectangular regions in atlas UV space.

Implements the resolver side of hotspot mapping. Given the size a face wants,
the atlas returns the corners of the best-matching rectangle. Rectangles are
compared by (sqrt(area), aspect) so that both scale and shape count.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np
from shapely.geometry import Polygon, box

from uv_primitives import RotateMode, region_from_bounds

logger = logging.getLogger(__name__)

_DEFAULT_RNG = np.random.default_rng()


@dataclass
class HotspotAtlas:
    """Hotspot rectangles plus the per-atlas mapping settings."""
    rects: List[Polygon] = field(default_factory=list)
    rotate_mode: RotateMode = RotateMode.NONE
    hotspot_scalar: float = 1.0
    # Reject a match when requested / hotspot size exceeds this on either axis
    fallback_threshold: float = 4.0
    enforce_fallback: bool = False
    # Rects this close to the best match are picked between at random
    match_tolerance: float = 0.01

    @classmethod
    def from_pixel_rects(
        cls,
        rects: Sequence[Tuple[float, float, float, float]],
        texture_size: Tuple[float, float],
        **kwargs,
    ) -> "HotspotAtlas":
        """Build an atlas from (x, y, w, h) pixel rects, origin bottom-left."""
        tex_w, tex_h = texture_size
        if tex_w <= 0 or tex_h <= 0:
            raise ValueError(f"Texture size must be positive, got {texture_size}")

        polys = []
        for i, (x, y, w, h) in enumerate(rects):
            if w <= 0 or h <= 0:
                logger.warning("Skipping hotspot rect %d with zero area: %s", i, (x, y, w, h))
                continue
            polys.append(box(x / tex_w, y / tex_h, (x + w) / tex_w, (y + h) / tex_h))

        if not polys:
            raise ValueError("Hotspot atlas needs at least one rect")
        return cls(rects=polys, **kwargs)

    def get_best_uv_from_uvs(
        self,
        width: float,
        height: float,
        rng: Optional[np.random.Generator] = None,
    ) -> np.ndarray:
        """Corners of the rect that best matches a requested size.

        Returns:
            (4, 2) region, corner 3 at the rect's bounding-box minimum.
        """
        if not self.rects:
            raise ValueError("Hotspot atlas has no rects")
        if rng is None:
            rng = _DEFAULT_RNG

        source = _match_coord(width, height)
        coords = []
        for rect in self.rects:
            minx, miny, maxx, maxy = rect.bounds
            coords.append(_match_coord(maxx - minx, maxy - miny))
        dists = np.linalg.norm(np.array(coords) - source, axis=1)

        best = int(np.argmin(dists))
        candidates = [
            i for i, c in enumerate(coords)
            if np.linalg.norm(c - coords[best]) <= self.match_tolerance
        ]
        chosen = candidates[int(rng.integers(len(candidates)))]

        minx, miny, maxx, maxy = self.rects[chosen].bounds
        logger.debug(
            "Hotspot %d chosen for %.4f x %.4f (%d candidates)",
            chosen, width, height, len(candidates),
        )
        return region_from_bounds((minx, miny), (maxx, maxy))

    def exceeds_fallback(
        self,
        requested_size: np.ndarray,
        hotspot_size: np.ndarray,
    ) -> bool:
        """True if a hotspot is too small for the requested size."""
        return bool(
            requested_size[0] / hotspot_size[0] > self.fallback_threshold
            or requested_size[1] / hotspot_size[1] > self.fallback_threshold
        )


def _match_coord(width: float, height: float) -> np.ndarray:
    """Position of a rect in (sqrt(area), aspect) space."""
    aspect = width / max(height, 1e-9)
    return np.array([math.sqrt(max(width * height, 0.0)), aspect])
