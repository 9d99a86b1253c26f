#!/usr/bin/env python3
"""
Hotspot UV map every face of a mesh against a rectangle atlas.

Rects are given in texture pixels as x,y,w,h with the origin at the
bottom-left of the texture. Writes the per-face UVs as JSON.

Usage:
    python scripts/hotspot_mesh.py --input wall.obj --texture-size 1024 1024 \\
        --rect 0,0,512,512 --rect 512,0,512,256 --rect 512,256,512,256
    python scripts/hotspot_mesh.py --input room.glb --rect 0,0,256,1024 \\
        --rotate-mode random --seed 7 --output room_uvs.json
"""
import sys
import os
import json
import argparse
import logging
from pathlib import Path

import numpy as np
import trimesh

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hotspot_atlas import HotspotAtlas
from hotspot_uv import DEFAULT_SCALAR
from mesh_uv import hotspot_mesh_faces
from uv_primitives import RotateMode


def parse_rect(text):
    parts = text.split(",")
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(f"Expected x,y,w,h, got {text!r}")
    try:
        return tuple(float(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Non-numeric rect {text!r}")


def main():
    parser = argparse.ArgumentParser(
        description="Hotspot UV map every face of a mesh.",
    )
    parser.add_argument(
        "--input", required=True,
        help="Path to input mesh file (STL, OBJ, GLB, PLY)",
    )
    parser.add_argument(
        "--output", default=None,
        help="Output JSON path (default: <input_dir>/<input_stem>_hotspot_uvs.json)",
    )
    parser.add_argument(
        "--rect", action="append", type=parse_rect, required=True,
        help="Hotspot rect in pixels as x,y,w,h (repeatable)",
    )
    parser.add_argument(
        "--texture-size", type=float, nargs=2, default=[1024.0, 1024.0],
        metavar=("WIDTH", "HEIGHT"),
        help="Atlas texture size in pixels (default: 1024 1024)",
    )
    parser.add_argument(
        "--rotate-mode", default=RotateMode.NONE.value,
        choices=[m.value for m in RotateMode],
        help="UV rotation before hotspot lookup (default: none)",
    )
    parser.add_argument(
        "--scalar", type=float, default=DEFAULT_SCALAR,
        help=f"World to UV size multiplier (default: {DEFAULT_SCALAR})",
    )
    parser.add_argument(
        "--hotspot-scalar", type=float, default=1.0,
        help="Atlas size multiplier (default: 1.0)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed for rotation and mirroring",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    input_path = os.path.abspath(args.input)
    if not os.path.isfile(input_path):
        parser.error(f"Input file not found: {input_path}")

    if args.output:
        output_path = os.path.abspath(args.output)
    else:
        stem = Path(input_path).stem
        output_path = os.path.join(os.path.dirname(input_path), f"{stem}_hotspot_uvs.json")

    try:
        atlas = HotspotAtlas.from_pixel_rects(
            args.rect,
            tuple(args.texture_size),
            rotate_mode=RotateMode(args.rotate_mode),
            hotspot_scalar=args.hotspot_scalar,
        )
    except ValueError as exc:
        parser.error(str(exc))

    mesh = trimesh.load(input_path, force="mesh")
    print(f"Mapping {len(mesh.faces)} faces from {input_path} ...")

    rng = np.random.default_rng(args.seed)
    result = hotspot_mesh_faces(mesh, atlas, scalar=args.scalar, rng=rng)

    payload = {
        "input_mesh": input_path,
        "rotate_mode": atlas.rotate_mode.value,
        "scalar": args.scalar,
        "hotspot_scalar": atlas.hotspot_scalar,
        "seed": args.seed,
        **result.to_dict(),
    }
    with open(output_path, "w") as f:
        json.dump(payload, f, indent=2)

    print(f"Mapped {result.face_count - len(result.failed_faces)}/{result.face_count} faces")
    print(f"UVs saved to {output_path}")


if __name__ == "__main__":
    main()
