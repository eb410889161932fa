"""Wavefront OBJ/MTL export for MeshBuffers.

One `usemtl` block per surface group, in group order (floor, walls).
Faces reference vertex, UV and normal with the same 1-based index.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

import numpy as np

from ..mesh import MeshBuffers

# Diffuse colours per material slot (floor, wall)
_DIFFUSE = ((0.45, 0.40, 0.35), (0.70, 0.70, 0.72))


def write_mtl(path: str | os.PathLike, material_names: Sequence[str] = ("floor", "wall")) -> Path:
    """Write a minimal MTL library with one material per surface group."""
    p = Path(path)
    with open(p, "w", encoding="utf-8") as f:
        f.write("# Material library for procedural maze\n\n")
        for k, name in enumerate(material_names):
            kd = _DIFFUSE[k % len(_DIFFUSE)]
            f.write(f"newmtl {name}\n")
            f.write("Ka 0.200000 0.200000 0.200000\n")
            f.write(f"Kd {kd[0]:.6f} {kd[1]:.6f} {kd[2]:.6f}\n")
            f.write("Ks 0.000000 0.000000 0.000000\n")
            f.write("d 1.000000\n")
            f.write("illum 1\n\n")
    return p


def _face_lines(triangles: np.ndarray) -> list[str]:
    lines = []
    for a, b, c in np.asarray(triangles, dtype=np.int64) + 1:
        lines.append(f"f {a}/{a}/{a} {b}/{b}/{b} {c}/{c}/{c}\n")
    return lines


def write_obj(
    mesh: MeshBuffers,
    path: str | os.PathLike,
    material_names: Sequence[str] = ("floor", "wall"),
    write_materials: bool = True,
) -> Path:
    """Write `mesh` as OBJ; also writes the sibling .mtl unless disabled."""
    if len(material_names) != len(mesh.submeshes):
        raise ValueError(
            f"need {len(mesh.submeshes)} material names, got {len(material_names)}"
        )
    p = Path(path)
    mtl_path = p.with_suffix(".mtl")
    if write_materials:
        write_mtl(mtl_path, material_names)

    with open(p, "w", encoding="utf-8") as f:
        f.write("# Procedural maze mesh\n")
        f.write(f"# {mesh.vertex_count} vertices, {mesh.triangle_count} triangles\n")
        f.write(f"mtllib {mtl_path.name}\n\n")
        f.write("".join(f"v {x:.6f} {y:.6f} {z:.6f}\n" for x, y, z in mesh.vertices))
        f.write("".join(f"vt {u:.6f} {v:.6f}\n" for u, v in mesh.uvs))
        f.write("".join(f"vn {x:.6f} {y:.6f} {z:.6f}\n" for x, y, z in mesh.normals))
        for name, tris in zip(material_names, mesh.submeshes):
            f.write(f"\ng {name}\nusemtl {name}\n")
            f.write("".join(_face_lines(tris)))
    return p


__all__ = ["write_obj", "write_mtl"]
