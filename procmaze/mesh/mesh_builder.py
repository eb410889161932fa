"""Grid to 3D mesh conversion.

Design decisions:
- World axes: x follows column j, z follows row i, y is up. Cell (i, j) is
  centred at (j * w, 0, i * w).
- Every quad owns its 4 vertices; adjacent quads are never welded, so
  normals stay faceted.
- Two surface groups share one vertex buffer: group 0 holds floor and
  ceiling triangles, group 1 holds wall triangles.
- Winding: normals are cross(b - a, c - a). Floors face +y, ceilings -y and
  each wall faces into the open cell that emitted it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from ..constants import HALL_HEIGHT, HALL_WIDTH
from ..types import WALL, freeze
from .transform import BACK, DOWN, FORWARD, LEFT, RIGHT, UP, Transform

# Canonical unit quad in the local XY plane and its fixed UV corners
QUAD_CORNERS = np.array(
    [
        [-0.5, -0.5, 0.0],
        [-0.5, 0.5, 0.0],
        [0.5, 0.5, 0.0],
        [0.5, -0.5, 0.0],
    ]
)
QUAD_UVS = np.array([[1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [0.0, 0.0]])
QUAD_TRIANGLES = np.array([[2, 1, 0], [3, 2, 0]], dtype=np.int64)


@dataclass(frozen=True)
class MeshBuffers:
    """Vertex, UV and normal buffers with two triangle groups (floor, walls)."""

    vertices: np.ndarray  # (N, 3)
    uvs: np.ndarray  # (N, 2)
    floor_triangles: np.ndarray  # (F, 3)
    wall_triangles: np.ndarray  # (W, 3)
    normals: np.ndarray  # (N, 3)

    @property
    def vertex_count(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def triangle_count(self) -> int:
        return int(self.floor_triangles.shape[0] + self.wall_triangles.shape[0])

    @property
    def submeshes(self) -> Tuple[np.ndarray, np.ndarray]:
        return (self.floor_triangles, self.wall_triangles)


def add_quad(
    transform: Transform,
    vertices: List[np.ndarray],
    uvs: List[np.ndarray],
    triangles: List[np.ndarray],
) -> None:
    """Append one placed quad: 4 vertices, 4 UVs and 2 triangles.

    Triangle indices are offsets from the vertex count before the append.
    `vertices` and `uvs` hold one (4, k) block per quad.
    """
    index = 4 * len(vertices)
    vertices.append(transform.apply(QUAD_CORNERS))
    uvs.append(QUAD_UVS.copy())
    triangles.append(QUAD_TRIANGLES + index)


def recalculate_normals(vertices: np.ndarray, triangles: np.ndarray) -> np.ndarray:
    """Per-vertex normals as the normalised, area-weighted sum of face normals.

    Vertices not referenced by any triangle get a zero normal.
    """
    normals = np.zeros_like(vertices, dtype=float)
    if len(triangles) == 0:
        return normals
    a = vertices[triangles[:, 0]]
    b = vertices[triangles[:, 1]]
    c = vertices[triangles[:, 2]]
    # Unnormalised cross product length is twice the triangle area
    face = np.cross(b - a, c - a)
    for k in range(3):
        np.add.at(normals, triangles[:, k], face)
    lengths = np.linalg.norm(normals, axis=1)
    nz = lengths > 1e-12
    normals[nz] /= lengths[nz, None]
    return normals


def _stack(blocks: List[np.ndarray], width: int, dtype) -> np.ndarray:
    if not blocks:
        return np.empty((0, width), dtype=dtype)
    return np.concatenate(blocks, axis=0).astype(dtype, copy=False)


class MeshBuilder:
    """Builds floor, ceiling and wall quads for every open grid cell.

    Args:
        cell_width: hall width; floor quads are cell_width x cell_width.
        cell_height: hall height; walls are cell_width x cell_height.
    """

    def __init__(self, cell_width: float = HALL_WIDTH, cell_height: float = HALL_HEIGHT) -> None:
        if not cell_width > 0.0:
            raise ValueError(f"cell_width must be > 0, got {cell_width}")
        if not cell_height > 0.0:
            raise ValueError(f"cell_height must be > 0, got {cell_height}")
        self.width = float(cell_width)
        self.height = float(cell_height)

    def build(self, grid) -> MeshBuffers:
        data = np.asarray(grid)
        if data.ndim != 2:
            raise ValueError(f"grid must be 2D, got shape {data.shape}")
        w = self.width
        h = self.height
        half_h = h * 0.5
        r_max, c_max = data.shape[0] - 1, data.shape[1] - 1

        vertices: List[np.ndarray] = []
        uvs: List[np.ndarray] = []
        floor_tris: List[np.ndarray] = []
        wall_tris: List[np.ndarray] = []
        floor_scale = (w, w, 1.0)
        wall_scale = (w, h, 1.0)

        for i in range(r_max + 1):
            for j in range(c_max + 1):
                if data[i, j] == WALL:
                    continue
                # floor
                add_quad(Transform.trs((j * w, 0.0, i * w), UP, floor_scale), vertices, uvs, floor_tris)
                # ceiling
                add_quad(Transform.trs((j * w, h, i * w), DOWN, floor_scale), vertices, uvs, floor_tris)

                # walls on sides next to blocked or missing cells
                if i - 1 < 0 or data[i - 1, j] == WALL:
                    add_quad(
                        Transform.trs((j * w, half_h, (i - 0.5) * w), FORWARD, wall_scale),
                        vertices, uvs, wall_tris,
                    )
                if j + 1 > c_max or data[i, j + 1] == WALL:
                    add_quad(
                        Transform.trs(((j + 0.5) * w, half_h, i * w), LEFT, wall_scale),
                        vertices, uvs, wall_tris,
                    )
                if j - 1 < 0 or data[i, j - 1] == WALL:
                    add_quad(
                        Transform.trs(((j - 0.5) * w, half_h, i * w), RIGHT, wall_scale),
                        vertices, uvs, wall_tris,
                    )
                if i + 1 > r_max or data[i + 1, j] == WALL:
                    add_quad(
                        Transform.trs((j * w, half_h, (i + 0.5) * w), BACK, wall_scale),
                        vertices, uvs, wall_tris,
                    )

        verts = _stack(vertices, 3, np.float64)
        floor = _stack(floor_tris, 3, np.int64)
        walls = _stack(wall_tris, 3, np.int64)
        normals = recalculate_normals(verts, np.concatenate([floor, walls], axis=0))
        return MeshBuffers(
            vertices=freeze(verts),
            uvs=freeze(_stack(uvs, 2, np.float64)),
            floor_triangles=freeze(floor),
            wall_triangles=freeze(walls),
            normals=freeze(normals),
        )


def build_mesh(
    grid,
    cell_width: float = HALL_WIDTH,
    cell_height: float = HALL_HEIGHT,
) -> MeshBuffers:
    """Functional form of MeshBuilder(cell_width, cell_height).build(grid)."""
    return MeshBuilder(cell_width, cell_height).build(grid)


__all__ = [
    "MeshBuffers",
    "MeshBuilder",
    "add_quad",
    "build_mesh",
    "recalculate_normals",
]
