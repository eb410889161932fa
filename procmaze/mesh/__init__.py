"""Mesh assembly from occupancy grids."""

from .mesh_builder import MeshBuffers, MeshBuilder, add_quad, build_mesh, recalculate_normals
from .transform import Transform, look_rotation

__all__ = [
    "MeshBuffers",
    "MeshBuilder",
    "add_quad",
    "build_mesh",
    "recalculate_normals",
    "Transform",
    "look_rotation",
]
