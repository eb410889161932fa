"""Procedural maze grids and their floor/ceiling/wall meshes."""

from .config import GeneratorConfig, MazeConfig, MeshConfig
from .gen import GridGenerator, NumpyRandomSource, RandomSource, SequenceRandomSource, generate_grid
from .maze import Maze, MazeConstructor, Trigger, find_goal_position, find_start_position, render_text
from .mesh import MeshBuffers, MeshBuilder, build_mesh
from .types import (
    OPEN,
    WALL,
    InvalidDimensionError,
    MazeError,
    OddDimensionWarning,
    RandomSourceExhausted,
)

__all__ = [
    "OPEN",
    "WALL",
    "GeneratorConfig",
    "MazeConfig",
    "MeshConfig",
    "GridGenerator",
    "generate_grid",
    "RandomSource",
    "NumpyRandomSource",
    "SequenceRandomSource",
    "MeshBuffers",
    "MeshBuilder",
    "build_mesh",
    "Maze",
    "MazeConstructor",
    "Trigger",
    "find_start_position",
    "find_goal_position",
    "render_text",
    "MazeError",
    "InvalidDimensionError",
    "RandomSourceExhausted",
    "OddDimensionWarning",
]
