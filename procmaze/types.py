from __future__ import annotations

from typing import Tuple

import numpy as np

OPEN: int = 0
WALL: int = 1

# Grid convention: uint8 array indexed [row, col] = [i, j], values OPEN/WALL.
Grid = np.ndarray
Cell = Tuple[int, int]


class MazeError(Exception):
    """Base class for maze generation and meshing errors."""


class InvalidDimensionError(MazeError, ValueError):
    """Raised when a requested grid dimension is not a positive integer."""


class RandomSourceExhausted(MazeError, RuntimeError):
    """Raised when a scripted random source has no values left."""


class OddDimensionWarning(UserWarning):
    """Advisory: even dimensions are accepted but carve a weaker pattern."""


def freeze(grid: np.ndarray) -> Grid:
    """Mark an array read-only and return it."""
    grid.flags.writeable = False
    return grid


def check_dimension(name: str, value: object) -> int:
    """Validate a grid dimension; raises InvalidDimensionError."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidDimensionError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidDimensionError(f"{name} must be > 0, got {value}")
    return int(value)
