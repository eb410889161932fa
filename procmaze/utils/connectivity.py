from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from scipy.ndimage import label

from ..types import WALL


def cells_connected(
    grid: np.ndarray,
    start_ij: Optional[Tuple[int, int]],
    goal_ij: Optional[Tuple[int, int]],
) -> bool:
    """Return True if start and goal lie in the same 4-connected open region.

    Generated grids carry no connectivity guarantee; this only reports it.
    """
    grid = np.asarray(grid)
    if grid.ndim != 2:
        raise ValueError("grid must be 2D")
    if start_ij is None or goal_ij is None:
        return False
    H, W = grid.shape
    si, sj = start_ij
    gi, gj = goal_ij
    if si < 0 or sj < 0 or si >= H or sj >= W:
        return False
    if gi < 0 or gj < 0 or gi >= H or gj >= W:
        return False
    if grid[si, sj] == WALL or grid[gi, gj] == WALL:
        return False

    labels, _ = open_components(grid)
    return bool(labels[si, sj] == labels[gi, gj])


def open_components(grid: np.ndarray) -> Tuple[np.ndarray, int]:
    """Label 4-connected open regions. Walls get label 0."""
    labels, count = label(np.asarray(grid) != WALL)
    return labels, int(count)


__all__ = [
    "cells_connected",
    "open_components",
]
