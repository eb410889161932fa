"""Randomized grid carving.

Design decisions:
- Grid convention: uint8 array indexed [i, j] = [row, col], OPEN=0, WALL=1.
- Border cells are always WALL.
- Every interior cell with even row and even column becomes a pillar with
  probability 1 - placement_threshold (strict `u > threshold`), together with
  one random 4-neighbour. Everything else stays OPEN and forms the corridors.
- No connectivity guarantee: the output is a pillar pattern that reads as a
  maze, not a perfect maze. Start and goal may end up in separate regions.
- Draw order is fixed (one draw per even cell, two more when it becomes a
  pillar) so a recorded sequence reproduces the grid exactly.
"""

from __future__ import annotations

from typing import Optional
import warnings

import numpy as np

from ..constants import PLACEMENT_THRESHOLD
from ..types import OPEN, WALL, Grid, OddDimensionWarning, check_dimension, freeze
from .random_source import NumpyRandomSource, RandomSource


class GridGenerator:
    """Carves WALL/OPEN occupancy grids from an injected RandomSource.

    Args:
        placement_threshold: probability that an even interior cell is left
            open instead of becoming a pillar.
    """

    def __init__(self, placement_threshold: float = PLACEMENT_THRESHOLD) -> None:
        if not 0.0 <= float(placement_threshold) <= 1.0:
            raise ValueError(
                f"placement_threshold must lie in [0, 1], got {placement_threshold}"
            )
        self.placement_threshold = float(placement_threshold)

    def generate(self, rows: int, cols: int, rng: RandomSource) -> Grid:
        """Generate a read-only (rows, cols) grid.

        Raises:
            InvalidDimensionError: if rows or cols is not a positive integer.

        Warns:
            OddDimensionWarning: if either dimension is even.
        """
        rows = check_dimension("rows", rows)
        cols = check_dimension("cols", cols)
        if rows % 2 == 0 or cols % 2 == 0:
            warnings.warn(
                f"odd dimensions recommended for better structure (got {rows}x{cols})",
                OddDimensionWarning,
                stacklevel=2,
            )

        grid = np.full((rows, cols), OPEN, dtype=np.uint8)
        r_max = rows - 1
        c_max = cols - 1
        for i in range(rows):
            for j in range(cols):
                if i == 0 or j == 0 or i == r_max or j == c_max:
                    grid[i, j] = WALL
                elif i % 2 == 0 and j % 2 == 0:
                    if rng.next() > self.placement_threshold:
                        grid[i, j] = WALL
                        di, dj = self._pick_neighbour(rng)
                        ni, nj = i + di, j + dj
                        # Only reachable with even dimensions; skip rather than wrap
                        if 0 <= ni < rows and 0 <= nj < cols:
                            grid[ni, nj] = WALL
        return freeze(grid)

    @staticmethod
    def _pick_neighbour(rng: RandomSource) -> tuple[int, int]:
        """Two coin flips: axis first (column vs row), then sign."""
        along_cols = rng.next() < 0.5
        step = -1 if rng.next() < 0.5 else 1
        if along_cols:
            return 0, step
        return step, 0


def generate_grid(
    rows: int,
    cols: int,
    rng: Optional[RandomSource] = None,
    placement_threshold: float = PLACEMENT_THRESHOLD,
) -> Grid:
    """Convenience wrapper; uses a fresh NumpyRandomSource when rng is None."""
    src = rng if rng is not None else NumpyRandomSource()
    return GridGenerator(placement_threshold).generate(rows, cols, src)
