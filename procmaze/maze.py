"""Level construction on top of the grid generator and mesh builder.

Responsibilities:
- Generate a grid, mesh it, and locate start and goal cells.
- Place start/goal triggers in world space and hold their callbacks.
- Keep the latest maze as `current`; earlier mazes are independent values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

import numpy as np

from .config import MazeConfig
from .constants import SPAWN_HEIGHT, TRIGGER_HEIGHT
from .gen import GridGenerator, NumpyRandomSource, RandomSource
from .mesh import MeshBuffers, MeshBuilder
from .types import OPEN, WALL, Cell, Grid, freeze

TriggerCallback = Callable[..., Any]

# Walls surrounding a single open cell, used before the first generation
DEFAULT_GRID: Grid = freeze(
    np.array(
        [
            [1, 1, 1],
            [1, 0, 1],
            [1, 1, 1],
        ],
        dtype=np.uint8,
    )
)


def find_start_position(grid: Grid) -> Optional[Cell]:
    """First open cell in row-major order."""
    rows, cols = grid.shape
    for i in range(rows):
        for j in range(cols):
            if grid[i, j] == OPEN:
                return (i, j)
    return None


def find_goal_position(grid: Grid) -> Optional[Cell]:
    """First open cell scanning from the last row and last column backwards."""
    rows, cols = grid.shape
    for i in range(rows - 1, -1, -1):
        for j in range(cols - 1, -1, -1):
            if grid[i, j] == OPEN:
                return (i, j)
    return None


def render_text(grid: Grid) -> str:
    """Debug view: last row first, '....' for open cells and '==' for walls."""
    lines = []
    for i in range(grid.shape[0] - 1, -1, -1):
        lines.append("".join("==" if v == WALL else "...." for v in grid[i]))
    return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class Trigger:
    name: str
    cell: Cell
    position: Tuple[float, float, float]
    callback: Optional[TriggerCallback] = None


@dataclass(frozen=True)
class Maze:
    """One generated level: grid, mesh, start/goal and triggers."""

    grid: Grid
    mesh: MeshBuffers
    start: Optional[Cell]
    goal: Optional[Cell]
    hall_width: float
    hall_height: float
    triggers: Dict[str, Trigger] = field(default_factory=dict)

    def cell_to_world(self, row: int, col: int, y: float = 0.0) -> Tuple[float, float, float]:
        return (float(col * self.hall_width), float(y), float(row * self.hall_width))

    def spawn_position(self) -> Optional[Tuple[float, float, float]]:
        """Player spawn point above the start cell."""
        if self.start is None:
            return None
        return self.cell_to_world(self.start[0], self.start[1], SPAWN_HEIGHT)

    def fire(self, trigger_name: str, *args: Any) -> Any:
        """Invoke the callback registered for a trigger, if any."""
        trig = self.triggers[trigger_name]
        if trig.callback is None:
            return None
        return trig.callback(*args)


class MazeConstructor:
    """Builds mazes from a MazeConfig and an injected RandomSource.

    Args:
        config: dimensions, carving and hall geometry; defaults if None.
        rng: random source; a NumpyRandomSource seeded from config.seed if None.
    """

    def __init__(
        self,
        config: Optional[MazeConfig] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or MazeConfig()
        self.rng = rng if rng is not None else NumpyRandomSource(seed=self.config.seed)
        self.data_generator = GridGenerator(self.config.generator.placement_threshold)
        self.mesh_generator = MeshBuilder(
            self.config.mesh.cell_width, self.config.mesh.cell_height
        )
        self.data: Grid = DEFAULT_GRID
        self.current: Optional[Maze] = None

    @property
    def hall_width(self) -> float:
        return self.mesh_generator.width

    @property
    def hall_height(self) -> float:
        return self.mesh_generator.height

    def generate_new_maze(
        self,
        rows: Optional[int] = None,
        cols: Optional[int] = None,
        start_callback: Optional[TriggerCallback] = None,
        goal_callback: Optional[TriggerCallback] = None,
    ) -> Maze:
        r = self.config.rows if rows is None else rows
        c = self.config.cols if cols is None else cols
        grid = self.data_generator.generate(r, c, self.rng)
        maze = self.build_maze(grid, start_callback, goal_callback)
        self.data = grid
        self.current = maze
        return maze

    def build_maze(
        self,
        grid: Grid,
        start_callback: Optional[TriggerCallback] = None,
        goal_callback: Optional[TriggerCallback] = None,
    ) -> Maze:
        """Mesh an existing grid and place its triggers."""
        grid = np.asarray(grid)
        mesh = self.mesh_generator.build(grid)
        start = find_start_position(grid)
        goal = find_goal_position(grid)
        triggers: Dict[str, Trigger] = {}
        if start is not None:
            triggers["start"] = self._place_trigger("start", start, start_callback)
        if goal is not None:
            triggers["goal"] = self._place_trigger("goal", goal, goal_callback)
        return Maze(
            grid=grid,
            mesh=mesh,
            start=start,
            goal=goal,
            hall_width=self.hall_width,
            hall_height=self.hall_height,
            triggers=triggers,
        )

    def _place_trigger(
        self, name: str, cell: Cell, callback: Optional[TriggerCallback]
    ) -> Trigger:
        row, col = cell
        pos = (float(col * self.hall_width), TRIGGER_HEIGHT, float(row * self.hall_width))
        return Trigger(name=name, cell=cell, position=pos, callback=callback)
