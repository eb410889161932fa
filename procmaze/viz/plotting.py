from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt

from ..types import WALL


def draw_grid(
    grid: np.ndarray,
    ax=None,
    start: Optional[Tuple[int, int]] = None,
    goal: Optional[Tuple[int, int]] = None,
    title: Optional[str] = None,
):
    """Top-down view of a maze grid: walls dark, open cells light.

    Rows grow upwards so the picture matches the x/z layout of the mesh.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))
    ax.clear()
    img = (np.asarray(grid) == WALL).astype(float)
    ax.imshow(img, origin="lower", cmap="Greys", vmin=0.0, vmax=1.0)

    if start is not None:
        ax.plot(start[1], start[0], "bo", markersize=8, label="start")
    if goal is not None:
        ax.plot(goal[1], goal[0], "gx", markersize=8, markeredgewidth=2, label="goal")
    if start is not None or goal is not None:
        ax.legend(loc="upper right", fontsize=8)

    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(title or f"Maze {grid.shape[0]}x{grid.shape[1]}: start (blue), goal (green x)")
    return ax
