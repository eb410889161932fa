from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

UP = np.array([0.0, 1.0, 0.0])
DOWN = np.array([0.0, -1.0, 0.0])
FORWARD = np.array([0.0, 0.0, 1.0])
BACK = np.array([0.0, 0.0, -1.0])
LEFT = np.array([-1.0, 0.0, 0.0])
RIGHT = np.array([1.0, 0.0, 0.0])


def look_rotation(forward: Sequence[float], up: Sequence[float] = UP) -> np.ndarray:
    """Rotation matrix mapping local +z onto `forward`, local +y towards `up`.

    Columns are the world images of the local x, y, z axes. When `forward`
    is parallel to `up` the local x axis is kept on world +x.
    """
    f = np.asarray(forward, dtype=float)
    f = f / np.linalg.norm(f)
    x = np.cross(np.asarray(up, dtype=float), f)
    n = np.linalg.norm(x)
    if n < 1e-9:
        x = RIGHT.copy()
    else:
        x = x / n
    y = np.cross(f, x)
    return np.column_stack([x, y, f])


@dataclass(frozen=True)
class Transform:
    """Placement of a quad: position, orientation and non-uniform scale."""

    position: np.ndarray
    rotation: np.ndarray = field(default_factory=lambda: np.eye(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    @classmethod
    def trs(
        cls,
        position: Sequence[float],
        forward: Sequence[float],
        scale: Sequence[float],
    ) -> "Transform":
        return cls(
            position=np.asarray(position, dtype=float),
            rotation=look_rotation(forward),
            scale=np.asarray(scale, dtype=float),
        )

    def matrix(self) -> np.ndarray:
        """4x4 homogeneous TRS matrix."""
        m = np.eye(4)
        m[:3, :3] = self.rotation * self.scale[None, :]
        m[:3, 3] = self.position
        return m

    def apply(self, points: np.ndarray) -> np.ndarray:
        """Transform (n, 3) local points into world space."""
        pts = np.asarray(points, dtype=float)
        return (pts * self.scale) @ self.rotation.T + self.position
