"""Injected randomness for grid generation.

Generators never touch global random state; every draw goes through a
`RandomSource` the caller owns.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, runtime_checkable

import numpy as np

from ..types import RandomSourceExhausted


@runtime_checkable
class RandomSource(Protocol):
    def next(self) -> float:
        """Return a uniform float in [0, 1)."""
        ...


class NumpyRandomSource:
    """RandomSource backed by a NumPy Generator.

    Args:
        rng: optional numpy Generator; if None, one is created from `seed`.
        seed: seed for the internally created Generator.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> None:
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    def next(self) -> float:
        return float(self._rng.random())


class SequenceRandomSource:
    """Replays a fixed list of draws, e.g. a recorded or hand-written script."""

    def __init__(self, values: Iterable[float]) -> None:
        vals = [float(v) for v in values]
        for v in vals:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"random values must lie in [0, 1), got {v}")
        self._values = vals
        self._pos = 0

    @property
    def consumed(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._values) - self._pos

    def next(self) -> float:
        if self._pos >= len(self._values):
            raise RandomSourceExhausted(
                f"sequence exhausted after {len(self._values)} draws"
            )
        v = self._values[self._pos]
        self._pos += 1
        return v
