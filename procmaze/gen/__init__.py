"""Grid generation.

Keep generators pure: all randomness comes from an injected RandomSource.
"""

from .grid_generator import GridGenerator, generate_grid
from .random_source import NumpyRandomSource, RandomSource, SequenceRandomSource

__all__ = [
    "GridGenerator",
    "generate_grid",
    "RandomSource",
    "NumpyRandomSource",
    "SequenceRandomSource",
]
