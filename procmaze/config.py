from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .constants import (
    DEFAULT_COLS,
    DEFAULT_ROWS,
    HALL_HEIGHT,
    HALL_WIDTH,
    PLACEMENT_THRESHOLD,
)
from .types import check_dimension


@dataclass
class GeneratorConfig:
    placement_threshold: float = PLACEMENT_THRESHOLD

    def __post_init__(self) -> None:
        assert 0.0 <= self.placement_threshold <= 1.0, "placement_threshold in [0,1]"


@dataclass
class MeshConfig:
    cell_width: float = HALL_WIDTH  # hall width, also floor quad size
    cell_height: float = HALL_HEIGHT

    def __post_init__(self) -> None:
        assert self.cell_width > 0.0, "cell_width must be > 0"
        assert self.cell_height > 0.0, "cell_height must be > 0"


@dataclass
class MazeConfig:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    seed: Optional[int] = None
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    mesh: MeshConfig = field(default_factory=MeshConfig)
    material_names: tuple[str, str] = ("floor", "wall")

    def __post_init__(self) -> None:
        self.rows = check_dimension("rows", self.rows)
        self.cols = check_dimension("cols", self.cols)
        assert len(self.material_names) == 2, "material_names needs one name per surface group"

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any] | None) -> "MazeConfig":
        d = cfg or {}
        gen = d.get("generator") or {}
        mesh = d.get("mesh") or {}
        # Allow nested dicts or top-level overrides
        generator = {
            "placement_threshold": d.get(
                "placement_threshold", gen.get("placement_threshold", PLACEMENT_THRESHOLD)
            ),
        }
        mesh_cfg = {
            "cell_width": d.get("cell_width", mesh.get("cell_width", HALL_WIDTH)),
            "cell_height": d.get("cell_height", mesh.get("cell_height", HALL_HEIGHT)),
        }
        seed = d.get("seed")
        return cls(
            rows=d.get("rows", DEFAULT_ROWS),
            cols=d.get("cols", DEFAULT_COLS),
            seed=None if seed is None else int(seed),
            generator=GeneratorConfig(**{k: float(v) for k, v in generator.items()}),
            mesh=MeshConfig(**{k: float(v) for k, v in mesh_cfg.items()}),
            material_names=tuple(d.get("material_names", ("floor", "wall"))),
        )
