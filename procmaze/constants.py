from __future__ import annotations

# Grid carving
PLACEMENT_THRESHOLD: float = 0.1  # u <= threshold leaves an even cell open

# Hall geometry (world units per cell)
HALL_WIDTH: float = 3.75
HALL_HEIGHT: float = 3.5

# Level defaults
DEFAULT_ROWS: int = 13
DEFAULT_COLS: int = 15

# Orchestration
TRIGGER_HEIGHT: float = 0.5
SPAWN_HEIGHT: float = 1.0
