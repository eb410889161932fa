"""Maze config loading built around OmegaConf."""

from __future__ import annotations

from typing import Any, Dict, Sequence

from omegaconf import OmegaConf

from ..config import MazeConfig


def load_config_any(path: str, overrides: Sequence[str] | None = None) -> Any:
    """Load a YAML file, merge dotted `key=value` overrides, then resolve."""
    base = OmegaConf.load(path)
    if overrides:
        base = OmegaConf.merge(base, OmegaConf.from_dotlist(list(overrides)))
    return OmegaConf.to_container(base, resolve=True)


def load_config_dict(path: str, overrides: Sequence[str] | None = None) -> Dict[str, Any]:
    """Like load_config_any, but the top level must be a mapping."""
    cfg = load_config_any(path, overrides)
    if not isinstance(cfg, dict):
        raise TypeError(f"Expected mapping at {path}, got {type(cfg)}")
    return cfg


def load_maze_config(path: str, overrides: Sequence[str] | None = None) -> MazeConfig:
    """Load a MazeConfig from YAML, applying dotted `key=value` overrides."""
    return MazeConfig.from_dict(load_config_dict(path, overrides))
