"""Utility helpers shared by the maze builders and scripts."""

from .config import load_config_dict, load_config_any, load_maze_config
from .connectivity import cells_connected, open_components

__all__ = [
    "load_config_dict",
    "load_config_any",
    "load_maze_config",
    "cells_connected",
    "open_components",
]
