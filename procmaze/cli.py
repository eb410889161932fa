"""Command-line maze generation: print, export OBJ, plot."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

from omegaconf import OmegaConf

from .config import MazeConfig
from .maze import MazeConstructor, render_text
from .utils.config import load_maze_config
from .utils.connectivity import cells_connected, open_components


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a procedural maze grid and its floor/wall mesh"
    )
    parser.add_argument("--config", type=str, default=None, help="YAML config (see configs/maze.yaml)")
    parser.add_argument("--rows", type=int, default=None, help="Grid rows (odd recommended)")
    parser.add_argument("--cols", type=int, default=None, help="Grid cols (odd recommended)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--threshold", type=float, default=None, help="Placement threshold in [0,1]")
    parser.add_argument("--set", dest="overrides", action="append", default=[], help="Config override key=value (repeatable)")
    parser.add_argument("--obj", type=str, default=None, help="Write mesh to this OBJ path (+ .mtl)")
    parser.add_argument("--plot", type=str, default=None, help="Save a top-down PNG of the grid")
    parser.add_argument("--quiet", action="store_true", help="Do not print the text view")
    return parser


def resolve_config(args: argparse.Namespace) -> MazeConfig:
    if args.config:
        cfg = load_maze_config(args.config, args.overrides)
    elif args.overrides:
        cfg = MazeConfig.from_dict(OmegaConf.to_container(OmegaConf.from_dotlist(args.overrides)))
    else:
        cfg = MazeConfig()
    d = {
        "rows": cfg.rows if args.rows is None else args.rows,
        "cols": cfg.cols if args.cols is None else args.cols,
        "seed": cfg.seed if args.seed is None else args.seed,
        "placement_threshold": (
            cfg.generator.placement_threshold if args.threshold is None else args.threshold
        ),
        "cell_width": cfg.mesh.cell_width,
        "cell_height": cfg.mesh.cell_height,
        "material_names": cfg.material_names,
    }
    return MazeConfig.from_dict(d)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = resolve_config(args)

    constructor = MazeConstructor(cfg)
    maze = constructor.generate_new_maze()

    if not args.quiet:
        print(render_text(maze.grid), end="")
    _, n_regions = open_components(maze.grid)
    print(f"[MAZE] size={cfg.rows}x{cfg.cols} seed={cfg.seed}")
    print(f"[MAZE] start={maze.start} goal={maze.goal} regions={n_regions}")
    print(f"[MAZE] goal_reachable={cells_connected(maze.grid, maze.start, maze.goal)}")
    print(
        f"[MAZE] vertices={maze.mesh.vertex_count} "
        f"floor_tris={len(maze.mesh.floor_triangles)} wall_tris={len(maze.mesh.wall_triangles)}"
    )

    if args.obj:
        from .io.obj import write_obj

        os.makedirs(os.path.dirname(os.path.abspath(args.obj)), exist_ok=True)
        out = write_obj(maze.mesh, args.obj, cfg.material_names)
        print(f"[INFO] Saved OBJ: {out}")

    if args.plot:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        from .viz.plotting import draw_grid

        fig, ax = plt.subplots(figsize=(6, 6))
        draw_grid(maze.grid, ax, start=maze.start, goal=maze.goal)
        fig.savefig(args.plot, dpi=120, bbox_inches="tight")
        plt.close(fig)
        print(f"[INFO] Saved plot: {args.plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
