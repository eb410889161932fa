import pytest

from procmaze.cli import build_parser, main, resolve_config
from procmaze.types import InvalidDimensionError


def test_cli_generates_and_exports(tmp_path, capsys) -> None:
    obj = tmp_path / "out" / "maze.obj"
    rc = main(["--rows", "7", "--cols", "9", "--seed", "3", "--quiet", "--obj", str(obj)])
    assert rc == 0
    assert obj.exists()
    assert obj.with_suffix(".mtl").exists()
    out = capsys.readouterr().out
    assert "[MAZE] size=7x9 seed=3" in out
    assert "goal_reachable=" in out


def test_cli_prints_text_view(capsys) -> None:
    main(["--rows", "5", "--cols", "5", "--seed", "0"])
    out = capsys.readouterr().out
    # top line of the text view is the last (all-wall) row
    assert out.splitlines()[0] == "==" * 5


def test_cli_config_and_overrides(tmp_path) -> None:
    path = tmp_path / "maze.yaml"
    path.write_text("rows: 9\ncols: 9\nmesh:\n  cell_width: 2.0\n  cell_height: 2.5\n")
    args = build_parser().parse_args(
        ["--config", str(path), "--set", "cols=11", "--threshold", "0.4"]
    )
    cfg = resolve_config(args)
    assert (cfg.rows, cfg.cols) == (9, 11)
    assert cfg.generator.placement_threshold == 0.4
    assert cfg.mesh.cell_width == 2.0

    args = build_parser().parse_args(["--set", "generator.placement_threshold=0.3"])
    assert resolve_config(args).generator.placement_threshold == 0.3


def test_cli_plot(tmp_path) -> None:
    pytest.importorskip("matplotlib")
    png = tmp_path / "maze.png"
    assert main(["--rows", "7", "--cols", "7", "--seed", "1", "--quiet", "--plot", str(png)]) == 0
    assert png.exists()


def test_cli_rejects_invalid_dimensions() -> None:
    with pytest.raises(InvalidDimensionError):
        main(["--rows", "0", "--quiet"])
    with pytest.raises(InvalidDimensionError):
        main(["--set", "cols=8.5", "--quiet"])
