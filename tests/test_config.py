import pytest

from procmaze.config import GeneratorConfig, MazeConfig, MeshConfig
from procmaze.constants import DEFAULT_COLS, DEFAULT_ROWS, HALL_HEIGHT, HALL_WIDTH, PLACEMENT_THRESHOLD
from procmaze.types import InvalidDimensionError
from procmaze.utils.config import load_config_dict, load_maze_config


def test_defaults() -> None:
    cfg = MazeConfig()
    assert (cfg.rows, cfg.cols) == (DEFAULT_ROWS, DEFAULT_COLS) == (13, 15)
    assert cfg.generator.placement_threshold == PLACEMENT_THRESHOLD == 0.1
    assert cfg.mesh.cell_width == HALL_WIDTH == 3.75
    assert cfg.mesh.cell_height == HALL_HEIGHT == 3.5
    assert cfg.seed is None


def test_from_dict_nested_and_flat() -> None:
    nested = MazeConfig.from_dict(
        {"rows": 7, "cols": 9, "generator": {"placement_threshold": 0.3}, "mesh": {"cell_width": 2}}
    )
    assert (nested.rows, nested.cols) == (7, 9)
    assert nested.generator.placement_threshold == 0.3
    assert nested.mesh.cell_width == 2.0
    assert nested.mesh.cell_height == HALL_HEIGHT

    flat = MazeConfig.from_dict({"placement_threshold": 0.2, "cell_height": 4.0, "seed": "5"})
    assert flat.generator.placement_threshold == 0.2
    assert flat.mesh.cell_height == 4.0
    assert flat.seed == 5
    assert MazeConfig.from_dict(None) == MazeConfig()


def test_invalid_values_rejected() -> None:
    with pytest.raises(AssertionError):
        GeneratorConfig(placement_threshold=-0.1)
    with pytest.raises(AssertionError):
        MeshConfig(cell_width=0.0)
    with pytest.raises(InvalidDimensionError):
        MazeConfig(rows=0)


def test_load_maze_config_yaml(tmp_path) -> None:
    path = tmp_path / "maze.yaml"
    path.write_text(
        "rows: 9\n"
        "cols: 11\n"
        "seed: 3\n"
        "generator:\n"
        "  placement_threshold: 0.25\n"
        "mesh:\n"
        "  cell_width: 2.0\n"
        "  cell_height: ${mesh.cell_width}\n"
    )
    cfg = load_maze_config(str(path))
    assert (cfg.rows, cfg.cols, cfg.seed) == (9, 11, 3)
    assert cfg.generator.placement_threshold == 0.25
    assert cfg.mesh.cell_height == 2.0

    over = load_maze_config(str(path), ["rows=21", "mesh.cell_width=5.0"])
    assert over.rows == 21
    assert over.mesh.cell_width == 5.0
    assert over.mesh.cell_height == 5.0


def test_load_config_dict_requires_mapping(tmp_path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(TypeError):
        load_config_dict(str(path))


def test_from_dict_keeps_dimension_errors() -> None:
    with pytest.raises(InvalidDimensionError):
        MazeConfig.from_dict({"rows": 7.9, "cols": 9})
    with pytest.raises(InvalidDimensionError):
        MazeConfig.from_dict({"rows": 7, "cols": -1})
    with pytest.raises(InvalidDimensionError):
        MazeConfig.from_dict({"rows": "7"})


def test_empty_sections_use_defaults(tmp_path) -> None:
    path = tmp_path / "sparse.yaml"
    path.write_text("rows: 5\ngenerator:\nmesh:\n")
    cfg = load_maze_config(str(path))
    assert cfg.rows == 5
    assert cfg.generator.placement_threshold == PLACEMENT_THRESHOLD
    assert cfg.mesh.cell_width == HALL_WIDTH


def test_load_config_dict_applies_overrides(tmp_path) -> None:
    path = tmp_path / "maze.yaml"
    path.write_text("rows: 9\nmesh:\n  cell_width: 2.0\n  cell_height: ${mesh.cell_width}\n")
    d = load_config_dict(str(path), ["mesh.cell_width=4.0"])
    assert d["rows"] == 9
    assert d["mesh"] == {"cell_width": 4.0, "cell_height": 4.0}
