import numpy as np

from procmaze.utils.connectivity import cells_connected, open_components


def test_connected_through_corridor() -> None:
    grid = np.array(
        [
            [1, 1, 1, 1, 1],
            [1, 0, 0, 0, 1],
            [1, 1, 1, 0, 1],
            [1, 0, 0, 0, 1],
            [1, 1, 1, 1, 1],
        ],
        dtype=np.uint8,
    )
    assert cells_connected(grid, (1, 1), (3, 1))
    labels, count = open_components(grid)
    assert count == 1
    assert labels[0, 0] == 0


def test_diagonal_is_not_connected() -> None:
    grid = np.array(
        [
            [1, 1, 1, 1],
            [1, 0, 1, 1],
            [1, 1, 0, 1],
            [1, 1, 1, 1],
        ],
        dtype=np.uint8,
    )
    assert not cells_connected(grid, (1, 1), (2, 2))
    _, count = open_components(grid)
    assert count == 2


def test_invalid_endpoints() -> None:
    grid = np.zeros((3, 3), dtype=np.uint8)
    grid[0, 0] = 1
    assert not cells_connected(grid, None, (1, 1))
    assert not cells_connected(grid, (0, 0), (1, 1))
    assert not cells_connected(grid, (1, 1), (5, 5))
    assert cells_connected(grid, (1, 1), (1, 1))


def test_regions_split_by_wall_row() -> None:
    grid = [
        [1, 1, 1, 1, 1],
        [1, 0, 0, 0, 1],
        [1, 1, 1, 1, 1],
        [1, 0, 0, 0, 1],
        [1, 1, 1, 1, 1],
    ]
    assert cells_connected(grid, (1, 1), (1, 3))
    assert not cells_connected(grid, (1, 1), (3, 3))
