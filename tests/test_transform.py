import numpy as np
import pytest

from procmaze.mesh.transform import BACK, DOWN, FORWARD, LEFT, RIGHT, UP, Transform, look_rotation


@pytest.mark.parametrize("forward", [UP, DOWN, FORWARD, BACK, LEFT, RIGHT])
def test_look_rotation_is_proper_and_aims_z(forward) -> None:
    R = look_rotation(forward)
    assert np.allclose(R @ R.T, np.eye(3))
    assert np.isclose(np.linalg.det(R), 1.0)
    assert np.allclose(R @ np.array([0.0, 0.0, 1.0]), forward)


def test_look_rotation_keeps_up_for_horizontal_forward() -> None:
    for f in (FORWARD, BACK, LEFT, RIGHT):
        assert np.allclose(look_rotation(f) @ np.array([0.0, 1.0, 0.0]), UP)


def test_vertical_forward_keeps_x_axis() -> None:
    assert np.allclose(look_rotation(UP)[:, 0], [1.0, 0.0, 0.0])
    assert np.allclose(look_rotation(UP)[:, 1], [0.0, 0.0, -1.0])
    assert np.allclose(look_rotation(DOWN)[:, 1], [0.0, 0.0, 1.0])


def test_apply_matches_matrix() -> None:
    t = Transform.trs((1.0, 2.0, 3.0), LEFT, (2.0, 3.0, 1.0))
    pts = np.array([[0.5, -0.5, 0.0], [-0.5, 0.5, 0.0], [0.0, 0.0, 0.0]])
    homo = np.hstack([pts, np.ones((3, 1))]) @ t.matrix().T
    assert np.allclose(t.apply(pts), homo[:, :3])
    assert np.allclose(t.apply(pts[2:]), [[1.0, 2.0, 3.0]])
