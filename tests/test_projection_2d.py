from __future__ import annotations

import numpy as np
import pytest

from glmath import Camera, Matrix4, Vector3, project_points_to_screen


def test_identity_maps_ndc_to_pixels() -> None:
    xyz = np.array([[0, 0, 0], [1, 1, 0], [-1, -1, 0]], dtype=np.float64)
    means2d, valid = project_points_to_screen(xyz, Matrix4(), 800, 600)
    assert valid.all()
    np.testing.assert_allclose(means2d, [[400, 300], [800, 0], [0, 600]])


def test_points_behind_camera_are_invalid() -> None:
    camera = Camera()
    camera.frustum(-1, 1, -1, 1, 1, 100)
    camera.look_at(Vector3([0, 0, 5]), Vector3(), Vector3([0, 1, 0]))

    xyz = np.array([[0, 0, 0], [0, 0, 10]], dtype=np.float64)
    means2d, valid = project_points_to_screen(xyz, camera.view_projection(), 640, 480)
    assert valid.tolist() == [True, False]
    np.testing.assert_allclose(means2d[0], [320, 240])
    assert np.isnan(means2d[1]).all()


def test_perspective_divide() -> None:
    camera = Camera()
    camera.frustum(-1, 1, -1, 1, 1, 100)
    # x = 1 at depth 2 lands halfway to the right edge
    means2d, valid = project_points_to_screen(
        np.array([[1, 0, -2]]), camera.get_projection(), 100, 100
    )
    assert valid[0]
    np.testing.assert_allclose(means2d[0], [75, 50])


def test_rejects_bad_input() -> None:
    with pytest.raises(ValueError, match=r"\(N, 3\)"):
        project_points_to_screen(np.zeros((4, 2)), Matrix4(), 10, 10)
    with pytest.raises(ValueError, match="positive"):
        project_points_to_screen(np.zeros((1, 3)), Matrix4(), 0, 10)
