from __future__ import annotations

import numpy as np

from glmath import Matrix4, Vector3, to_numpy_array, to_vector3
from glmath.utils import debug_matrix_info, debug_print, is_debug_enabled


def test_to_numpy_array() -> None:
    m = Matrix4([1, 2, 3, 4])
    np.testing.assert_array_equal(to_numpy_array(m), m.data())
    assert to_numpy_array(m).dtype == np.float32

    v = to_numpy_array(Vector3([1, 2, 3]), dtype=np.float64)
    np.testing.assert_array_equal(v, [1, 2, 3, 0])

    assert to_numpy_array([1, 2]).dtype == np.float32


def test_to_vector3() -> None:
    v = Vector3([1, 2, 3])
    assert to_vector3(v) is v
    np.testing.assert_array_equal(to_vector3((4, 5)).data(), [4, 5, 0, 0])


def test_debug_disabled_by_default(monkeypatch, capsys) -> None:
    monkeypatch.delenv("GLMATH_DEBUG", raising=False)
    assert not is_debug_enabled()
    debug_print("hidden")
    Matrix4().scale(0, 1, 1).inverse()
    assert capsys.readouterr().out == ""


def test_debug_enabled(monkeypatch, capsys) -> None:
    monkeypatch.setenv("GLMATH_DEBUG", "1")
    assert is_debug_enabled()

    Matrix4().scale(0, 1, 1).inverse()
    assert "non-invertible" in capsys.readouterr().out

    debug_matrix_info("View", Matrix4().translate(1, 2, 3))
    out = capsys.readouterr().out
    assert out.startswith("[View]")
    assert len(out.strip().splitlines()) == 5


def test_debug_false_string(monkeypatch) -> None:
    monkeypatch.setenv("GLMATH_DEBUG", "False")
    assert not is_debug_enabled()
