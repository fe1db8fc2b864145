from __future__ import annotations

import numpy as np
import pytest

from glmath import Matrix4, ModelTransform


def test_default_model_is_identity() -> None:
    assert ModelTransform().model() == Matrix4()


def test_model_applies_world_scale_rotate_translate() -> None:
    t = ModelTransform(world=Matrix4().translate(1, 0, 0))
    t.resize(2, 2, 2)
    t.orient(0, 0, 90)
    t.move(10, 0, 0)

    # world -> (1,0,0), scale -> (2,0,0), rotate -> (0,2,0), move -> (10,2,0)
    np.testing.assert_allclose(t.model().transform_point(0, 0, 0), [10, 2, 0, 1], atol=1e-12)

    expected = (
        t.translate_matrix
        .multiply(t.rotate_matrix)
        .multiply(t.scale_matrix)
        .multiply(t.world)
    )
    assert t.model() == expected


def test_setters_replace_matrices_and_accumulate_bookkeeping() -> None:
    t = ModelTransform()
    t.move(1, 2, 3)
    t.move(1, 0, 0)
    assert t.translate_matrix == Matrix4().translate(1, 0, 0)
    assert t.get_location() == [2, 2, 3]

    t.resize(2, 3, 4)
    t.resize(0.5, 1, 1)
    assert t.scale_matrix == Matrix4().scale(0.5, 1, 1)
    assert t.get_size() == [1.0, 3, 4]

    t.orient(10, 0, 0)
    t.orient(5, 20, 0)
    assert t.rotate_matrix.allclose(Matrix4().rotate(5, 20, 0), 1e-12)
    assert t.get_orientation() == [15, 20, 0]


def test_from_dict() -> None:
    t = ModelTransform.from_dict({"location": [1, 2, 3], "orientation": [0, 90, 0]})
    assert t.get_location() == [1.0, 2.0, 3.0]
    assert t.get_size() == [1.0, 1.0, 1.0]
    # +x rotated about y by 90 degrees points to -z
    np.testing.assert_allclose(t.model().transform_point(1, 0, 0), [1, 2, 2, 1], atol=1e-12)


def test_from_dict_rejects_wrong_length_vectors() -> None:
    with pytest.raises(ValueError, match="model.location must have 3 values, got 2"):
        ModelTransform.from_dict({"location": [1, 2]})
    with pytest.raises(ValueError, match="model.size must have 3 values, got 1"):
        ModelTransform.from_dict({"size": 2})
