import numpy as np
import pytest

from ssl_autoref.entities.data.vector import Vector2D


def test_construct_from_sequences():
    assert Vector2D((1, 2)) == Vector2D(1, 2)
    assert Vector2D([1, 2]) == Vector2D(1.0, 2.0)
    assert Vector2D(np.array([1, 2])) == Vector2D(1, 2)


def test_invalid_construction():
    with pytest.raises(TypeError):
        Vector2D(1)
    with pytest.raises(TypeError):
        Vector2D(1, 2, 3)


def test_distance_and_magnitude():
    assert Vector2D(3, 4).mag() == pytest.approx(5.0)
    assert Vector2D(1, 1).distance_to(Vector2D(4, 5)) == pytest.approx(5.0)
    assert Vector2D(0, 0).distance_to((0, 2)) == pytest.approx(2.0)


def test_arithmetic():
    a = Vector2D(1, 2)
    b = Vector2D(3, -1)
    assert a + b == Vector2D(4, 1)
    assert a - b == Vector2D(-2, 3)
    assert 2 * a == Vector2D(2, 4)
    assert -a == Vector2D(-1, -2)


def test_numpy_interop():
    v = Vector2D(1.5, -2.0)
    np.testing.assert_allclose(np.asarray(v), [1.5, -2.0])
    np.testing.assert_allclose(v.to_array(), [1.5, -2.0])
    assert tuple(v) == (1.5, -2.0)
    assert v.to_dict() == {"x": 1.5, "y": -2.0}


def test_equality_is_tolerant_and_vectors_are_unhashable():
    assert Vector2D(1.0, 2.0) == Vector2D(1.0 + 1e-12, 2.0)
    with pytest.raises(TypeError):
        hash(Vector2D(1.0, 2.0))
