import dataclasses
import math

import numpy.testing as npt
import pytest

from vectometry import (
    Angle,
    DegenerateGeometryError,
    DimensionMismatchError,
    Matrix,
    Vector,
)


@pytest.mark.parametrize(
    "a, b",
    [
        (Vector(1, 2), Vector(3, 4)),
        (Vector(-0.5, 0.25), Vector(8, -16)),
        (Vector(0, 0), Vector(1.5, 2.5)),
    ],
)
def test_add_then_subtract_is_identity(a, b):
    assert a.add(b).subtract(b) == a
    assert (a + b) - b == a


def test_add_then_subtract_is_close_for_inexact_floats():
    a = Vector(0.1, 0.2)
    b = Vector(0.3, 0.7)
    assert a.add(b).subtract(b).is_close(a)


def test_vector_like_arguments_are_coerced():
    assert Vector(1, 2).add((1, 1)) == Vector(2, 3)
    assert Vector(1, 2).dot([3, 4]) == 11


def test_vectors_are_immutable():
    v = Vector(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5


def test_constants():
    assert Vector.ZERO == Vector(0, 0)
    assert Vector.RIGHT.cross(Vector.UP) == 1
    assert Vector.LEFT == Vector.RIGHT.invert()
    assert Vector.DOWN == -Vector.UP


def test_products():
    a = Vector(1, 0)
    b = Vector(0, 1)
    assert a.cross(b) == 1
    assert b.cross(a) == -1
    assert Vector(2, 3).dot(Vector(4, 5)) == 23
    assert Vector(2, 3).multiply(Vector(4, 5)) == Vector(8, 15)
    assert Vector(2, 3).scale(2) == Vector(4, 6)
    assert Vector(1, 0).crossdot(Vector(1, 1)) == Vector(1, 1)


def test_project_and_reflect():
    assert Vector(2, 2).project(Vector(1, 0)) == Vector(2, 0)
    assert Vector(1, 1).reflect(Vector(2, 2)) == Vector(3, 3)
    with pytest.raises(DegenerateGeometryError):
        Vector(1, 1).project(Vector.ZERO)


def test_metrics():
    assert Vector(3, 4).length() == 5
    assert Vector(1, 1).distance(Vector(4, 5)) == 5
    assert Vector(0, 0).midpoint(Vector(2, 4)) == Vector(1, 2)
    assert Vector(1.5, -0.5).floor() == Vector(1, -1)


def test_slope():
    assert Vector(2, 4).slope() == 2
    with pytest.raises(DegenerateGeometryError):
        Vector(0, 3).slope()


@pytest.mark.parametrize(
    "vector, quadrant",
    [((1, 1), 1), ((-1, 1), 2), ((-1, -1), 3), ((1, -1), 4), ((0, 1), 0), ((2, 0), 0)],
)
def test_quadrant(vector, quadrant):
    assert Vector(*vector).quadrant() == quadrant


def test_resize():
    assert Vector(3, 4).resize(10) == Vector(6, 8)
    # as a point moved away from an origin
    assert Vector(4, 1).resize(6, origin=(1, 1)) == Vector(7, 1)
    with pytest.raises(DegenerateGeometryError):
        Vector.ZERO.resize(1)


def test_angles():
    assert math.isclose(Vector(0, 1).angle().degrees, 90)
    assert math.isclose(Vector(-1, 0).angle().degrees, 180)
    assert math.isclose(Vector(1, 0).angle((0, 1)).degrees, 90)
    assert math.isclose(Vector(1, 1).angle((1, 0)).degrees, 45)


def test_rotate():
    assert Vector(1, 0).rotate(Angle.deg(90)).is_close(Vector(0, 1))
    assert Vector(2, 0).rotate(Angle.deg(90), center=(1, 0)).is_close(Vector(1, 1))
    assert Vector(1, 0).rotate(Angle.deg(-90)).is_close(Vector(0, -1))


def test_from_angle():
    assert Vector.from_angle(Angle.deg(90), 2).is_close(Vector(0, 2))


def test_parallel_and_orthogonal():
    assert Vector(1, 2).is_parallel(Vector(2, 4))
    assert Vector(1, 2).is_parallel(Vector(-1, -2))
    assert not Vector(1, 2).is_parallel(Vector(2, 3))
    assert Vector(1, 0).is_orthogonal(Vector(0, 5))
    assert not Vector(1, 1).is_orthogonal(Vector(1, 0))


def test_parallel_uses_tolerance():
    assert Vector(1, 1).is_parallel(Vector(1, 1 + 1e-12))


def test_to_array():
    npt.assert_array_equal(Vector(1.5, -2).to_array(), [1.5, -2.0])
    assert Vector(1.5, -2).values() == (1.5, -2.0)
    assert tuple(Vector(1, 2)) == (1, 2)


def test_matrix_transform():
    rotation = Matrix([[0, 1], [-1, 0]])  # columns of a 90 degree rotation
    assert Vector(1, 0).matrix_transform(rotation) == Vector(0, 1)
    assert Vector(0, 2).matrix_transform(rotation) == Vector(-2, 0)
    assert Vector(3, 4).matrix_transform(Matrix.identity(2)) == Vector(3, 4)


def test_matrix_transform_requires_two_rows():
    with pytest.raises(DimensionMismatchError):
        Vector(1, 0).matrix_transform(Matrix([[1, 0, 0], [0, 1, 0]]))


def test_parallel_and_orthogonal_at_small_scale():
    small = Vector(1e-5, 0)
    assert small.is_parallel((3e-5, 0))
    assert not small.is_parallel((1e-5, 1e-7))
    assert small.is_orthogonal((0, 1e-5))
    assert not small.is_orthogonal((1e-7, 1e-5))


def test_parallel_at_large_scale():
    assert Vector(1e6, 1e6).is_parallel((2e6, 2e6 + 1e-4))
    assert not Vector(1e6, 1e6).is_parallel((2e6, 2e6 + 1))
