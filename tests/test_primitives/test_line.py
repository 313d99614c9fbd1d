import math

import pytest

from vectometry import DegenerateGeometryError, Line, Segment, Vector


def test_zero_direction_is_rejected():
    with pytest.raises(DegenerateGeometryError):
        Line((1, 1), (0, 0))


def test_slope_and_intercepts():
    line = Line.from_slope(2, 4)
    assert line.slope() == 2
    assert line.y_intercept() == 4
    assert line.x_intercept() == -2
    assert line.axis_intersections() == Vector(-2, 4)


def test_vertical_line_has_no_slope():
    vertical = Line((3, 0), (0, 1))
    assert vertical.is_vertical
    assert vertical.x_intercept() == 3
    with pytest.raises(DegenerateGeometryError):
        vertical.slope()
    with pytest.raises(DegenerateGeometryError):
        vertical.y_intercept()


def test_horizontal_line_has_no_x_intercept():
    horizontal = Line.from_slope(0, 2)
    assert horizontal.is_horizontal
    with pytest.raises(DegenerateGeometryError):
        horizontal.x_intercept()


def test_intersection():
    assert Line.from_slope(1, 0).intersection(Line.from_slope(-1, 2)) == Vector(1, 1)


def test_intersection_with_vertical_line():
    vertical = Line((2, 0), (0, 1))
    assert vertical.intersection(Line.from_slope(3, 1)) == Vector(2, 7)
    assert Line.from_slope(3, 1).intersection(vertical) == Vector(2, 7)


def test_parallel_lines_do_not_intersect():
    assert Line.from_slope(1, 0).intersection(Line.from_slope(1, 5)) is None
    assert Line((0, 0), (0, 1)).intersection(Line((4, 0), (0, -2))) is None
    # coincident lines have no single intersection point either
    assert Line.X_AXIS.intersection(Line((5, 0), (-1, 0))) is None
    assert Line.X_AXIS.intersections(Line.from_slope(0, 1)) == []


def test_intersections_returns_a_list():
    assert Line.X_AXIS.intersections(Line.Y_AXIS) == [Vector(0, 0)]


def test_line_intersection_is_clipped_to_a_segment():
    assert Line.Y_AXIS.intersection(Segment((1, -1), (2, 1))) is None
    assert Line.Y_AXIS.intersection(Segment((-1, -1), (1, 1))) == Vector(0, 0)


def test_contains():
    diagonal = Line((0, 0), (1, 1))
    assert diagonal.contains((5, 5))
    assert diagonal.contains((-3, -3))
    assert not diagonal.contains((5, 6))
    assert Line((2, 0), (0, 1)).contains((2, 100))


def test_projection_and_reflection():
    assert Line.X_AXIS.projection((3, 4)) == Vector(3, 0)
    assert Line.X_AXIS.reflection((3, 4)) == Vector(3, -4)
    diagonal = Line((0, 0), (1, 1))
    assert diagonal.projection((2, 0)) == Vector(1, 1)
    assert diagonal.reflection((2, 0)) == Vector(0, 2)


def test_parallel_line_through_point():
    parallel = Line.X_AXIS.parallel((0, 2))
    assert parallel.contains((5, 2))
    assert parallel.is_parallel(Line.X_AXIS)


def test_relations():
    assert Line.X_AXIS.is_orthogonal(Line.Y_AXIS)
    assert not Line.X_AXIS.is_parallel(Line.Y_AXIS)
    assert math.isclose(Line.X_AXIS.angle(Line.Y_AXIS).degrees, 90)
    assert Line((0, 0), (1, 1)).coincides(Line((2, 2), (-3, -3)))
    assert not Line((0, 0), (1, 1)).coincides(Line((0, 1), (1, 1)))


def test_through_origin():
    assert Line.through_origin((1, 2)) == Line((0, 0), (1, 2))


def test_contains_at_small_scale():
    diagonal = Line((0, 0), (1e-5, 1e-5))
    assert diagonal.contains((3e-5, 3e-5))
    assert not diagonal.contains((1e-5, 1.1e-5))
    assert not Line((0, 0), (1e-5, 0)).is_parallel(Line((0, 0), (1e-5, 1e-7)))
