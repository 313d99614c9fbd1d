import logging
import math

import pytest

from vectometry import Polygon, Rectangle, UnionError, Vector


def _square(x, y, size=1):
    return Polygon([(x, y), (x + size, y), (x + size, y + size), (x, y + size)])


def _vertex_set(polygon):
    return {vertex.values() for vertex in polygon.vertices}


class TestOverlapping:
    def test_offset_squares(self, unit_square):
        other = _square(0.5, 0)
        merged = unit_square.merge(other)
        overlap = 0.5
        assert math.isclose(merged.area(), unit_square.area() + other.area() - overlap)
        assert _vertex_set(merged) == {(0, 0), (1.5, 0), (1.5, 1), (0, 1)}

    def test_area_does_not_depend_on_order(self, unit_square):
        other = _square(0.5, 0)
        assert math.isclose(unit_square.merge(other).area(), other.merge(unit_square).area())

    def test_crossing_squares(self):
        a = _square(0, 0, 2)
        b = _square(1, 1, 2)
        merged = a.merge(b)
        assert merged.n == 8
        assert math.isclose(merged.area(), 7)
        assert {(2, 1), (1, 2)} <= _vertex_set(merged)
        assert math.isclose(b.merge(a).area(), 7)

    def test_clockwise_input(self, unit_square):
        clockwise = Polygon(_square(0.5, 0).vertices[::-1])
        assert math.isclose(unit_square.merge(clockwise).area(), 1.5)

    def test_rectangle_operand(self, unit_square):
        merged = unit_square.merge(Rectangle((0.5, 0.5), 1, 1))
        assert math.isclose(merged.area(), 1.75)
        assert merged.contains((1.25, 1.25))
        assert not merged.contains((1.25, 0.25))

    def test_triangle_over_square(self, unit_square):
        triangle = Polygon([(0.5, 0.5), (2, 0.5), (0.5, 2)])
        merged = unit_square.merge(triangle)
        # triangle area 1.125, of which a 0.5 x 0.5 square overlaps
        assert math.isclose(merged.area(), 1 + 1.125 - 0.25)
        assert merged.contains(Vector(0.6, 1.8))


class TestWithoutCrossing:
    def test_identical_polygons(self, unit_square):
        assert unit_square.merge(Polygon(unit_square.vertices)) == unit_square

    def test_contained_polygon(self):
        outer = _square(0, 0, 4)
        inner = _square(1, 1)
        assert outer.merge(inner) == outer
        assert inner.merge(outer) == outer

    def test_disjoint_polygons(self, unit_square):
        with pytest.raises(UnionError):
            unit_square.merge(_square(3, 3))

    def test_touching_in_a_single_vertex(self, unit_square):
        with pytest.raises(UnionError):
            unit_square.merge(_square(1, 1))

    def test_union_with_a_hole(self):
        u_shape = Polygon([(0, 0), (3, 0), (3, 3), (2, 3), (2, 1), (1, 1), (1, 3), (0, 3)])
        bar = Polygon([(0, 2), (3, 2), (3, 4), (0, 4)])
        with pytest.raises(UnionError):
            u_shape.merge(bar)


class TestWarningsAndLimits:
    def test_containment_is_logged(self, caplog):
        outer = _square(0, 0, 4)
        inner = _square(1, 1)
        with caplog.at_level(logging.WARNING, logger="vectometry.polygon"):
            assert inner.merge(outer) == outer
        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING
        assert "lies inside" in caplog.text

    def test_overlap_is_not_logged(self, unit_square, caplog):
        with caplog.at_level(logging.WARNING, logger="vectometry.polygon"):
            unit_square.merge(_square(0.5, 0))
        assert caplog.records == []

    def test_flat_rectangle_inside(self, unit_square, caplog):
        with caplog.at_level(logging.WARNING, logger="vectometry.polygon"):
            assert unit_square.merge(Rectangle((0.2, 0.5), 0.5, 0)) == unit_square
        assert "has no area" in caplog.text

    def test_flat_rectangle_sticking_out(self, unit_square):
        with pytest.raises(UnionError):
            unit_square.merge(Rectangle((0.5, 0.5), 2, 0))

    def test_walk_is_bounded(self, unit_square, monkeypatch):
        monkeypatch.setattr("vectometry.polygon.MERGE_STEP_FACTOR", 0)
        with pytest.raises(UnionError, match="did not close"):
            unit_square.merge(_square(0.5, 0))


def test_small_offset_squares():
    a = _square(0, 0, 1e-5)
    b = _square(0.5e-5, 0, 1e-5)
    merged = a.merge(b)
    assert merged.n == 4
    assert math.isclose(merged.area(), 1.5e-10)
    assert merged.contains((1.25e-5, 0.5e-5))
    assert not merged.contains((1.25e-5, 1.1e-5))
