"""
Pairwise intersection table.

Every intersectable entity belongs to one of three kinds: ``line`` (lines and
segments), ``circle`` and ``polygon`` (polygons and rectangles). Each
unordered pair of kinds has exactly one function in :data:`INTERSECTIONS`;
:func:`intersections` looks the pair up in either order.

Results are lists of points without duplicates. Collinear overlaps between
lines or edges have no isolated intersection point and contribute nothing.
Polygon-like operands are intersected edge by edge through ``segments()``,
so a rectangle without width or height acts as a single segment.
"""

import logging
import math
from typing import Callable, Dict, List, Sequence, Tuple, Union

from vectometry.circle import Circle
from vectometry.line import Line
from vectometry.polygon import Polygon
from vectometry.rectangle import Rectangle
from vectometry.utils import is_zero
from vectometry.vector import Vector

logger = logging.getLogger(__name__)

Intersectable = Union[Line, Circle, Polygon, Rectangle]

KINDS: Tuple[Tuple[type, str], ...] = (
    (Line, "line"),
    (Circle, "circle"),
    (Polygon, "polygon"),
    (Rectangle, "polygon"),
)


def kind_of(entity: Intersectable) -> str:
    for cls, kind in KINDS:
        if isinstance(entity, cls):
            return kind
    raise TypeError(f"{type(entity).__name__} does not support intersections")


def _unique(points: Sequence[Vector]) -> List[Vector]:
    result: List[Vector] = []
    for point in points:
        if not any(point.is_close(seen) for seen in result):
            result.append(point)
    return result


def _quadratic_roots(a: float, b: float, c: float) -> List[float]:
    """Real roots of ``a*t^2 + b*t + c``; a double root is returned once."""
    discriminant = b * b - 4 * a * c
    if is_zero(discriminant, b * b + abs(4 * a * c)):
        return [-b / (2 * a)]
    if discriminant < 0:
        return []
    root = math.sqrt(discriminant)
    return [(-b - root) / (2 * a), (-b + root) / (2 * a)]


def line_line(a: Line, b: Line) -> List[Vector]:
    point = a.intersection(b)
    return [] if point is None else [point]


def line_circle(line: Line, circle: Circle) -> List[Vector]:
    """
    Intersect a line (or segment) with a circle.

    The line ``y = m*x + t`` is substituted into the circle equation and the
    quadratic in x is solved. Vertical lines are solved for y instead.
    """
    cx, cy = circle.center
    r = circle.radius
    if line.is_vertical:
        x = line.point.x
        points = [
            Vector(x, y)
            for y in _quadratic_roots(1.0, -2 * cy, cy * cy + (x - cx) ** 2 - r * r)
        ]
    else:
        m = line.slope()
        t = line.y_intercept()
        points = [
            Vector(x, m * x + t)
            for x in _quadratic_roots(
                1 + m * m,
                2 * (m * (t - cy) - cx),
                cx * cx + (t - cy) ** 2 - r * r,
            )
        ]
    return [point for point in points if line._bounds_contain(point)]


def line_polygon(line: Line, polygon: Union[Polygon, Rectangle]) -> List[Vector]:
    hits = [line.intersection(edge) for edge in polygon.segments()]
    return _unique([point for point in hits if point is not None])


def circle_circle(a: Circle, b: Circle) -> List[Vector]:
    """
    Intersect two circles through their radical line.

    Concentric circles, circles too far apart and nested circles have no
    intersection. Touching circles yield their single tangency point.
    """
    offset = b.center.subtract(a.center)
    d = offset.length()
    if is_zero(d, max(a.radius, b.radius)):
        return []
    if d > a.radius + b.radius and not is_zero(d - a.radius - b.radius, d):
        return []
    if d < abs(a.radius - b.radius) and not is_zero(d - abs(a.radius - b.radius), d):
        return []
    along = (a.radius**2 - b.radius**2 + d * d) / (2 * d)
    base = a.center.add(offset.scale(along / d))
    h_squared = a.radius**2 - along**2
    if h_squared <= 0 or is_zero(h_squared, a.radius**2):
        return [base]
    h = math.sqrt(h_squared)
    perpendicular = Vector(-offset.y, offset.x).scale(h / d)
    return [base.add(perpendicular), base.subtract(perpendicular)]


def circle_polygon(circle: Circle, polygon: Union[Polygon, Rectangle]) -> List[Vector]:
    points: List[Vector] = []
    for edge in polygon.segments():
        points.extend(line_circle(edge, circle))
    return _unique(points)


def polygon_polygon(
    a: Union[Polygon, Rectangle], b: Union[Polygon, Rectangle]
) -> List[Vector]:
    points: List[Vector] = []
    for edge in a.segments():
        points.extend(line_polygon(edge, b))
    return _unique(points)


INTERSECTIONS: Dict[Tuple[str, str], Callable[..., List[Vector]]] = {
    ("line", "line"): line_line,
    ("line", "circle"): line_circle,
    ("line", "polygon"): line_polygon,
    ("circle", "circle"): circle_circle,
    ("circle", "polygon"): circle_polygon,
    ("polygon", "polygon"): polygon_polygon,
}


def intersections(a: Intersectable, b: Intersectable) -> List[Vector]:
    """All intersection points of two lines, segments or shape outlines."""
    pair = (kind_of(a), kind_of(b))
    if pair in INTERSECTIONS:
        return INTERSECTIONS[pair](a, b)
    logger.debug(f"intersections: using {pair[1]} x {pair[0]} for {pair}")
    return INTERSECTIONS[pair[::-1]](b, a)
