"""
Polygon module - simple polygons given as an ordered loop of vertices.

Edges are implicit (vertex ``i`` to vertex ``i + 1``, the last one closing the
loop) and are recomputed whenever they are needed.
"""

import enum
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from vectometry.angle import Angle
from vectometry.constants import FULL_TURN, MERGE_STEP_FACTOR
from vectometry.exceptions import ConstructionError, DegenerateGeometryError, UnionError
from vectometry.segment import Segment
from vectometry.shape import Shape
from vectometry.utils import as_vector, is_close, is_zero
from vectometry.vector import Vector, VectorLike

if TYPE_CHECKING:
    from vectometry.rectangle import Rectangle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Polygon(Shape):
    """
    An immutable polygon with at least three distinct vertices.

    The vertex order defines the winding; both clockwise and counter-clockwise
    loops are accepted. Polygons are expected to be simple (no
    self-intersections); results for self-intersecting loops are undefined.
    """

    vertices: Tuple[Vector, ...]

    def __post_init__(self):
        vertices = tuple(as_vector(vertex) for vertex in self.vertices)
        if len(vertices) < 3:
            raise ConstructionError(
                f"A polygon must at least have 3 vertices, got {len(vertices)}"
            )
        if len(set(vertices)) != len(vertices):
            raise ConstructionError("Polygon vertices must be distinct")
        object.__setattr__(self, "vertices", vertices)

    # ========== Factories ==========

    @classmethod
    def regular(cls, side: Segment, n: int) -> "Polygon":
        """
        Create a regular polygon with ``n`` vertices on the given side.

        The polygon starts with ``side.point_a`` and ``side.point_b`` and lies
        to the left of the side (counter-clockwise winding).
        """
        if n < 3:
            raise ConstructionError(f"A polygon must at least have 3 vertices, got {n}")
        turn = Angle.rad(FULL_TURN / n)
        vertices = [side.point_a, side.point_b]
        edge = side.direction
        for _ in range(n - 2):
            edge = edge.rotate(turn)
            vertices.append(vertices[-1].add(edge))
        return cls(vertices)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Polygon":
        """Create a polygon from an Nx2 array of vertex coordinates."""
        array = np.asarray(array, dtype=float)
        if array.ndim != 2 or array.shape[1] != 2:
            raise ConstructionError(f"Vertices must be an Nx2 array, got shape {array.shape}")
        return cls([(float(x), float(y)) for x, y in array])

    def to_array(self) -> np.ndarray:
        return np.array([vertex.values() for vertex in self.vertices], dtype=float)

    # ========== Structure ==========

    @property
    def n(self) -> int:
        return len(self.vertices)

    def _edges(self) -> Iterator[Tuple[Vector, Vector]]:
        for i, vertex in enumerate(self.vertices):
            yield vertex, self.vertices[(i + 1) % self.n]

    def segments(self) -> Tuple[Segment, ...]:
        return tuple(Segment(a, b) for a, b in self._edges())

    def diagonals(self) -> Tuple[Segment, ...]:
        """All segments between non-adjacent vertices, ``n * (n - 3) / 2`` of them."""
        return tuple(
            Segment(self.vertices[i], self.vertices[j])
            for i in range(self.n)
            for j in range(i + 2, self.n)
            if not (i == 0 and j == self.n - 1)
        )

    def angles(self) -> Tuple[Angle, ...]:
        """Interior angle at every vertex; reflex vertices exceed 180 degrees."""
        orientation = -1.0 if self.is_clockwise() else 1.0
        angles = []
        for i, vertex in enumerate(self.vertices):
            incoming = vertex.subtract(self.vertices[i - 1])
            outgoing = self.vertices[(i + 1) % self.n].subtract(vertex)
            turn = math.atan2(incoming.cross(outgoing), incoming.dot(outgoing))
            angles.append(Angle.rad(math.pi - orientation * turn))
        return tuple(angles)

    # ========== Metrics ==========

    def perimeter(self) -> float:
        return sum(segment.length() for segment in self.segments())

    def signed_area(self) -> float:
        """Shoelace area; positive for counter-clockwise winding."""
        return sum(a.cross(b) for a, b in self._edges()) / 2

    def area(self) -> float:
        return abs(self.signed_area())

    def is_clockwise(self) -> bool:
        return self.signed_area() < 0

    def centroid(self) -> Vector:
        # The scale factor must use the signed cross sum; the sign cancels with
        # the signed weights of the vertex sums. Coordinates are taken relative
        # to the first vertex so the cross products do not depend on where the
        # polygon lies.
        origin = self.vertices[0]
        cross_sum = 0.0
        cross_magnitude = 0.0
        weighted = Vector.ZERO
        for a, b in self._edges():
            a = a.subtract(origin)
            b = b.subtract(origin)
            cross = a.cross(b)
            cross_sum += cross
            cross_magnitude += abs(cross)
            weighted = weighted.add(a.add(b).scale(cross))
        if is_zero(cross_sum, cross_magnitude):
            raise DegenerateGeometryError(f"Polygon {self} has no area and no centroid")
        return origin.add(weighted.scale(1 / (3 * cross_sum)))

    def bounds(self) -> "Rectangle":
        from vectometry.rectangle import Rectangle

        coords = self.to_array()
        lower = coords.min(axis=0)
        upper = coords.max(axis=0)
        return Rectangle.from_corners(
            (float(lower[0]), float(lower[1])), (float(upper[0]), float(upper[1]))
        )

    # ========== Predicates ==========

    def contains(self, point: VectorLike) -> bool:
        """
        Even-odd point in polygon test, boundary inclusive.

        A horizontal ray is cast from ``point`` towards +x; every edge whose y
        range straddles the ray and whose crossing lies right of the point
        toggles the result. The half-open straddle test counts a vertex
        exactly on the ray once.
        """
        point = as_vector(point)
        if not self.bounds().contains(point):
            return False
        if any(segment.contains(point) for segment in self.segments()):
            return True
        inside = False
        for a, b in self._edges():
            if (a.y > point.y) != (b.y > point.y):
                crossing_x = a.x + (point.y - a.y) * (b.x - a.x) / (b.y - a.y)
                if crossing_x > point.x:
                    inside = not inside
        return inside

    def is_congruent(self, other: Union["Polygon", "Rectangle"]) -> bool:
        """
        Whether both polygons have the same edge lengths and interior angles.

        Lengths and angles are compared as unordered collections, so this is a
        necessary but not a sufficient condition for congruence beyond
        triangles. A rectangle without area is congruent to no polygon.
        """
        if _is_degenerate(other):
            return False
        other = _as_polygon(other)
        if other.n != self.n:
            return False
        return _same_values(
            [segment.length() for segment in self.segments()],
            [segment.length() for segment in other.segments()],
        ) and _same_values(
            [angle.radians for angle in self.angles()],
            [angle.radians for angle in other.angles()],
        )

    def nearest_point(self, point: VectorLike) -> Vector:
        """
        Point on the boundary closest to ``point``.

        The candidates are the projections onto every edge that fall inside
        the edge, plus every vertex, which is the nearest boundary point
        whenever ``point`` lies in the wedge outside a convex corner.
        """
        point = as_vector(point)
        candidates = list(self.vertices)
        for segment in self.segments():
            projected = segment.projection(point)
            if projected is not None:
                candidates.append(projected)
        return min(candidates, key=point.distance)

    # ========== Transforms ==========

    def move(self, translation: VectorLike) -> "Polygon":
        translation = as_vector(translation)
        return Polygon([vertex.add(translation) for vertex in self.vertices])

    def scale(
        self,
        factor: float,
        factor_y: Optional[float] = None,
        center: Optional[VectorLike] = None,
    ) -> "Polygon":
        """
        Scale every vertex away from ``center``.

        Args:
            factor: Scale factor (along x only if ``factor_y`` is given)
            factor_y: Optional separate scale factor along y
            center: Fixed point of the scaling, the centroid by default

        Returns:
            Polygon: The scaled polygon
        """
        factors = Vector(factor, factor if factor_y is None else factor_y)
        center = self.centroid() if center is None else as_vector(center)
        return Polygon(
            [center.add(vertex.subtract(center).multiply(factors)) for vertex in self.vertices]
        )

    def rotate(self, angle: Angle, center: Optional[VectorLike] = None) -> "Polygon":
        """Rotate counter-clockwise around ``center``, the centroid by default."""
        center = self.centroid() if center is None else as_vector(center)
        return Polygon([vertex.rotate(angle, center) for vertex in self.vertices])

    # ========== Union ==========

    def merge(self, other: Union["Polygon", "Rectangle"]) -> "Polygon":
        """
        Union of this polygon and ``other`` as a single polygon.

        The boundaries of both polygons are walked counter-clockwise. The walk
        starts on this polygon and follows it until its next edge runs into
        the other polygon; there it switches to the other polygon's boundary
        and continues until it is back at the start. Every point where the
        boundaries touch is inserted as a vertex first, so overlapping edges
        and vertices lying on the other boundary are handled like crossings.

        If the boundaries never touch, the containing polygon is returned
        unchanged and a warning is logged. A rectangle without area only
        merges into a polygon that covers it.

        Raises:
            UnionError: If the polygons are disjoint, or the union is not a
                single simple polygon (it touches itself or has holes)
        """
        if _is_degenerate(other):
            if all(self.contains(vertex) for vertex in other.vertices):
                logger.warning(f"merge: {other} has no area and lies inside {self}")
                return self
            raise UnionError(f"{other} has no area and is not covered by {self}")

        other = _as_polygon(other)
        if not self._touches(other):
            if all(self.contains(vertex) for vertex in other.vertices):
                logger.warning(f"merge: boundaries do not touch, {other} lies inside {self}")
                return self
            if all(other.contains(vertex) for vertex in self.vertices):
                logger.warning(f"merge: boundaries do not touch, {self} lies inside {other}")
                return other
            raise UnionError("The polygons are disjoint, their union is not a polygon")

        own = _counter_clockwise(self)
        theirs = _counter_clockwise(other)
        loops = (_refine(own, theirs), _refine(theirs, own))
        partners = (theirs, own)
        sides = tuple(
            [
                _classify(loop[k], loop[(k + 1) % len(loop)], partner)
                for k in range(len(loop))
            ]
            for loop, partner in zip(loops, partners)
        )

        start = next(
            (
                (active, k)
                for active in (0, 1)
                for k, side in enumerate(sides[active])
                if side is _Side.OUTSIDE
            ),
            None,
        )
        if start is None:
            # every edge is shared, both polygons cover the same region
            return self

        active, k = start
        start_point = loops[active][k]
        walk = [start_point]
        visited = set()
        for _ in range(MERGE_STEP_FACTOR * (len(loops[0]) + len(loops[1]))):
            visited.add((active, k))
            k = (k + 1) % len(loops[active])
            point = loops[active][k]
            if point.is_close(start_point):
                break
            walk.append(point)
            if sides[active][k] is _Side.INSIDE:
                active = 1 - active
                k = _index_of(loops[active], point)
                if k is None or sides[active][k] is _Side.INSIDE:
                    raise UnionError(f"Cannot continue the union boundary at {point}")
                logger.debug(f"merge: switched to polygon {active} at {point}")
        else:
            raise UnionError("The union boundary walk did not close")

        missed = [
            (loop_index, k)
            for loop_index in (0, 1)
            for k, side in enumerate(sides[loop_index])
            if side is _Side.OUTSIDE and (loop_index, k) not in visited
        ]
        if missed:
            raise UnionError(
                f"The union is not a single simple polygon, {len(missed)} boundary "
                f"edges are not on its outline"
            )
        return Polygon(_drop_collinear(walk))

    def _touches(self, other: "Polygon") -> bool:
        own = self.segments()
        theirs = other.segments()
        return (
            any(a.intersection(b) is not None for a in own for b in theirs)
            or any(segment.contains(vertex) for segment in own for vertex in other.vertices)
            or any(segment.contains(vertex) for segment in theirs for vertex in self.vertices)
        )

    def __str__(self) -> str:
        return "[" + ", ".join(str(vertex) for vertex in self.vertices) + "]"


class _Side(enum.Enum):
    """Position of a boundary piece relative to the other polygon of a union."""

    OUTSIDE = "outside"
    SHARED = "shared"
    INSIDE = "inside"


def _is_degenerate(shape: Union[Polygon, "Rectangle"]) -> bool:
    return not isinstance(shape, Polygon) and shape.is_degenerate


def _as_polygon(shape: Union[Polygon, "Rectangle"]) -> Polygon:
    if isinstance(shape, Polygon):
        return shape
    return shape.to_polygon()


def _same_values(a: Sequence[float], b: Sequence[float]) -> bool:
    return all(is_close(x, y) for x, y in zip(sorted(a), sorted(b)))


def _counter_clockwise(polygon: Polygon) -> Polygon:
    if polygon.is_clockwise():
        return Polygon(polygon.vertices[::-1])
    return polygon


def _refine(polygon: Polygon, partner: Polygon) -> List[Vector]:
    """Vertex loop of ``polygon`` with every contact point of ``partner`` inserted."""
    partner_segments = partner.segments()
    refined: List[Vector] = []
    for edge in polygon.segments():
        contacts = [edge.intersection(segment) for segment in partner_segments]
        contacts.extend(vertex for vertex in partner.vertices if edge.contains(vertex))
        refined.append(edge.point_a)
        for point in sorted(
            (p for p in contacts if p is not None),
            key=edge.parameter,
        ):
            if point.is_close(edge.point_b) or point.is_close(refined[-1]):
                continue
            refined.append(point)
    return refined


def _classify(a: Vector, b: Vector, partner: Polygon) -> _Side:
    """Classify the boundary piece ``a -> b`` by its midpoint."""
    middle = a.midpoint(b)
    direction = b.subtract(a)
    on_boundary = [segment for segment in partner.segments() if segment.contains(middle)]
    if on_boundary:
        if any(segment.direction.dot(direction) > 0 for segment in on_boundary):
            return _Side.SHARED
        return _Side.INSIDE
    return _Side.INSIDE if partner.contains(middle) else _Side.OUTSIDE


def _index_of(loop: Sequence[Vector], point: Vector) -> Optional[int]:
    return next((k for k, vertex in enumerate(loop) if vertex.is_close(point)), None)


def _drop_collinear(points: Sequence[Vector]) -> List[Vector]:
    kept = []
    for i, point in enumerate(points):
        incoming = point.subtract(points[i - 1])
        outgoing = points[(i + 1) % len(points)].subtract(point)
        if not incoming.is_parallel(outgoing):
            kept.append(point)
    return kept
