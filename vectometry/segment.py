"""
Segment module - bounded pieces of a line between two end points.
"""

from typing import Optional

from vectometry.exceptions import DegenerateGeometryError
from vectometry.line import Line
from vectometry.utils import as_vector, is_between
from vectometry.vector import Vector, VectorLike


class Segment(Line):
    """
    A line bounded to ``[point_a, point_b]``.

    The general line algebra is inherited from :class:`Line`; every result is
    clipped to the extent of the segment.
    """

    def __init__(self, point_a: VectorLike, point_b: VectorLike):
        point_a = as_vector(point_a)
        point_b = as_vector(point_b)
        if point_a == point_b:
            raise DegenerateGeometryError(f"Segment end points coincide at {point_a}")
        super().__init__(point_a, point_b.subtract(point_a))

    @classmethod
    def from_vector(cls, vector: VectorLike) -> "Segment":
        """The segment from the origin to ``vector``."""
        return cls(Vector.ZERO, vector)

    @property
    def point_a(self) -> Vector:
        return self.point

    @property
    def point_b(self) -> Vector:
        return self.point.add(self.direction)

    def length(self) -> float:
        return self.direction.length()

    def midpoint(self) -> Vector:
        return self.point_a.midpoint(self.point_b)

    def reversed(self) -> "Segment":
        return Segment(self.point_b, self.point_a)

    def parameter(self, point: VectorLike) -> float:
        """Position of the projection of ``point``: 0 at point_a, 1 at point_b."""
        offset = as_vector(point).subtract(self.point)
        return offset.dot(self.direction) / self.direction.dot(self.direction)

    def _bounds_contain(self, point: Vector) -> bool:
        return is_between(self.parameter(point), 0.0, 1.0)

    def contains(self, point: VectorLike) -> bool:
        point = as_vector(point)
        return super().contains(point) and self._bounds_contain(point)

    def projection(self, point: VectorLike) -> Optional[Vector]:
        """Orthogonal projection onto the segment, None if it falls outside."""
        projected = super().projection(point)
        return projected if self._bounds_contain(projected) else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return {self.point_a, self.point_b} == {other.point_a, other.point_b}

    def __hash__(self) -> int:
        return hash(frozenset((self.point_a, self.point_b)))

    def __repr__(self) -> str:
        return f"Segment(point_a={self.point_a!r}, point_b={self.point_b!r})"

    def __str__(self) -> str:
        return f"[{self.point_a}, {self.point_b}]"
