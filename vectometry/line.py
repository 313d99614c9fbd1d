"""
Line module - infinite straight lines.

A line is stored as a point and a non-zero direction rather than as two
points, so a zero-length line can never be constructed by accident.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from vectometry.angle import Angle
from vectometry.exceptions import DegenerateGeometryError
from vectometry.utils import as_vector, is_zero
from vectometry.vector import Vector, VectorLike

if TYPE_CHECKING:
    from vectometry.intersect import Intersectable


@dataclass(frozen=True)
class Line:
    """An infinite line through ``point`` running along ``direction``."""

    point: Vector
    direction: Vector

    X_AXIS = None  # type: Line
    Y_AXIS = None  # type: Line

    def __post_init__(self):
        object.__setattr__(self, "point", as_vector(self.point))
        object.__setattr__(self, "direction", as_vector(self.direction))
        if self.direction.x == 0 and self.direction.y == 0:
            raise DegenerateGeometryError("The direction of a line must not be zero")

    @classmethod
    def from_slope(cls, slope: float, y_intercept: float) -> "Line":
        """Create the line ``y = slope * x + y_intercept``."""
        return cls(Vector(0.0, y_intercept), Vector(1.0, slope))

    @classmethod
    def through_origin(cls, direction: VectorLike) -> "Line":
        return cls(Vector.ZERO, direction)

    # ========== Slope / intercept ==========

    @property
    def is_vertical(self) -> bool:
        return is_zero(self.direction.x, self.direction.length())

    @property
    def is_horizontal(self) -> bool:
        return is_zero(self.direction.y, self.direction.length())

    def slope(self) -> float:
        if self.is_vertical:
            raise DegenerateGeometryError(f"{self} is vertical and has no slope")
        return self.direction.y / self.direction.x

    def y_intercept(self) -> float:
        """y coordinate where the line crosses the y axis."""
        return self.point.y - self.slope() * self.point.x

    def x_intercept(self) -> float:
        """x coordinate where the line crosses the x axis."""
        if self.is_horizontal:
            raise DegenerateGeometryError(f"{self} is horizontal and has no x intercept")
        if self.is_vertical:
            return self.point.x
        return -self.y_intercept() / self.slope()

    def axis_intersections(self) -> Vector:
        """Return ``(x_intercept, y_intercept)``."""
        return Vector(self.x_intercept(), self.y_intercept())

    # ========== Intersections ==========

    def _bounds_contain(self, point: Vector) -> bool:
        """Whether ``point`` (known to lie on the line) is inside its extent."""
        return True

    def _infinite_intersection(self, other: "Line") -> Optional[Vector]:
        if self.is_parallel(other):
            return None
        if self.is_vertical:
            x = self.point.x
            return Vector(x, other.slope() * x + other.y_intercept())
        if other.is_vertical:
            x = other.point.x
            return Vector(x, self.slope() * x + self.y_intercept())
        m1, b1 = self.slope(), self.y_intercept()
        m2, b2 = other.slope(), other.y_intercept()
        x = (b2 - b1) / (m1 - m2)
        return Vector(x, m1 * x + b1)

    def intersection(self, other: "Line") -> Optional[Vector]:
        """
        Single intersection point with another line or segment.

        Parallel (and coincident) lines have no single intersection point and
        return None, as do points outside the extent of a segment operand.
        """
        point = self._infinite_intersection(other)
        if point is None:
            return None
        if not (self._bounds_contain(point) and other._bounds_contain(point)):
            return None
        return point

    def intersections(self, other: "Intersectable") -> List[Vector]:
        """All intersection points with a line, segment, circle or polygon."""
        from vectometry.intersect import intersections

        return intersections(self, other)

    # ========== Relations ==========

    def angle(self, other: "Line") -> Angle:
        return self.direction.angle(other.direction)

    def contains(self, point: VectorLike) -> bool:
        offset = as_vector(point).subtract(self.point)
        return is_zero(self.direction.cross(offset), self.direction.length() * offset.length())

    def projection(self, point: VectorLike) -> Optional[Vector]:
        """Orthogonal projection of ``point`` onto the line."""
        point = as_vector(point)
        return self.point.add(point.subtract(self.point).project(self.direction))

    def reflection(self, point: VectorLike) -> Vector:
        """Mirror image of ``point`` across the line."""
        # Segment.projection clips to the extent, the mirror axis must not
        return as_vector(point).reflect(Line.projection(self, point))

    def parallel(self, point: VectorLike) -> "Line":
        """The line through ``point`` parallel to this one."""
        return Line(point, self.direction)

    def is_parallel(self, other: "Line") -> bool:
        return self.direction.is_parallel(other.direction)

    def is_orthogonal(self, other: "Line") -> bool:
        return self.direction.is_orthogonal(other.direction)

    def coincides(self, other: "Line") -> bool:
        """Whether both describe the same infinite line."""
        return self.is_parallel(other) and Line.contains(self, other.point)

    def __str__(self) -> str:
        return f"Line({self.point} + t{self.direction})"


Line.X_AXIS = Line(Vector.ZERO, Vector.RIGHT)
Line.Y_AXIS = Line(Vector.ZERO, Vector.UP)
