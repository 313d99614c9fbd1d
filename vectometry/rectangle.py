"""
Rectangle module - axis-aligned rectangles.

Vertex indexing::

    3------2
    |      |
    0------1
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from vectometry.angle import Angle
from vectometry.exceptions import ConstructionError, DegenerateGeometryError
from vectometry.segment import Segment
from vectometry.shape import Shape
from vectometry.utils import as_vector, is_between, is_zero
from vectometry.vector import Vector, VectorLike

if TYPE_CHECKING:
    from vectometry.polygon import Polygon


@dataclass(frozen=True)
class Rectangle(Shape):
    """
    An axis-aligned rectangle given by its bottom left corner and its size.

    All metrics are plain coordinate arithmetic. Operations that could break
    axis alignment (rotation) return a general :class:`Polygon` instead.
    """

    origin: Vector
    width: float
    height: float

    def __post_init__(self):
        object.__setattr__(self, "origin", as_vector(self.origin))
        object.__setattr__(self, "width", float(self.width))
        object.__setattr__(self, "height", float(self.height))
        if not (self.width >= 0 and self.height >= 0):
            raise ConstructionError(
                f"Rectangle size must be non-negative, got {self.width}x{self.height}"
            )

    @classmethod
    def from_edges(cls, origin: VectorLike, edge_x: VectorLike, edge_y: VectorLike) -> "Rectangle":
        """
        Create a rectangle from a corner and the two edge vectors leaving it.

        Args:
            origin: Corner the edges start from
            edge_x: Horizontal edge vector
            edge_y: Vertical edge vector

        Raises:
            ConstructionError: If an edge is not parallel to its axis
        """
        origin = as_vector(origin)
        edge_x = as_vector(edge_x)
        edge_y = as_vector(edge_y)
        if not (is_zero(edge_x.y, edge_x.length()) and is_zero(edge_y.x, edge_y.length())):
            raise ConstructionError(
                f"Edges {edge_x} and {edge_y} do not span an axis-aligned rectangle"
            )
        return cls.from_corners(origin, origin.add(edge_x).add(edge_y))

    @classmethod
    def from_corners(cls, corner: VectorLike, opposite: VectorLike) -> "Rectangle":
        """Create the rectangle spanned by two opposite corners."""
        corner = as_vector(corner)
        opposite = as_vector(opposite)
        x_min, x_max = sorted((corner.x, opposite.x))
        y_min, y_max = sorted((corner.y, opposite.y))
        return cls(Vector(x_min, y_min), x_max - x_min, y_max - y_min)

    # ========== Coordinates ==========

    @property
    def x_min(self) -> float:
        return self.origin.x

    @property
    def y_min(self) -> float:
        return self.origin.y

    @property
    def x_max(self) -> float:
        return self.origin.x + self.width

    @property
    def y_max(self) -> float:
        return self.origin.y + self.height

    @property
    def vertices(self) -> Tuple[Vector, Vector, Vector, Vector]:
        return (
            self.origin,
            Vector(self.x_max, self.y_min),
            Vector(self.x_max, self.y_max),
            Vector(self.x_min, self.y_max),
        )

    @property
    def is_degenerate(self) -> bool:
        """True if the corners collapse into a segment or a single point."""
        corners = self.vertices
        return corners[0] == corners[1] or corners[1] == corners[2]

    def segments(self) -> Tuple[Segment, ...]:
        """
        The edges, counter-clockwise from the origin.

        A rectangle without width or height is a single segment, one without
        both has no edges at all.
        """
        corners = self.vertices
        if self.is_degenerate:
            if corners[0] == corners[2]:
                return ()
            return (Segment(corners[0], corners[2]),)
        return tuple(Segment(corners[i], corners[(i + 1) % 4]) for i in range(4))

    # ========== Shape interface ==========

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)

    def contains(self, point: VectorLike) -> bool:
        point = as_vector(point)
        return is_between(point.x, self.x_min, self.x_max) and is_between(
            point.y, self.y_min, self.y_max
        )

    def move(self, translation: VectorLike) -> "Rectangle":
        return Rectangle(self.origin.add(translation), self.width, self.height)

    def bounds(self) -> "Rectangle":
        return self

    def centroid(self) -> Vector:
        return Vector(self.x_min + self.width / 2, self.y_min + self.height / 2)

    # ========== Transforms ==========

    def padding(self, amount: float) -> "Rectangle":
        """Move every side inwards by ``amount`` (outwards if negative)."""
        return Rectangle(
            self.origin.add(Vector(amount, amount)),
            self.width - 2 * amount,
            self.height - 2 * amount,
        )

    def scale(
        self,
        factor: float,
        factor_y: Optional[float] = None,
        center: Optional[VectorLike] = None,
    ) -> "Rectangle":
        """
        Scale around ``center`` (the centroid by default).

        Scaling along the axes keeps the rectangle axis-aligned, so unlike
        rotation the result is still a Rectangle, even for negative factors.
        """
        factors = Vector(factor, factor if factor_y is None else factor_y)
        center = self.centroid() if center is None else as_vector(center)
        corner = center.add(self.origin.subtract(center).multiply(factors))
        opposite = center.add(self.vertices[2].subtract(center).multiply(factors))
        return Rectangle.from_corners(corner, opposite)

    def rotate(self, angle: Angle, center: Optional[VectorLike] = None) -> "Polygon":
        """
        Rotate around ``center`` (the centroid by default); returns a Polygon.

        Raises:
            DegenerateGeometryError: If the rectangle has no area
        """
        return self.to_polygon().rotate(angle, self.centroid() if center is None else center)

    def to_polygon(self) -> "Polygon":
        """
        The same outline as a general polygon.

        Raises:
            DegenerateGeometryError: If the rectangle has no area
        """
        from vectometry.polygon import Polygon

        if self.is_degenerate:
            raise DegenerateGeometryError(
                f"Rectangle of size {self.width}x{self.height} is not a polygon"
            )
        return Polygon(self.vertices)
