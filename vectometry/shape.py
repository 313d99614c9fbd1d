from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

from vectometry.vector import Vector, VectorLike

if TYPE_CHECKING:
    from vectometry.intersect import Intersectable
    from vectometry.rectangle import Rectangle


class Shape(ABC):
    """
    Capabilities shared by every closed 2D shape.

    Circles, polygons and rectangles implement this interface independently;
    code that only composes shapes should not need to know which one it holds.
    """

    @abstractmethod
    def area(self) -> float: ...

    @abstractmethod
    def perimeter(self) -> float: ...

    @abstractmethod
    def contains(self, point: VectorLike) -> bool:
        """Return True if ``point`` lies inside the shape or on its boundary."""
        ...

    @abstractmethod
    def move(self, translation: VectorLike) -> "Shape":
        """Return a copy of the shape translated by ``translation``."""
        ...

    @abstractmethod
    def bounds(self) -> "Rectangle":
        """Return the smallest axis-aligned rectangle enclosing the shape."""
        ...

    @abstractmethod
    def centroid(self) -> Vector: ...

    def intersections(self, other: "Intersectable") -> List[Vector]:
        """All points where the boundary of this shape meets ``other``."""
        from vectometry.intersect import intersections

        return intersections(self, other)
