"""
Circle module.
"""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from vectometry.exceptions import ConstructionError
from vectometry.shape import Shape
from vectometry.utils import as_vector, is_zero
from vectometry.vector import Vector, VectorLike

if TYPE_CHECKING:
    from vectometry.rectangle import Rectangle


@dataclass(frozen=True)
class Circle(Shape):
    """A circle with a ``center`` and a non-negative ``radius``."""

    center: Vector
    radius: float

    def __post_init__(self):
        object.__setattr__(self, "center", as_vector(self.center))
        object.__setattr__(self, "radius", float(self.radius))
        if not self.radius >= 0:
            raise ConstructionError(f"Circle radius must be >= 0, got {self.radius}")

    def area(self) -> float:
        return math.pi * self.radius**2

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius

    def contains(self, point: VectorLike) -> bool:
        distance = as_vector(point).distance(self.center)
        return distance <= self.radius or is_zero(distance - self.radius, self.radius)

    def scale(self, factor: float) -> "Circle":
        """Circle with the same center and the radius multiplied by ``factor``."""
        return Circle(self.center, self.radius * factor)

    def move(self, translation: VectorLike) -> "Circle":
        return Circle(self.center.add(translation), self.radius)

    def bounds(self) -> "Rectangle":
        from vectometry.rectangle import Rectangle

        corner = self.center.subtract(Vector(self.radius, self.radius))
        return Rectangle(corner, 2 * self.radius, 2 * self.radius)

    def centroid(self) -> Vector:
        return self.center
