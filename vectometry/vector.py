"""
Vector module - 2D points and displacement vectors.
"""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from vectometry.angle import Angle
from vectometry.exceptions import DegenerateGeometryError, DimensionMismatchError
from vectometry.utils import as_vector, is_close, is_zero

if TYPE_CHECKING:
    from vectometry.matrix import Matrix


@dataclass(frozen=True)
class Vector:
    """
    An immutable 2D vector with value semantics.

    Vectors double as points. ``==`` compares components exactly, use
    :meth:`is_close` for a tolerant comparison.
    """

    x: float
    y: float

    ZERO = None  # type: Vector
    RIGHT = None  # type: Vector
    UP = None  # type: Vector
    LEFT = None  # type: Vector
    DOWN = None  # type: Vector

    @classmethod
    def from_angle(cls, angle: Angle, length: float = 1.0) -> "Vector":
        """Create the vector with the given polar angle and length."""
        return cls(angle.cos() * length, angle.sin() * length)

    # ========== Algebra ==========

    def add(self, other: "VectorLike") -> "Vector":
        other = as_vector(other)
        return Vector(self.x + other.x, self.y + other.y)

    def subtract(self, other: "VectorLike") -> "Vector":
        other = as_vector(other)
        return Vector(self.x - other.x, self.y - other.y)

    def invert(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def floor(self) -> "Vector":
        return Vector(float(math.floor(self.x)), float(math.floor(self.y)))

    def multiply(self, other: "VectorLike") -> "Vector":
        """Component-wise product."""
        other = as_vector(other)
        return Vector(self.x * other.x, self.y * other.y)

    def scale(self, factor: float) -> "Vector":
        return Vector(self.x * factor, self.y * factor)

    def dot(self, other: "VectorLike") -> float:
        other = as_vector(other)
        return self.x * other.x + self.y * other.y

    def cross(self, other: "VectorLike") -> float:
        """Signed area of the parallelogram spanned by both vectors."""
        other = as_vector(other)
        return self.x * other.y - self.y * other.x

    def crossdot(self, other: "VectorLike") -> "Vector":
        """Return ``(cross, dot)`` of this vector and ``other``."""
        return Vector(self.cross(other), self.dot(other))

    def project(self, other: "VectorLike") -> "Vector":
        """Orthogonal projection of this vector onto ``other``."""
        other = as_vector(other)
        norm = other.dot(other)
        if norm == 0:
            raise DegenerateGeometryError("Cannot project onto the zero vector")
        return other.scale(self.dot(other) / norm)

    def reflect(self, center: "VectorLike") -> "Vector":
        """Point reflection of this point about ``center``."""
        center = as_vector(center)
        return center.add(center.subtract(self))

    # ========== Metrics ==========

    def slope(self) -> float:
        if self.x == 0:
            raise DegenerateGeometryError(f"Slope of vertical vector {self} is undefined")
        return self.y / self.x

    def quadrant(self) -> int:
        """Quadrant (1 to 4) containing the vector, 0 if it lies on an axis."""
        if self.x > 0 and self.y > 0:
            return 1
        if self.x < 0 and self.y > 0:
            return 2
        if self.x < 0 and self.y < 0:
            return 3
        if self.x > 0 and self.y < 0:
            return 4
        return 0

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, other: "VectorLike") -> float:
        return as_vector(other).subtract(self).length()

    def midpoint(self, other: "VectorLike") -> "Vector":
        other = as_vector(other)
        return Vector((self.x + other.x) / 2, (self.y + other.y) / 2)

    def resize(self, length: float, origin: Optional["VectorLike"] = None) -> "Vector":
        """
        Change the length of the vector while keeping its direction.

        Args:
            length: Target length
            origin: If given, this vector is treated as a point and moved along
                the ray from ``origin`` so that it lies ``length`` away from it

        Returns:
            Vector: The resized vector (or moved point)
        """
        if origin is not None:
            origin = as_vector(origin)
            return origin.add(self.subtract(origin).resize(length))
        current = self.length()
        if current == 0:
            raise DegenerateGeometryError("Cannot resize the zero vector")
        return self.scale(length / current)

    def angle(self, other: Optional["VectorLike"] = None) -> Angle:
        """Polar angle of this vector, or the unsigned angle to ``other``."""
        if other is None:
            return Angle.rad(math.atan2(self.y, self.x))
        other = as_vector(other)
        if self.length() == 0 or other.length() == 0:
            raise DegenerateGeometryError("Angle with the zero vector is undefined")
        return Angle.rad(math.atan2(abs(self.cross(other)), self.dot(other)))

    def rotate(self, angle: Angle, center: Optional["VectorLike"] = None) -> "Vector":
        """Rotate counter-clockwise by ``angle``, around ``center`` if given."""
        if center is not None:
            center = as_vector(center)
            return center.add(self.subtract(center).rotate(angle))
        cos_a = angle.cos()
        sin_a = angle.sin()
        return Vector(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    # ========== Predicates ==========

    def is_parallel(self, other: "VectorLike") -> bool:
        other = as_vector(other)
        return is_zero(self.cross(other), self.length() * other.length())

    def is_orthogonal(self, other: "VectorLike") -> bool:
        other = as_vector(other)
        return is_zero(self.dot(other), self.length() * other.length())

    def is_close(self, other: "VectorLike") -> bool:
        other = as_vector(other)
        return is_close(self.x, other.x) and is_close(self.y, other.y)

    # ========== Conversion ==========

    def values(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def matrix_transform(self, matrix: "Matrix") -> "Vector":
        """Apply a linear transform given as a 2 column x 2 row matrix."""
        from vectometry.matrix import Matrix

        if matrix.rows != 2:
            raise DimensionMismatchError(
                f"A vector transform needs a matrix with 2 rows, got {matrix.rows}"
            )
        result = matrix.multiply(Matrix.from_values(1, 2, self.values())).values()
        return Vector(result[0], result[1])

    # ========== Operators ==========

    def __add__(self, other: "VectorLike") -> "Vector":
        return self.add(other)

    def __sub__(self, other: "VectorLike") -> "Vector":
        return self.subtract(other)

    def __neg__(self) -> "Vector":
        return self.invert()

    def __mul__(self, factor: float) -> "Vector":
        return self.scale(factor)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


Vector.ZERO = Vector(0.0, 0.0)
Vector.RIGHT = Vector(1.0, 0.0)
Vector.UP = Vector(0.0, 1.0)
Vector.LEFT = Vector(-1.0, 0.0)
Vector.DOWN = Vector(0.0, -1.0)

VectorLike = Union[Vector, Tuple[float, float], Sequence[float], np.ndarray]
