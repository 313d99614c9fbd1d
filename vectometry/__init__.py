"""
vectometry - 2D computational geometry primitives.

This package provides vectors, angles, lines, segments, circles, polygons,
axis-aligned rectangles and a small column-major matrix type, together with
geometric predicates, metrics and affine transforms.
"""

__version__ = "0.1.0"

from .angle import Angle
from .circle import Circle
from .exceptions import (
    ConstructionError,
    DegenerateGeometryError,
    DimensionMismatchError,
    GeometryError,
    UnionError,
)
from .intersect import intersections
from .line import Line
from .matrix import Matrix
from .polygon import Polygon
from .rectangle import Rectangle
from .segment import Segment
from .shape import Shape
from .vector import Vector, VectorLike

# Define what gets imported with "from vectometry import *"
__all__ = [
    # Primitives
    "Angle",
    "Vector",
    "VectorLike",
    "Matrix",
    # Lines
    "Line",
    "Segment",
    # Shapes
    "Shape",
    "Circle",
    "Polygon",
    "Rectangle",
    "intersections",
    # Errors
    "GeometryError",
    "ConstructionError",
    "DegenerateGeometryError",
    "DimensionMismatchError",
    "UnionError",
]
