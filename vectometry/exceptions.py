"""
Exceptions raised by vectometry.

Every error is a ``ValueError`` so callers that only guard against invalid
input keep working.
"""


class GeometryError(ValueError):
    """Base class of all vectometry errors."""


class ConstructionError(GeometryError):
    """An entity was constructed from input that violates its invariants."""


class DegenerateGeometryError(GeometryError):
    """The requested quantity is undefined for the given geometry.

    Examples are the slope of a vertical line, the direction of a zero-length
    segment or the centroid of a polygon without area.
    """


class DimensionMismatchError(GeometryError):
    """Two matrices do not have the dimensions an operation requires."""


class UnionError(GeometryError):
    """The union of two polygons is not a single simple polygon."""
