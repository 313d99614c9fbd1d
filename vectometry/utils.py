"""
Tolerance helpers shared by all geometric predicates.

Every "is this zero / are these equal" decision in the package goes through
:func:`is_zero` or :func:`is_close` so the policy defined by
``constants.EPSILON`` is applied uniformly.
"""

import math
from typing import TYPE_CHECKING

import numpy as np

from vectometry.constants import EPSILON
from vectometry.exceptions import ConstructionError

if TYPE_CHECKING:
    from vectometry.vector import Vector, VectorLike


def is_zero(value: float, scale: float = 1.0) -> bool:
    """Return True if ``value`` is zero relative to ``scale``.

    Products such as cross or dot products grow with the magnitude of their
    operands, so callers pass that magnitude as ``scale`` and the test stays
    the same at every size of input. Without a scale the test is absolute,
    which only suits dimensionless values such as angles. A zero scale only
    accepts an exact zero.
    """
    return abs(value) <= EPSILON * abs(scale)


def is_close(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=EPSILON, abs_tol=EPSILON)


def as_vector(value: "VectorLike") -> "Vector":
    """Coerce a Vector, a pair of numbers or a 2-element array to a Vector."""
    from vectometry.vector import Vector

    if isinstance(value, Vector):
        return value
    coords = np.asarray(value, dtype=float).ravel()
    if coords.shape != (2,):
        raise ConstructionError(f"Expected a 2D point, got {value!r}")
    return Vector(float(coords[0]), float(coords[1]))


def is_between(value: float, low: float, high: float) -> bool:
    """Inclusive range test that accepts values within tolerance of a bound."""
    return (value >= low or is_close(value, low)) and (value <= high or is_close(value, high))
