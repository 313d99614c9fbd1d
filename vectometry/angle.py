"""
Angle module - a scalar angle stored in radians.
"""

import math
from dataclasses import dataclass

from vectometry.constants import FULL_TURN, HALF_TURN, QUARTER_TURN
from vectometry.exceptions import DegenerateGeometryError
from vectometry.utils import is_close, is_zero


@dataclass(frozen=True, order=True)
class Angle:
    """
    An immutable angle.

    The value is kept in radians; degrees are derived on access. Build angles
    with :meth:`rad` or :meth:`deg` rather than the raw constructor when the
    unit should be explicit at the call site.
    """

    radians: float

    @classmethod
    def rad(cls, value: float) -> "Angle":
        return cls(float(value))

    @classmethod
    def deg(cls, value: float) -> "Angle":
        return cls(math.radians(value))

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)

    def sin(self) -> float:
        return math.sin(self.radians)

    def cos(self) -> float:
        return math.cos(self.radians)

    def tan(self) -> float:
        """Tangent of the angle; undefined for odd multiples of 90 degrees."""
        remainder = math.fmod(self.radians - QUARTER_TURN, HALF_TURN)
        if is_zero(remainder) or is_close(abs(remainder), HALF_TURN):
            raise DegenerateGeometryError(f"tan is undefined for {self}")
        return math.tan(self.radians)

    def normalized(self) -> "Angle":
        """Return the same direction expressed in [0, 2*pi)."""
        value = math.fmod(self.radians, FULL_TURN)
        if value < 0:
            value += FULL_TURN
        return Angle(value)

    def is_close(self, other: "Angle") -> bool:
        return is_close(self.radians, other.radians)

    def __add__(self, other: "Angle") -> "Angle":
        return Angle(self.radians + other.radians)

    def __sub__(self, other: "Angle") -> "Angle":
        return Angle(self.radians - other.radians)

    def __neg__(self) -> "Angle":
        return Angle(-self.radians)

    def __mul__(self, factor: float) -> "Angle":
        return Angle(self.radians * factor)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"{self.degrees}°"
