import math
import numbers
from dataclasses import dataclass
from fractions import Fraction
from functools import total_ordering

from config import get_active_params
from models.slope_order import SlopeOrder


# Slope sentinels: a vertical pair sorts above every real slope,
# a point compared with itself sorts below every real slope.
VERTICAL = math.inf
COINCIDENT = -math.inf

SLOPE_ARITHMETICS = ("rational", "float")


@total_ordering
@dataclass(frozen=True)
class Point:
    """
    Immutable point in the plane with integer coordinates.

    Supports:
      - slope to another point (exact fraction or IEEE double)
      - location order (y first, then x), also used by sorted()
      - a slope-order comparator anchored at this point

    Notes:
      • Equality and hashing are by the (x, y) pair.
      • Coordinates must be integers; numpy integers are accepted and
        converted to plain int.
    """

    x: int
    y: int

    def __post_init__(self):
        for name in ("x", "y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(f"Point.{name} must be an integer, got {value!r}")
            object.__setattr__(self, name, int(value))

    # ------------------------------------------------------------------
    # Slope
    # ------------------------------------------------------------------

    def slopeTo(self, other: "Point", arithmetic: str = None):
        """
        Slope = rise / run = (y1 - y0) / (x1 - x0)

          - COINCIDENT if other has the same coordinates
          - VERTICAL if other shares x
          - 0 if other shares y
          - otherwise the quotient, as a Fraction ("rational") or a
            float ("float")

        Equal inputs always yield equal results, so slopes can be compared
        with == and no tolerance.
        """
        if arithmetic is None:
            arithmetic = get_active_params()["SLOPE_ARITHMETIC"]

        dx = other.x - self.x
        dy = other.y - self.y

        if dx == 0 and dy == 0:
            return COINCIDENT
        if dx == 0:
            return VERTICAL

        if arithmetic == "rational":
            if dy == 0:
                return Fraction(0)
            return Fraction(dy, dx)
        if arithmetic == "float":
            if dy == 0:
                return 0.0
            return dy / dx

        raise ValueError(
            f"Unknown slope arithmetic {arithmetic!r}, expected one of {SLOPE_ARITHMETICS}"
        )

    def slopeOrder(self, arithmetic: str = None):
        """
        Comparator ordering other points by the slope they make with this one.
        """
        return SlopeOrder(self, arithmetic)

    # ------------------------------------------------------------------
    # Location order
    # ------------------------------------------------------------------

    def locationOrder(self, other: "Point") -> int:
        """
        Three-way comparison: y coordinates first, ties broken by x.
        Returns -1, 0 or 1.
        """
        if self.y < other.y:
            return -1
        if self.y > other.y:
            return 1
        if self.x < other.x:
            return -1
        if self.x > other.x:
            return 1
        return 0

    def __lt__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.locationOrder(other) < 0

    # ------------------------------------------------------------------
    # Convenience
    # ------------------------------------------------------------------

    def as_tuple(self):
        return (self.x, self.y)

    def __str__(self):
        return f"({self.x}, {self.y})"
