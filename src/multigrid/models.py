from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from .geometry import (
    DETERMINANT_EPSILON,
    SMALL_EPSILON,
    MultigridInvariantError,
    round_with_epsilon,
)


@dataclass(frozen=True)
class Point:
    """Immutable 2-D coordinate usable as a dictionary key.

    ``-0.0`` is stored as ``+0.0`` so that equal points always share a
    representation.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x) + 0.0)
        object.__setattr__(self, "y", float(self.y) + 0.0)

    def distance(self, other: Optional["Point"] = None) -> float:
        """Distance to *other*, or to the origin when omitted."""
        if other is None:
            return math.hypot(self.x, self.y)
        return math.hypot(other.x - self.x, other.y - self.y)

    def midpoint(self, other: "Point") -> "Point":
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def toward(self, other: "Point", distance: float) -> "Point":
        """Point at *distance* from this one in the direction of *other*."""
        length = self.distance(other)
        if length == 0.0:
            raise ValueError(f"Direction from {self} toward itself is undefined")
        fx = (other.x - self.x) / length
        fy = (other.y - self.y) / length
        return Point(self.x + fx * distance, self.y + fy * distance)

    def rotate_and_shift(self, angle: float, offset: float) -> "Point":
        """Rotate about the origin by *angle*, then shift *offset* along
        the rotated y axis."""
        sin_a = math.sin(angle)
        cos_a = math.cos(angle)
        rx = self.x * cos_a - self.y * sin_a
        ry = self.x * sin_a + self.y * cos_a
        return Point(rx - offset * sin_a, ry + offset * cos_a)

    def rounded(self, epsilon: float = SMALL_EPSILON) -> "Point":
        return Point(
            round_with_epsilon(self.x, epsilon),
            round_with_epsilon(self.y, epsilon),
        )

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Line:
    """Oriented line ``x·cos(angle) + y·sin(angle) = offset``.

    Equality and hashing use ``(angle, offset)`` only; the trigonometric
    values are memoised at construction.
    """

    angle: float
    offset: float
    sin: float = field(init=False, repr=False, compare=False)
    cos: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sin", math.sin(self.angle))
        object.__setattr__(self, "cos", math.cos(self.angle))

    def intersect(self, other: "Line") -> Optional[Point]:
        """Intersection point with *other*, or ``None`` for (near-)parallel lines."""
        if self.angle == other.angle:
            return None
        determinant = self.cos * other.sin - self.sin * other.cos
        if abs(determinant) < DETERMINANT_EPSILON:
            return None
        x = (self.offset * other.sin - other.offset * self.sin) / determinant
        y = -(self.offset * other.cos - other.offset * self.cos) / determinant
        return Point(x, y)

    def normal_projection(self, point: Point) -> float:
        return point.x * self.cos + point.y * self.sin

    def contains_point(self, point: Point, epsilon: float = SMALL_EPSILON) -> bool:
        return abs(self.normal_projection(point) - self.offset) <= epsilon

    def ordering_key(self, point: Point) -> float:
        """Signed position of *point* along the line.

        Raises :class:`MultigridInvariantError` when *point* is not on
        the line, which only happens if the arrangement was built wrong.
        """
        residual = self.normal_projection(point) - self.offset
        if abs(residual) > SMALL_EPSILON:
            raise MultigridInvariantError(
                f"{point} is {residual:.3g} off {self}; cannot order it along the line"
            )
        along = point.x * self.sin - point.y * self.cos
        if abs(along) <= SMALL_EPSILON:
            return 0.0
        return along
