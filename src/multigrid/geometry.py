"""Precision constants and small numeric helpers shared across the package."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

# Point clustering, on-line and incidence tests.
SMALL_EPSILON = 1e-10
# Rhombus side equality and tile area rounding.
BIG_EPSILON = 1e-6
# Below this the 2x2 line system is treated as parallel.
DETERMINANT_EPSILON = 1e-10

TAU = 2 * math.pi


class MultigridInvariantError(RuntimeError):
    """An internal consistency check failed; the build cannot continue."""


def round_with_epsilon(value: float, epsilon: float) -> float:
    """Round *value* to the nearest multiple of *epsilon* (half rounds up)."""
    scale = round(1.0 / epsilon)
    return math.floor(value * scale + 0.5) / scale


def round_small(value: float) -> float:
    return round_with_epsilon(value, SMALL_EPSILON)


def round_big(value: float) -> float:
    return round_with_epsilon(value, BIG_EPSILON)


def equal_with_epsilon(a: float, b: float, epsilon: float) -> bool:
    return abs(a - b) <= epsilon


def angle_key(angle: float) -> float:
    """Normalise an angle into [0, 2π) and round it for use as a set key.

    Angles that round to a full turn collapse onto 0.
    """
    key = round_small(angle % TAU)
    if key >= round_small(TAU):
        return 0.0
    return key


def polygon_signed_area(coords: Sequence[Tuple[float, float]]) -> float:
    """Signed area of a closed polygon via the shoelace formula.

    Positive when the vertices wind counter-clockwise.
    """
    area = 0.0
    n = len(coords)
    for i in range(n):
        x1, y1 = coords[i]
        x2, y2 = coords[(i + 1) % n]
        area += x1 * y2 - x2 * y1
    return area / 2.0
