from __future__ import annotations

import math
from typing import Tuple

from .models import Line, Point


class Pencil:
    """One family of ``2·radius + 1`` equally spaced parallel lines.

    Lines sit at offsets ``offset - radius … offset + radius``.  Two
    extra boundary lines at ``offset ± (radius + 1 - inset)`` delimit
    the band used by :meth:`contains`; *inset* narrows that band without
    moving the member lines.
    """

    def __init__(self, angle: float, offset: float, radius: int, inset: float = 0.0) -> None:
        self.angle = angle
        self.offset = offset
        self.radius = radius
        self.inset = inset
        self.lines: Tuple[Line, ...] = tuple(
            Line(angle, offset + j) for j in range(-radius, radius + 1)
        )
        self.lower_border = Line(angle, self.lines[0].offset - (1 - inset))
        self.upper_border = Line(angle, self.lines[-1].offset + (1 - inset))

    @property
    def direction(self) -> Tuple[float, float]:
        """Unit normal shared by every line of the pencil."""
        return (self.lower_border.cos, self.lower_border.sin)

    def contains(self, point: Point) -> bool:
        """True when *point* lies between the two boundary lines, inclusive."""
        v = self.lower_border.normal_projection(point)
        lo = min(self.lower_border.offset, self.upper_border.offset)
        hi = max(self.lower_border.offset, self.upper_border.offset)
        return lo <= v <= hi

    def lane_index(self, point: Point) -> int:
        """Index of the strip between consecutive lines that holds *point*."""
        return math.floor(self.lower_border.normal_projection(point) - self.offset)

    def __len__(self) -> int:
        return len(self.lines)

    def __repr__(self) -> str:
        return (
            f"Pencil(angle={self.angle!r}, offset={self.offset!r}, "
            f"radius={self.radius!r}, inset={self.inset!r})"
        )
