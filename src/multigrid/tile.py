"""Accepted rhombus tiles and their canonical vertex order.

A dual polygon becomes a :class:`Tile` only when it is a unit rhombus.
Its four vertices each carry a *grid index*, the sum of the lane indices
of that vertex taken modulo the symmetry.  Around any rhombus the labels
read ``L, L+1, L+2, L+1`` (mod symmetry), so two labels occur once and
one occurs twice.  The pair of single labels identifies the tile class
and picks the reference corner that is rotated to the front.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence, Tuple

from .geometry import BIG_EPSILON, MultigridInvariantError, equal_with_epsilon, round_big
from .models import Point

# Reference corner per symmetry, keyed by the (min, max) pair of labels
# that occur once in a tile.  The value is the label of the vertex that
# must come first.  Only the 5-fold table is known.
# Symmetries absent from this mapping keep wedge-discovery order.
REFERENCE_INDEX: Dict[int, Dict[Tuple[int, int], int]] = {
    5: {
        (0, 2): 0,
        (0, 3): 3,
        (1, 3): 3,
        (2, 4): 4,
        (1, 4): 1,
    },
}

# Rhombus areas of the Penrose tiling, rounded the way tile areas are.
THIN_AREA = 0.587785
THICK_AREA = 0.951057
PENROSE_SHAPES: Dict[float, str] = {THIN_AREA: "thin", THICK_AREA: "thick"}


def is_unit_rhombus(vertices: Sequence[Point]) -> bool:
    """Four vertices with every side of length 1 within ``BIG_EPSILON``."""
    if len(vertices) != 4:
        return False
    for i in range(4):
        side = vertices[i].distance(vertices[(i + 1) % 4])
        if not equal_with_epsilon(side, 1.0, BIG_EPSILON):
            return False
    return True


def rhombus_area(vertices: Sequence[Point]) -> float:
    """Half the product of the diagonals, rounded to ``BIG_EPSILON``."""
    d1 = vertices[0].distance(vertices[2])
    d2 = vertices[1].distance(vertices[3])
    return round_big(0.5 * d1 * d2)


def single_labels(indices: Sequence[int]) -> list[int]:
    """Labels that occur an odd number of times, in ascending order."""
    counts = Counter(indices)
    return sorted(label for label, count in counts.items() if count % 2 == 1)


def canonicalize(
    vertices: Sequence[Point],
    indices: Sequence[int],
    symmetry: int,
) -> Tuple[Tuple[Point, ...], Tuple[int, ...]]:
    """Rotate the vertex cycle so the reference corner comes first.

    Idempotent: a canonical cycle is returned unchanged.
    """
    if len(indices) != len(vertices):
        raise MultigridInvariantError(
            f"{len(indices)} grid indices for {len(vertices)} vertices"
        )
    table = REFERENCE_INDEX.get(symmetry)
    if table is None:
        return tuple(vertices), tuple(indices)

    singles = single_labels(indices)
    if len(singles) != 2:
        raise MultigridInvariantError(
            f"Expected two unique grid indices, got {singles} from {list(indices)}"
        )
    pair = (singles[0], singles[1])
    if pair not in table:
        raise MultigridInvariantError(f"Unexpected pair of grid indices {pair}")

    start = list(indices).index(table[pair])
    rotated_vertices = tuple(vertices[start:]) + tuple(vertices[:start])
    rotated_indices = tuple(indices[start:]) + tuple(indices[:start])
    return rotated_vertices, rotated_indices


@dataclass(frozen=True)
class Tile:
    """A validated rhombus handed to renderers and exporters.

    *vertices* and *indices* are parallel tuples in canonical order;
    *intersection* is the arrangement vertex the tile is dual to and
    *symmetry* the number of pencils of the tiling it belongs to.
    """

    intersection: Point
    vertices: Tuple[Point, ...]
    indices: Tuple[int, ...]
    area: float
    symmetry: int

    @classmethod
    def from_dual(
        cls,
        intersection: Point,
        vertices: Sequence[Point],
        indices: Sequence[int],
        symmetry: int,
    ) -> "Tile":
        area = rhombus_area(vertices)
        ordered, labels = canonicalize(vertices, indices, symmetry)
        return cls(intersection, ordered, labels, area, symmetry)

    @property
    def index_map(self) -> Mapping[Point, int]:
        return dict(zip(self.vertices, self.indices))

    def vertex_index(self, point: Point) -> int:
        """Grid index of the tile vertex at *point* (``KeyError`` if absent)."""
        return self.index_map[point]

    @property
    def signature(self) -> Tuple[int, ...]:
        return tuple(sorted(self.indices))

    @property
    def index_sum(self) -> int:
        return sum(self.indices)

    @property
    def shape(self) -> Optional[str]:
        """``"thin"`` or ``"thick"`` for 5-fold tiles, else ``None``."""
        if self.symmetry != 5:
            return None
        return PENROSE_SHAPES.get(self.area)

    @property
    def center(self) -> Point:
        return self.vertices[0].midpoint(self.vertices[2])
