"""Multigrid engine — de Bruijn dualization of a pencil arrangement.

:func:`build` runs the whole pipeline in one call and returns an
immutable :class:`Tiling`:

1. assemble ``symmetry`` pencils at angles ``2πi / symmetry``;
2. intersect every pair of lines, merging results that agree to
   ``SMALL_EPSILON`` under the first point seen;
3. for each intersection inside every pencil's band, walk the wedges
   around it and turn each wedge into a lattice point;
4. keep the dual polygons that are unit rhombi and summarise them.

Usage
-----
>>> from multigrid import build
>>> tiling = build(5, 3, [0.2] * 5)
>>> tiling.areas
(0.587785, 0.951057)
"""

from __future__ import annotations

import logging
import math
import numbers
from collections import Counter
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Dict,
    FrozenSet,
    Iterable,
    List,
    Mapping,
    Sequence,
    Set,
    Tuple,
)

import numpy as np

from .geometry import SMALL_EPSILON, angle_key, round_small
from .models import Line, Point
from .pencil import Pencil
from .tile import Tile, is_unit_rhombus

if TYPE_CHECKING:
    from .config import TilingParams

logger = logging.getLogger(__name__)

_ORIGIN = Point(0.0, 0.0)


class Tiling:
    """Immutable result of one :func:`build` call.

    Every collection is a tuple, frozenset or read-only mapping, so a
    tiling can be shared between readers without copying.
    """

    def __init__(
        self,
        symmetry: int,
        radius: int,
        offsets: Tuple[float, ...],
        inset: float,
        pencils: Tuple[Pencil, ...],
        intersections: Mapping[Point, FrozenSet[Line]],
        points_on: Mapping[Line, Tuple[Point, ...]],
        duals: Mapping[Point, Tuple[Point, ...]],
        tiles: Tuple[Tile, ...],
    ) -> None:
        self._symmetry = symmetry
        self._radius = radius
        self._offsets = offsets
        self._inset = inset
        self._pencils = pencils
        self._lines = tuple(line for pencil in pencils for line in pencil.lines)
        self._intersections = MappingProxyType(dict(intersections))
        self._points_on = MappingProxyType(dict(points_on))
        self._duals = MappingProxyType(dict(duals))
        self._tiles = tiles
        self._areas = tuple(sorted({tile.area for tile in tiles}))
        self._signatures = frozenset(tile.signature for tile in tiles)
        self._tiling_radius = max(
            (max(abs(v.x), abs(v.y)) for tile in tiles for v in tile.vertices),
            default=0.0,
        )

    # ── Parameters ──────────────────────────────────────────────────

    @property
    def symmetry(self) -> int:
        return self._symmetry

    @property
    def radius(self) -> int:
        return self._radius

    @property
    def offsets(self) -> Tuple[float, ...]:
        return self._offsets

    @property
    def inset(self) -> float:
        return self._inset

    @property
    def params(self) -> "TilingParams":
        from .config import TilingParams
        return TilingParams(self._symmetry, self._radius, self._offsets, self._inset)

    # ── Arrangement ─────────────────────────────────────────────────

    @property
    def pencils(self) -> Tuple[Pencil, ...]:
        return self._pencils

    @property
    def lines(self) -> Tuple[Line, ...]:
        return self._lines

    @property
    def intersections(self) -> Mapping[Point, FrozenSet[Line]]:
        """Canonical intersection point → lines incident to it."""
        return self._intersections

    def incidence(self, point: Point) -> FrozenSet[Line]:
        return self._intersections[point]

    def points_on(self, line: Line) -> Tuple[Point, ...]:
        """Intersections on *line*, sorted along it."""
        return self._points_on[line]

    def contains(self, point: Point) -> bool:
        """True when every pencil's band contains *point*."""
        return all(pencil.contains(point) for pencil in self._pencils)

    @property
    def duals(self) -> Mapping[Point, Tuple[Point, ...]]:
        """Retained intersection → dual polygon, whether accepted or not."""
        return self._duals

    # ── Tiles ───────────────────────────────────────────────────────

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        return self._tiles

    @property
    def tile_count(self) -> int:
        return len(self._tiles)

    @property
    def areas(self) -> Tuple[float, ...]:
        """Distinct tile areas, ascending."""
        return self._areas

    @property
    def signatures(self) -> FrozenSet[Tuple[int, ...]]:
        """Distinct sorted grid-index tuples over all tiles."""
        return self._signatures

    @property
    def tiling_radius(self) -> float:
        """Largest absolute vertex coordinate over all tiles."""
        return self._tiling_radius

    def area_counts(self) -> Dict[float, int]:
        counts = Counter(tile.area for tile in self._tiles)
        return {area: counts[area] for area in self._areas}

    def shape_counts(self) -> Dict[str, int]:
        """Tile count per named shape; unnamed areas are keyed by their value."""
        counts: Dict[str, int] = {}
        for tile in self._tiles:
            name = tile.shape or f"{tile.area:.6f}"
            counts[name] = counts.get(name, 0) + 1
        return counts

    def __repr__(self) -> str:
        return (
            f"Tiling(symmetry={self._symmetry}, radius={self._radius}, "
            f"tiles={len(self._tiles)}, areas={list(self._areas)})"
        )


# ═══════════════════════════════════════════════════════════════════
# Parameter validation
# ═══════════════════════════════════════════════════════════════════


def validate_parameters(
    symmetry: int,
    radius: int,
    offsets: Sequence[float],
    inset: float,
) -> List[str]:
    """Return a list of problems with the build parameters (empty when valid)."""
    errors: List[str] = []
    if isinstance(symmetry, bool) or not isinstance(symmetry, numbers.Integral):
        errors.append(f"symmetry must be an integer, got {symmetry!r}")
    elif symmetry < 1:
        errors.append(f"symmetry must be >= 1, got {symmetry}")
    if isinstance(radius, bool) or not isinstance(radius, numbers.Integral):
        errors.append(f"radius must be an integer, got {radius!r}")
    elif radius < 0:
        errors.append(f"radius must be >= 0, got {radius}")
    if isinstance(symmetry, numbers.Integral) and len(offsets) != symmetry:
        errors.append(f"expected {symmetry} offsets, got {len(offsets)}")
    if any(not math.isfinite(o) for o in offsets):
        errors.append("offsets must be finite")
    if not 0.0 <= inset < 1.0:
        errors.append(f"inset must be in [0, 1), got {inset}")
    return errors


# ═══════════════════════════════════════════════════════════════════
# Build pipeline
# ═══════════════════════════════════════════════════════════════════


def build(
    symmetry: int,
    radius: int,
    offsets: Sequence[float],
    inset: float = 0.0,
) -> Tiling:
    """Build the multigrid tiling for the given parameters.

    Raises ``ValueError`` for invalid parameters before any work is done.
    """
    offsets = tuple(float(o) for o in offsets)
    inset = float(inset)
    errors = validate_parameters(symmetry, radius, offsets, inset)
    if errors:
        raise ValueError("; ".join(errors))
    symmetry = int(symmetry)
    radius = int(radius)

    pencils = tuple(
        Pencil(2 * i * math.pi / symmetry, offsets[i], radius, inset)
        for i in range(symmetry)
    )
    lines = [line for pencil in pencils for line in pencil.lines]
    directions = np.array([pencil.direction for pencil in pencils], dtype=float)
    lane_offsets = np.array(offsets, dtype=float)
    logger.debug("build: %d pencils, %d lines", len(pencils), len(lines))

    intersections, incident = _discover_intersections(lines)
    points_on = {}
    for line in lines:
        keys = incident.get(line, {})
        points_on[line] = tuple(sorted(keys, key=keys.__getitem__))
    logger.debug("build: %d distinct intersections", len(intersections))

    duals: Dict[Point, Tuple[Point, ...]] = {}
    tiles: List[Tile] = []
    for point, line_set in intersections.items():
        # Hanging intersections sit outside some pencil's band.
        if not all(pencil.contains(point) for pencil in pencils):
            continue
        vertices, labels = _dual_polygon(point, line_set, directions, lane_offsets, symmetry)
        duals[point] = vertices
        if is_unit_rhombus(vertices):
            tiles.append(Tile.from_dual(point, vertices, labels, symmetry))

    logger.debug(
        "build: %d retained intersections, %d tiles accepted, %d rejected",
        len(duals), len(tiles), len(duals) - len(tiles),
    )

    return Tiling(
        symmetry,
        radius,
        offsets,
        inset,
        pencils,
        {point: frozenset(line_set) for point, line_set in intersections.items()},
        points_on,
        duals,
        tuple(tiles),
    )


def _discover_intersections(
    lines: Sequence[Line],
) -> Tuple[Dict[Point, Set[Line]], Dict[Line, Dict[Point, float]]]:
    """Intersect every pair of lines.

    Points that round to the same ``SMALL_EPSILON`` grid cell are one
    intersection; the first one computed stands for all of them.  Each
    line records its position along itself from the point computed on
    that line, since the stand-in may sit up to a cell diagonal away.
    """
    canonical: Dict[Tuple[float, float], Point] = {}
    intersections: Dict[Point, Set[Line]] = {}
    incident: Dict[Line, Dict[Point, float]] = {}

    for i, first in enumerate(lines):
        for second in lines[i + 1 :]:
            raw = first.intersect(second)
            if raw is None:
                continue
            point = canonical.setdefault(raw.rounded(SMALL_EPSILON).as_tuple(), raw)
            intersections.setdefault(point, set()).update((first, second))
            incident.setdefault(first, {}).setdefault(point, first.ordering_key(raw))
            incident.setdefault(second, {}).setdefault(point, second.ordering_key(raw))

    return intersections, incident


def _wedge_medians(point: Point, lines: Iterable[Line]) -> List[Point]:
    """One sample point inside each angular wedge around *point*."""
    angles = set()
    for line in lines:
        angles.add(angle_key(line.angle))
        angles.add(angle_key(line.angle + math.pi))

    samples = []
    for angle in sorted(angles):
        step = _ORIGIN.rotate_and_shift(angle, SMALL_EPSILON)
        samples.append(Point(point.x + step.x, point.y + step.y))

    count = len(samples)
    return [samples[i].midpoint(samples[(i + 1) % count]) for i in range(count)]


def _dual_polygon(
    point: Point,
    lines: Set[Line],
    directions: np.ndarray,
    lane_offsets: np.ndarray,
    symmetry: int,
) -> Tuple[Tuple[Point, ...], Tuple[int, ...]]:
    """Lattice vertices and grid indices of the polygon dual to *point*."""
    medians = _wedge_medians(point, lines)
    coords = np.array([m.as_tuple() for m in medians], dtype=float)
    lanes = np.floor(coords @ directions.T - lane_offsets)
    dual = lanes @ directions
    labels = lanes.sum(axis=1).astype(int) % symmetry

    vertices = tuple(Point(round_small(x), round_small(y)) for x, y in dual)
    return vertices, tuple(int(label) for label in labels)
