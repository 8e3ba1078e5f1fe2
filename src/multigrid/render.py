"""Tile decorations and PNG rendering of a :class:`Tiling`.

Choosing a decoration is a pure function of the tile (its vertices,
area and grid indices) and a global *reverse* flag; it never mutates
the tile.  :func:`render_png` turns decorations into a matplotlib
figure.  matplotlib is imported lazily so the engine stays usable
without it.
"""

from __future__ import annotations

import colorsys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from .models import Point
from .multigrid import Tiling
from .tile import THICK_AREA, THIN_AREA, Tile

Segment = Tuple[Point, Point]

PAINTERS = ("outline", "area", "indices", "kites-darts")


@dataclass(frozen=True)
class Decoration:
    """What to draw for one tile: an optional fill and a set of segments."""

    fill: Optional[str]
    segments: Tuple[Segment, ...] = ()


def palette(size: int, saturation: float = 0.8, value: float = 0.9) -> List[str]:
    """*size* hex colours with hues spread evenly around the wheel."""
    colours = []
    for i in range(size):
        r, g, b = colorsys.hsv_to_rgb(i / size, saturation, value)
        colours.append(f"#{round(r * 255):02x}{round(g * 255):02x}{round(b * 255):02x}")
    return colours


def painter_supports(painter: str, symmetry: int) -> bool:
    if painter not in PAINTERS:
        raise ValueError(f"Unknown painter {painter!r}; choose from {', '.join(PAINTERS)}")
    if painter == "kites-darts":
        return symmetry == 5
    return True


def corner_order(tile: Tile, reverse: bool = False) -> Tuple[Point, Point, Point, Point]:
    """Drawing order ``(a, b, c, d)`` of a tile's canonical vertices.

    ``a`` is the reference corner and ``c`` the one opposite it;
    *reverse* swaps them, which mirrors orientation-sensitive marks.
    """
    v = tile.vertices
    if reverse:
        return v[2], v[1], v[0], v[3]
    return v[0], v[3], v[2], v[1]


def decorate(
    tile: Tile,
    painter: str,
    *,
    areas: Sequence[float] = (),
    index_sums: Sequence[int] = (),
    reverse: bool = False,
) -> Decoration:
    """Decoration for *tile* under *painter*.

    *areas* and *index_sums* are the tiling-wide distinct values that
    the colour-by painters index into.
    """
    a, b, c, d = corner_order(tile, reverse)

    if painter == "outline":
        return Decoration(None, ((a, b), (b, c), (c, d), (d, a)))

    if painter == "area":
        colours = palette(len(areas))
        return Decoration(colours[list(areas).index(tile.area)])

    if painter == "indices":
        colours = palette(len(index_sums))
        return Decoration(colours[list(index_sums).index(tile.index_sum)])

    if painter == "kites-darts":
        if tile.area == THIN_AREA:
            return Decoration(None, ((a, c), (a, b), (a, d)))
        if tile.area == THICK_AREA:
            i = c.toward(a, 1.0)
            return Decoration(None, ((c, i), (b, i), (d, i), (a, b), (a, d)))
        raise ValueError(f"Unexpected tile area for kites and darts: {tile.area}")

    raise ValueError(f"Unknown painter {painter!r}; choose from {', '.join(PAINTERS)}")


def tiling_index_sums(tiling: Tiling) -> List[int]:
    return sorted({sum(signature) for signature in tiling.signatures})


def decorate_tiling(
    tiling: Tiling,
    painters: Iterable[str] = ("area", "outline"),
    reverse: bool = False,
) -> List[Tuple[Tile, List[Decoration]]]:
    """Decorations for every tile, one per painter in drawing order."""
    painters = list(painters)
    for painter in painters:
        if not painter_supports(painter, tiling.symmetry):
            raise ValueError(
                f"Painter {painter!r} does not support symmetry {tiling.symmetry}"
            )
    areas = tiling.areas
    index_sums = tiling_index_sums(tiling)
    return [
        (
            tile,
            [
                decorate(tile, p, areas=areas, index_sums=index_sums, reverse=reverse)
                for p in painters
            ],
        )
        for tile in tiling.tiles
    ]


def render_png(
    tiling: Tiling,
    output_path: str | Path,
    painters: Iterable[str] = ("area", "outline"),
    reverse: bool = False,
    edge_color: str = "#2b2b2b",
    line_width: float = 0.6,
    padding: float = 1.0,
    dpi: int = 150,
    figsize: Tuple[float, float] = (8.0, 8.0),
) -> None:
    """Render a tiling to PNG.

    Requires matplotlib; imported lazily to keep the engine lightweight.
    """
    decorated = decorate_tiling(tiling, painters, reverse)

    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        from matplotlib.collections import LineCollection
        from matplotlib.patches import Polygon
    except ImportError as exc:  # pragma: no cover - requires optional dep
        raise RuntimeError(
            "matplotlib is required for rendering. Install with `pip install matplotlib`."
        ) from exc

    fig, ax = plt.subplots(figsize=figsize)

    segments: List[List[Tuple[float, float]]] = []
    for tile, decorations in decorated:
        corners = [v.as_tuple() for v in tile.vertices]
        for decoration in decorations:
            if decoration.fill is not None:
                ax.add_patch(Polygon(corners, closed=True, facecolor=decoration.fill,
                                     edgecolor="none"))
            for start, end in decoration.segments:
                segments.append([start.as_tuple(), end.as_tuple()])

    if segments:
        ax.add_collection(LineCollection(segments, colors=edge_color, linewidths=line_width))

    extent = tiling.tiling_radius + padding
    ax.set_aspect("equal", "box")
    ax.set_xlim(-extent, extent)
    ax.set_ylim(-extent, extent)
    ax.axis("off")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches="tight", pad_inches=0)
    plt.close(fig)
