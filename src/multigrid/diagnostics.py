from __future__ import annotations

from typing import Any, Dict, List

from .geometry import BIG_EPSILON, polygon_signed_area
from .multigrid import Tiling
from .tile import Tile


def side_lengths(tile: Tile) -> List[float]:
    verts = tile.vertices
    return [verts[i].distance(verts[(i + 1) % len(verts)]) for i in range(len(verts))]


def rhombus_side_errors(tiling: Tiling) -> List[float]:
    """Largest deviation from unit side length, per tile."""
    return [max(abs(side - 1.0) for side in side_lengths(tile)) for tile in tiling.tiles]


def diagonals_perpendicular(tile: Tile, epsilon: float = BIG_EPSILON) -> bool:
    a, b, c, d = tile.vertices
    dx1, dy1 = c.x - a.x, c.y - a.y
    dx2, dy2 = d.x - b.x, d.y - b.y
    return abs(dx1 * dx2 + dy1 * dy2) <= epsilon


def winding_counts(tiling: Tiling) -> Dict[str, int]:
    """Number of tiles whose vertex cycle runs counter-clockwise / clockwise."""
    counts = {"ccw": 0, "cw": 0}
    for tile in tiling.tiles:
        area = polygon_signed_area([v.as_tuple() for v in tile.vertices])
        counts["ccw" if area > 0 else "cw"] += 1
    return counts


def tiling_report(tiling: Tiling) -> Dict[str, Any]:
    """Summary of a tiling as a JSON-serialisable dict."""
    errors = rhombus_side_errors(tiling)
    return {
        "params": tiling.params.to_dict(),
        "line_count": len(tiling.lines),
        "intersection_count": len(tiling.intersections),
        "retained_count": len(tiling.duals),
        "tile_count": tiling.tile_count,
        "rejected_count": len(tiling.duals) - tiling.tile_count,
        "areas": list(tiling.areas),
        "area_counts": {f"{area:.6f}": n for area, n in tiling.area_counts().items()},
        "shape_counts": tiling.shape_counts(),
        "signatures": [list(sig) for sig in sorted(tiling.signatures)],
        "tiling_radius": tiling.tiling_radius,
        "max_side_error": max(errors) if errors else 0.0,
        "diagonals_perpendicular": all(diagonals_perpendicular(t) for t in tiling.tiles),
        "winding": winding_counts(tiling),
    }


def report_lines(tiling: Tiling) -> List[str]:
    report = tiling_report(tiling)
    params = report["params"]
    lines = [
        f"symmetry {params['symmetry']}, radius {params['radius']}, inset {params['inset']}",
        f"  offsets: {', '.join(f'{o:g}' for o in params['offsets'])}",
        f"  lines: {report['line_count']}",
        f"  intersections: {report['intersection_count']} "
        f"({report['retained_count']} retained)",
        f"  tiles: {report['tile_count']} ({report['rejected_count']} rejected)",
        f"  tiling radius: {report['tiling_radius']:.4f}",
        "  areas:",
    ]
    for area, count in report["area_counts"].items():
        lines.append(f"    {area}: {count}")
    lines.append(f"  signatures: {len(report['signatures'])}")
    lines.append(f"  max side error: {report['max_side_error']:.3g}")
    lines.append(f"  diagonals perpendicular: {report['diagonals_perpendicular']}")
    return lines
