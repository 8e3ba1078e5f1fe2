"""Tests for diagnostics module."""

import json

from multigrid.diagnostics import (
    diagonals_perpendicular,
    report_lines,
    rhombus_side_errors,
    tiling_report,
    winding_counts,
)
from multigrid.multigrid import build


def test_side_errors_within_tolerance():
    tiling = build(5, 2, [0.2] * 5)
    errors = rhombus_side_errors(tiling)
    assert len(errors) == tiling.tile_count
    assert max(errors) <= 1e-6


def test_diagonals_perpendicular():
    tiling = build(7, 1, [0.3] * 7)
    assert all(diagonals_perpendicular(tile) for tile in tiling.tiles)


def test_winding_counts_cover_all_tiles():
    tiling = build(5, 1, [0.2] * 5)
    counts = winding_counts(tiling)
    assert counts["ccw"] + counts["cw"] == tiling.tile_count


def test_tiling_report_smoke():
    tiling = build(5, 2, [0.2] * 5)
    report = tiling_report(tiling)
    assert report["tile_count"] == tiling.tile_count
    assert report["retained_count"] == report["tile_count"] + report["rejected_count"]
    assert report["areas"] == [0.587785, 0.951057]
    assert set(report["area_counts"]) == {"0.587785", "0.951057"}
    assert report["diagonals_perpendicular"] is True
    assert report["line_count"] == 25
    json.dumps(report)


def test_empty_tiling_report():
    report = tiling_report(build(1, 0, [0.0]))
    assert report["tile_count"] == 0
    assert report["max_side_error"] == 0.0
    assert report["areas"] == []


def test_report_lines():
    lines = report_lines(build(5, 1, [0.2] * 5))
    assert lines[0].startswith("symmetry 5")
    assert any(line.strip().startswith("tiles:") for line in lines)
    assert any("0.587785" in line for line in lines)
