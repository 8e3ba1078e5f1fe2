"""Tests for tile decorations and PNG rendering."""

import pytest

from multigrid.multigrid import build
from multigrid.render import (
    PAINTERS,
    corner_order,
    decorate,
    decorate_tiling,
    painter_supports,
    palette,
    render_png,
    tiling_index_sums,
)
from multigrid.tile import THICK_AREA, THIN_AREA


@pytest.fixture(scope="module")
def penrose():
    return build(5, 2, [0.2] * 5)


@pytest.fixture(scope="module")
def square():
    return build(4, 1, [0.1, 0.2, 0.3, 0.4])


def _tile_with_area(tiling, area):
    return next(tile for tile in tiling.tiles if tile.area == area)


class TestPalette:

    def test_size_and_format(self):
        colours = palette(3)
        assert len(colours) == 3
        assert all(c.startswith("#") and len(c) == 7 for c in colours)
        assert len(set(colours)) == 3

    def test_empty(self):
        assert palette(0) == []


class TestCornerOrder:

    def test_forward(self, penrose):
        tile = penrose.tiles[0]
        v = tile.vertices
        assert corner_order(tile) == (v[0], v[3], v[2], v[1])

    def test_reverse_swaps_reference_corner(self, penrose):
        tile = penrose.tiles[0]
        v = tile.vertices
        assert corner_order(tile, reverse=True) == (v[2], v[1], v[0], v[3])


class TestDecorate:

    def test_outline(self, penrose):
        decoration = decorate(penrose.tiles[0], "outline")
        assert decoration.fill is None
        assert len(decoration.segments) == 4

    def test_fill_by_area(self, penrose):
        colours = palette(len(penrose.areas))
        thin = _tile_with_area(penrose, THIN_AREA)
        thick = _tile_with_area(penrose, THICK_AREA)
        assert decorate(thin, "area", areas=penrose.areas).fill == colours[0]
        assert decorate(thick, "area", areas=penrose.areas).fill == colours[1]

    def test_fill_by_indices(self, penrose):
        sums = tiling_index_sums(penrose)
        for tile in penrose.tiles:
            decoration = decorate(tile, "indices", index_sums=sums)
            assert decoration.fill in palette(len(sums))

    def test_kites_and_darts(self, penrose):
        thin = decorate(_tile_with_area(penrose, THIN_AREA), "kites-darts")
        thick = decorate(_tile_with_area(penrose, THICK_AREA), "kites-darts")
        assert len(thin.segments) == 3
        assert len(thick.segments) == 5

    def test_kite_inner_point_at_unit_distance(self, penrose):
        tile = _tile_with_area(penrose, THICK_AREA)
        a, b, c, d = corner_order(tile)
        inner = decorate(tile, "kites-darts").segments[0][1]
        assert c.distance(inner) == pytest.approx(1.0)

    def test_reverse_changes_orientation_only(self, penrose):
        tile = _tile_with_area(penrose, THICK_AREA)
        forward = decorate(tile, "kites-darts")
        backward = decorate(tile, "kites-darts", reverse=True)
        assert forward != backward
        assert len(forward.segments) == len(backward.segments)

    def test_kites_and_darts_reject_other_areas(self, square):
        with pytest.raises(ValueError):
            decorate(square.tiles[0], "kites-darts")

    def test_unknown_painter(self, penrose):
        with pytest.raises(ValueError):
            decorate(penrose.tiles[0], "sparkles")

    def test_painter_supports(self):
        assert painter_supports("kites-darts", 5)
        assert not painter_supports("kites-darts", 4)
        assert all(painter_supports(p, 7) for p in PAINTERS if p != "kites-darts")
        with pytest.raises(ValueError):
            painter_supports("sparkles", 5)

    def test_decorate_tiling(self, penrose):
        decorated = decorate_tiling(penrose, ("area", "outline"))
        assert len(decorated) == penrose.tile_count
        assert all(len(decorations) == 2 for _, decorations in decorated)

    def test_decorate_tiling_rejects_unsupported(self, square):
        with pytest.raises(ValueError, match="symmetry 4"):
            decorate_tiling(square, ("kites-darts",))


class TestRenderPng:

    def test_renders_penrose(self, penrose, tmp_path):
        out = tmp_path / "penrose.png"
        render_png(penrose, out, painters=("area", "kites-darts"))
        assert out.exists()
        assert out.stat().st_size > 0

    def test_renders_reversed_outline(self, square, tmp_path):
        out = tmp_path / "sub" / "square.png"
        render_png(square, out, painters=("outline",), reverse=True, dpi=50)
        assert out.exists()
        assert out.stat().st_size > 0

    def test_renders_empty_tiling(self, tmp_path):
        out = tmp_path / "empty.png"
        render_png(build(1, 0, [0.0]), out)
        assert out.exists()
