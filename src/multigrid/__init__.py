"""Multigrid — rhombus tilings by de Bruijn dualization.

Public API is organised into layers:

- **Core** — points, lines, pencils, tiles and the build engine
- **Configuration** — parameter surface and presets
- **I/O** — JSON export
- **Rendering** — tile decorations and PNG output (requires matplotlib)
- **Diagnostics** — quality checks and reports
"""

# ── Core ────────────────────────────────────────────────────────────
from .geometry import BIG_EPSILON, SMALL_EPSILON, MultigridInvariantError
from .models import Line, Point
from .pencil import Pencil
from .tile import REFERENCE_INDEX, Tile, canonicalize, is_unit_rhombus
from .multigrid import Tiling, build, validate_parameters

# ── Configuration ───────────────────────────────────────────────────
from .config import (
    AMMANN_BEENKER,
    PENROSE,
    PRESETS,
    SQUARE,
    TilingParams,
    build_from_params,
)

# ── I/O ─────────────────────────────────────────────────────────────
from .io import load_json, save_json, tiling_to_dict, tiling_to_json

# ── Rendering (requires matplotlib at call time) ────────────────────
from .render import PAINTERS, Decoration, corner_order, decorate, render_png

# ── Diagnostics ─────────────────────────────────────────────────────
from .diagnostics import (
    diagonals_perpendicular,
    rhombus_side_errors,
    tiling_report,
)

__all__ = [
    # Core
    "BIG_EPSILON",
    "SMALL_EPSILON",
    "MultigridInvariantError",
    "Point",
    "Line",
    "Pencil",
    "Tile",
    "REFERENCE_INDEX",
    "canonicalize",
    "is_unit_rhombus",
    "Tiling",
    "build",
    "validate_parameters",
    # Configuration
    "TilingParams",
    "build_from_params",
    "PENROSE",
    "AMMANN_BEENKER",
    "SQUARE",
    "PRESETS",
    # I/O
    "load_json",
    "save_json",
    "tiling_to_dict",
    "tiling_to_json",
    # Rendering
    "PAINTERS",
    "Decoration",
    "corner_order",
    "decorate",
    "render_png",
    # Diagnostics
    "diagonals_perpendicular",
    "rhombus_side_errors",
    "tiling_report",
]
