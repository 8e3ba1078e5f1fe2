import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from multigrid.config import PRESETS, build_from_params
from multigrid.diagnostics import report_lines
from multigrid.render import render_png


def main() -> None:
    out_dir = ROOT / "exports"
    for name, params in PRESETS.items():
        tiling = build_from_params(params)
        for line in report_lines(tiling):
            print(line)
        painters = ("area", "kites-darts") if params.symmetry == 5 else ("area", "outline")
        path = out_dir / f"{name}.png"
        render_png(tiling, path, painters=painters)
        print(f"Saved {path}")


if __name__ == "__main__":
    main()
