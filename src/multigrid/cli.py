"""Multigrid command-line interface."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import PRESETS, TilingParams, build_from_params
from .io import save_json
from .render import PAINTERS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Multigrid rhombus tilings")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Build a tiling and export it")
    _add_param_arguments(build)
    build.add_argument("--out", dest="output_path")
    build.add_argument("--render-out", dest="render_path")
    build.add_argument(
        "--painter",
        dest="painters",
        action="append",
        choices=PAINTERS,
        help="Decoration to draw; repeat to layer several (default: area + outline)",
    )
    build.add_argument("--reverse", action="store_true")
    build.add_argument("--dpi", type=int, default=150)
    build.add_argument("--report", action="store_true")
    build.add_argument("--report-json", dest="report_json")

    report = sub.add_parser("report", help="Print diagnostics for a tiling")
    _add_param_arguments(report)
    report.add_argument("--json", dest="as_json", action="store_true")

    return parser


def _add_param_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--preset", choices=sorted(PRESETS))
    parser.add_argument("--symmetry", type=int)
    parser.add_argument("--radius", type=int)
    offsets = parser.add_mutually_exclusive_group()
    offsets.add_argument("--offset", type=float, help="Same offset for every pencil")
    offsets.add_argument("--offsets", type=float, nargs="+", help="One offset per pencil")
    parser.add_argument("--inset", type=float)


def params_from_args(args: argparse.Namespace) -> TilingParams:
    base = PRESETS[args.preset] if args.preset else TilingParams()
    symmetry = args.symmetry if args.symmetry is not None else base.symmetry
    radius = args.radius if args.radius is not None else base.radius
    inset = args.inset if args.inset is not None else base.inset
    if args.offsets is not None:
        offsets = tuple(args.offsets)
    elif args.offset is not None:
        offsets = (args.offset,) * max(symmetry, 0)
    elif symmetry == base.symmetry:
        offsets = base.offsets
    else:
        offsets = None
    return TilingParams(symmetry, radius, offsets, inset)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    params = params_from_args(args)
    errors = params.validate()
    if errors:
        for error in errors:
            print(error)
        raise SystemExit(1)

    if args.command == "build":
        _cmd_build(args, params)

    elif args.command == "report":
        _cmd_report(args, params)


def _cmd_build(args, params: TilingParams) -> None:
    from .diagnostics import report_lines, tiling_report

    tiling = build_from_params(params)
    print(f"Built {tiling.tile_count} tiles from {len(tiling.lines)} lines")

    if args.output_path:
        save_json(tiling, args.output_path)
        print(f"Saved {args.output_path}")
    if args.render_path:
        from .render import render_png
        try:
            render_png(
                tiling,
                args.render_path,
                painters=args.painters or ("area", "outline"),
                reverse=args.reverse,
                dpi=args.dpi,
            )
        except ValueError as exc:
            print(exc)
            raise SystemExit(1)
        print(f"Saved {args.render_path}")
    if args.report:
        for line in report_lines(tiling):
            print(line)
    if args.report_json:
        Path(args.report_json).write_text(
            json.dumps(tiling_report(tiling), indent=2), encoding="utf-8"
        )


def _cmd_report(args, params: TilingParams) -> None:
    from .diagnostics import report_lines, tiling_report

    tiling = build_from_params(params)
    if args.as_json:
        print(json.dumps(tiling_report(tiling), indent=2))
        return
    for line in report_lines(tiling):
        print(line)


if __name__ == "__main__":
    main()
