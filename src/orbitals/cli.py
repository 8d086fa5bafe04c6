"""Command line interface: parse angles, export diagrams or open the window."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Optional, Sequence

import argparse
import json
import logging

from . import __version__
from .core import build_scene, clamp_orbits_count, format_angle, parse_angle
from .logging_config import setup_logging
from .models import AppConfig, load_config
from .render import EXPORT_SUFFIXES, export_scene

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orbitals",
        description="Radial orbit diagrams from a constant turn fraction.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON configuration file"
        " (default: $ORBITALS_CONFIG or ~/.orbitals_config.json)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--log-file", default=None, help="also write logs to this file")

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("gui", help="open the interactive window (default)")

    p_parse = sub.add_parser("parse", help="parse an angle and print the result")
    p_parse.add_argument("text", help='angle, e.g. "5/99" or "0.25"')

    p_export = sub.add_parser("export", help="render the diagram to a file")
    p_export.add_argument(
        "output", type=Path, help=f"output file ({', '.join(EXPORT_SUFFIXES)})"
    )
    p_export.add_argument("--angle", default=None, help="angle (default: from config)")
    p_export.add_argument("--orbits", type=int, default=None, help="number of orbits")
    p_export.add_argument("--width", type=int, default=None, help="canvas width")
    p_export.add_argument("--height", type=int, default=None, help="canvas height")
    return parser


def _cmd_parse(args: argparse.Namespace) -> int:
    spec = parse_angle(args.text)
    payload = asdict(spec)
    payload["reading"] = format_angle(spec)
    print(json.dumps(payload))
    return 0 if spec.is_valid else 1


def _cmd_export(
    parser: argparse.ArgumentParser, args: argparse.Namespace, cfg: AppConfig
) -> int:
    params = cfg.params
    if args.width is not None:
        params.canvas_width = args.width
    if args.height is not None:
        params.canvas_height = args.height
    if params.canvas_width < 1 or params.canvas_height < 1:
        parser.error("canvas width and height must be positive")

    text = args.angle if args.angle is not None else params.initial_angle
    angle = parse_angle(text)
    if not angle.is_valid:
        parser.error(f"invalid angle {text!r}")

    requested = args.orbits if args.orbits is not None else cfg.ui.orbits_count
    try:
        orbits = clamp_orbits_count(params, requested)
        if requested is not None and orbits != requested:
            lo, hi = params.orbit_count_range()
            logger.warning(
                "Orbit count %d clamped to %d (range %d-%d)", requested, orbits, lo, hi
            )
        scene = build_scene(params, orbits, angle)
        path = export_scene(
            args.output, scene, cfg.palette, params.canvas_width, params.canvas_height
        )
    except (ValueError, OSError) as exc:
        logger.error("Export failed: %s", exc)
        return 1
    print(f"Wrote {len(scene.orbits)} orbits → {path}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    if args.command == "parse":
        return _cmd_parse(args)

    cfg = load_config(args.config)
    if args.command == "export":
        return _cmd_export(parser, args, cfg)

    # Qt is only imported when a window is actually requested.
    from .app import main as run_app

    return run_app(cfg)


__all__ = ["main"]
