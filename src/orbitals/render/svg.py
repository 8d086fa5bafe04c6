"""SVG markup for a :class:`~orbitals.core.pipeline.Scene`."""

from __future__ import annotations

from pathlib import Path
from typing import List

import logging

from ..core.layout import project
from ..core.pipeline import Scene
from ..models import Palette, format_number

logger = logging.getLogger(__name__)


def render_svg(scene: Scene, palette: Palette, width: int, height: int) -> str:
    frame = scene.frame
    lines: List[str] = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}"'
        f' viewBox="{frame.as_viewbox()}">',
        f'<rect x="{format_number(frame.min_x)}" y="{format_number(frame.min_y)}"'
        f' width="{format_number(frame.width)}" height="{format_number(frame.height)}"'
        f' fill="{palette.background}"/>',
    ]

    if scene.guide_rings:
        lines.append(f'<g fill="transparent" stroke="{palette.guide_stroke}">')
        for r in scene.guide_rings:
            lines.append(f'<circle cx="0" cy="0" r="{format_number(r)}"/>')
        lines.append("</g>")

    for orbit in scene.orbits:
        x, y = project(orbit.angle_turns, orbit.orbit_radius)
        r = orbit.circle_radius
        lines.append(
            f'<circle cx="{format_number(x)}" cy="{format_number(y)}"'
            f' r="{format_number(r)}"'
            f' fill="{palette.fill_for(orbit.is_special)}"'
            f' stroke="{palette.stroke_for(orbit.is_special)}"/>'
        )

    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def write_svg(path: Path, text: str) -> None:
    Path(path).write_text(text, encoding="utf-8")
    logger.info("Wrote SVG → %s", path)


__all__ = ["render_svg", "write_svg"]
