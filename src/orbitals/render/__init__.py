"""File renderers for orbit scenes."""

from __future__ import annotations

from pathlib import Path

from ..core.pipeline import Scene
from ..models import Palette
from .colors import hex_to_bgr, parse_color
from .raster import render_bgr, write_png
from .svg import render_svg, write_svg

EXPORT_SUFFIXES = (".svg", ".png")


def export_scene(
    path: Path, scene: Scene, palette: Palette, width: int, height: int
) -> Path:
    """Write ``scene`` to ``path``; the format follows the file suffix."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".svg":
        write_svg(path, render_svg(scene, palette, width, height))
    elif suffix == ".png":
        write_png(path, render_bgr(scene, palette, width, height))
    else:
        raise ValueError(
            f"Unsupported export format {path.suffix!r}; use one of {EXPORT_SUFFIXES}"
        )
    return path


__all__ = [
    "EXPORT_SUFFIXES",
    "export_scene",
    "render_svg",
    "write_svg",
    "render_bgr",
    "write_png",
    "parse_color",
    "hex_to_bgr",
]
