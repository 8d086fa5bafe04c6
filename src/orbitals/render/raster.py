"""Rasterise a scene into a BGR image with OpenCV."""

from __future__ import annotations

from pathlib import Path

import logging

import cv2  # opencv-python
import numpy as np

from ..core.layout import orbit_positions
from ..core.pipeline import Scene
from ..models import Palette
from ..utils import frame_mapping
from .colors import hex_to_bgr, parse_color

logger = logging.getLogger(__name__)

# Fixed-point bits for sub-pixel circle centres and radii.
SHIFT = 4
_ONE = 1 << SHIFT


def _fixed(value: float) -> int:
    return int(round(value * _ONE))


def render_bgr(
    scene: Scene, palette: Palette, width_px: int, height_px: int
) -> np.ndarray:
    """Draw ``scene`` into a new ``(height_px, width_px, 3)`` uint8 image."""
    if width_px < 1 or height_px < 1:
        raise ValueError(f"Image size must be positive, got {width_px}x{height_px}")

    img = np.empty((int(height_px), int(width_px), 3), dtype=np.uint8)
    img[...] = hex_to_bgr(palette.background)

    scale, dx, dy = frame_mapping(scene.frame, float(width_px), float(height_px))
    cx0 = _fixed(dx)
    cy0 = _fixed(dy)

    if scene.guide_rings:
        r, g, b, alpha = parse_color(palette.guide_stroke)
        overlay = img.copy()
        for ring in scene.guide_rings:
            cv2.circle(
                overlay,
                (cx0, cy0),
                max(1, _fixed(ring * scale)),
                (b, g, r),
                1,
                cv2.LINE_AA,
                SHIFT,
            )
        cv2.addWeighted(overlay, alpha, img, 1.0 - alpha, 0.0, dst=img)

    centres = orbit_positions(scene.orbits) * scale + np.array([dx, dy])
    fixed_centres = np.rint(centres * _ONE).astype(np.int64)
    for orbit, (fx, fy) in zip(scene.orbits, fixed_centres):
        centre = (int(fx), int(fy))
        radius = max(1, _fixed(orbit.circle_radius * scale))
        cv2.circle(
            img,
            centre,
            radius,
            hex_to_bgr(palette.fill_for(orbit.is_special)),
            -1,
            cv2.LINE_AA,
            SHIFT,
        )
        cv2.circle(
            img,
            centre,
            radius,
            hex_to_bgr(palette.stroke_for(orbit.is_special)),
            1,
            cv2.LINE_AA,
            SHIFT,
        )
    return img


def write_png(path: Path, image: np.ndarray) -> None:
    try:
        ok = cv2.imwrite(str(path), image)
    except cv2.error as exc:
        raise OSError(f"OpenCV could not write image to {path}: {exc}") from exc
    if not ok:
        raise OSError(f"OpenCV could not write image to {path}")
    logger.info("Wrote PNG → %s", path)


__all__ = ["SHIFT", "render_bgr", "write_png"]
