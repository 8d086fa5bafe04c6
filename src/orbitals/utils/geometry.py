"""Geometry helpers used throughout the layout and rendering layers."""

from typing import Tuple

from ..models import ViewFrame


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return max(lo, min(hi, value))


def frame_mapping(
    frame: ViewFrame, width: float, height: float
) -> Tuple[float, float, float]:
    """Return ``(scale, dx, dy)`` fitting ``frame`` into a ``width``×``height`` area.

    A diagram point ``(x, y)`` lands at ``(x * scale + dx, y * scale + dy)``.
    The scale is uniform and the frame is centred along the slack axis.
    """
    scale = min(width / frame.width, height / frame.height)
    dx = (width - frame.width * scale) / 2.0 - frame.min_x * scale
    dy = (height - frame.height * scale) / 2.0 - frame.min_y * scale
    return scale, dx, dy


__all__ = ["clamp", "frame_mapping"]
