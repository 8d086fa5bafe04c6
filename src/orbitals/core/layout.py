"""View frame and per-orbit geometry for the radial diagram."""

from __future__ import annotations

from numbers import Integral, Real
from typing import List, Sequence, Tuple

import math

import numpy as np

from ..models import OrbitDescriptor, ViewFrame


class LayoutError(ValueError):
    """Raised when the caller passes arguments outside the layout contract."""


def _require_count(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise LayoutError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise LayoutError(f"{name} must be >= 1, got {value}")
    return int(value)


def _require_real(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise LayoutError(f"{name} must be a number, got {value!r}")
    v = float(value)
    if not math.isfinite(v):
        raise LayoutError(f"{name} must be finite, got {value!r}")
    return v


def _require_positive(name: str, value: object) -> float:
    v = _require_real(name, value)
    if v <= 0.0:
        raise LayoutError(f"{name} must be > 0, got {value!r}")
    return v


def _require_denominator(value: object) -> int:
    if isinstance(value, Real) and not isinstance(value, (bool, Integral)):
        # Accept integral floats (e.g. 4.0) but nothing fractional or non-finite.
        if not math.isfinite(float(value)) or not float(value).is_integer():
            raise LayoutError(f"denominator must be a whole number, got {value!r}")
        value = int(value)
    return _require_count("denominator", value)


def compute_view_frame(
    spacing: float, orbits_count: int, canvas_width: float, canvas_height: float
) -> ViewFrame:
    """Smallest origin-centred frame holding every orbit at the canvas aspect ratio."""
    spacing = _require_positive("spacing", spacing)
    orbits_count = _require_count("orbits_count", orbits_count)
    canvas_width = _require_positive("canvas_width", canvas_width)
    canvas_height = _require_positive("canvas_height", canvas_height)

    largest = spacing * orbits_count
    aspect = canvas_width / canvas_height

    if canvas_height <= canvas_width:
        height = 2.0 * largest
        width = height * aspect
        min_x, min_y = -width / 2.0, -largest
    else:
        width = 2.0 * largest
        height = width / aspect
        min_x, min_y = -largest, -height / 2.0

    if not (math.isfinite(width) and math.isfinite(height)):
        raise LayoutError(f"frame for {orbits_count} orbits overflows a float")
    return ViewFrame(min_x=min_x, min_y=min_y, width=width, height=height)


def circle_radius_factor(
    orbits_count: int, min_radius: float, max_radius: float
) -> float:
    """Per-index growth so that index ``orbits_count`` reaches ``max_radius``."""
    orbits_count = _require_count("orbits_count", orbits_count)
    min_radius = _require_real("min_radius", min_radius)
    max_radius = _require_real("max_radius", max_radius)
    if min_radius < 0.0:
        raise LayoutError(f"min_radius must be >= 0, got {min_radius}")
    if max_radius <= min_radius:
        raise LayoutError(
            f"max_radius ({max_radius}) must exceed min_radius ({min_radius})"
        )
    return (max_radius - min_radius) / orbits_count


def compute_orbit(
    index: int,
    spacing: float,
    angle_value: float,
    denominator: int,
    circle_radius_factor: float,
    min_circle_radius: float,
) -> OrbitDescriptor:
    index = _require_count("index", index)
    spacing = _require_positive("spacing", spacing)
    angle_value = _require_real("angle_value", angle_value)
    denominator = _require_denominator(denominator)
    factor = _require_real("circle_radius_factor", circle_radius_factor)
    min_circle_radius = _require_real("min_circle_radius", min_circle_radius)
    if factor < 0.0 or min_circle_radius < 0.0:
        raise LayoutError("circle radius parameters must be >= 0")

    circle_radius = index * factor + min_circle_radius
    if not circle_radius > 0.0:
        raise LayoutError(f"circle radius for orbit {index} is not positive")
    orbit_radius = index * spacing
    angle_turns = index * angle_value
    if not (
        math.isfinite(orbit_radius)
        and math.isfinite(angle_turns)
        and math.isfinite(circle_radius)
    ):
        raise LayoutError(f"orbit {index} overflows a float")

    return OrbitDescriptor(
        index=index,
        orbit_radius=orbit_radius,
        angle_turns=angle_turns,
        circle_radius=circle_radius,
        is_special=(index - 1) % denominator == 0,
    )


def compute_orbits(
    orbits_count: int,
    spacing: float,
    angle_value: float,
    denominator: int,
    min_radius: float,
    max_radius: float,
) -> List[OrbitDescriptor]:
    """All orbits ``1..orbits_count`` in index order."""
    factor = circle_radius_factor(orbits_count, min_radius, max_radius)
    return [
        compute_orbit(i, spacing, angle_value, denominator, factor, min_radius)
        for i in range(1, int(orbits_count) + 1)
    ]


def project(angle_turns: float, orbit_radius: float) -> Tuple[float, float]:
    """Screen position of a circle; positive turns rotate counter-clockwise."""
    if not math.isfinite(angle_turns):
        raise LayoutError(f"angle_turns must be finite, got {angle_turns!r}")
    # Whole turns are dropped first so 2π·turns cannot overflow.
    radians = 2.0 * math.pi * math.fmod(angle_turns, 1.0)
    return math.cos(radians) * orbit_radius, -math.sin(radians) * orbit_radius


def orbit_positions(orbits: Sequence[OrbitDescriptor]) -> np.ndarray:
    """Vectorised :func:`project` returning an ``(N, 2)`` float array."""
    if not orbits:
        return np.empty((0, 2), dtype=np.float64)
    turns = np.fromiter((o.angle_turns for o in orbits), np.float64, len(orbits))
    radii = np.fromiter((o.orbit_radius for o in orbits), np.float64, len(orbits))
    radians = 2.0 * np.pi * np.fmod(turns, 1.0)
    return np.column_stack((np.cos(radians) * radii, -np.sin(radians) * radii))


def guide_ring_radii(spacing: float, orbits_count: int) -> List[float]:
    """Faint reference rings, drawn only when orbits are more than a unit apart."""
    spacing = _require_positive("spacing", spacing)
    orbits_count = _require_count("orbits_count", orbits_count)
    if spacing <= 1.0:
        return []
    return [i * spacing or 0.5 for i in range(0, orbits_count + 1)]


__all__ = [
    "LayoutError",
    "compute_view_frame",
    "circle_radius_factor",
    "compute_orbit",
    "compute_orbits",
    "project",
    "orbit_positions",
    "guide_ring_radii",
]
