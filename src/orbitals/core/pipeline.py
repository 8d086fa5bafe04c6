"""Derived-state pipeline shared by the Qt window, the CLI and the exporters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import logging
import math

from ..models import AngleSpec, DiagramParams, OrbitDescriptor, ViewFrame
from ..utils import clamp
from .angle import parse_angle
from .layout import LayoutError, compute_orbits, compute_view_frame, guide_ring_radii

logger = logging.getLogger(__name__)


def effective_angle(parsed: AngleSpec, last_valid: AngleSpec) -> AngleSpec:
    """Angle to draw: the fresh parse when it is valid, otherwise the fallback."""
    return parsed if parsed.is_valid else last_valid


class AngleInput:
    """Raw angle text plus the last angle that parsed successfully.

    ``check`` may reject a valid parse by raising :class:`LayoutError`; such an
    angle is reported by :attr:`parsed` but never becomes the fallback.
    """

    def __init__(
        self,
        initial_text: str,
        check: Optional[Callable[[AngleSpec], None]] = None,
    ) -> None:
        self._check = check
        parsed = parse_angle(initial_text)
        if not parsed.is_valid:
            raise ValueError(f"Initial angle {initial_text!r} is not a valid angle.")
        if check is not None:
            check(parsed)
        self._text = initial_text
        self._parsed = parsed
        self._accepted = parsed
        self._last_valid = parsed

    @property
    def text(self) -> str:
        return self._text

    @property
    def parsed(self) -> AngleSpec:
        return self._parsed

    @property
    def last_valid(self) -> AngleSpec:
        return self._last_valid

    @property
    def effective(self) -> AngleSpec:
        return effective_angle(self._accepted, self._last_valid)

    def update(self, text: str) -> AngleSpec:
        """Store ``text`` and return its parse; remember it only if it can be drawn."""
        self._text = text
        self._parsed = parse_angle(text)
        self._accepted = self._parsed
        if self._parsed.is_valid and self._check is not None:
            try:
                self._check(self._parsed)
            except LayoutError as exc:
                logger.warning("Angle %r cannot be drawn: %s", text, exc)
                self._accepted = AngleSpec.invalid()
        if self._accepted.is_valid:
            self._last_valid = self._accepted
        else:
            logger.debug("Angle %r is invalid, keeping %r", text, self._last_valid)
        return self._parsed


@dataclass(frozen=True)
class Scene:
    """Everything a renderer needs for one frame."""

    frame: ViewFrame
    orbits: Tuple[OrbitDescriptor, ...]
    guide_rings: Tuple[float, ...]
    angle: AngleSpec


def clamp_orbits_count(params: DiagramParams, requested: Optional[int]) -> int:
    lo, hi = params.orbit_count_range()
    if requested is None:
        return lo
    return int(clamp(int(requested), lo, hi))


def check_angle(params: DiagramParams, angle: AngleSpec) -> None:
    """Raise :class:`LayoutError` unless ``angle`` fits every allowed orbit count."""
    if not angle.is_valid or angle.value is None:
        raise LayoutError("Cannot lay out orbits without a valid angle.")
    _, hi = params.orbit_count_range()
    if not math.isfinite(hi * angle.value):
        raise LayoutError(f"angle {angle.value!r} overflows a float over {hi} orbits")


def build_scene(params: DiagramParams, orbits_count: int, angle: AngleSpec) -> Scene:
    if not angle.is_valid or angle.value is None or angle.denominator is None:
        raise LayoutError("Cannot lay out orbits without a valid angle.")
    frame = compute_view_frame(
        params.spacing, orbits_count, params.canvas_width, params.canvas_height
    )
    orbits = compute_orbits(
        orbits_count,
        params.spacing,
        angle.value,
        angle.denominator,
        params.min_circle_radius,
        params.max_circle_radius,
    )
    logger.debug(
        "Scene: %d orbits, angle=%r, period=%d",
        len(orbits),
        angle.value,
        angle.denominator,
    )
    return Scene(
        frame=frame,
        orbits=tuple(orbits),
        guide_rings=tuple(guide_ring_radii(params.spacing, orbits_count)),
        angle=angle,
    )


__all__ = [
    "effective_angle",
    "AngleInput",
    "Scene",
    "clamp_orbits_count",
    "check_angle",
    "build_scene",
]
