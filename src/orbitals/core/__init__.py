"""Angle parsing and orbit layout used by every orbitals front end."""

from ..models import AngleSpec, OrbitDescriptor, ViewFrame
from .angle import format_angle, gcd, parse_angle
from .layout import (
    LayoutError,
    circle_radius_factor,
    compute_orbit,
    compute_orbits,
    compute_view_frame,
    guide_ring_radii,
    orbit_positions,
    project,
)
from .pipeline import (
    AngleInput,
    Scene,
    build_scene,
    check_angle,
    clamp_orbits_count,
    effective_angle,
)

__all__ = [
    "parse_angle",
    "format_angle",
    "gcd",
    "compute_view_frame",
    "compute_orbit",
    "compute_orbits",
    "circle_radius_factor",
    "project",
    "orbit_positions",
    "guide_ring_radii",
    "LayoutError",
    "AngleInput",
    "Scene",
    "build_scene",
    "check_angle",
    "clamp_orbits_count",
    "effective_angle",
    "AngleSpec",
    "OrbitDescriptor",
    "ViewFrame",
]
