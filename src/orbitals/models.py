"""Dataclasses describing configuration and computed layouts for orbitals."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

import json
import logging
import math
import os

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ORBITALS_CONFIG"


@dataclass(frozen=True)
class AngleSpec:
    """Result of parsing an angle expression.

    ``value`` is the angle as a fraction of a full turn and ``denominator``
    the reduced period after which the special-orbit pattern repeats. Both
    are ``None`` when the text could not be parsed.
    """

    is_valid: bool
    value: Optional[float] = None
    denominator: Optional[int] = None

    @staticmethod
    def invalid() -> "AngleSpec":
        return AngleSpec(is_valid=False, value=None, denominator=None)

    @property
    def degrees(self) -> Optional[float]:
        """Angle in degrees wrapped into ``(-360, 360)``; sign follows ``value``."""
        if not self.is_valid or self.value is None:
            return None
        # Whole turns go first so huge values cannot overflow; adding 0.0 turns
        # -0.0 into 0.0 so "-0" reads "0.00°".
        return math.fmod(self.value, 1.0) * 360.0 + 0.0


@dataclass(frozen=True)
class OrbitDescriptor:
    """Geometry and marking of one ring (1-based ``index``, outward)."""

    index: int
    orbit_radius: float
    angle_turns: float
    circle_radius: float
    is_special: bool

    @property
    def position(self) -> Tuple[float, float]:
        # Imported lazily; layout imports this module.
        from .core.layout import project

        return project(self.angle_turns, self.orbit_radius)


@dataclass(frozen=True)
class ViewFrame:
    """Viewport rectangle in diagram units (y grows downward)."""

    min_x: float
    min_y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.min_x + self.width

    @property
    def max_y(self) -> float:
        return self.min_y + self.height

    def as_viewbox(self) -> str:
        return " ".join(
            format_number(v) for v in (self.min_x, self.min_y, self.width, self.height)
        )


def format_number(value: float) -> str:
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


@dataclass
class DiagramParams:
    """Constants the shell supplies to the layout engine."""

    spacing: float = 1.0
    min_circle_radius: float = 4.0
    max_circle_radius: float = 16.0
    canvas_width: int = 700
    canvas_height: int = 700
    initial_angle: str = "5/99"

    def orbit_count_range(self) -> Tuple[int, int]:
        """Slider bounds: enough orbits to fill the canvas, up to three times that."""
        if not (math.isfinite(self.spacing) and self.spacing > 0.0):
            raise ValueError(f"spacing must be > 0, got {self.spacing!r}")
        max_half_size = max(self.canvas_width / 2.0, self.canvas_height / 2.0)
        lo = max(1, int(math.floor(max_half_size / self.spacing)))
        return lo, lo * 3


@dataclass
class Palette:
    """Fill and stroke colours used by every renderer."""

    special_fill: str = "#1666EE"
    special_stroke: str = "#3A7DF0"
    regular_fill: str = "#e99911"
    regular_stroke: str = "#c5820f"
    guide_stroke: str = "rgba(0, 0, 0, 0.2)"
    background: str = "#ffffff"

    def fill_for(self, is_special: bool) -> str:
        return self.special_fill if is_special else self.regular_fill

    def stroke_for(self, is_special: bool) -> str:
        return self.special_stroke if is_special else self.regular_stroke


@dataclass
class UIState:
    """Window level preferences."""

    orbits_count: Optional[int] = None  # None -> lower end of the range
    always_on_top: bool = False


@dataclass
class AppConfig:
    """Read-only configuration for the application."""

    params: DiagramParams = field(default_factory=DiagramParams)
    ui: UIState = field(default_factory=UIState)
    palette: Palette = field(default_factory=Palette)

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "AppConfig":
        data: Dict = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("Configuration root must be a JSON object.")
        p = data.get("params", {})
        u = data.get("ui", {})
        c = data.get("palette", {})
        defaults = Palette()
        orbits = u.get("orbits_count")
        return AppConfig(
            params=DiagramParams(
                spacing=float(p.get("spacing", 1.0)),
                min_circle_radius=float(p.get("min_circle_radius", 4.0)),
                max_circle_radius=float(p.get("max_circle_radius", 16.0)),
                canvas_width=int(p.get("canvas_width", 700)),
                canvas_height=int(p.get("canvas_height", 700)),
                initial_angle=str(p.get("initial_angle", "5/99")),
            ),
            ui=UIState(
                orbits_count=None if orbits is None else int(orbits),
                always_on_top=bool(u.get("always_on_top", False)),
            ),
            palette=Palette(
                **{
                    name: str(c.get(name, getattr(defaults, name)))
                    for name in defaults.__dataclass_fields__
                }
            ),
        )


def default_config_path() -> Path:
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return Path.home() / ".orbitals_config.json"


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load configuration from ``path``; fall back to defaults on any problem."""
    p = path if path is not None else default_config_path()
    if not p.exists():
        logger.debug("No configuration at %s, using defaults", p)
        return AppConfig()
    try:
        cfg = AppConfig.from_json(p.read_text(encoding="utf-8"))
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring unreadable configuration %s: %s", p, exc)
        return AppConfig()
    logger.info("Loaded configuration from %s", p)
    return cfg


__all__ = [
    "AngleSpec",
    "OrbitDescriptor",
    "ViewFrame",
    "format_number",
    "DiagramParams",
    "Palette",
    "UIState",
    "AppConfig",
    "default_config_path",
    "load_config",
]
