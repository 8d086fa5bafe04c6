"""Qt application entry point for the orbitals diagram viewer."""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Optional, Tuple

import logging
import sys

from PySide6 import QtCore, QtGui, QtWidgets

from . import __version__ as APP_VERSION
from .core import (
    AngleInput,
    LayoutError,
    Scene,
    build_scene,
    check_angle,
    clamp_orbits_count,
    format_angle,
)
from .models import AppConfig, Palette
from .render import EXPORT_SUFFIXES, export_scene
from .utils.qt import frame_transform, qcolor

logger = logging.getLogger(__name__)


# ------------------------------- Orbit Canvas ---------------------------------


class OrbitCanvas(QtWidgets.QWidget):
    """Paints the current :class:`Scene` scaled into the widget."""

    def __init__(
        self, palette: Palette, parent: Optional[QtWidgets.QWidget] = None
    ) -> None:
        super().__init__(parent)
        self._palette = palette
        self._scene: Optional[Scene] = None
        self.setSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding,
        )

    @property
    def scene(self) -> Optional[Scene]:
        return self._scene

    def set_scene(self, scene: Scene) -> None:
        self._scene = scene
        self.update()

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        painter.fillRect(self.rect(), qcolor(self._palette.background))

        scene = self._scene
        if scene is None:
            return

        painter.setTransform(frame_transform(scene.frame, QtCore.QRectF(self.rect())))

        if scene.guide_rings:
            pen = QtGui.QPen(qcolor(self._palette.guide_stroke))
            pen.setCosmetic(True)
            painter.setPen(pen)
            painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
            origin = QtCore.QPointF(0.0, 0.0)
            for r in scene.guide_rings:
                painter.drawEllipse(origin, r, r)

        for orbit in scene.orbits:
            x, y = orbit.position
            pen = QtGui.QPen(qcolor(self._palette.stroke_for(orbit.is_special)))
            pen.setCosmetic(True)
            painter.setPen(pen)
            painter.setBrush(qcolor(self._palette.fill_for(orbit.is_special)))
            r = orbit.circle_radius
            painter.drawEllipse(QtCore.QPointF(x, y), r, r)
        painter.end()


# ------------------------------- Control Panel --------------------------------


class ControlPanel(QtWidgets.QWidget):
    angleTextChanged = QtCore.Signal(str)
    orbitsCountChanged = QtCore.Signal(int)
    exportRequested = QtCore.Signal()

    def __init__(
        self,
        initial_angle: str,
        orbit_range: Tuple[int, int],
        orbits_count: int,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)

        self.angle_edit = QtWidgets.QLineEdit(initial_angle)
        self.angle_edit.setToolTip("Turn fraction, e.g. 5/99, 0.25 or -0.1")
        self.angle_edit.textChanged.connect(self.angleTextChanged)

        self.angle_label = QtWidgets.QLabel()
        self.angle_label.setMinimumWidth(80)

        lo, hi = orbit_range
        self.orbits_slider = QtWidgets.QSlider(QtCore.Qt.Orientation.Horizontal)
        self.orbits_slider.setRange(int(lo), int(hi))
        self.orbits_slider.setSingleStep(1)
        self.orbits_slider.setValue(int(orbits_count))
        self.orbits_slider.valueChanged.connect(self._on_orbits_changed)

        self.orbits_label = QtWidgets.QLabel(str(orbits_count))
        self.orbits_label.setMinimumWidth(48)

        self.export_btn = QtWidgets.QPushButton("Export…")
        self.export_btn.clicked.connect(self.exportRequested)

        form = QtWidgets.QGridLayout(self)
        form.addWidget(QtWidgets.QLabel("Angle:"), 0, 0)
        form.addWidget(self.angle_edit, 0, 1)
        form.addWidget(self.angle_label, 0, 2)
        form.addWidget(QtWidgets.QLabel("Orbits:"), 1, 0)
        form.addWidget(self.orbits_slider, 1, 1)
        form.addWidget(self.orbits_label, 1, 2)
        form.addWidget(self.export_btn, 0, 3, 2, 1)

    def set_angle_reading(self, text: str) -> None:
        self.angle_label.setText(text)

    def _on_orbits_changed(self, value: int) -> None:
        self.orbits_label.setText(str(value))
        self.orbitsCountChanged.emit(int(value))


# ---------------------------- Main Window -------------------------------------


class MainWindow(QtWidgets.QWidget):
    def __init__(
        self, panel: ControlPanel, canvas: OrbitCanvas, cfg: AppConfig
    ) -> None:
        super().__init__(None)
        self.setWindowTitle(f"orbitals {APP_VERSION}")
        self.setWindowFlag(
            QtCore.Qt.WindowType.WindowStaysOnTopHint, cfg.ui.always_on_top
        )
        canvas.setMinimumSize(cfg.params.canvas_width, cfg.params.canvas_height)
        v = QtWidgets.QVBoxLayout(self)
        v.addWidget(panel, stretch=0)
        v.addWidget(canvas, stretch=1)


# ---------------------------- Main Controller ---------------------------------


class MainController(QtCore.QObject):
    """Owns the input state and re-derives the scene on every change."""

    def __init__(self, cfg: AppConfig, show: bool = True) -> None:
        super().__init__(None)
        self.cfg = cfg
        self.angle = AngleInput(
            cfg.params.initial_angle, check=partial(check_angle, cfg.params)
        )
        self.orbits_count = clamp_orbits_count(cfg.params, cfg.ui.orbits_count)

        self.canvas = OrbitCanvas(cfg.palette)
        self.panel = ControlPanel(
            cfg.params.initial_angle,
            cfg.params.orbit_count_range(),
            self.orbits_count,
        )
        self.window = MainWindow(self.panel, self.canvas, cfg)

        self.panel.angleTextChanged.connect(self._on_angle_text)
        self.panel.orbitsCountChanged.connect(self._on_orbits_count)
        self.panel.exportRequested.connect(self._on_export)

        self.panel.set_angle_reading(format_angle(self.angle.parsed))
        self._refresh()

        if show:
            self.window.show()

    # ---------------------------- Event Handlers ------------------------------

    def _on_angle_text(self, text: str) -> None:
        parsed = self.angle.update(text)
        self.panel.set_angle_reading(format_angle(parsed))
        self._refresh()

    def _on_orbits_count(self, count: int) -> None:
        self.orbits_count = clamp_orbits_count(self.cfg.params, count)
        self._refresh()

    def _on_export(self) -> None:
        filters = ";;".join(f"{s[1:].upper()} (*{s})" for s in EXPORT_SUFFIXES)
        name, _ = QtWidgets.QFileDialog.getSaveFileName(
            self.window, "Export diagram", "orbits.svg", filters
        )
        if name:
            self.export(Path(name))

    # ----------------------------- Core Actions --------------------------------

    def _refresh(self) -> None:
        try:
            scene = build_scene(
                self.cfg.params, self.orbits_count, self.angle.effective
            )
        except LayoutError as exc:
            logger.warning("Keeping the previous diagram: %s", exc)
            return
        self.canvas.set_scene(scene)

    def export(self, path: Path) -> Optional[Path]:
        scene = self.canvas.scene
        if scene is None:
            return None
        try:
            return export_scene(
                path,
                scene,
                self.cfg.palette,
                self.cfg.params.canvas_width,
                self.cfg.params.canvas_height,
            )
        except (OSError, ValueError) as exc:
            logger.error("Export to %s failed: %s", path, exc)
            QtWidgets.QMessageBox.warning(self.window, "Export failed", str(exc))
            return None


# ---------------------------------- Main --------------------------------------


def main(cfg: Optional[AppConfig] = None) -> int:
    cfg = cfg if cfg is not None else AppConfig()
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    app.setApplicationName("orbitals")
    app.setApplicationVersion(APP_VERSION)

    try:
        ctrl = MainController(cfg)
    except ValueError as exc:
        logger.error("Cannot start: %s", exc)
        return 2
    logger.info(
        "Window ready: angle=%r, orbits=%d", ctrl.angle.text, ctrl.orbits_count
    )
    return int(app.exec())

