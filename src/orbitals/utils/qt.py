"""Qt helper utilities."""

from PySide6 import QtCore, QtGui

from ..models import ViewFrame
from ..render.colors import parse_color
from .geometry import frame_mapping


def frame_transform(frame: ViewFrame, rect: QtCore.QRectF) -> QtGui.QTransform:
    """Map diagram coordinates inside ``frame`` onto the widget area ``rect``."""
    scale, dx, dy = frame_mapping(frame, rect.width(), rect.height())
    return QtGui.QTransform(scale, 0.0, 0.0, scale, rect.left() + dx, rect.top() + dy)


def qcolor(text: str) -> QtGui.QColor:
    """Convert a palette colour string (hex or ``rgba()``) into a QColor."""
    r, g, b, alpha = parse_color(text)
    return QtGui.QColor(r, g, b, int(round(alpha * 255)))


__all__ = ["frame_transform", "qcolor"]
