"""Small helpers shared by the core and the front ends.

:mod:`orbitals.utils.qt` is not imported here so that headless code paths
never pull in PySide6.
"""

from .geometry import clamp, frame_mapping

__all__ = ["clamp", "frame_mapping"]
