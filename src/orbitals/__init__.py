"""orbitals package exposing a lazy ``main`` entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from ._version import get_version

__version__ = get_version()

if TYPE_CHECKING:  # pragma: no cover - only for type checkers
    from .cli import main as _main_type  # noqa: F401


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for ``python -m orbitals`` and console scripts."""
    from .cli import main as _main

    return _main(argv)


__all__ = ["main", "__version__", "get_version"]
