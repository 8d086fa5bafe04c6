"""Minimal version helper for the orbitals application."""

import json
from os import PathLike
from pathlib import Path
import sys

PACKAGE_NAME = "orbitals"
VERSION_FILENAME = "version.json"
FALLBACK_VERSION = "0.0.0"


def get_embedded_path(name: str | PathLike[str]) -> Path:
    """Return the path to an embedded resource shipped with the binary."""

    meipass = getattr(sys, "_MEIPASS", None)
    if meipass is not None:
        base = Path(meipass) / PACKAGE_NAME
    else:
        base = Path(__file__).resolve().parent
    return base / Path(name)


def get_version() -> str:
    """
    Get version for application.

    Frozen builds read the bundled ``version.json``; source checkouts ask
    setuptools_scm, which falls back to :data:`FALLBACK_VERSION` outside git.

    :return: Version number.
    """
    if getattr(sys, "frozen", False):  # *.exe
        with open(get_embedded_path(VERSION_FILENAME), "r") as f:
            version = str(json.load(f)["version"])
    else:  # dev
        import setuptools_scm  # type: ignore[import-untyped]

        version = setuptools_scm.get_version(
            root=str(Path(__file__).resolve().parents[2]),
            fallback_version=FALLBACK_VERSION,
        )
    return version


__all__ = ["get_version", "get_embedded_path"]
