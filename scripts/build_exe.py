"""Build the orbitals executable with PyInstaller."""

from __future__ import annotations

import json
import os
import re
import subprocess
import sys
from pathlib import Path
from tempfile import TemporaryDirectory

BASE_DIR = Path(__file__).resolve().parent.parent
ENTRY_POINT = BASE_DIR / "scripts/orbitals_gui.py"
APP_NAME = "orbitals"

_SAFE = re.compile(r"[^A-Za-z0-9.-]+")


def _safe_version(version: str) -> str:
    cleaned = _SAFE.sub("-", version).strip("-")
    return cleaned or "unknown"


def build_command(version: str, version_json: Path) -> list[str]:
    """PyInstaller invocation bundling ``version_json`` into the package folder."""
    data_sep = ";" if os.name == "nt" else ":"
    return [
        "pyinstaller",
        "--noconsole",
        "--onefile",
        "--name",
        f"{APP_NAME}-v{_safe_version(version)}",
        "--clean",
        "--paths",
        str(BASE_DIR / "src"),
        "--add-data",
        f"{version_json}{data_sep}{APP_NAME}",
        str(ENTRY_POINT),
    ]


def main() -> None:
    import setuptools_scm  # type: ignore[import-untyped]

    version = str(setuptools_scm.get_version(root=BASE_DIR, fallback_version="0.0.0"))

    with TemporaryDirectory() as temp_dir:
        version_json = Path(temp_dir) / "version.json"
        version_json.write_text(
            json.dumps({"version": version}, indent=4), encoding="utf-8"
        )
        sys.exit(subprocess.call(build_command(version, version_json)))


if __name__ == "__main__":
    main()
