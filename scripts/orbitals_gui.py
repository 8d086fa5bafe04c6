"""Frozen-build entry point; PyInstaller cannot start from a relative-import module."""

import sys

from orbitals.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:] or ["gui"]))
