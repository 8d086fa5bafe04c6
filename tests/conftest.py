"""Shared fixtures for the orbitals test-suite."""

import logging

import pytest

from orbitals.models import DiagramParams


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """CLI tests install stdout handlers bound to pytest's captured streams."""
    yield
    logger = logging.getLogger("orbitals")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def small_params() -> DiagramParams:
    """Four well separated orbits on a 320×320 canvas (frame ±160, scale 1)."""
    return DiagramParams(
        spacing=40.0,
        min_circle_radius=4.0,
        max_circle_radius=16.0,
        canvas_width=320,
        canvas_height=320,
        initial_angle="1/4",
    )
