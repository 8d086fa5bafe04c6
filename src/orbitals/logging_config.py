"""
Logging Configuration
One stdout handler (and optionally a log file) on the package logger, shared by
the command line and the Qt window.
"""
import logging
import sys
from os import PathLike
from typing import Optional, Union

PACKAGE_LOGGER = __package__ or "orbitals"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, PathLike[str]]] = None,
) -> logging.Logger:
    """
    Route every ``orbitals.*`` logger to stdout, and to ``log_file`` if given.

    Calling it again replaces the handlers of the previous call.

    Args:
        level: Logging level (e.g. logging.DEBUG with ``--verbose``).
        log_file: Optional path; the file is truncated on each run.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(sys.stdout), level)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        _attach(logger, file_handler, level)

    logger.debug("Logging to stdout%s", f" and {log_file}" if log_file else "")
    return logger
