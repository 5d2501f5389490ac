"""Logging for flugen.

Per-unit messages come from worker threads, so debug output carries the
thread name to tell interleaved units apart.
"""

from __future__ import annotations

import logging

_LOGGER_NAME = "flugen"

_FORMAT = "[flugen] %(levelname)s %(message)s"
_DEBUG_FORMAT = "[flugen] %(levelname)s %(threadName)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the flugen hierarchy (`flugen.<name>`)."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def log_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI flags to a level; verbose wins over quiet."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Send flugen records to stderr at the level chosen by the CLI flags."""
    level = log_level(verbose=verbose, quiet=quiet)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # The CLI can be invoked repeatedly in one process (tests); keep one handler.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_DEBUG_FORMAT if verbose else _FORMAT))
    logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "get_logger", "log_level"]
