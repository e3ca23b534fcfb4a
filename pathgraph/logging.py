"""Logging utilities for pathgraph.

Provides module loggers with a shared stderr handler and runtime level control.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

# Default logging level
_DEFAULT_LEVEL = logging.WARNING

_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _stream_handler(stream: Optional[object] = None) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached logger for ``name`` under the ``pathgraph`` namespace.

    Pass ``__name__`` from the calling module; None gives the package logger.
    Handlers carry no level of their own, so ``set_log_level`` alone decides
    what gets through.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Relaxing frontier")
    """
    if name is None or name == "pathgraph":
        logger_name = "pathgraph"
    elif name.startswith("pathgraph."):
        logger_name = name
    else:
        logger_name = f"pathgraph.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        logger.addHandler(_stream_handler())
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all pathgraph loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').
    """
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING, stream: Optional[object] = None
) -> None:
    """Send every pathgraph logger to ``stream`` (stderr by default) at ``level``.

    Existing handlers are replaced, so calling this again redirects output.
    """
    set_log_level(level)
    for logger in _loggers.values():
        logger.handlers.clear()
        logger.addHandler(_stream_handler(stream))
