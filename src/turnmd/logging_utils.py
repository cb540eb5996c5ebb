#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/logging_utils.py
"""Logging setup for the turnmd command line.

The library only creates module loggers (``turnmd.converter``,
``turnmd.rules.selector``, ...) and never installs handlers. The CLI calls
:func:`configure_logging` once, before reading its input.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(level: int | str) -> int:
    """Return the numeric logging level for a level or level name.

    Names are case-insensitive; unknown names resolve to ``logging.INFO``.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    trace_mode: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Replace the root logger's handlers with a single stream handler.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "DEBUG").
    trace_mode : bool, default False
        Prefix records with a timestamp and the logger name, so rule
        selection and append hooks can be traced per module.
    stream : IO[str], optional
        Destination of log records. Defaults to standard error, keeping
        standard output free for Markdown.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(LOG_FORMAT)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    return root_logger


__all__ = ["configure_logging", "resolve_log_level"]
