#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the ``html2jsx`` command.

Library modules only create module loggers (``logging.getLogger(__name__)``)
and never install handlers; the command-line front end calls
:func:`configure_logging` once at start-up.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.WARNING)


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    return logging.Formatter(CONSOLE_FORMAT)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Replace the root logger's handlers with a stderr handler and an optional file handler.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name such as ``"INFO"``.
        Unknown names fall back to ``WARNING``.
    log_file : str, optional
        Path of a file that receives the same records as stderr.
    trace_mode : bool, default False
        Prefix records with a timestamp, level and logger name.

    Returns
    -------
    logging.Logger
        The configured root logger.

    """
    level = _resolve_level(log_level)
    formatter = _make_formatter(trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if file_error is not None:
        root_logger.warning("Could not open log file %s: %s", log_file, file_error)
    elif log_file:
        root_logger.debug("Logging to file: %s", log_file)

    return root_logger


__all__ = ["configure_logging"]
