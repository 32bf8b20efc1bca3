#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/logging_utils.py
"""Logging setup for the mdlatex command.

Only the ``mdlatex`` package logger is configured, so an application that
embeds the library keeps control of the root logger. Diagnostics always go
to stderr because stdout carries the LaTeX fragment.

"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "mdlatex"

LOG_FORMAT = "mdlatex: %(levelname)s: %(message)s"
TRACE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-7s %(name)s:%(lineno)d %(message)s"
TRACE_DATE_FORMAT = "%H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the package logger.

    Calling this again replaces the handlers added by the previous call.

    Parameters
    ----------
    log_level : int | str
        Numeric level or level name. Unknown names mean INFO.
    log_file : str, optional
        Also append log records to this file
    trace_mode : bool, default False
        Force DEBUG and prefix each record with a timestamp, the logger name
        and the source line

    Returns
    -------
    logging.Logger
        The ``mdlatex`` logger

    """
    level = logging.DEBUG if trace_mode else _resolve_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            package_logger.warning(f"Could not open log file {log_file}: {e}")
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.debug(f"Logging to file: {log_file}")

    return package_logger
