#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the highlightwords command line.

Library modules only create module-level loggers. The CLI installs a
``rich`` console handler on stderr and, optionally, a plain file handler.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def resolve_log_level(log_level: int | str, verbose: bool = False, trace: bool = False) -> int:
    """Return the effective numeric level for the CLI logging flags.

    ``trace`` always means DEBUG. ``verbose`` means DEBUG unless a level
    other than the WARNING default was asked for. Unknown names fall back
    to INFO.
    """
    if trace:
        return logging.DEBUG
    if isinstance(log_level, int):
        level = log_level
    else:
        named = getattr(logging, str(log_level).upper(), logging.INFO)
        level = named if isinstance(named, int) else logging.INFO
    if verbose and level == logging.WARNING:
        return logging.DEBUG
    return level


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install the CLI's log handlers on the root logger.

    Parameters
    ----------
    log_level : int | str
        Level number or name
    log_file : str, optional
        Also append records to this file
    trace_mode : bool, default False
        Show timestamps, logger names and source locations on the console

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = resolve_log_level(log_level, trace=trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        level=level,
        show_time=trace_mode,
        show_path=trace_mode,
        markup=False,
        rich_tracebacks=trace_mode,
    )
    console_handler.setFormatter(logging.Formatter("[%(name)s] %(message)s" if trace_mode else "%(message)s"))
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Cannot open log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
            root_logger.addHandler(file_handler)

    return root_logger
