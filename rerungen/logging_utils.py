"""
Logging helpers for rerungen.

Defines the package logger and simple utilities for configuring
console and optional file logging.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

LOG = logging.getLogger("rerungen")

# Verbosity levels
VERBOSITY_QUIET = 0    # Warnings and errors only
VERBOSITY_NORMAL = 1   # One status line per rerun list plus the summary (default)
VERBOSITY_VERBOSE = 2  # Detailed debug output

_CONSOLE_FORMAT = "%(levelname)s: %(message)s"
_QUIET_FORMAT = "%(message)s"


def setup_logging(
    debug: bool,
    log_file: Optional[Union[str, Path]] = None,
    verbosity: int = VERBOSITY_NORMAL,
) -> None:
    """
    Setup logging with verbosity control.

    Args:
        debug: Debug flag (overrides verbosity to VERBOSITY_VERBOSE)
        log_file: Optional log file path
        verbosity: Verbosity level (0=quiet, 1=normal, 2=verbose)
    """
    if debug:
        verbosity = VERBOSITY_VERBOSE

    if verbosity >= VERBOSITY_VERBOSE:
        level = logging.DEBUG
    elif verbosity >= VERBOSITY_NORMAL:
        level = logging.INFO
    else:
        level = logging.WARNING

    fmt = _CONSOLE_FORMAT if verbosity >= VERBOSITY_NORMAL else _QUIET_FORMAT

    # Handlers may already be installed (e.g. by pytest); only retune them
    if logging.root.handlers:
        for handler in logging.root.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(level)
                handler.setFormatter(logging.Formatter(fmt))
        logging.root.setLevel(level)
    else:
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(logging.Formatter(fmt))
        logging.basicConfig(level=level, handlers=[console], force=True)

    if log_file:
        file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # always full detail in file
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logging.root.addHandler(file_handler)
        # The file handler needs DEBUG records to reach the root logger
        logging.root.setLevel(logging.DEBUG)


def fmt_issues(errors: List[str], warnings: List[str]) -> str:
    """
    Compact error/warning string for the one-line-per-file log.
    """
    parts: List[str] = []
    if errors:
        parts.append("errors: " + ", ".join(errors))
    if warnings:
        parts.append("warnings: " + ", ".join(warnings))
    return " | ".join(parts) if parts else "-"
