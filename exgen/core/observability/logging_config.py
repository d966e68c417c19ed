"""
Logging configuration — set up once by the CLI entrypoint.

Every module logs through ``logging.getLogger(__name__)`` and inherits
what is configured here.

Level precedence:
    --debug  >  --verbose  >  --quiet  >  EXGEN_LOG_LEVEL  >  WARNING

A second, file-backed handler is added when EXGEN_LOG_FILE is set
(its level comes from EXGEN_LOG_FILE_LEVEL, else the console level).
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "EXGEN_LOG_LEVEL"
ENV_FILE = "EXGEN_LOG_FILE"
ENV_FILE_LEVEL = "EXGEN_LOG_FILE_LEVEL"

# Console: bare messages at WARNING and above, context below that
_FMT_PLAIN = "%(message)s"
_FMT_INFO = "%(asctime)s [%(name)s] %(message)s"
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d - %(message)s"
_DATEFMT_CONSOLE = "%H:%M:%S"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def level_from_flags(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick a level name from CLI flags, falling back to the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger for the whole process.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to WARNING.
        log_file: Optional path of a log file that receives full detail.
        log_file_level: Level for the file handler; defaults to ``level``.
    """
    console_level = _parse_level(level)

    if console_level <= logging.DEBUG:
        fmt = _FMT_DEBUG
    elif console_level <= logging.INFO:
        fmt = _FMT_INFO
    else:
        fmt = _FMT_PLAIN

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=_DATEFMT_CONSOLE))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)


def setup_logging_from_env(level: str) -> None:
    """``setup_logging`` with the file handler taken from the environment."""
    setup_logging(
        level=level,
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
    )


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
