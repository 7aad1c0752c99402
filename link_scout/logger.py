"""Logging configuration for the **LinkScout** project.

Highlights
----------
* Diagnostic logger ``LinkScout``: timestamped records on stderr, with an
  optional rotating log file.
* Report logger ``LinkScout.report``: bare report lines delivered to the
  console and to the report file, identically and in the same order.
* Single, importable instance :data:`logger` – simply::

      from link_scout.logger import logger
      logger.info("Crawl started")
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, TextIO, Union

# --------------------------------------------------------------------------- #
# Constants & basic types                                                     #
# --------------------------------------------------------------------------- #

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_REPORT_FORMAT: Final[str] = "%(message)s"
_LOGGER_NAME: Final[str] = "LinkScout"
REPORT_LOGGER_NAME: Final[str] = f"{_LOGGER_NAME}.report"

_LevelT = Union[int, str]


# --------------------------------------------------------------------------- #
# Helper builders                                                             #
# --------------------------------------------------------------------------- #


def _stream_handler(stream: TextIO, fmt: str) -> logging.StreamHandler:
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(file: Path | str, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _clear_handlers(lg: logging.Logger) -> None:
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #


def configure(
    *,
    level: _LevelT = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """(Re)configure the diagnostic project logger.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Path to a logfile. *None* → stderr only.
    log_format
        Format string for :class:`logging.Formatter`.
    replace_handlers
        *True* – remove existing handlers; *False* – just append new one(s).
    """
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)

    if replace_handlers:
        _clear_handlers(lg)

    # stdout belongs to the report
    lg.addHandler(_stream_handler(sys.stderr, log_format))

    if log_file is not None:
        lg.addHandler(_file_handler(log_file, log_format))

    lg.propagate = False
    return lg


def configure_report(
    report_file: str | Path | None = None, *, console: bool = True
) -> logging.Logger:
    """Attach the report sinks: stdout and, if given, a fresh report file."""
    lg = logging.getLogger(REPORT_LOGGER_NAME)
    lg.setLevel(logging.INFO)
    _clear_handlers(lg)

    if console:
        lg.addHandler(_stream_handler(sys.stdout, _REPORT_FORMAT))

    if report_file is not None:
        Path(report_file).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(report_file), mode="w", encoding="utf-8")
        handler.setFormatter(logging.Formatter(_REPORT_FORMAT))
        lg.addHandler(handler)

    lg.propagate = False
    return lg


def init_logging(
    level: _LevelT = "WARNING", log_file: str | Path | None = None, log_format: str = _DEFAULT_FORMAT
) -> logging.Logger:
    """Shorthand used by the CLI."""
    return configure(level=level, log_file=log_file, log_format=log_format, replace_handlers=True)


# --------------------------------------------------------------------------- #
# Ready‑to‑use instance                                                       #
# --------------------------------------------------------------------------- #

logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "configure_report", "init_logging", "REPORT_LOGGER_NAME"]
