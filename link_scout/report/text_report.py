"""
Plain-text broken link report.

Every line goes through the ``LinkScout.report`` logger, so each configured
sink (console, report file) receives the same lines in the same order.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from link_scout.crawler.models import PageResult
from link_scout.logger import REPORT_LOGGER_NAME

OK_GLYPH = "✅"
FAIL_GLYPH = "❌"


def format_result(result: PageResult) -> str:
    """Render one fetch outcome as a report line."""
    if result.ok:
        return f"{OK_GLYPH}  [{result.status}] {result.url}"
    note = f" (linked from: {result.referrer})" if result.referrer else ""
    return f"{FAIL_GLYPH}  [{result.status}] {result.url}{note}"


class Reporter:
    """Writes report lines to the report logger and keeps a copy in ``lines``."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(REPORT_LOGGER_NAME)
        self.lines: List[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)
        self._logger.info(line)

    def header(self, base_url: str) -> None:
        self.emit(f"Broken Link Report for {base_url}")
        self.emit("")

    def outcome(self, result: PageResult) -> None:
        self.emit(format_result(result))

    def summary(self, visited: int) -> None:
        self.emit("")
        self.emit(f"{OK_GLYPH} Scan completed. {visited} pages visited.")

    def fatal(self, exc: BaseException) -> None:
        self.emit(f"{FAIL_GLYPH} Unexpected error: {exc}")
