import asyncio
import logging
from typing import Dict, List, Tuple

import pytest

from link_scout.config import ScannerConfig
from link_scout.crawler.models import ERROR, FetchFailure, FetchSuccess, WorkItem
from link_scout.logger import REPORT_LOGGER_NAME
from link_scout.report.text_report import Reporter


class FakeSite:
    """
    In-memory fetcher: maps URL -> (status, html).
    Unknown URLs fail like an unreachable host.
    """

    def __init__(self, pages: Dict[str, Tuple[int, str]], content_type: str = "text/html") -> None:
        self.pages = pages
        self.content_type = content_type
        self.calls: List[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch(self, item: WorkItem):
        self.calls.append(item.target)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
        finally:
            self.in_flight -= 1
        if item.target not in self.pages:
            return FetchFailure(ERROR, item.referrer, "unreachable")
        status, html = self.pages[item.target]
        if status >= 400:
            return FetchFailure(status, item.referrer)
        return FetchSuccess(status, html, self.content_type)


@pytest.fixture(autouse=True)
def reset_loggers():
    """Drop handlers bound to streams that die with each test."""
    yield
    for name in ("LinkScout", REPORT_LOGGER_NAME):
        lg = logging.getLogger(name)
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()


@pytest.fixture()
def fake_site():
    return FakeSite


@pytest.fixture()
def reporter() -> Reporter:
    return Reporter(logging.getLogger("tests.report"))


@pytest.fixture()
def make_config(tmp_path):
    """Return a factory for ScannerConfig rooted at https://x.test/."""

    def _make(**overrides) -> ScannerConfig:
        data = {
            "base_url": "https://x.test/",
            "concurrency": 4,
            "timeout": 2.0,
            "user_agents": ["TestAgent/1.0"],
            "report_file": None,
        }
        data.update(overrides)
        return ScannerConfig(**data)

    return _make
