"""
Breadth-first crawl engine for LinkScout.
"""
from __future__ import annotations

import asyncio
import logging
import time
from collections import deque
from typing import Deque, List, Optional, Protocol, Set, Tuple

from aiohttp import ClientSession, ClientTimeout

from link_scout.config import ScannerConfig
from link_scout.crawler.fetcher import Fetcher
from link_scout.crawler.link_extractor import extract_links
from link_scout.crawler.models import (
    CrawlSummary,
    FetchFailure,
    FetchOutcome,
    FetchSuccess,
    PageResult,
    WorkItem,
)
from link_scout.crawler.urls import dedup_key, normalize_url
from link_scout.report.text_report import Reporter

__all__ = ("LinkCrawler", "CrawlError", "PageFetcher")


class PageFetcher(Protocol):
    async def fetch(self, item: WorkItem) -> FetchOutcome: ...


class CrawlError(RuntimeError):
    """The crawl was aborted by an error outside the per-page fetch model."""


class LinkCrawler:
    """
    Breadth-first same-origin crawler that reports the HTTP outcome of every page.

    Work proceeds in batches of at most ``config.concurrency`` items: a batch
    is fetched concurrently and fully processed before the next one is formed.
    All queue and set bookkeeping happens between batches.
    """

    def __init__(
        self,
        config: ScannerConfig,
        reporter: Optional[Reporter] = None,
        fetcher: Optional[PageFetcher] = None,
    ) -> None:
        self.config = config
        self.base_url: str = str(config.base_url)
        self.concurrency: int = config.concurrency
        self.reporter = reporter or Reporter()
        self.fetcher = fetcher
        self.queue: Deque[WorkItem] = deque()
        self.visited: Set[str] = set()
        self.queued: Set[str] = set()
        self.results: List[PageResult] = []
        self.session: Optional[ClientSession] = None
        self.logger = logging.getLogger("LinkScout")

    async def __aenter__(self) -> LinkCrawler:
        if self.fetcher is None:
            self.session = ClientSession(timeout=ClientTimeout(total=self.config.timeout))
            self.fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self) -> CrawlSummary:
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized")
        self.logger.info("Crawl started: %s (concurrency %d)", self.base_url, self.concurrency)
        start = time.monotonic()
        self.reporter.header(self.base_url)
        seed = normalize_url(self.base_url, self.base_url) or self.base_url
        self._enqueue(WorkItem(seed))
        try:
            while self.queue:
                batch = self._next_batch()
                if batch:
                    await self._run_batch(batch)
        except Exception as exc:
            self.logger.error("Crawl aborted: %s", exc)
            self.reporter.fatal(exc)
            raise CrawlError(str(exc) or type(exc).__name__) from exc
        duration = time.monotonic() - start
        self.logger.info("Finished: %d pages in %.2f s", len(self.visited), duration)
        self.reporter.summary(len(self.visited))
        return CrawlSummary(self.base_url, len(self.visited), list(self.results))

    def _next_batch(self) -> List[WorkItem]:
        """Pop up to ``concurrency`` unvisited items, marking each visited."""
        batch: List[WorkItem] = []
        while self.queue and len(batch) < self.concurrency:
            item = self.queue.popleft()
            key = dedup_key(item.target)
            if key in self.visited:
                continue
            self.visited.add(key)
            batch.append(item)
        return batch

    async def _run_batch(self, batch: List[WorkItem]) -> None:
        self.logger.debug("Dispatching batch of %d: %s", len(batch), [i.target for i in batch])
        outcomes = await asyncio.gather(
            *(self.fetcher.fetch(item) for item in batch), return_exceptions=True
        )
        errors = [o for o in outcomes if isinstance(o, BaseException)]
        completed: List[Tuple[WorkItem, FetchOutcome]] = [
            (item, o) for item, o in zip(batch, outcomes) if not isinstance(o, BaseException)
        ]
        try:
            if errors:
                raise errors[0]
            for item, outcome in completed:
                self._process(item, outcome)
        finally:
            # lines are flushed only once the whole batch is processed
            for item, outcome in completed:
                self._record(item, outcome)

    def _process(self, item: WorkItem, outcome: FetchOutcome) -> None:
        if not isinstance(outcome, FetchSuccess) or not outcome.is_html:
            return
        for link in extract_links(outcome.body, self.base_url):
            self._enqueue(WorkItem(link, item.target))

    def _enqueue(self, item: WorkItem) -> bool:
        key = dedup_key(item.target)
        if key in self.visited or key in self.queued:
            return False
        self.queued.add(key)
        self.queue.append(item)
        return True

    def _record(self, item: WorkItem, outcome: FetchOutcome) -> None:
        if isinstance(outcome, FetchFailure):
            result = PageResult(item.target, outcome.status, outcome.referrer, ok=False)
        else:
            result = PageResult(item.target, outcome.status, item.referrer, ok=True)
        self.results.append(result)
        self.reporter.outcome(result)
