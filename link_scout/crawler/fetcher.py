"""
Fetcher module: performs one GET per work item and classifies the outcome.
"""
from __future__ import annotations

import asyncio
import random
from typing import Callable, Optional

from aiohttp import ClientError, ClientResponseError, ClientSession

from link_scout.config import ScannerConfig
from link_scout.crawler.models import ERROR, FetchFailure, FetchOutcome, FetchSuccess, WorkItem
from link_scout.logger import logger


class Fetcher:
    """Fetches pages with a random User-Agent; never retries."""

    def __init__(
        self,
        session: ClientSession,
        config: ScannerConfig,
        pick_user_agent: Optional[Callable[[], str]] = None,
    ) -> None:
        self.session = session
        self.config = config
        self._pick_user_agent = pick_user_agent or (lambda: random.choice(self.config.user_agents))

    async def fetch(self, item: WorkItem) -> FetchOutcome:
        """
        Fetch ``item.target``.

        Any response below 400 is a FetchSuccess. Error statuses come back as
        FetchFailure with the numeric code; transport errors without a
        response as FetchFailure with status ``ERROR``.
        """
        headers = {"User-Agent": self._pick_user_agent()}
        try:
            async with self.session.get(item.target, headers=headers, raise_for_status=True) as resp:
                ctype = resp.headers.get("Content-Type", "")
                if ctype and "html" not in ctype.lower():
                    # nothing to extract; the body is never read
                    return FetchSuccess(resp.status, "", ctype)
                body = await resp.text(errors="replace")
                return FetchSuccess(resp.status, body, ctype)
        except ClientResponseError as exc:
            # status is 0 when no response line was parsed
            status = exc.status if exc.status else ERROR
            logger.debug("HTTP %s for %s", status, item.target)
            return FetchFailure(status, item.referrer, exc.message)
        except (ClientError, asyncio.TimeoutError) as exc:
            logger.debug("Transport error for %s: %r", item.target, exc)
            return FetchFailure(ERROR, item.referrer, str(exc) or type(exc).__name__)
