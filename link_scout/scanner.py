"""
Thin wrapper that runs one crawl.
"""
from typing import Optional

from link_scout.config import ScannerConfig
from link_scout.crawler.crawler import LinkCrawler
from link_scout.crawler.models import CrawlSummary
from link_scout.report.text_report import Reporter


async def start_scan(cfg: ScannerConfig, reporter: Optional[Reporter] = None) -> CrawlSummary:
    """
    Run a fresh LinkCrawler inside its session context.

    Parameters
    ----------
    cfg : ScannerConfig
        Scan configuration.
    reporter : Reporter, optional
        Receives the report lines; a default one is created when omitted.

    Returns
    -------
    CrawlSummary
        Visited count and per-URL outcomes.
    """
    async with LinkCrawler(cfg, reporter) as crawler:
        return await crawler.crawl()

__all__ = ["start_scan"]
