"""
Link extraction for LinkScout.
"""
from __future__ import annotations

from typing import Dict, List

from bs4 import BeautifulSoup
from bs4.element import Tag

from link_scout.crawler.urls import is_internal, normalize_url

LINK_TAGS = ("a", "area")


def extract_links(html: str, base_url: str) -> List[str]:
    """
    Extract same-origin links from an HTML page.

    Hrefs are resolved against the crawl *base_url* and only links sharing
    its origin are kept. Duplicates collapse into one entry, in
    first-occurrence order.
    """
    soup = BeautifulSoup(html, "html.parser")
    links: Dict[str, None] = {}
    for tag in soup.find_all(LINK_TAGS, href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        link = normalize_url(href_val, base_url)
        if link is None or not is_internal(link, base_url):
            continue
        links.setdefault(link, None)
    return list(links)
