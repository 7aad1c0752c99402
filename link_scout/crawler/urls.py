"""
URL normalization and same-origin checks for LinkScout.
"""
from __future__ import annotations

from typing import Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

__all__ = ("normalize_url", "is_internal", "dedup_key")


def normalize_url(href: str, base: str) -> Optional[str]:
    """
    Resolve *href* against *base* into a comparable absolute URL.

    The fragment is dropped and one trailing slash is removed from any
    non-root path. Scheme and host are lower-cased; path and query keep
    their case. Returns ``None`` when *href* cannot be parsed.
    """
    try:
        parts = urlsplit(urljoin(base, href.strip()))
        # accessing .port validates it
        parts.port
    except ValueError:
        return None
    path = parts.path
    if parts.netloc and not path:
        path = "/"
    elif len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), path, parts.query, ""))


def is_internal(url: str, base: str) -> bool:
    """Return True if *url* has the same scheme and hostname as *base*."""
    try:
        link = urlsplit(url)
        root = urlsplit(base)
    except ValueError:
        return False
    if not link.hostname:
        return False
    return link.scheme.lower() == root.scheme.lower() and link.hostname == root.hostname


def dedup_key(url: str) -> str:
    """Key used for visited/queued membership."""
    return url.lower()
