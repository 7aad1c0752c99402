"""
Data models for the LinkScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Union

ERROR: Literal["ERROR"] = "ERROR"


@dataclass(frozen=True, slots=True)
class WorkItem:
    """A URL waiting to be fetched and the page it was discovered on."""

    target: str
    referrer: Optional[str] = None


@dataclass(frozen=True, slots=True)
class FetchSuccess:
    """A response was received with a non-error status."""

    status: int
    body: str
    content_type: str = ""

    @property
    def is_html(self) -> bool:
        # servers that omit Content-Type are assumed to send HTML
        return not self.content_type or "html" in self.content_type.lower()


@dataclass(frozen=True, slots=True)
class FetchFailure:
    """Either an HTTP error status or no response at all (status ``ERROR``)."""

    status: Union[int, Literal["ERROR"]]
    referrer: Optional[str] = None
    reason: str = ""


FetchOutcome = Union[FetchSuccess, FetchFailure]


@dataclass(slots=True)
class PageResult:
    """Outcome of one fetched URL as it appears in the report."""

    url: str
    status: Union[int, str]
    referrer: Optional[str] = None
    ok: bool = True


@dataclass(slots=True)
class CrawlSummary:
    base_url: str
    visited: int = 0
    results: List[PageResult] = field(default_factory=list)

    @property
    def broken(self) -> List[PageResult]:
        return [r for r in self.results if not r.ok]
