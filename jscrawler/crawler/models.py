# jscrawler/crawler/models.py
"""
Data models for the jscrawler pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class PageData:
    """Holds the requested URL and the decoded body of a fetched page."""

    url: str
    content: str


@dataclass(slots=True)
class CrawlSummary:
    """Counters collected over one run."""

    processed: int = 0
    failed: int = 0
    references: int = 0
