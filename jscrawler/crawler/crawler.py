# jscrawler/crawler/crawler.py
"""
Admission-gated orchestration: one task per URL, fetch, extract, emit.

At most ``config.threads`` pages are in flight; a failing page never
cancels its siblings.
"""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

from aiohttp import ClientSession

from jscrawler.config import CrawlerConfig
from jscrawler.crawler.fetcher import Fetcher, build_session
from jscrawler.crawler.link_extractor import extract_js_links
from jscrawler.crawler.models import CrawlSummary
from jscrawler.crawler.sink import OutputSink
from jscrawler.exceptions import FetchError

__all__ = ("AsyncJSCrawler",)


class AsyncJSCrawler:
    """Fetches every URL once, at most ``config.threads`` at a time, and emits its JS links."""

    def __init__(self, config: CrawlerConfig, sink: OutputSink) -> None:
        self.config = config
        self.sink = sink
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None
        self.logger = logging.getLogger("jscrawler")
        self._gate = asyncio.Semaphore(config.threads)
        self._summary = CrawlSummary()

    async def __aenter__(self) -> AsyncJSCrawler:
        self.session = build_session(self.config)
        self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def run(self, urls: Sequence[str]) -> CrawlSummary:
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        self._summary = CrawlSummary()
        tasks: List[asyncio.Task[None]] = [asyncio.create_task(self._worker(u)) for u in urls]
        outcomes = await asyncio.gather(*tasks, return_exceptions=True)
        for url, outcome in zip(urls, outcomes):
            if isinstance(outcome, BaseException):
                self._summary.failed += 1
                self.logger.error("Unexpected failure for %s", url, exc_info=outcome)
        return self._summary

    async def _worker(self, url: str) -> None:
        async with self._gate:
            await self._process(url)

    async def _process(self, url: str) -> None:
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        url = url.strip()
        self.logger.info("Processing URL: %s", url)
        try:
            page = await self.fetcher.fetch(url)
        except FetchError as e:
            self._summary.failed += 1
            self.logger.warning("%s", e)
            return
        links = extract_js_links(page.url, page.content, self.config.complete)
        self.logger.debug("%d JS references on %s", len(links), page.url)
        for link in links:
            self.sink.emit(link)
        self._summary.processed += 1
        self._summary.references += len(links)
