# File: jscrawler/engine.py
"""jscrawler.engine: сборка sink и краулера для одного запуска."""

from __future__ import annotations

import time
from typing import Optional, Sequence, TextIO

from jscrawler.config import CrawlerConfig
from jscrawler.crawler.crawler import AsyncJSCrawler
from jscrawler.crawler.models import CrawlSummary
from jscrawler.crawler.sink import OutputSink
from jscrawler.logger import logger

__all__ = ["start_crawl"]


async def start_crawl(
    urls: Sequence[str], config: CrawlerConfig, stream: Optional[TextIO] = None
) -> CrawlSummary:
    """
    Открывает файл вывода (ошибка открытия прерывает запуск до первого запроса),
    обрабатывает все URL и закрывает файл ровно один раз.
    """
    start = time.monotonic()
    with OutputSink(config.output, stream=stream) as sink:
        async with AsyncJSCrawler(config, sink) as crawler:
            summary = await crawler.run(urls)
    duration = time.monotonic() - start
    logger.info(
        "Finished: %d/%d pages, %d failed, %d references in %.2f s",
        summary.processed,
        len(urls),
        summary.failed,
        summary.references,
        duration,
    )
    return summary
