# jscrawler/crawler/fetcher.py
"""
Fetcher module: a single GET per page, no retries.

Timeout and TLS settings live on the shared :class:`aiohttp.ClientSession`
(see :func:`build_session`); failures are classified into
:class:`~jscrawler.exceptions.FetchError` subclasses.
"""
from __future__ import annotations

import asyncio

from aiohttp import (
    ClientConnectionError,
    ClientError,
    ClientResponse,
    ClientSession,
    ClientTimeout,
    TCPConnector,
)

from jscrawler.config import CrawlerConfig
from jscrawler.crawler.models import PageData
from jscrawler.exceptions import (
    BodyReadError,
    FetchConnectionError,
    FetchTimeoutError,
    NonSuccessStatus,
    OtherNetworkError,
)


def build_session(config: CrawlerConfig) -> ClientSession:
    """Session with a per-request timeout and certificate checks turned off."""
    return ClientSession(
        timeout=ClientTimeout(total=config.timeout),
        connector=TCPConnector(ssl=False, limit=config.threads),
        raise_for_status=False,
    )


class Fetcher:
    """Retrieves page bodies through a shared session."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> PageData:
        """
        GET *url* and return its decoded body.

        Raises a :class:`~jscrawler.exceptions.FetchError` subclass on any
        failure; status codes other than 200 count as failures.
        """
        try:
            async with self.session.get(url) as resp:
                if resp.status != 200:
                    raise NonSuccessStatus(url, resp.status)
                return PageData(url, await self._read_body(url, resp))
        except asyncio.TimeoutError as exc:
            raise FetchTimeoutError(url, f"Timeout occurred while fetching: {url}") from exc
        except ClientConnectionError as exc:
            raise FetchConnectionError(url, f"A connection error occurred: {url}: {exc}") from exc
        except (ClientError, ValueError) as exc:
            raise OtherNetworkError(url, f"An error occurred: {url}: {exc!r}") from exc

    @staticmethod
    async def _read_body(url: str, resp: ClientResponse) -> str:
        try:
            body = await resp.read()
        except (ClientError, asyncio.TimeoutError) as exc:
            raise BodyReadError(url, f"Error reading response body: {exc!r}") from exc
        try:
            return body.decode(resp.charset or "utf-8", errors="replace")
        except LookupError:
            return body.decode("utf-8", errors="replace")


__all__ = ["Fetcher", "build_session"]
