"""
Error hierarchy for jscrawler.

Fatal errors (:class:`InputError`, :class:`OutputOpenError`) abort the whole run
before any request is sent.  :class:`FetchError` and :class:`ExtractionError`
are scoped to a single page and never leave the task that processes it.
"""
from __future__ import annotations

from typing import Sequence

__all__: Sequence[str] = (
    "JSCrawlerError",
    "InputError",
    "OutputOpenError",
    "ExtractionError",
    "FetchError",
    "FetchTimeoutError",
    "FetchConnectionError",
    "NonSuccessStatus",
    "BodyReadError",
    "OtherNetworkError",
)


class JSCrawlerError(Exception):
    """Base class for all jscrawler errors."""


class InputError(JSCrawlerError):
    """The URL list could not be read."""


class OutputOpenError(JSCrawlerError):
    """The shared output file could not be opened."""


class ExtractionError(JSCrawlerError):
    """Markup of a page could not be parsed."""


class FetchError(JSCrawlerError):
    """A single page could not be retrieved."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class FetchTimeoutError(FetchError):
    """The request did not complete within the configured timeout."""


class FetchConnectionError(FetchError):
    """The remote host could not be reached."""


class NonSuccessStatus(FetchError):
    """The server answered with a status other than 200."""

    def __init__(self, url: str, status: int) -> None:
        super().__init__(url, f"HTTP Error {status}: {url}")
        self.status = status


class BodyReadError(FetchError):
    """The response arrived but its body could not be read."""


class OtherNetworkError(FetchError):
    """Any other client-side failure (invalid URL, protocol error, ...)."""
