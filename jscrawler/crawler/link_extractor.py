# jscrawler/crawler/link_extractor.py
"""
JavaScript reference extraction for jscrawler.

Two independent scans feed one per-page result set:

* a textual scan over every quoted string containing ``.js``;
* a markup scan over ``<script src=...>`` elements.
"""
from __future__ import annotations

import re
from typing import Dict, Iterator, List

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag

from jscrawler.crawler.resolver import resolve_url
from jscrawler.exceptions import ExtractionError
from jscrawler.logger import logger

# '...something.js...' or "...something.js..."
_QUOTED_JS_RE = re.compile(r"""['"]([^'"]*\.js[^'"]*)['"]""")

_JS_TYPES = ("", "text/javascript")


def _quoted_references(content: str) -> Iterator[str]:
    for match in _QUOTED_JS_RE.finditer(content):
        link = match.group(1).strip("'\"")
        if ".json" in link:
            continue
        yield link


def _script_sources(content: str) -> Iterator[str]:
    """Yield ``src`` of every JavaScript ``<script>`` in document order."""
    try:
        soup = BeautifulSoup(content, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ExtractionError(str(exc)) from exc

    for tag in soup.find_all("script"):
        if not isinstance(tag, Tag):
            continue
        src = tag.get("src")
        if not isinstance(src, str) or not src:
            continue
        script_type = tag.get("type") or ""
        if not isinstance(script_type, str):
            continue
        if script_type.lower() in _JS_TYPES:
            yield src


def extract_js_links(base_url: str, content: str, complete: bool = False) -> List[str]:
    """
    Return deduplicated JavaScript references found in *content*.

    With ``complete`` every reference is resolved against *base_url* before
    deduplication.  Order: textual-scan hits first, then markup hits, each in
    the order they occur in the page.
    """
    links: Dict[str, bool] = {}

    def _add(link: str) -> None:
        links[resolve_url(base_url, link) if complete else link] = True

    for link in _quoted_references(content):
        _add(link)

    try:
        for src in _script_sources(content):
            _add(src)
    except ExtractionError as exc:
        logger.warning("Markup of %s could not be parsed, using text matches only: %s", base_url, exc)

    return list(links)


__all__ = ["extract_js_links"]
