"""Fetch, extract and emit pipeline for jscrawler."""
from jscrawler.crawler.crawler import AsyncJSCrawler
from jscrawler.crawler.link_extractor import extract_js_links
from jscrawler.crawler.resolver import resolve_url
from jscrawler.crawler.sink import OutputSink

__all__ = ["AsyncJSCrawler", "OutputSink", "extract_js_links", "resolve_url"]
