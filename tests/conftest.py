# File: tests/conftest.py
from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import web

from jscrawler.config import CrawlerConfig
from jscrawler.logger import init_logging

#: seconds the "/slow" handler sleeps
SLOW_SLEEP: float = 1.0

INDEX_HTML = """<html><head>
<script src="/static/app.js"></script>
<script type="text/css" src="/static/style.js"></script>
</head><body>
<script>var cfg = 'config.json'; loadScript("lib/legacy.js");</script>
</body></html>"""

NESTED_HTML = """<html><body><div><section>
<script type="TEXT/JAVASCRIPT" src="deep.js"></script>
</section></div></body></html>"""


@pytest.fixture(autouse=True)
def reset_logging():
    """CliRunner swaps sys.stderr; re-bind the handler after every test."""
    yield
    init_logging()


@pytest.fixture()
def basic_config() -> CrawlerConfig:
    """Return a small valid CrawlerConfig for crawler tests."""
    return CrawlerConfig(timeout=2.0, threads=4)


async def _serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


@pytest_asyncio.fixture
async def js_site(unused_tcp_port: int) -> AsyncIterator[str]:
    app = web.Application()

    async def handle_index(_):
        return web.Response(text=INDEX_HTML, content_type="text/html")

    async def handle_nested(_):
        return web.Response(text=NESTED_HTML, content_type="text/html")

    async def handle_missing(_):
        return web.Response(status=404, text="not found")

    async def handle_slow(_):
        await asyncio.sleep(SLOW_SLEEP)
        return web.Response(text="<script src='late.js'></script>", content_type="text/html")

    app.router.add_get("/", handle_index)
    app.router.add_get("/docs/nested.html", handle_nested)
    app.router.add_get("/missing", handle_missing)
    app.router.add_get("/slow", handle_slow)

    async for url in _serve_app(app, unused_tcp_port):
        yield url
