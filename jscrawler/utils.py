"""jscrawler.utils: чтение списка URL из текстового потока."""

from __future__ import annotations

from typing import List, Sequence, TextIO

from jscrawler.exceptions import InputError
from jscrawler.logger import logger

__all__: Sequence[str] = ("read_urls",)


def read_urls(stream: TextIO) -> List[str]:
    """Читает URL построчно до конца потока, пропуская пустые строки.

    Дубликаты сохраняются: каждый URL обрабатывается независимо.
    """
    try:
        urls = [line.strip() for line in stream if line.strip()]
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read URLs: {exc}") from exc
    logger.debug("Loaded %d URLs from input", len(urls))
    return urls
