# jscrawler/crawler/sink.py
"""
Result sink: stdout plus an optional append-only file shared by all tasks.
"""
from __future__ import annotations

import threading
from pathlib import Path
from typing import IO, Optional, TextIO

import click

from jscrawler.exceptions import OutputOpenError
from jscrawler.logger import logger


class OutputSink:
    """Echoes every reference and appends it to *path* when one is given.

    The file is opened once (append/create, never truncated) and closed once;
    writes are serialized by a lock held for a single line.
    """

    def __init__(self, path: Optional[Path] = None, stream: Optional[TextIO] = None) -> None:
        self.path = path
        self.stream = stream
        self._file: Optional[IO[str]] = None
        self._lock = threading.Lock()

    def open(self) -> OutputSink:
        if self.path is None or self._file is not None:
            return self
        try:
            self._file = open(self.path, "a", encoding="utf-8")
        except OSError as exc:
            raise OutputOpenError(f"Error opening output file {self.path}: {exc}") from exc
        logger.debug("Appending results to %s", self.path)
        return self

    def close(self) -> None:
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    @property
    def closed(self) -> bool:
        return self._file is None

    def emit(self, reference: str) -> None:
        click.echo(reference, file=self.stream)
        with self._lock:
            if self._file is not None:
                self._file.write(reference + "\n")

    def __enter__(self) -> OutputSink:
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["OutputSink"]
