"""Logging setup for **jscrawler**.

Diagnostics go to *stderr* (stdout carries nothing but extracted references)
and, with ``--log-file``, to a rotating log file as well::

    from jscrawler.logger import logger
    logger.info("Processing URL: %s", url)
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional

_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "jscrawler"


def _file_handler(file: Path | str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(_FORMAT))
    return handler


def init_logging(verbose: bool = False, log_file: Optional[Path | str] = None) -> logging.Logger:
    """Rebuild the project logger's handlers.

    ``verbose`` selects ``DEBUG``; otherwise only errors are reported.
    The file, when given, receives the same records as stderr.
    """
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(logging.DEBUG if verbose else logging.ERROR)
    for handler in lg.handlers:
        handler.close()
    lg.handlers.clear()

    stderr = logging.StreamHandler(sys.stderr)
    stderr.setFormatter(logging.Formatter(_FORMAT))
    lg.addHandler(stderr)
    if log_file is not None:
        lg.addHandler(_file_handler(log_file))

    lg.propagate = False
    return lg


logger: logging.Logger = init_logging()

__all__ = ["logger", "init_logging"]
