from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config import get_settings

_INITIALIZED = False
_HANDLERS: list[logging.Handler] = []


def configure_logging(
    level: Optional[str] = None,
    *,
    log_dir: Optional[Path] = None,
    to_file: Optional[bool] = None,
) -> None:
    """Configure application-wide logging with stderr and rotating file output.

    Console output goes to stderr because stdout carries the stdio transport.
    """

    global _INITIALIZED
    if _INITIALIZED:
        return

    settings = get_settings().logging
    resolved_level = getattr(logging, (level or settings.level).upper(), logging.INFO)
    write_file = settings.to_file if to_file is None else to_file

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    log_file: Optional[Path] = None
    if write_file:
        directory = log_dir or settings.directory
        directory.mkdir(parents=True, exist_ok=True)
        log_file = directory / "google_calendar_mcp.log"
        handlers.append(RotatingFileHandler(str(log_file), maxBytes=1_000_000, backupCount=5, encoding="utf-8"))

    root = logging.getLogger()
    root.setLevel(resolved_level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
        _HANDLERS.append(handler)

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging configured. Output file: %s", log_file)


def reset_logging() -> None:
    """Detach handlers installed by :func:`configure_logging`."""

    global _INITIALIZED
    root = logging.getLogger()
    while _HANDLERS:
        handler = _HANDLERS.pop()
        root.removeHandler(handler)
        handler.close()
    _INITIALIZED = False
