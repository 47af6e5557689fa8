from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .context import ContextFilter
from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    service: str = "fleet",
    level: str | int | None = None,
    console: Optional[bool] = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "fleet.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Configure the root logger for one CLI run.

    The console handler is off unless ``console`` (or ``LOG_CONSOLE=true``)
    asks for it; report output goes to stdout and should not be interleaved
    with log lines by default. When ``log_dir`` is given, records are written
    as JSON lines to a rotating file through a queue so that slow disks never
    stall the event loop.
    """
    global _listener
    shutdown_logging()
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    if console is None:
        console = os.getenv("LOG_CONSOLE", "false").strip().lower() == "true"
    if console:
        handler = logging.StreamHandler()
        console_level = os.getenv("LOG_CONSOLE_LEVEL", "")
        handler.setLevel(to_level(console_level) if console_level else lvl)
        handler.setFormatter(ConsoleFormatter())
        handler.addFilter(ContextFilter())
        root.addHandler(handler)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count)
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        queue_handler = QueueHandler(q)
        queue_handler.addFilter(ContextFilter())
        root.addHandler(queue_handler)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    if not root.handlers:
        root.addHandler(logging.NullHandler())
    logging.getLogger("httpx").setLevel(max(lvl, logging.WARNING))
    logging.getLogger(__name__).debug("logging configured", extra={"service": service})


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
