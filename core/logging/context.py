from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator

# asyncio tasks copy the current context when created, so values bound before
# the dispatcher launches its tasks show up in every per-host log line.
_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("fleet_log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


def bind(**values: Any) -> None:
    current = dict(_context.get())
    current.update({k: v for k, v in values.items() if v is not None})
    _context.set(current)


def unbind(*keys: str) -> None:
    current = dict(_context.get())
    for k in keys:
        current.pop(k, None)
    _context.set(current)


@contextmanager
def log_context(**values: Any) -> Iterator[Dict[str, Any]]:
    """Bind values for the duration of a ``with`` block."""
    current = dict(_context.get())
    current.update({k: v for k, v in values.items() if v is not None})
    token = _context.set(current)
    try:
        yield current
    finally:
        _context.reset(token)


class ContextFilter(logging.Filter):
    """Copy the bound context onto the record in the emitting task.

    Records handed to a ``QueueListener`` are formatted on another thread where
    the caller's context variables are not visible.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = get_context()
        return True
