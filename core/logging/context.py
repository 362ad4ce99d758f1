"""Per-run log context (current player, run id)."""
from __future__ import annotations

import contextvars
import logging
from typing import Any, Dict

_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("tracker_log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


class context(object):
    """Bind values for the duration of a ``with`` block.

        with context(player="Glube#EUW"):
            ...  # every log line carries player=Glube#EUW
    """

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token = None

    def __enter__(self) -> Dict[str, Any]:
        current = dict(_context.get())
        current.update({k: v for k, v in self._values.items() if v is not None})
        self._token = _context.set(current)
        return current

    def __exit__(self, exc_type, exc, tb):
        if self._token is not None:
            _context.reset(self._token)
            self._token = None
        return False


class ContextFilter(logging.Filter):
    """Stamp the emitting task's context onto the record.

    Records handed to a ``QueueListener`` are formatted on another thread,
    where the context variable is empty.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        ctx = get_context()
        extra = getattr(record, "context", None)
        if isinstance(extra, dict):
            ctx.update(extra)
        record.context = ctx
        return True
