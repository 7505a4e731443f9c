"""Request-scoped key-value pairs rendered in front of log messages."""
from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Iterator

_fields: contextvars.ContextVar[dict[str, object]] = contextvars.ContextVar(
    "compcalc_log_context", default={}
)


class LogContext:
    """Bind values such as the edited form field for the duration of a block."""

    @contextmanager
    def bound(self, **values: object) -> Iterator[None]:
        merged = {**_fields.get(), **{k: v for k, v in values.items() if v is not None}}
        token = _fields.set(merged)
        try:
            yield
        finally:
            _fields.reset(token)

    def as_dict(self) -> dict[str, object]:
        return dict(_fields.get())


class ContextFilter(logging.Filter):
    """Expose the bound values as ``record.context`` (``field=annualSqls ``)."""

    def filter(self, record: logging.LogRecord) -> bool:
        fields = _fields.get()
        record.context = "".join(f"{k}={v} " for k, v in fields.items())
        return True


log_context = LogContext()
