"""
Contextual logging with correlation ID and timing support.

Every Lambda invocation and every decay tick gets a correlation id so that
all log lines belonging to one request, or one sweep, can be filtered
together in CloudWatch. Elapsed milliseconds since the start of that unit of
work are attached to each record as well.
"""

import time
from contextvars import ContextVar
from typing import Any, Dict, Optional

from eterna.logutil.config import logger

correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
request_start_time: ContextVar[Optional[float]] = ContextVar(
    "request_start_time", default=None
)

__all__ = ["correlation_id", "request_start_time", "ContextualLogger", "clogger"]


class ContextualLogger:
    """
    Wrapper around the loguru logger that injects correlation_id and timing.
    """

    def _enrich_message(self, msg: str) -> str:
        cid = correlation_id.get()
        if cid:
            return f"[{cid[:8]}] {msg}"
        return msg

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        ctx = extra.copy() if extra else {}
        cid = correlation_id.get()
        start = request_start_time.get()

        if cid:
            ctx["correlation_id"] = cid
        if start:
            ctx["elapsed_ms"] = int((time.time() - start) * 1000)

        return ctx

    def _log(
        self, level: str, msg: str, extra: Optional[Dict[str, Any]], **kwargs: Any
    ) -> None:
        # depth=2 reports the caller of info()/debug()/... rather than this helper
        bound = logger.bind(**self._add_context(extra)).opt(depth=2)
        getattr(bound, level)(self._enrich_message(msg), **kwargs)

    def info(self, msg: str, extra: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None:
        self._log("info", msg, extra, **kwargs)

    def debug(self, msg: str, extra: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None:
        self._log("debug", msg, extra, **kwargs)

    def warning(self, msg: str, extra: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None:
        self._log("warning", msg, extra, **kwargs)

    def error(self, msg: str, extra: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None:
        self._log("error", msg, extra, **kwargs)

    def exception(
        self, msg: str, extra: Optional[Dict[str, Any]] = None, **kwargs: Any
    ) -> None:
        self._log("exception", msg, extra, **kwargs)


clogger = ContextualLogger()
