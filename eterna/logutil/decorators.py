"""
Lambda handler logging decorator.

Logs a one-line request summary and a one-line response summary for every
invocation, tracks duration, and binds a correlation id (the AWS request id
when available) for the lifetime of the call.
"""

import json
import time
import uuid
from functools import wraps
from typing import Any, Callable, Dict, TypeVar

from eterna.logutil.config import logger
from eterna.logutil.context import clogger, correlation_id, request_start_time

F = TypeVar("F", bound=Callable[..., Any])

__all__ = ["log_lambda_handler"]

_DEBUG_LEVEL_NO = 10


def _debug_enabled() -> bool:
    return logger._core.min_level <= _DEBUG_LEVEL_NO  # type: ignore[attr-defined]


def _elapsed_ms() -> int:
    start = request_start_time.get()
    return int((time.time() - (start or time.time())) * 1000)


def log_lambda_handler(
    endpoint_name: str,
    log_request_body: bool = False,
    log_response_body: bool = False,
) -> Callable[[F], F]:
    """
    Request/response logging decorator for Lambda handlers.

    Args:
        endpoint_name: Human-readable endpoint name (e.g., "GET /artifacts/{id}")
        log_request_body: Log the parsed request body at DEBUG level
        log_response_body: Log the response body at DEBUG level

    Usage:
        @translate_exceptions
        @log_lambda_handler("POST /artifacts")
        def lambda_handler(event, context):
            ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(event: Dict[str, Any], context: Any, **kwargs: Any) -> Dict[str, Any]:
            cid = getattr(context, "aws_request_id", None) or str(uuid.uuid4())
            correlation_id.set(cid)
            request_start_time.set(time.time())

            http_method = event.get("httpMethod", "UNKNOWN")
            path = event.get("path", "UNKNOWN")

            clogger.info(
                f"Incoming request: {http_method} {path}",
                extra={
                    "event_type": "request",
                    "endpoint": endpoint_name,
                    "method": http_method,
                    "path": path,
                },
            )

            if _debug_enabled():
                details: Dict[str, Any] = {
                    "event_type": "request_details",
                    "endpoint": endpoint_name,
                    "query_params": event.get("queryStringParameters") or {},
                    "path_params": event.get("pathParameters") or {},
                }
                if log_request_body:
                    raw_body = event.get("body") or ""
                    try:
                        details["body"] = json.loads(raw_body) if raw_body else {}
                    except (TypeError, json.JSONDecodeError):
                        details["body"] = "[NON_JSON_BODY]"
                clogger.debug(f"Request details: {http_method} {path}", extra=details)

            try:
                result = func(event, context, **kwargs)

                status_code = result.get("statusCode", 500)
                duration_ms = _elapsed_ms()
                log_func = clogger.info if 200 <= status_code < 400 else clogger.warning
                log_func(
                    f"Request completed: {http_method} {path} -> {status_code} ({duration_ms}ms)",
                    extra={
                        "event_type": "response",
                        "endpoint": endpoint_name,
                        "status_code": status_code,
                        "duration_ms": duration_ms,
                    },
                )

                if log_response_body and _debug_enabled():
                    clogger.debug(
                        f"Response details: {status_code}",
                        extra={"event_type": "response_details", "body": result.get("body")},
                    )

                return result

            except Exception as e:
                clogger.exception(
                    f"Request failed: {http_method} {path}",
                    extra={
                        "event_type": "error",
                        "endpoint": endpoint_name,
                        "duration_ms": _elapsed_ms(),
                        "error_type": type(e).__name__,
                    },
                )
                raise

            finally:
                correlation_id.set(None)
                request_start_time.set(None)

        return wrapper  # type: ignore[return-value]

    return decorator
