"""
HTTP response utilities for Lambda functions behind API Gateway.
Provides consistent JSON responses, error formatting, CORS headers and
request parsing helpers.
"""

from __future__ import annotations

import json
from functools import wraps
from typing import Any, Callable, Dict, List, Optional, TypedDict, TypeVar, Union

from eterna.errors import EternaError
from eterna.logutil import clogger

F = TypeVar("F", bound=Callable[..., Any])


# -----------------------------------------------------------------------------
# Typed response object for API Gateway
# -----------------------------------------------------------------------------
class LambdaResponse(TypedDict):
    statusCode: int
    headers: Dict[str, str]
    body: str


DEFAULT_HEADERS: Dict[str, str] = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Amz-Date, X-Api-Key",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
}


# -----------------------------------------------------------------------------
# Success Response
# -----------------------------------------------------------------------------
def json_response(
    status_code: int,
    body: Union[Dict[str, Any], List[Any]],
    headers: Optional[Dict[str, str]] = None,
) -> LambdaResponse:
    """
    Build a standardized JSON response object for API Gateway.
    """
    combined_headers = DEFAULT_HEADERS.copy()
    if headers:
        combined_headers.update(headers)

    return LambdaResponse(
        statusCode=status_code,
        headers=combined_headers,
        body=json.dumps(body),
    )


# -----------------------------------------------------------------------------
# Error Response
# -----------------------------------------------------------------------------
def error_response(
    status_code: int,
    message: str,
    error_code: Optional[str] = None,
    field: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> LambdaResponse:
    """
    Build a standardized error JSON response.

    Example body:
    {
        "error": "Field 'title' is required",
        "error_code": "VALIDATION_ERROR",
        "field": "title"
    }
    """
    payload: Dict[str, Any] = {"error": message}

    if error_code is not None:
        payload["error_code"] = error_code
    if field is not None:
        payload["field"] = field

    return json_response(status_code=status_code, body=payload, headers=headers)


# -----------------------------------------------------------------------------
# Request helpers
# -----------------------------------------------------------------------------
def parse_json_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Parse the request body as a JSON object.

    Raises:
        ValueError: if the body is not a JSON object
    """
    raw_body = event.get("body") or "{}"

    if isinstance(raw_body, dict):
        return raw_body

    if not isinstance(raw_body, str):
        raise ValueError("Request body must be a JSON object or JSON string.")

    try:
        body = json.loads(raw_body)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Request body must be valid JSON: {exc}") from exc

    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object.")
    return body


def get_path_param(event: Dict[str, Any], name: str) -> Optional[str]:
    """Return a non-empty path parameter or None."""
    value = (event.get("pathParameters") or {}).get(name)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


# -----------------------------------------------------------------------------
# Exception -> API Gateway Response Translator Decorator
# -----------------------------------------------------------------------------
def translate_exceptions(func: F) -> Callable[[Dict[str, Any], Any], LambdaResponse]:
    """
    Decorator for Lambda handlers that turns uncaught exceptions into
    standardized JSON error responses.

    Domain errors carry their own status code (404, 400, 409, 503);
    everything else becomes a 500.
    """

    @wraps(func)
    def wrapper(event: Dict[str, Any], context: Any) -> LambdaResponse:
        try:
            return func(event, context)

        except EternaError as e:
            clogger.warning(f"{func.__module__}: {type(e).__name__}: {e}")
            return error_response(e.status_code, str(e), error_code=e.error_code)

        except Exception as e:
            clogger.exception(f"Error in {func.__module__}: {e}")
            return error_response(
                500,
                f"Internal Server Error: {e}",
                error_code="INTERNAL_ERROR",
            )

    return wrapper
