"""
Lambda handler for POST /comments/{id}/support
Increments a comment's support counter.
"""

from __future__ import annotations

from typing import Any, Dict

from eterna.logutil import log_lambda_handler
from eterna.storage import get_comment_store
from eterna.utils.http import (
    LambdaResponse,
    error_response,
    get_path_param,
    json_response,
    translate_exceptions,
)


@translate_exceptions
@log_lambda_handler("POST /comments/{id}/support")
def lambda_handler(event: Dict[str, Any], context: Any) -> LambdaResponse:
    comment_id = get_path_param(event, "id")
    if not comment_id:
        return error_response(400, "Missing required path parameter: id", error_code="MISSING_ID")

    comment = get_comment_store().add_support(comment_id)
    return json_response(200, comment.to_dict())
