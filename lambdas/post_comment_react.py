"""
POST /comments/{id}/react
Add one reaction to a comment.

Body: {"emoji": "<one of the supported reactions>"}
Unknown reactions are rejected with 400 before anything is written.
"""

from __future__ import annotations

from typing import Any, Dict

from eterna.artifacts.comment import parse_reaction
from eterna.logutil import log_lambda_handler
from eterna.storage import get_comment_store
from eterna.utils.http import (
    LambdaResponse,
    error_response,
    get_path_param,
    json_response,
    parse_json_body,
    translate_exceptions,
)


@translate_exceptions
@log_lambda_handler("POST /comments/{id}/react", log_request_body=True)
def lambda_handler(event: Dict[str, Any], context: Any) -> LambdaResponse:
    comment_id = get_path_param(event, "id")
    if not comment_id:
        return error_response(400, "Missing required path parameter: id", error_code="MISSING_ID")

    try:
        body = parse_json_body(event)
    except ValueError as exc:
        return error_response(400, str(exc), error_code="INVALID_JSON")

    # InvalidReactionError -> 400 via translate_exceptions
    kind = parse_reaction(body.get("emoji"))

    comment = get_comment_store().add_reaction(comment_id, kind)
    return json_response(200, comment.to_dict())
