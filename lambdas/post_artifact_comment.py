"""
POST /artifacts/{id}/comments
Leave a comment on an artifact.

Body: {"content": "<non-empty text>"}
"""

from __future__ import annotations

from typing import Any, Dict

from eterna.artifacts.comment import Comment
from eterna.logutil import clogger, log_lambda_handler
from eterna.storage import get_artifact_store, get_comment_store
from eterna.utils.http import (
    LambdaResponse,
    error_response,
    get_path_param,
    json_response,
    parse_json_body,
    translate_exceptions,
)


@translate_exceptions
@log_lambda_handler("POST /artifacts/{id}/comments", log_request_body=True)
def lambda_handler(event: Dict[str, Any], context: Any) -> LambdaResponse:
    # ------------------------------------------------------------------
    # Step 1 - Validate path and body
    # ------------------------------------------------------------------
    artifact_id = get_path_param(event, "id")
    if not artifact_id:
        return error_response(400, "Missing required path parameter: id", error_code="MISSING_ID")

    try:
        body = parse_json_body(event)
    except ValueError as exc:
        return error_response(400, str(exc), error_code="INVALID_JSON")

    content = body.get("content")
    if content is not None and not isinstance(content, str):
        return error_response(
            400, "Field 'content' must be a string", error_code="VALIDATION_ERROR", field="content"
        )

    # ------------------------------------------------------------------
    # Step 2 - The artifact must exist
    # ------------------------------------------------------------------
    get_artifact_store().get_by_id(artifact_id)

    # ------------------------------------------------------------------
    # Step 3 - Create the comment
    # ------------------------------------------------------------------
    try:
        comment = Comment.new(artifact_id, content or "")
    except ValueError as exc:
        return error_response(400, str(exc), error_code="VALIDATION_ERROR", field="content")

    comment = get_comment_store().create(comment)
    clogger.debug(f"[post_artifact_comment] {comment.comment_id} on {artifact_id}")
    return json_response(201, comment.to_dict())
