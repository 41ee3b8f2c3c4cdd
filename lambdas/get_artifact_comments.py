"""
Lambda handler for GET /artifacts/{id}/comments
Lists the comments on one artifact, newest first.
"""

from __future__ import annotations

from typing import Any, Dict

from eterna.logutil import log_lambda_handler
from eterna.storage import get_artifact_store, get_comment_store
from eterna.utils.http import (
    LambdaResponse,
    error_response,
    get_path_param,
    json_response,
    translate_exceptions,
)


@translate_exceptions
@log_lambda_handler("GET /artifacts/{id}/comments")
def lambda_handler(event: Dict[str, Any], context: Any) -> LambdaResponse:
    artifact_id = get_path_param(event, "id")
    if not artifact_id:
        return error_response(400, "Missing required path parameter: id", error_code="MISSING_ID")

    # Unknown artifact is a 404, not an empty list
    get_artifact_store().get_by_id(artifact_id)

    comments = get_comment_store().list_for_artifact(artifact_id)
    return json_response(200, [comment.to_dict() for comment in comments])
