"""
Lambda handler for GET /artifacts/{id}
Returns one artifact, or 404 when the id is unknown.
"""

from __future__ import annotations

from typing import Any, Dict

from eterna.logutil import log_lambda_handler
from eterna.storage import get_artifact_store
from eterna.utils.http import (
    LambdaResponse,
    error_response,
    get_path_param,
    json_response,
    translate_exceptions,
)


@translate_exceptions
@log_lambda_handler("GET /artifacts/{id}")
def lambda_handler(event: Dict[str, Any], context: Any) -> LambdaResponse:
    artifact_id = get_path_param(event, "id")
    if not artifact_id:
        return error_response(400, "Missing required path parameter: id", error_code="MISSING_ID")

    # NotFoundError -> 404 via translate_exceptions
    artifact = get_artifact_store().get_by_id(artifact_id)
    return json_response(200, artifact.to_dict())
