"""
POST /artifacts/{id}/support
Apply one support action (vote, stake or interact) to an artifact.

Body: {"action": "vote" | "stake" | "interact"}

Error codes:
  400 - missing id, malformed body, or an action outside the closed set
  404 - unknown artifact (NotFoundError)
  409 - the artifact kept changing under concurrent supports
  503 - the store is unavailable; nothing was written
"""

from __future__ import annotations

from typing import Any, Dict

from eterna.logutil import clogger, log_lambda_handler
from eterna.scoring.support import parse_support_action
from eterna.services import support_artifact
from eterna.storage import get_artifact_store
from eterna.utils.http import (
    LambdaResponse,
    error_response,
    get_path_param,
    json_response,
    parse_json_body,
    translate_exceptions,
)


@translate_exceptions
@log_lambda_handler("POST /artifacts/{id}/support", log_request_body=True)
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

    # InvalidActionError -> 400 via translate_exceptions
    action = parse_support_action(body.get("action"))
    clogger.debug(f"[post_artifact_support] artifact_id={artifact_id}, action={action}")

    # ------------------------------------------------------------------
    # Step 2 - Resolve, transition and persist
    # ------------------------------------------------------------------
    artifact = support_artifact(get_artifact_store(), artifact_id, action)
    return json_response(200, artifact.to_dict())
