"""
POST /artifacts
Preserve a new artifact.

High-level behavior:
  1. Validate the body: title, type, description and image URL are required
     strings; tags is an optional list of strings.
  2. Build the artifact with its starting scores (fade 0, no support,
     extinction risk drawn from [20, 100]).
  3. Save it, then attach a generated narrative. A narrative failure never
     fails the request; the artifact is already preserved at that point.
"""

from __future__ import annotations

from typing import Any, Dict

from eterna.artifacts.creation import new_artifact, parse_artifact_input
from eterna.errors import EternaError, ValidationError
from eterna.logutil import clogger, log_lambda_handler
from eterna.narrative import generate_narrative
from eterna.storage import get_artifact_store
from eterna.utils.http import (
    LambdaResponse,
    error_response,
    json_response,
    parse_json_body,
    translate_exceptions,
)


@translate_exceptions
@log_lambda_handler("POST /artifacts", log_request_body=True)
def lambda_handler(event: Dict[str, Any], context: Any) -> LambdaResponse:
    # ------------------------------------------------------------------
    # Step 1 - Parse and validate request body
    # ------------------------------------------------------------------
    try:
        body = parse_json_body(event)
        fields = parse_artifact_input(body)
    except ValidationError as exc:
        return error_response(400, str(exc), error_code=exc.error_code, field=exc.field)
    except ValueError as exc:
        clogger.warning(f"[post_artifact] Invalid JSON body: {exc}")
        return error_response(400, str(exc), error_code="INVALID_JSON")

    # ------------------------------------------------------------------
    # Step 2 - Create and save the artifact
    # ------------------------------------------------------------------
    store = get_artifact_store()
    artifact = store.create(new_artifact(**fields))
    clogger.info(
        f"[post_artifact] Preserved '{artifact.title}' as {artifact.artifact_id} "
        f"(risk={artifact.extinction_risk}, rarity={artifact.rarity})"
    )

    # ------------------------------------------------------------------
    # Step 3 - Attach narrative (best effort)
    # ------------------------------------------------------------------
    narrative = generate_narrative(artifact.title, artifact.artifact_type, artifact.description)
    try:
        artifact = store.update(artifact.artifact_id, {"ai_narrative": narrative})
    except EternaError as exc:
        clogger.error(
            f"[post_artifact] Failed to attach narrative to {artifact.artifact_id}: {exc}"
        )

    return json_response(201, artifact.to_dict())
