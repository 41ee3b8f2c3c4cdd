"""
Lambda handler for GET /artifacts
Lists every artifact in the archive, newest first.
"""

from __future__ import annotations

from typing import Any, Dict

from eterna.logutil import clogger, log_lambda_handler
from eterna.storage import get_artifact_store
from eterna.utils.http import LambdaResponse, json_response, translate_exceptions


@translate_exceptions
@log_lambda_handler("GET /artifacts")
def lambda_handler(event: Dict[str, Any], context: Any) -> LambdaResponse:
    artifacts = get_artifact_store().list_all()
    clogger.debug(f"[get_artifacts] Returning {len(artifacts)} artifacts")
    return json_response(200, [artifact.to_dict() for artifact in artifacts])
