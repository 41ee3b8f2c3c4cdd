"""
Lambda handler for GET /health
Provides a lightweight heartbeat/liveness response.
"""

from __future__ import annotations

from typing import Any, Dict

from eterna import __version__
from eterna.logutil import log_lambda_handler
from eterna.utils.http import LambdaResponse, json_response, translate_exceptions
from eterna.utils.time_utils import to_iso_z, utc_now


@translate_exceptions
@log_lambda_handler("GET /health")
def lambda_handler(event: Dict[str, Any], context: Any) -> LambdaResponse:
    return json_response(
        200,
        {
            "status": "ok",
            "checked_at": to_iso_z(utc_now()),
            "version": __version__,
            "message": "Eterna archive is reachable",
        },
    )
