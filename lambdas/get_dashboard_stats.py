"""
Lambda handler for GET /dashboard/stats
Aggregate view over the whole archive.
"""

from __future__ import annotations

from typing import Any, Dict

from eterna.logutil import log_lambda_handler
from eterna.scoring.stats import compute_dashboard_stats
from eterna.storage import get_artifact_store, get_comment_store
from eterna.utils.http import LambdaResponse, json_response, translate_exceptions


@translate_exceptions
@log_lambda_handler("GET /dashboard/stats", log_response_body=True)
def lambda_handler(event: Dict[str, Any], context: Any) -> LambdaResponse:
    artifacts = get_artifact_store().list_all()
    comment_counts = get_comment_store().count_by_artifact()
    stats = compute_dashboard_stats(artifacts, comment_counts)
    return json_response(200, stats.to_dict())
