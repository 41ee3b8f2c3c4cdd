"""
Scheduled Lambda (EventBridge rate rule) that runs one decay sweep.

Each invocation is a single tick over every artifact. The returned report
lists which artifacts faded and which failed; a failed artifact never
stops the rest of the sweep.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict

from eterna.logutil import clogger, correlation_id
from eterna.scheduler import DecayScheduler
from eterna.scoring.decay import DecayConfig
from eterna.settings import DECAY_IDLE_THRESHOLD_HOURS
from eterna.storage import get_artifact_store


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    correlation_id.set(getattr(context, "aws_request_id", None) or f"decay-{uuid.uuid4()}")
    try:
        scheduler = DecayScheduler(
            get_artifact_store(),
            config=DecayConfig(idle_threshold_hours=DECAY_IDLE_THRESHOLD_HOURS),
        )
        report = scheduler.tick()

        if not report.ok:
            clogger.warning(
                f"[decay_sweep] Tick finished with problems: "
                f"listing_error={report.listing_error}, failed={len(report.failed)}"
            )
        return report.to_dict()
    finally:
        correlation_id.set(None)
