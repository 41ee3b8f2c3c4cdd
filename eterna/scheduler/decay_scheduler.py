"""
Decay scheduler: a periodic sweep that fades every artifact nobody has
supported recently.

The scheduler is an owned object. Its period is injected, start() and stop()
bound its lifetime, and tick() can be called directly to run exactly one
sweep (this is what the scheduled Lambda and the tests do).

Each sweep reads fresh state from the store and writes only fade_level, only
for artifacts whose fade actually changes. A failure on one artifact is
logged and the sweep moves on; a failure listing artifacts ends that sweep
only. Overlapping sweeps are allowed: decay only ever pushes fade upward, so
a stale write can cost at most one sweep's worth of fade.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from eterna.logutil import BatchOperationLogger, clogger, correlation_id
from eterna.scoring.decay import DEFAULT_DECAY_CONFIG, DecayConfig, calculate_decay
from eterna.settings import DECAY_INTERVAL_SECONDS
from eterna.storage.artifact_store import ArtifactStore
from eterna.utils.time_utils import to_iso_z, utc_now

JOB_ID = "decay-sweep"

# Sweeps allowed to run at once when storage is slow
MAX_OVERLAPPING_TICKS = 3


@dataclass
class TickReport:
    """Outcome of one decay sweep."""
    ran_at: datetime
    scanned: int = 0
    updated: List[str] = field(default_factory=list)
    unchanged: int = 0
    failed: Dict[str, str] = field(default_factory=dict)
    listing_error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.listing_error is None and not self.failed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ran_at": to_iso_z(self.ran_at),
            "scanned": self.scanned,
            "updated": list(self.updated),
            "unchanged": self.unchanged,
            "failed": dict(self.failed),
            "listing_error": self.listing_error,
        }


class DecayScheduler:
    """
    Owns the recurring decay sweep over an ArtifactStore.

    Usage:
        scheduler = DecayScheduler(DynamoArtifactStore(), interval_seconds=300)
        scheduler.start()
        ...
        scheduler.stop()
    """

    def __init__(
        self,
        store: ArtifactStore,
        interval_seconds: float = DECAY_INTERVAL_SECONDS,
        config: DecayConfig = DEFAULT_DECAY_CONFIG,
        clock: Callable[[], datetime] = utc_now,
    ):
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds}")

        self.store = store
        self.interval_seconds = interval_seconds
        self.config = config
        self._clock = clock
        self._scheduler: Optional[BackgroundScheduler] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def start(self) -> None:
        """Begin sweeping every interval_seconds. No-op if already running."""
        if self.running:
            return

        scheduler = BackgroundScheduler(timezone=timezone.utc)
        scheduler.add_job(
            self._run_scheduled_tick,
            trigger=IntervalTrigger(seconds=self.interval_seconds),
            id=JOB_ID,
            max_instances=MAX_OVERLAPPING_TICKS,
            coalesce=True,
        )
        scheduler.start()
        self._scheduler = scheduler
        clogger.info(f"Decay scheduler started (every {self.interval_seconds}s)")

    def stop(self, wait: bool = False) -> None:
        """Stop scheduling sweeps. In-flight sweeps are not drained unless wait=True."""
        if self._scheduler is None:
            return
        if self._scheduler.running:
            self._scheduler.shutdown(wait=wait)
        self._scheduler = None
        clogger.info("Decay scheduler stopped")

    def _run_scheduled_tick(self) -> None:
        correlation_id.set(f"decay-{uuid.uuid4()}")
        try:
            self.tick()
        except Exception as e:
            # The next interval still fires; a broken sweep must not kill the job
            clogger.exception(f"Decay sweep crashed: {e}")
        finally:
            correlation_id.set(None)

    # ------------------------------------------------------------------
    # One sweep
    # ------------------------------------------------------------------
    def tick(self, now: Optional[datetime] = None) -> TickReport:
        """Run exactly one decay sweep and report what it did."""
        now = now or self._clock()
        report = TickReport(ran_at=now)

        try:
            artifacts = self.store.list_all()
        except Exception as e:
            clogger.error(f"Decay sweep could not list artifacts: {e}")
            report.listing_error = str(e)
            return report

        report.scanned = len(artifacts)

        with BatchOperationLogger("decay_tick", total=len(artifacts)) as batch:
            for artifact in artifacts:
                result = calculate_decay(artifact, now, self.config)

                if not result.decayed:
                    report.unchanged += 1
                    batch.log_item(
                        artifact.artifact_id, status="unchanged", reason=result.skip_reason
                    )
                    continue

                try:
                    self.store.update(
                        artifact.artifact_id, {"fade_level": result.new_fade_level}
                    )
                except Exception as e:
                    report.failed[artifact.artifact_id] = str(e)
                    batch.log_item(
                        artifact.artifact_id,
                        status=BatchOperationLogger.FAILURE_STATUS,
                        error=str(e),
                    )
                    continue

                report.updated.append(artifact.artifact_id)
                batch.log_item(
                    artifact.artifact_id,
                    status="updated",
                    old_fade_level=result.old_fade_level,
                    new_fade_level=result.new_fade_level,
                )

        return report
