"""
Long-running decay worker.

Hosts the DecayScheduler in-process for deployments that run outside Lambda:

    python -m eterna.worker
"""

from __future__ import annotations

import signal
import sys
import threading
from typing import Any

from eterna.logutil import clogger
from eterna.scheduler import DecayScheduler
from eterna.scoring.decay import DecayConfig
from eterna.settings import DECAY_IDLE_THRESHOLD_HOURS, DECAY_INTERVAL_SECONDS
from eterna.storage import DynamoArtifactStore


def main() -> int:
    scheduler = DecayScheduler(
        DynamoArtifactStore(),
        interval_seconds=DECAY_INTERVAL_SECONDS,
        config=DecayConfig(idle_threshold_hours=DECAY_IDLE_THRESHOLD_HOURS),
    )
    stopping = threading.Event()

    def _request_stop(signum: int, frame: Any) -> None:
        clogger.info(f"Received signal {signum}, stopping decay worker")
        stopping.set()

    signal.signal(signal.SIGTERM, _request_stop)

    scheduler.start()
    try:
        stopping.wait()
    except (KeyboardInterrupt, SystemExit):
        pass
    finally:
        scheduler.stop()

    return 0


if __name__ == "__main__":
    sys.exit(main())
