"""
Support path: resolve an artifact, apply one support action and persist the
four scoring fields as a single conditional write.

The write is guarded on the support_count that was read. If another support
lands in between, the condition fails, nothing is written, and the
transition is recomputed from fresh state.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from eterna.artifacts.artifact import Artifact
from eterna.artifacts.types import SupportAction
from eterna.errors import ConcurrentUpdateError
from eterna.logutil import clogger, log_operation
from eterna.scoring.support import apply_support
from eterna.settings import SUPPORT_MAX_RETRIES
from eterna.storage.artifact_store import ArtifactStore
from eterna.utils.time_utils import utc_now


def support_artifact(
    store: ArtifactStore,
    artifact_id: str,
    action: SupportAction,
    now: Optional[datetime] = None,
    max_retries: int = SUPPORT_MAX_RETRIES,
) -> Artifact:
    """
    Apply a validated support action to an artifact.

    Raises:
        NotFoundError: the artifact does not exist
        StorageUnavailableError: the store could not be read or written
        ConcurrentUpdateError: every attempt lost a race with another writer
    """
    attempts = max(1, max_retries + 1)

    with log_operation("support_artifact", artifact_id=artifact_id, action=action):
        for attempt in range(1, attempts + 1):
            artifact = store.get_by_id(artifact_id)
            update = apply_support(artifact, action, now or utc_now())
            try:
                updated = store.update(
                    artifact_id,
                    update.as_fields(),
                    expected={"support_count": artifact.support_count},
                )
            except ConcurrentUpdateError:
                clogger.warning(
                    f"Support on {artifact_id} raced another writer "
                    f"(attempt {attempt}/{attempts})"
                )
                continue

            clogger.info(
                f"Artifact {artifact_id} supported via {action}: "
                f"fade {artifact.fade_level}->{updated.fade_level}, "
                f"risk {artifact.extinction_risk}->{updated.extinction_risk}, "
                f"supports {updated.support_count}"
            )
            return updated

        raise ConcurrentUpdateError(
            f"Artifact '{artifact_id}' kept changing; support was not applied"
        )
