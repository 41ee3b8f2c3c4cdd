"""
Artifact storage: the narrow get/list/update interface the scoring engine
depends on, and its DynamoDB implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from botocore.exceptions import BotoCoreError, ClientError

from eterna.artifacts.artifact import Artifact, validate_update_fields
from eterna.errors import ConcurrentUpdateError, NotFoundError, StorageUnavailableError
from eterna.logutil import clogger
from eterna.settings import ARTIFACTS_TABLE
from eterna.storage.dynamo_utils import (
    is_conditional_check_failure,
    load_item_from_key,
    save_item_to_table,
    scan_table,
    update_item_fields,
)
from eterna.utils.time_utils import to_iso_z

KEY_NAME = "artifact_id"


class ArtifactStore(ABC):
    """
    The only way the engine reads or writes artifacts.

    Implementations never cache: every call reflects the store's current state.
    """

    @abstractmethod
    def list_all(self) -> List[Artifact]:
        """Every stored artifact, newest first."""

    @abstractmethod
    def get_by_id(self, artifact_id: str) -> Artifact:
        """
        Raises:
            NotFoundError: if no artifact has this id
        """

    @abstractmethod
    def update(
        self,
        artifact_id: str,
        fields: Mapping[str, Any],
        expected: Optional[Mapping[str, Any]] = None,
    ) -> Artifact:
        """
        Write `fields` atomically and return the updated artifact.

        Args:
            expected: field values that must still hold for the write to
                happen (optimistic concurrency)

        Raises:
            NotFoundError: if no artifact has this id
            ConcurrentUpdateError: if `expected` no longer holds
        """

    @abstractmethod
    def create(self, artifact: Artifact) -> Artifact:
        """Insert a brand-new artifact."""


def _to_storage_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return to_iso_z(value)
    return value


class DynamoArtifactStore(ArtifactStore):
    """
    ArtifactStore over a DynamoDB table keyed by artifact_id.

    Every botocore failure surfaces as StorageUnavailableError.
    """

    def __init__(self, table_name: str = ARTIFACTS_TABLE):
        self.table_name = table_name

    def list_all(self) -> List[Artifact]:
        try:
            items = scan_table(self.table_name)
        except (ClientError, BotoCoreError) as e:
            raise StorageUnavailableError(f"Failed to list artifacts: {e}") from e

        artifacts: List[Artifact] = []
        for item in items:
            try:
                artifacts.append(Artifact.from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                clogger.warning(
                    f"Skipping malformed artifact {item.get(KEY_NAME)}: {e}"
                )

        artifacts.sort(key=lambda a: a.created_at, reverse=True)
        clogger.info(f"Loaded {len(artifacts)} artifacts from {self.table_name}")
        return artifacts

    def get_by_id(self, artifact_id: str) -> Artifact:
        try:
            item = load_item_from_key(self.table_name, {KEY_NAME: artifact_id})
        except (ClientError, BotoCoreError) as e:
            raise StorageUnavailableError(
                f"Failed to load artifact '{artifact_id}': {e}"
            ) from e

        if not item:
            raise NotFoundError("artifact", artifact_id)
        return Artifact.from_dict(item)

    def update(
        self,
        artifact_id: str,
        fields: Mapping[str, Any],
        expected: Optional[Mapping[str, Any]] = None,
    ) -> Artifact:
        validate_update_fields(fields)

        condition = "attribute_exists(#key)"
        names: Dict[str, str] = {"#key": KEY_NAME}
        values: Dict[str, Any] = {}
        for i, (name, value) in enumerate((expected or {}).items()):
            names[f"#e{i}"] = name
            values[f":e{i}"] = _to_storage_value(value)
            condition += f" AND #e{i} = :e{i}"

        try:
            attributes = update_item_fields(
                self.table_name,
                {KEY_NAME: artifact_id},
                {name: _to_storage_value(value) for name, value in fields.items()},
                condition_expression=condition,
                condition_names=names,
                condition_values=values or None,
            )
        except ClientError as e:
            if not is_conditional_check_failure(e):
                raise StorageUnavailableError(
                    f"Failed to update artifact '{artifact_id}': {e}"
                ) from e
            if not expected:
                raise NotFoundError("artifact", artifact_id) from None
            # Tell a vanished artifact apart from a lost race
            self.get_by_id(artifact_id)
            raise ConcurrentUpdateError(
                f"Artifact '{artifact_id}' changed while it was being updated"
            ) from None
        except BotoCoreError as e:
            raise StorageUnavailableError(
                f"Failed to update artifact '{artifact_id}': {e}"
            ) from e

        return Artifact.from_dict(attributes)

    def create(self, artifact: Artifact) -> Artifact:
        artifact.validate()
        try:
            save_item_to_table(
                self.table_name,
                artifact.to_dict(),
                condition_expression=f"attribute_not_exists({KEY_NAME})",
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageUnavailableError(
                f"Failed to create artifact '{artifact.artifact_id}': {e}"
            ) from e

        clogger.info(f"Created artifact {artifact.artifact_id} ('{artifact.title}')")
        return artifact


# -------------------------------------------------------------------------------------
# Shared instance for Lambda handlers
# -------------------------------------------------------------------------------------
_artifact_store: Optional[ArtifactStore] = None


def get_artifact_store() -> ArtifactStore:
    """Returns the process-wide DynamoDB artifact store."""
    global _artifact_store
    if _artifact_store is None:
        _artifact_store = DynamoArtifactStore()
    return _artifact_store
