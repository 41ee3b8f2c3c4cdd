"""
Comment storage over DynamoDB.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from eterna.artifacts.comment import Comment
from eterna.artifacts.types import ReactionKind
from eterna.errors import NotFoundError, StorageUnavailableError
from eterna.logutil import clogger
from eterna.settings import COMMENTS_TABLE
from eterna.storage.dynamo_utils import (
    increment_item_counter,
    is_conditional_check_failure,
    save_item_to_table,
    scan_table,
)

KEY_NAME = "comment_id"


class DynamoCommentStore:
    """Comments keyed by comment_id, filtered by artifact_id on read."""

    def __init__(self, table_name: str = COMMENTS_TABLE):
        self.table_name = table_name

    def _scan(self) -> List[Dict]:
        try:
            return scan_table(self.table_name)
        except (ClientError, BotoCoreError) as e:
            raise StorageUnavailableError(f"Failed to list comments: {e}") from e

    def list_for_artifact(self, artifact_id: str) -> List[Comment]:
        """Comments left on one artifact, newest first."""
        comments = [
            Comment.from_dict(item)
            for item in self._scan()
            if item.get("artifact_id") == artifact_id
        ]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments

    def count_by_artifact(self) -> Dict[str, int]:
        """Number of comments per artifact id, from a single scan."""
        return dict(Counter(str(item.get("artifact_id")) for item in self._scan()))

    def create(self, comment: Comment) -> Comment:
        try:
            save_item_to_table(
                self.table_name,
                comment.to_dict(),
                condition_expression=f"attribute_not_exists({KEY_NAME})",
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageUnavailableError(f"Failed to create comment: {e}") from e

        clogger.info(f"Created comment {comment.comment_id} on {comment.artifact_id}")
        return comment

    def _increment(self, comment_id: str, path: List[str]) -> Comment:
        try:
            attributes = increment_item_counter(
                self.table_name, {KEY_NAME: comment_id}, path
            )
        except ClientError as e:
            if is_conditional_check_failure(e):
                raise NotFoundError("comment", comment_id) from None
            raise StorageUnavailableError(
                f"Failed to update comment '{comment_id}': {e}"
            ) from e
        except BotoCoreError as e:
            raise StorageUnavailableError(
                f"Failed to update comment '{comment_id}': {e}"
            ) from e
        return Comment.from_dict(attributes)

    def add_support(self, comment_id: str) -> Comment:
        return self._increment(comment_id, ["support_count"])

    def add_reaction(self, comment_id: str, kind: ReactionKind) -> Comment:
        return self._increment(comment_id, ["reactions", kind.value])


# -------------------------------------------------------------------------------------
# Shared instance for Lambda handlers
# -------------------------------------------------------------------------------------
_comment_store: Optional[DynamoCommentStore] = None


def get_comment_store() -> DynamoCommentStore:
    global _comment_store
    if _comment_store is None:
        _comment_store = DynamoCommentStore()
    return _comment_store
