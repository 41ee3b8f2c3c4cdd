"""Record storage for artifacts and comments."""

from .artifact_store import ArtifactStore, DynamoArtifactStore, get_artifact_store
from .comment_store import DynamoCommentStore, get_comment_store

__all__ = [
    "ArtifactStore",
    "DynamoArtifactStore",
    "DynamoCommentStore",
    "get_artifact_store",
    "get_comment_store",
]
