"""
Conftest for lambda tests - provides fake stores in place of DynamoDB.
"""

from unittest.mock import MagicMock

import pytest

from eterna.storage import ArtifactStore, DynamoCommentStore


# ====================================================================================
# FIXTURE: Store doubles
# ====================================================================================
@pytest.fixture
def artifact_store():
    """A MagicMock constrained to the ArtifactStore interface."""
    return MagicMock(spec=ArtifactStore)


@pytest.fixture
def comment_store():
    return MagicMock(spec=DynamoCommentStore)


@pytest.fixture
def lambda_context():
    context = MagicMock()
    context.aws_request_id = "req-1234567890"
    return context
