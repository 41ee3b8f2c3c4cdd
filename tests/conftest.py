import os
from datetime import datetime, timezone

import pytest


def pytest_configure(config):
    # Settings are read at import time, so these must exist before collection
    os.environ.setdefault("AWS_REGION", "us-east-2")
    os.environ.setdefault("ARTIFACTS_TABLE", "ArtifactsTestTable")
    os.environ.setdefault("COMMENTS_TABLE", "CommentsTestTable")
    os.environ.setdefault("NARRATIVE_ENABLED", "false")
    os.environ.setdefault("LOG_LEVEL", "INFO")

    # moto never needs real credentials; make sure none are picked up
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
    os.environ.setdefault("AWS_SECURITY_TOKEN", "testing")
    os.environ.setdefault("AWS_SESSION_TOKEN", "testing")
    os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-2")


@pytest.fixture(autouse=True)
def reset_aws_clients():
    """
    Reset cached AWS clients before each test.

    This ensures that moto mocking works correctly when tests are run together.
    Without this, a client cached outside the @mock_aws context would persist
    and point to real AWS instead of the mocked AWS.
    """
    from eterna.aws.clients import reset_clients

    reset_clients()
    yield
    reset_clients()


# ====================================================================================
# Shared test data
# ====================================================================================
T0 = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_artifact():
    """
    Factory for Artifact instances with sensible defaults.

    Usage:
        artifact = make_artifact(fade_level=40, extinction_risk=85)
    """
    from eterna.artifacts.artifact import Artifact

    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        fields = {
            "artifact_id": f"artifact-{counter['n']}",
            "title": "Grandma's Sourdough Bread",
            "artifact_type": "recipe",
            "description": "A century-old starter.",
            "image_url": "https://example.com/bread.jpg",
            "extinction_risk": 50,
            "fade_level": 0,
            "support_count": 0,
            "created_at": T0,
            "last_supported_at": T0,
        }
        fields.update(overrides)
        return Artifact(**fields)

    return _make
