"""
Unit tests for lambdas/decay_sweep_handler.py
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from eterna.errors import StorageUnavailableError
from eterna.logutil import correlation_id
from lambdas.decay_sweep_handler import lambda_handler

T0 = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestDecaySweepHandler:
    def test_runs_one_tick_and_returns_report(self, artifact_store, make_artifact, lambda_context):
        idle = make_artifact(artifact_id="idle", extinction_risk=85, fade_level=40)
        artifact_store.list_all.return_value = [idle]

        with patch("lambdas.decay_sweep_handler.get_artifact_store", return_value=artifact_store):
            report = lambda_handler({"source": "aws.events"}, lambda_context)

        assert report["scanned"] == 1
        assert report["updated"] == ["idle"]
        assert report["listing_error"] is None
        artifact_store.update.assert_called_once_with("idle", {"fade_level": 49})

    def test_recently_supported_artifacts_are_untouched(self, artifact_store, make_artifact):
        from eterna.utils.time_utils import utc_now

        fresh = make_artifact(
            artifact_id="fresh",
            created_at=T0,
            last_supported_at=utc_now() - timedelta(minutes=5),
        )
        artifact_store.list_all.return_value = [fresh]

        with patch("lambdas.decay_sweep_handler.get_artifact_store", return_value=artifact_store):
            report = lambda_handler({}, None)

        assert report["unchanged"] == 1
        artifact_store.update.assert_not_called()

    def test_listing_failure_is_reported(self, artifact_store):
        artifact_store.list_all.side_effect = StorageUnavailableError("table offline")

        with patch("lambdas.decay_sweep_handler.get_artifact_store", return_value=artifact_store):
            report = lambda_handler({}, None)

        assert "table offline" in report["listing_error"]
        assert report["scanned"] == 0

    def test_correlation_id_is_cleared(self, artifact_store, lambda_context):
        artifact_store.list_all.return_value = []

        with patch("lambdas.decay_sweep_handler.get_artifact_store", return_value=artifact_store):
            lambda_handler({}, lambda_context)

        assert correlation_id.get() is None
