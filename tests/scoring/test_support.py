"""
Tests for the support transition.
"""

from datetime import datetime, timedelta, timezone

import pytest

from eterna.errors import InvalidActionError
from eterna.scoring.support import apply_support, parse_support_action

T0 = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
LATER = T0 + timedelta(hours=3)


class TestParseSupportAction:
    @pytest.mark.parametrize("action", ["vote", "stake", "interact"])
    def test_accepts_known_actions(self, action):
        assert parse_support_action(action) == action

    @pytest.mark.parametrize("raw", ["upvote", "VOTE", "", None, 1, ["vote"]])
    def test_rejects_everything_else(self, raw):
        with pytest.raises(InvalidActionError, match="Must be one of"):
            parse_support_action(raw)

    def test_invalid_action_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_support_action("boost")


class TestApplySupport:
    @pytest.mark.parametrize(
        "action,expected_risk",
        [("vote", 83), ("stake", 80), ("interact", 84)],
    )
    def test_reduces_risk_per_action(self, make_artifact, action, expected_risk):
        artifact = make_artifact(extinction_risk=85, fade_level=40, support_count=12)

        update = apply_support(artifact, action, LATER)

        assert update.extinction_risk == expected_risk
        assert update.fade_level == 20
        assert update.support_count == 13
        assert update.last_supported_at == LATER

    def test_fade_floors_at_zero(self, make_artifact):
        artifact = make_artifact(fade_level=15)

        assert apply_support(artifact, "vote", LATER).fade_level == 0

    def test_risk_floors_at_five(self, make_artifact):
        artifact = make_artifact(extinction_risk=7)

        assert apply_support(artifact, "stake", LATER).extinction_risk == 5

    def test_risk_at_floor_stays_at_floor(self, make_artifact):
        artifact = make_artifact(extinction_risk=5, support_count=3)

        assert apply_support(artifact, "vote", LATER).extinction_risk == 5

    def test_repeated_stakes_never_drop_below_floor(self, make_artifact):
        artifact = make_artifact(extinction_risk=100)

        for _ in range(40):
            update = apply_support(artifact, "stake", LATER)
            assert update.extinction_risk <= artifact.extinction_risk
            artifact.extinction_risk = update.extinction_risk
            artifact.support_count = update.support_count

        assert artifact.extinction_risk == 5
        assert artifact.support_count == 40

    def test_last_supported_never_precedes_creation(self, make_artifact):
        artifact = make_artifact(created_at=T0, last_supported_at=T0)

        update = apply_support(artifact, "interact", T0 - timedelta(minutes=10))

        assert update.last_supported_at == T0

    def test_is_pure(self, make_artifact):
        artifact = make_artifact(extinction_risk=85, fade_level=40, support_count=12)

        apply_support(artifact, "stake", LATER)

        assert (artifact.extinction_risk, artifact.fade_level, artifact.support_count) == (85, 40, 12)

    def test_as_fields_carries_all_four_fields(self, make_artifact):
        fields = apply_support(make_artifact(), "vote", LATER).as_fields()

        assert set(fields) == {"fade_level", "extinction_risk", "support_count", "last_supported_at"}

    def test_unknown_action_raises(self, make_artifact):
        with pytest.raises(InvalidActionError):
            apply_support(make_artifact(), "boost", LATER)  # type: ignore[arg-type]


class TestWorkedExamples:
    def test_stake_on_faded_artifact(self, make_artifact):
        artifact = make_artifact(fade_level=75, extinction_risk=92, support_count=5)

        update = apply_support(artifact, "stake", LATER)

        assert (update.fade_level, update.extinction_risk, update.support_count) == (55, 87, 6)
        assert update.last_supported_at == LATER

    def test_vote_hits_floor(self, make_artifact):
        artifact = make_artifact(extinction_risk=6, support_count=2)

        assert apply_support(artifact, "vote", LATER).extinction_risk == 5
