"""
Tests for artifact creation: input validation and the initial-risk policy.
"""

import random
from datetime import datetime, timezone

import pytest

from eterna.artifacts.creation import (
    INITIAL_RISK_MAX,
    INITIAL_RISK_MIN,
    assign_initial_risk,
    assign_token_id,
    new_artifact,
    parse_artifact_input,
)
from eterna.artifacts.types import RARITIES
from eterna.errors import ValidationError

T0 = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)

VALID = {
    "title": "Summer Solstice Bonfire",
    "artifact_type": "ritual",
    "description": "Leaping over the flames.",
    "image_url": "https://example.com/fire.jpg",
}


class TestInitialRisk:
    def test_stays_within_range(self):
        rng = random.Random(7)
        draws = [assign_initial_risk(rng) for _ in range(500)]

        assert min(draws) >= INITIAL_RISK_MIN
        assert max(draws) <= INITIAL_RISK_MAX

    def test_deterministic_with_seeded_rng(self):
        assert assign_initial_risk(random.Random(1)) == assign_initial_risk(random.Random(1))


def test_token_id_format():
    token = assign_token_id(random.Random(3))

    assert token.startswith("ETR-")
    int(token[4:], 16)


class TestNewArtifact:
    def test_starts_pristine(self):
        artifact = new_artifact(**VALID, tags=["fire"], rng=random.Random(5), now=T0)

        assert artifact.fade_level == 0
        assert artifact.support_count == 0
        assert artifact.created_at == T0
        assert artifact.last_supported_at == T0
        assert INITIAL_RISK_MIN <= artifact.extinction_risk <= INITIAL_RISK_MAX
        assert artifact.rarity in RARITIES
        assert artifact.tags == ["fire"]

    def test_ids_are_unique(self):
        assert new_artifact(**VALID).artifact_id != new_artifact(**VALID).artifact_id


class TestParseArtifactInput:
    def test_accepts_camel_case_aliases(self):
        parsed = parse_artifact_input(
            {
                "title": " Bonfire ",
                "type": "ritual",
                "description": "d",
                "imageUrl": "u",
                "tags": ["a", " ", "b "],
            }
        )

        assert parsed == {
            "title": "Bonfire",
            "artifact_type": "ritual",
            "description": "d",
            "image_url": "u",
            "tags": ["a", "b"],
        }

    def test_tags_are_optional(self):
        assert parse_artifact_input(VALID)["tags"] == []

    @pytest.mark.parametrize("missing", ["title", "artifact_type", "description", "image_url"])
    def test_required_fields(self, missing):
        body = {k: v for k, v in VALID.items() if k != missing}

        with pytest.raises(ValidationError) as exc_info:
            parse_artifact_input(body)

        assert exc_info.value.field == missing

    def test_blank_title_is_rejected(self):
        with pytest.raises(ValidationError):
            parse_artifact_input({**VALID, "title": "   "})

    @pytest.mark.parametrize("tags", ["fire", [1], {"a": 1}])
    def test_tags_must_be_list_of_strings(self, tags):
        with pytest.raises(ValidationError) as exc_info:
            parse_artifact_input({**VALID, "tags": tags})

        assert exc_info.value.field == "tags"
