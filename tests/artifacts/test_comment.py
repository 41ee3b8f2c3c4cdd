"""
Tests for the Comment entity and reaction parsing.
"""

from datetime import datetime, timezone

import pytest

from eterna.artifacts.comment import Comment, parse_reaction
from eterna.artifacts.types import ReactionKind
from eterna.errors import InvalidReactionError

T0 = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_new_comment_starts_at_zero():
    comment = Comment.new("bread", "  I remember this  ", now=T0)

    assert comment.content == "I remember this"
    assert comment.support_count == 0
    assert all(count == 0 for count in comment.reactions.values())
    assert set(comment.reactions) == set(ReactionKind)


@pytest.mark.parametrize("content", ["", "   ", None])
def test_new_comment_rejects_empty_content(content):
    with pytest.raises(ValueError):
        Comment.new("bread", content, now=T0)


@pytest.mark.parametrize("kind", list(ReactionKind))
def test_parse_reaction_accepts_closed_set(kind):
    assert parse_reaction(kind.value) is kind


@pytest.mark.parametrize("raw", ["🔥", "thumbs_up", None, 1])
def test_parse_reaction_rejects_others(raw):
    with pytest.raises(InvalidReactionError):
        parse_reaction(raw)


def test_to_dict_uses_emoji_keys():
    item = Comment.new("bread", "hi", now=T0).to_dict()

    assert item["created_at"] == "2026-03-01T12:00:00Z"
    assert set(item["reactions"]) == {"👍", "❤️", "😮", "😢", "🎉"}


def test_from_dict_drops_unknown_reactions():
    comment = Comment.from_dict(
        {
            "comment_id": "c",
            "artifact_id": "bread",
            "content": "hi",
            "created_at": "2026-03-01T12:00:00Z",
            "support_count": 4,
            "reactions": {"🎉": 2, "🔥": 9},
        }
    )

    assert comment.support_count == 4
    assert comment.reactions[ReactionKind.CELEBRATE] == 2
    assert "🔥" not in comment.to_dict()["reactions"]
