"""
Unit tests for lambdas/get_artifact_comments.py and lambdas/post_artifact_comment.py
"""

import json
from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from eterna.artifacts.comment import Comment
from eterna.errors import NotFoundError
from lambdas.get_artifact_comments import lambda_handler as list_comments
from lambdas.post_artifact_comment import lambda_handler as post_comment

T0 = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def stores(artifact_store, comment_store, make_artifact):
    artifact_store.get_by_id.return_value = make_artifact(artifact_id="a-1")
    comment_store.create.side_effect = lambda comment: comment
    with patch("lambdas.get_artifact_comments.get_artifact_store", return_value=artifact_store), \
         patch("lambdas.get_artifact_comments.get_comment_store", return_value=comment_store), \
         patch("lambdas.post_artifact_comment.get_artifact_store", return_value=artifact_store), \
         patch("lambdas.post_artifact_comment.get_comment_store", return_value=comment_store):
        yield artifact_store, comment_store


class TestGetArtifactComments:
    """Tests for GET /artifacts/{id}/comments endpoint."""

    def test_returns_comments(self, stores):
        _, comment_store = stores
        comment_store.list_for_artifact.return_value = [
            Comment.new("a-1", "Such a beautiful and lost art.", now=T0)
        ]

        response = list_comments({"pathParameters": {"id": "a-1"}}, None)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body[0]["content"] == "Such a beautiful and lost art."
        assert body[0]["reactions"]["🎉"] == 0
        comment_store.list_for_artifact.assert_called_once_with("a-1")

    def test_unknown_artifact_returns_404(self, stores):
        artifact_store, comment_store = stores
        artifact_store.get_by_id.side_effect = NotFoundError("artifact", "ghost")

        response = list_comments({"pathParameters": {"id": "ghost"}}, None)

        assert response["statusCode"] == 404
        comment_store.list_for_artifact.assert_not_called()


class TestPostArtifactComment:
    """Tests for POST /artifacts/{id}/comments endpoint."""

    def test_creates_comment(self, stores):
        _, comment_store = stores
        event = {"pathParameters": {"id": "a-1"}, "body": json.dumps({"content": " Keep it alive "})}

        response = post_comment(event, None)

        assert response["statusCode"] == 201
        body = json.loads(response["body"])
        assert body["artifact_id"] == "a-1"
        assert body["content"] == "Keep it alive"
        assert body["support_count"] == 0
        comment_store.create.assert_called_once()

    @pytest.mark.parametrize("content", ["", "   ", None])
    def test_empty_content_returns_400(self, stores, content):
        _, comment_store = stores
        event = {"pathParameters": {"id": "a-1"}, "body": json.dumps({"content": content})}

        response = post_comment(event, None)

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["field"] == "content"
        comment_store.create.assert_not_called()

    def test_unknown_artifact_returns_404(self, stores):
        artifact_store, comment_store = stores
        artifact_store.get_by_id.side_effect = NotFoundError("artifact", "ghost")
        event = {"pathParameters": {"id": "ghost"}, "body": json.dumps({"content": "hello"})}

        response = post_comment(event, None)

        assert response["statusCode"] == 404
        comment_store.create.assert_not_called()
