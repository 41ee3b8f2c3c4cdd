import json

import pytest

import eterna.utils.http as http
from eterna.errors import (
    ConcurrentUpdateError,
    InvalidActionError,
    NotFoundError,
    StorageUnavailableError,
)


# ================================================================
# json_response()
# ================================================================
def test_json_response_basic():
    resp = http.json_response(200, {"hello": "world"})

    assert resp["statusCode"] == 200
    assert json.loads(resp["body"]) == {"hello": "world"}

    # Default CORS headers must be present
    for key, value in http.DEFAULT_HEADERS.items():
        assert resp["headers"][key] == value


def test_json_response_accepts_list():
    resp = http.json_response(200, [{"a": 1}, {"a": 2}])

    assert json.loads(resp["body"]) == [{"a": 1}, {"a": 2}]


def test_json_response_merges_custom_headers():
    resp = http.json_response(201, {"ok": True}, headers={"X-Test": "123"})

    assert resp["statusCode"] == 201
    assert resp["headers"]["X-Test"] == "123"
    assert resp["headers"]["Content-Type"] == "application/json"


# ================================================================
# error_response()
# ================================================================
def test_error_response_basic():
    resp = http.error_response(400, "Bad request")

    assert resp["statusCode"] == 400
    body = json.loads(resp["body"])
    assert body == {"error": "Bad request"}


def test_error_response_with_code_and_field():
    resp = http.error_response(400, "Field 'title' is required", error_code="VALIDATION_ERROR", field="title")

    body = json.loads(resp["body"])
    assert body == {
        "error": "Field 'title' is required",
        "error_code": "VALIDATION_ERROR",
        "field": "title",
    }


# ================================================================
# parse_json_body() / get_path_param()
# ================================================================
def test_parse_json_body_string():
    assert http.parse_json_body({"body": '{"action": "vote"}'}) == {"action": "vote"}


def test_parse_json_body_missing_is_empty():
    assert http.parse_json_body({}) == {}
    assert http.parse_json_body({"body": None}) == {}


def test_parse_json_body_dict_passthrough():
    assert http.parse_json_body({"body": {"action": "stake"}}) == {"action": "stake"}


@pytest.mark.parametrize("raw", ["not json", "[1, 2]", '"vote"', 42])
def test_parse_json_body_rejects_non_objects(raw):
    with pytest.raises(ValueError):
        http.parse_json_body({"body": raw})


def test_get_path_param():
    event = {"pathParameters": {"id": " a-1 ", "blank": "  "}}

    assert http.get_path_param(event, "id") == "a-1"
    assert http.get_path_param(event, "blank") is None
    assert http.get_path_param(event, "missing") is None
    assert http.get_path_param({"pathParameters": None}, "id") is None


# ================================================================
# translate_exceptions()
# ================================================================
@pytest.mark.parametrize(
    "error,status,code",
    [
        (NotFoundError("artifact", "x"), 404, "NOT_FOUND"),
        (InvalidActionError("bad action"), 400, "INVALID_ACTION"),
        (ConcurrentUpdateError("raced"), 409, "CONCURRENT_UPDATE"),
        (StorageUnavailableError("offline"), 503, "STORAGE_UNAVAILABLE"),
    ],
)
def test_translate_exceptions_domain_errors(error, status, code):
    @http.translate_exceptions
    def handler(event, context):
        raise error

    resp = handler({}, None)

    assert resp["statusCode"] == status
    body = json.loads(resp["body"])
    assert body["error_code"] == code
    assert body["error"] == str(error)


def test_translate_exceptions_unexpected_error():
    @http.translate_exceptions
    def handler(event, context):
        raise RuntimeError("kaboom")

    resp = handler({}, None)

    assert resp["statusCode"] == 500
    body = json.loads(resp["body"])
    assert body["error_code"] == "INTERNAL_ERROR"
    assert "kaboom" in body["error"]


def test_translate_exceptions_passes_through_success():
    @http.translate_exceptions
    def handler(event, context):
        return http.json_response(200, {"ok": True})

    assert handler({}, None)["statusCode"] == 200
