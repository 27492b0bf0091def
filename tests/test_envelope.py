"""Response envelope parsing."""

import json

import pytest

from telegram_sdk.errors import RequestFailedError, TypeMismatch
from telegram_sdk.models.envelope import Response, ResponseParameters
from telegram_sdk.models.update import Update
from telegram_sdk.models.user import User
from telegram_sdk.transport.envelope import parse_response, read_result, unwrap


def test_parse_success(bot_payload):
    response = parse_response({"ok": True, "result": bot_payload}, User)
    assert response.ok
    assert isinstance(response.result, User)
    assert response.result.username == "test_bot"


def test_parse_list_result(update_payload):
    response = parse_response({"ok": True, "result": [update_payload]}, list[Update])
    assert [u.id for u in response.result] == [10000]


def test_parse_failure():
    response = parse_response(
        {
            "ok": False,
            "error_code": 429,
            "description": "Too Many Requests: retry after 5",
            "parameters": {"retry_after": 5},
        },
        User,
    )
    assert not response.ok
    assert response.result is None
    assert response.parameters == ResponseParameters(retry_after=5)


def test_malformed_result_is_a_decode_error():
    with pytest.raises(TypeMismatch):
        parse_response({"ok": True, "result": "not a user"}, User)


def test_unwrap_success(bot_payload):
    response = parse_response({"ok": True, "result": bot_payload}, User)
    assert unwrap(response).id == 987654321


def test_unwrap_failure_keeps_description():
    response = Response[bool](ok=False, description="Bad Request: BOT_COMMAND_INVALID", error_code=400)
    with pytest.raises(RequestFailedError) as exc:
        unwrap(response, body="raw")
    assert exc.value.description == "Bad Request: BOT_COMMAND_INVALID"
    assert exc.value.error_code == 400
    assert exc.value.body == "raw"


def test_unwrap_without_result():
    with pytest.raises(RequestFailedError) as exc:
        unwrap(Response[bool](ok=True))
    assert str(exc.value) == "No description provided"


def test_unwrap_with_success_check():
    response = Response[bool](ok=True, result=False)
    with pytest.raises(RequestFailedError):
        unwrap(response, is_success=lambda r: r.result is True)
    assert unwrap(Response[bool](ok=True, result=True), is_success=lambda r: r.result is True) is True


def test_read_result_attaches_raw_body():
    raw = {"ok": False, "description": "Unauthorized", "error_code": 401}
    with pytest.raises(RequestFailedError) as exc:
        read_result(raw, User)
    assert json.loads(exc.value.body) == raw
    assert exc.value.error_code == 401
