"""Shared wire payloads, shaped like what the Bot API actually sends."""

import copy

import pytest

USER = {
    "id": 123456789,
    "is_bot": False,
    "first_name": "Ada",
    "last_name": "Lovelace",
    "username": "ada",
    "language_code": "en",
}

BOT = {
    "id": 987654321,
    "is_bot": True,
    "first_name": "Test Bot",
    "username": "test_bot",
    "can_join_groups": True,
    "can_read_all_group_messages": False,
    "supports_inline_queries": False,
}

PRIVATE_CHAT = {
    "id": 123456789,
    "type": "private",
    "first_name": "Ada",
    "username": "ada",
}

GROUP_CHAT = {
    "id": -1001234567890,
    "type": "supergroup",
    "title": "Analytical Engines",
    "is_forum": True,
}

MESSAGE = {
    "message_id": 42,
    "from": USER,
    "chat": PRIVATE_CHAT,
    "date": 1700000000,
    "text": "/start hello",
    "entities": [{"type": "bot_command", "offset": 0, "length": 6}],
}

INACCESSIBLE = {
    "chat": GROUP_CHAT,
    "message_id": 7,
    "date": 0,
}


@pytest.fixture
def user_payload():
    return copy.deepcopy(USER)


@pytest.fixture
def bot_payload():
    return copy.deepcopy(BOT)


@pytest.fixture
def message_payload():
    return copy.deepcopy(MESSAGE)


@pytest.fixture
def inaccessible_payload():
    return copy.deepcopy(INACCESSIBLE)


@pytest.fixture
def update_payload():
    return {"update_id": 10000, "message": copy.deepcopy(MESSAGE)}
