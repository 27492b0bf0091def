"""Messages that may have become inaccessible, told apart by ``date == 0``."""

from datetime import datetime, timezone

import pytest

from telegram_sdk.errors import MissingField, TypeMismatch
from telegram_sdk.models.base import decode, encode
from telegram_sdk.models.chat import Chat, ChatType
from telegram_sdk.models.message import (
    InaccessibleMessage,
    MaybeInaccessibleMessage,
    Message,
    decode_maybe_inaccessible,
    encode_maybe_inaccessible,
)
from telegram_sdk.models.units import EPOCH


class TestDecode:
    def test_zero_date_selects_the_stub(self, inaccessible_payload):
        value = decode_maybe_inaccessible(inaccessible_payload)
        assert isinstance(value, InaccessibleMessage)
        assert value.id == 7
        assert value.chat.id == -1001234567890
        assert not value.is_accessible

    def test_other_dates_select_the_message(self, message_payload):
        value = decode_maybe_inaccessible(message_payload)
        assert isinstance(value, Message)
        assert value.is_accessible
        assert value.date == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_negative_date_is_a_message(self, message_payload):
        message_payload["date"] = -1
        assert isinstance(decode(MaybeInaccessibleMessage, message_payload), Message)

    def test_missing_date(self, message_payload):
        del message_payload["date"]
        with pytest.raises(MissingField) as exc:
            decode_maybe_inaccessible(message_payload)
        assert exc.value.name == "date"

    @pytest.mark.parametrize("date", [0.0, False, "0"])
    def test_only_integer_zero_is_the_marker(self, inaccessible_payload, date):
        inaccessible_payload["date"] = date
        with pytest.raises(TypeMismatch):
            decode_maybe_inaccessible(inaccessible_payload)

    def test_stub_with_missing_chat(self, inaccessible_payload):
        del inaccessible_payload["chat"]
        with pytest.raises(MissingField) as exc:
            decode_maybe_inaccessible(inaccessible_payload)
        assert exc.value.name == "chat"

    def test_pinned_message_uses_the_union(self, message_payload, inaccessible_payload):
        message_payload["pinned_message"] = inaccessible_payload
        message = Message.decode(message_payload)
        assert isinstance(message.pinned_message, InaccessibleMessage)

        message_payload["pinned_message"] = {**message_payload, "pinned_message": None, "message_id": 41}
        message = Message.decode(message_payload)
        assert isinstance(message.pinned_message, Message)
        assert message.pinned_message.id == 41


class TestEncode:
    def test_stub_gets_a_zero_date(self):
        stub = InaccessibleMessage(chat=Chat(id=-100, type=ChatType.SUPERGROUP, title="G"), id=7)
        tree = encode_maybe_inaccessible(stub)
        assert tree["date"] == 0
        assert tree["message_id"] == 7
        assert tree["chat"]["id"] == -100
        assert set(tree) == {"chat", "message_id", "date"}

    def test_stub_on_its_own_has_no_date(self):
        stub = InaccessibleMessage(chat=Chat(id=-100, type=ChatType.SUPERGROUP), id=7)
        assert "date" not in encode(stub)

    def test_message_keeps_its_date(self, message_payload):
        message = Message.decode(message_payload)
        tree = encode(message, MaybeInaccessibleMessage)
        assert tree["date"] == 1700000000
        assert tree["message_id"] == 42
        assert tree["from"]["id"] == 123456789

    def test_pinned_stub_is_encoded_with_zero_date(self, message_payload, inaccessible_payload):
        message_payload["pinned_message"] = inaccessible_payload
        tree = Message.decode(message_payload).encode()
        assert tree["pinned_message"]["date"] == 0
        assert tree["pinned_message"]["message_id"] == 7


class TestRoundTrip:
    def test_stub(self, inaccessible_payload):
        stub = decode_maybe_inaccessible(inaccessible_payload)
        assert decode_maybe_inaccessible(encode_maybe_inaccessible(stub)) == stub

    def test_message(self, message_payload):
        message = decode_maybe_inaccessible(message_payload)
        assert decode_maybe_inaccessible(encode_maybe_inaccessible(message)) == message

    def test_message_with_pinned_stub(self, message_payload, inaccessible_payload):
        message_payload["pinned_message"] = inaccessible_payload
        message = Message.decode(message_payload)
        assert Message.decode(message.encode()) == message

    def test_message_at_the_epoch_reads_back_as_a_stub(self, message_payload):
        # A real message dated exactly 1970-01-01T00:00:00Z is indistinguishable from the marker
        message = Message.decode(message_payload).model_copy(update={"date": EPOCH})
        assert isinstance(decode_maybe_inaccessible(encode_maybe_inaccessible(message)), InaccessibleMessage)
