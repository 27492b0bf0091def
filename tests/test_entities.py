"""Entity graph decoding: nesting, aliases, defaults and text extraction."""

import pytest

from telegram_sdk.errors import MissingField, UnknownVariant
from telegram_sdk.models.base import decode, encode
from telegram_sdk.models.chat import Chat, ChatType
from telegram_sdk.models.chat_info import ChatFullInfo
from telegram_sdk.models.checklists import InputChecklist, InputChecklistTask
from telegram_sdk.models.files import Animation, File
from telegram_sdk.models.message import ChecklistTasksDone, GiveawayCompleted, Message, MessageId
from telegram_sdk.models.polls import Poll
from telegram_sdk.models.reaction import ReactionTypeEmoji
from telegram_sdk.models.reply import MessageOriginUser
from telegram_sdk.models.suggested_post import SuggestedPostRefundReason
from telegram_sdk.models.text import MessageEntityBold, MessageEntityBotCommand, MessageEntityMention, utf16_slice
from telegram_sdk.models.update import Update
from telegram_sdk.models.user import Contact, User


class TestMessage:
    def test_basic_fields(self, message_payload):
        message = Message.decode(message_payload)
        assert message.id == 42
        assert message.from_.username == "ada"
        assert message.chat.type is ChatType.PRIVATE
        assert message.text == "/start hello"
        assert message.entities == (MessageEntityBotCommand(offset=0, length=6),)

    def test_absent_fields_take_defaults(self, message_payload):
        message = Message.decode(message_payload)
        assert message.photo == ()
        assert message.caption_entities == ()
        assert message.new_chat_members == ()
        assert message.has_protected_content is False
        assert message.is_topic_message is False
        assert message.reply_to is None
        assert message.pinned_message is None

    def test_unknown_fields_are_ignored(self, message_payload):
        message_payload["some_future_field"] = {"nested": [1, 2, 3]}
        assert Message.decode(message_payload).id == 42

    def test_missing_chat(self, message_payload):
        del message_payload["chat"]
        with pytest.raises(MissingField) as exc:
            Message.decode(message_payload)
        assert exc.value.name == "chat"

    def test_missing_field_deep_inside(self, message_payload):
        del message_payload["chat"]["type"]
        with pytest.raises(MissingField) as exc:
            Message.decode(message_payload)
        assert exc.value.name == "type"
        assert exc.value.path == ("chat", "type")

    def test_unknown_entity_type(self, message_payload):
        message_payload["entities"].append({"type": "sparkle", "offset": 0, "length": 1})
        with pytest.raises(UnknownVariant):
            Message.decode(message_payload)

    def test_reply_chain(self, message_payload):
        original = dict(message_payload, message_id=41, text="first")
        middle = dict(message_payload, message_id=42, text="second", reply_to_message=original)
        message = Message.decode(dict(message_payload, message_id=43, text="third", reply_to_message=middle))
        assert message.reply_to.id == 42
        assert message.reply_to.reply_to.id == 41
        assert message.reply_to.reply_to.reply_to is None

    def test_forward_origin_and_quote(self, message_payload, user_payload):
        message_payload["forward_origin"] = {"type": "user", "date": 1699999999, "sender_user": user_payload}
        message_payload["quote"] = {"text": "hello", "position": 7, "is_manual": True}
        message = Message.decode(message_payload)
        assert isinstance(message.forward_origin, MessageOriginUser)
        assert message.forward_origin.sender_user.id == 123456789
        assert message.quote.position == 7
        assert message.quote.entities == ()

    def test_media_aliases(self, message_payload):
        message_payload["animation"] = {
            "file_id": "AAA",
            "file_unique_id": "uAAA",
            "width": 320,
            "height": 240,
            "duration": 3,
            "file_name": "cat.gif",
        }
        message = Message.decode(message_payload)
        assert isinstance(message.animation, Animation)
        assert message.animation.id == "AAA"
        assert message.animation.name == "cat.gif"
        tree = message.encode()["animation"]
        assert tree["file_id"] == "AAA"
        assert tree["file_name"] == "cat.gif"
        assert tree["duration"] == 3

    def test_service_message_with_embedded_message(self, message_payload):
        message_payload["giveaway_completed"] = {
            "winner_count": 3,
            "giveaway_message": dict(message_payload, message_id=1),
        }
        message = Message.decode(message_payload)
        assert isinstance(message.giveaway_completed, GiveawayCompleted)
        assert message.giveaway_completed.giveaway_message.id == 1
        assert message.giveaway_completed.is_star_giveaway is False

    def test_checklist_tasks_done(self):
        done = ChecklistTasksDone.decode({"marked_as_done_task_ids": [1, 2]})
        assert done.marked_as_done_task_ids == (1, 2)
        assert done.marked_as_not_done_task_ids == ()
        assert done.checklist_message is None

    def test_suggested_post_refunded(self, message_payload):
        message_payload["suggested_post_refunded"] = {"reason": "post_deleted"}
        message = Message.decode(message_payload)
        assert message.suggested_post_refunded.reason is SuggestedPostRefundReason.POST_DELETED

    def test_encode_uses_wire_names(self, message_payload):
        message_payload["reply_to_message"] = dict(message_payload, message_id=41)
        tree = Message.decode(message_payload).encode()
        assert tree["message_id"] == 42
        assert tree["from"]["first_name"] == "Ada"
        assert tree["reply_to_message"]["message_id"] == 41
        assert "from_" not in tree
        assert "reply_to" not in tree
        assert "sticker" not in tree

    def test_round_trip(self, message_payload):
        message_payload["reply_to_message"] = dict(message_payload, message_id=41)
        message = Message.decode(message_payload)
        assert Message.decode(message.encode()) == message

    def test_decodes_are_independent(self, message_payload):
        first = Message.decode(message_payload)
        second = Message.decode(message_payload)
        assert first == second
        assert first is not second
        assert first.chat is not second.chat

    def test_immutable(self, message_payload):
        message = Message.decode(message_payload)
        with pytest.raises(Exception):
            message.text = "changed"


class TestEntityText:
    def test_ascii(self, message_payload):
        message = Message.decode(message_payload)
        assert message.entity_text(message.entities[0]) == "/start"

    def test_offsets_count_utf16_units(self, message_payload):
        # 😀 is one Python character but two UTF-16 code units
        message_payload["text"] = "😀 hello @bob"
        message_payload["entities"] = [{"type": "mention", "offset": 9, "length": 4}]
        message = Message.decode(message_payload)
        entity = message.entities[0]
        assert isinstance(entity, MessageEntityMention)
        assert message.entity_text(entity) == "@bob"
        assert entity.extract(message.text) == "@bob"

    def test_caption_entities(self, message_payload):
        del message_payload["text"]
        message_payload["caption"] = "look #here"
        message_payload["caption_entities"] = [{"type": "hashtag", "offset": 5, "length": 5}]
        message = Message.decode(message_payload)
        assert message.entity_text(message.caption_entities[0]) == "#here"

    def test_no_text(self, message_payload):
        del message_payload["text"]
        message = Message.decode(message_payload)
        assert message.entity_text(MessageEntityBotCommand(offset=0, length=6)) is None

    def test_utf16_slice(self):
        assert utf16_slice("a😀b", 1, 3) == "😀"
        assert utf16_slice("a😀b", 3, 4) == "b"

    def test_lone_surrogate_in_text(self, message_payload):
        message_payload["text"] = "ab\ud83dcd"
        message = Message.decode(message_payload)
        assert message.entity_text(MessageEntityBold(offset=0, length=2)) == "ab"
        assert message.entity_text(MessageEntityBold(offset=2, length=1)) == "\ud83d"
        assert message.entity_text(MessageEntityBold(offset=3, length=2)) == "cd"


class TestUser:
    def test_full_name(self, user_payload):
        assert User.decode(user_payload).full_name == "Ada Lovelace"
        del user_payload["last_name"]
        assert User.decode(user_payload).full_name == "Ada"

    def test_get_me_fields(self, bot_payload):
        bot = User.decode(bot_payload)
        assert bot.is_bot
        assert bot.can_join_groups is True
        assert bot.has_main_web_app is None

    def test_contact_user_alias(self):
        contact = Contact.decode({"phone_number": "+100", "first_name": "Ada", "user_id": 5})
        assert contact.user == 5
        assert contact.encode()["user_id"] == 5


class TestUpdate:
    def test_message_update(self, update_payload):
        update = Update.decode(update_payload)
        assert update.id == 10000
        assert update.effective_message.id == 42
        assert update.next_offset == 10001

    def test_channel_post(self, message_payload):
        update = Update.decode({"update_id": 5, "channel_post": message_payload})
        assert update.message is None
        assert update.effective_message.id == 42

    def test_unsupported_update_kind(self):
        update = Update.decode({"update_id": 6, "callback_query": {"id": "x"}})
        assert update.effective_message is None

    def test_list_of_updates(self, update_payload):
        updates = decode(list[Update], [update_payload, dict(update_payload, update_id=10001)])
        assert [u.id for u in updates] == [10000, 10001]


class TestChatFullInfo:
    PAYLOAD = {
        "id": -1001234567890,
        "type": "supergroup",
        "title": "Analytical Engines",
        "accent_color_id": 3,
        "max_reaction_count": 11,
        "available_reactions": [{"type": "emoji", "emoji": "👍"}],
        "accepted_gift_types": {"unlimited_gifts": True, "limited_gifts": False},
        "slow_mode_delay": 30,
        "linked_chat_id": -1009876543210,
    }

    def test_decode(self):
        info = ChatFullInfo.decode(self.PAYLOAD)
        assert info.accent_color == 3
        assert info.available_reactions == (ReactionTypeEmoji(emoji="👍"),)
        assert info.accepted_gift_types.unlimited_gifts is True
        assert info.slow_mode_delay.total_seconds() == 30
        assert info.active_usernames == ()
        assert info.has_hidden_members is False

    def test_all_reactions_allowed_when_absent(self):
        payload = {k: v for k, v in self.PAYLOAD.items() if k != "available_reactions"}
        assert ChatFullInfo.decode(payload).available_reactions is None

    def test_pinned_message(self, message_payload):
        info = ChatFullInfo.decode(dict(self.PAYLOAD, pinned_message=message_payload))
        assert info.pinned_message.id == 42

    def test_as_chat(self):
        chat = ChatFullInfo.decode(self.PAYLOAD).as_chat()
        assert chat == Chat(id=-1001234567890, type=ChatType.SUPERGROUP, title="Analytical Engines")

    def test_encode_round_trip(self):
        info = ChatFullInfo.decode(self.PAYLOAD)
        tree = info.encode()
        assert tree["accent_color_id"] == 3
        assert ChatFullInfo.decode(tree) == info


class TestMisc:
    def test_message_id(self):
        assert MessageId.decode({"message_id": 9}).id == 9

    def test_file(self):
        f = File.decode({"file_id": "a", "file_unique_id": "b", "file_size": 10, "file_path": "photos/1.jpg"})
        assert f.file_path == "photos/1.jpg"
        assert encode(f) == {"file_id": "a", "file_unique_id": "b", "file_size": 10, "file_path": "photos/1.jpg"}

    def test_poll_aliases(self):
        poll = Poll.decode({
            "id": "p1",
            "question": "Tea?",
            "options": [{"text": "Yes", "voter_count": 2}, {"text": "No", "voter_count": 0}],
            "total_voter_count": 2,
            "is_closed": False,
            "is_anonymous": True,
            "type": "regular",
            "allows_multiple_answers": False,
            "open_period": 60,
        })
        assert poll.open_duration.total_seconds() == 60
        assert poll.encode()["open_period"] == 60

    def test_input_types_omit_unset_fields(self):
        checklist = InputChecklist(title="Chores", tasks=(InputChecklistTask(id=1, text="Dishes"),))
        assert encode(checklist) == {"title": "Chores", "tasks": [{"id": 1, "text": "Dishes"}]}
