"""
Service messages that carry no nested message.
"""

from typing import Optional

from pydantic import Field

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.files import PhotoSize
from telegram_sdk.models.units import Seconds, UnixTime
from telegram_sdk.models.user import SharedUser, User
from telegram_sdk.models.values import ChatId


class MessageAutoDeleteTimerChanged(TelegramObject):
    duration: Seconds = Field(alias="message_auto_delete_time")


class UsersShared(TelegramObject):
    request_id: int
    users: tuple[SharedUser, ...]


class ChatShared(TelegramObject):
    request_id: int
    chat_id: ChatId
    title: Optional[str] = None
    username: Optional[str] = None
    photo: tuple[PhotoSize, ...] = ()


class WriteAccessAllowed(TelegramObject):
    from_request: bool = False
    web_app_name: Optional[str] = None
    from_attachment_menu: bool = False


class ProximityAlertTriggered(TelegramObject):
    traveler: User
    watcher: User
    distance: int  # meters


class ChatBoostAdded(TelegramObject):
    boost_count: int


class PaidMessagePriceChanged(TelegramObject):
    paid_message_star_count: int


class DirectMessagePriceChanged(TelegramObject):
    are_direct_messages_enabled: bool
    direct_message_star_count: Optional[int] = None


class VideoChatScheduled(TelegramObject):
    start_date: UnixTime


class VideoChatStarted(TelegramObject):
    pass


class VideoChatEnded(TelegramObject):
    duration: Seconds


class VideoChatParticipantsInvited(TelegramObject):
    users: tuple[User, ...]
