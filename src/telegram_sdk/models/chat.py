"""
Chat models — https://core.telegram.org/bots/api#chat
"""

from enum import Enum
from typing import Optional

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.common import Location
from telegram_sdk.models.files import Sticker
from telegram_sdk.models.values import ChatId


class ChatType(str, Enum):
    PRIVATE = "private"
    GROUP = "group"
    SUPERGROUP = "supergroup"
    CHANNEL = "channel"


class Chat(TelegramObject):
    id: ChatId
    type: ChatType
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_forum: bool = False
    is_direct_messages: bool = False


class ChatPhoto(TelegramObject):
    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str


class ChatPermissions(TelegramObject):
    """What non-administrator users may do in a chat."""
    can_send_messages: Optional[bool] = None
    can_send_audios: Optional[bool] = None
    can_send_documents: Optional[bool] = None
    can_send_photos: Optional[bool] = None
    can_send_videos: Optional[bool] = None
    can_send_video_notes: Optional[bool] = None
    can_send_voice_notes: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    can_manage_topics: Optional[bool] = None


class ChatLocation(TelegramObject):
    location: Location
    address: str


class Story(TelegramObject):
    chat: Chat
    id: int


class BusinessIntro(TelegramObject):
    title: Optional[str] = None
    message: Optional[str] = None
    sticker: Optional[Sticker] = None


class BusinessLocation(TelegramObject):
    address: str
    location: Optional[Location] = None


class BusinessOpeningHoursInterval(TelegramObject):
    """Minutes counted from the start of the week (Monday 00:00), 0-10080."""
    opening_minute: int
    closing_minute: int


class BusinessOpeningHours(TelegramObject):
    time_zone_name: str
    opening_hours: tuple[BusinessOpeningHoursInterval, ...]
