"""
Full chat information, as returned by getChat — https://core.telegram.org/bots/api#chatfullinfo
"""

from typing import Optional

from pydantic import Field

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.chat import (
    BusinessIntro,
    BusinessLocation,
    BusinessOpeningHours,
    Chat,
    ChatLocation,
    ChatPermissions,
    ChatPhoto,
    ChatType,
)
from telegram_sdk.models.gift import AcceptedGiftTypes
from telegram_sdk.models.message import Message
from telegram_sdk.models.reaction import ReactionType
from telegram_sdk.models.units import Seconds, UnixTime
from telegram_sdk.models.user import BirthDate
from telegram_sdk.models.values import AccentColor, ChatId


class ChatFullInfo(TelegramObject):
    id: ChatId
    type: ChatType
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_forum: bool = False
    is_direct_messages: bool = False
    accent_color: AccentColor = Field(alias="accent_color_id")
    max_reaction_count: int
    photo: Optional[ChatPhoto] = None
    active_usernames: tuple[str, ...] = ()
    birthdate: Optional[BirthDate] = None
    business_intro: Optional[BusinessIntro] = None
    business_location: Optional[BusinessLocation] = None
    business_opening_hours: Optional[BusinessOpeningHours] = None
    personal_chat: Optional[Chat] = None
    parent_chat: Optional[Chat] = None
    # None means every emoji reaction is allowed
    available_reactions: Optional[tuple[ReactionType, ...]] = None
    background_custom_emoji_id: Optional[str] = None
    profile_accent_color: Optional[AccentColor] = Field(default=None, alias="profile_accent_color_id")
    profile_background_custom_emoji_id: Optional[str] = None
    emoji_status_custom_emoji_id: Optional[str] = None
    emoji_status_expiration_date: Optional[UnixTime] = None
    bio: Optional[str] = None
    has_private_forwards: bool = False
    has_restricted_voice_and_video_messages: bool = False
    join_to_send_messages: bool = False
    join_by_request: bool = False
    description: Optional[str] = None
    invite_link: Optional[str] = None
    pinned_message: Optional[Message] = None
    permissions: Optional[ChatPermissions] = None
    accepted_gift_types: AcceptedGiftTypes
    can_send_paid_media: bool = False
    slow_mode_delay: Optional[Seconds] = None
    unrestrict_boost_count: Optional[int] = None
    message_auto_delete_time: Optional[Seconds] = None
    has_aggressive_anti_spam_enabled: bool = False
    has_hidden_members: bool = False
    has_protected_content: bool = False
    has_visible_history: bool = False
    sticker_set_name: Optional[str] = None
    can_set_sticker_set: bool = False
    custom_emoji_sticker_set_name: Optional[str] = None
    linked_chat_id: Optional[ChatId] = None
    location: Optional[ChatLocation] = None

    def as_chat(self) -> Chat:
        """The short form of this chat, as it appears inside messages."""
        return Chat(
            id=self.id,
            type=self.type,
            title=self.title,
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            is_forum=self.is_forum,
            is_direct_messages=self.is_direct_messages,
        )
