"""
Where a message comes from and what it replies to.

- MessageOrigin: https://core.telegram.org/bots/api#messageorigin
- ExternalReplyInfo: https://core.telegram.org/bots/api#externalreplyinfo
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.chat import Chat, Story
from telegram_sdk.models.checklists import Checklist
from telegram_sdk.models.common import Location, Venue
from telegram_sdk.models.files import Animation, Audio, Document, PaidMediaInfo, PhotoSize, Sticker, Video, VideoNote, Voice
from telegram_sdk.models.game import Game
from telegram_sdk.models.giveaway import Giveaway, GiveawayWinners
from telegram_sdk.models.payments import Invoice
from telegram_sdk.models.polls import Dice, Poll
from telegram_sdk.models.text import LinkPreviewOptions
from telegram_sdk.models.units import UnixTime
from telegram_sdk.models.user import Contact, User
from telegram_sdk.models.values import MessageIdentifier


class MessageOriginUser(TelegramObject):
    type: Literal["user"] = "user"
    date: UnixTime
    sender_user: User


class MessageOriginHiddenUser(TelegramObject):
    type: Literal["hidden_user"] = "hidden_user"
    date: UnixTime
    sender_user_name: str


class MessageOriginChat(TelegramObject):
    """Sent on behalf of a chat, e.g. by an anonymous group administrator."""
    type: Literal["chat"] = "chat"
    date: UnixTime
    sender_chat: Chat
    author_signature: Optional[str] = None


class MessageOriginChannel(TelegramObject):
    type: Literal["channel"] = "channel"
    date: UnixTime
    chat: Chat
    message_id: MessageIdentifier
    author_signature: Optional[str] = None


MessageOrigin = Annotated[
    Union[MessageOriginUser, MessageOriginHiddenUser, MessageOriginChat, MessageOriginChannel],
    Field(discriminator="type"),
]


class ExternalReplyInfo(TelegramObject):
    """A message replied to that lives in another chat or forum topic."""
    origin: MessageOrigin
    chat: Optional[Chat] = None
    message_id: Optional[MessageIdentifier] = None
    link_preview_options: Optional[LinkPreviewOptions] = None
    animation: Optional[Animation] = None
    audio: Optional[Audio] = None
    document: Optional[Document] = None
    paid_media: Optional[PaidMediaInfo] = None
    photo: tuple[PhotoSize, ...] = ()
    sticker: Optional[Sticker] = None
    story: Optional[Story] = None
    video: Optional[Video] = None
    video_note: Optional[VideoNote] = None
    voice: Optional[Voice] = None
    has_media_spoiler: bool = False
    checklist: Optional[Checklist] = None
    contact: Optional[Contact] = None
    dice: Optional[Dice] = None
    game: Optional[Game] = None
    giveaway: Optional[Giveaway] = None
    giveaway_winners: Optional[GiveawayWinners] = None
    invoice: Optional[Invoice] = None
    location: Optional[Location] = None
    poll: Optional[Poll] = None
    venue: Optional[Venue] = None


class DirectMessagesTopic(TelegramObject):
    id: int = Field(alias="topic_id")
    user: Optional[User] = None
