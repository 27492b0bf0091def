"""
Messages — https://core.telegram.org/bots/api#message

Also holds every type that embeds a full message (service messages about
giveaways, checklists and suggested posts), since those and Message refer
to each other.

MaybeInaccessibleMessage has no discriminator field on the wire. Telegram
sends a message the bot can no longer access as ``{"chat": ..., "message_id":
..., "date": 0}``, so a raw ``date`` of exactly ``0`` selects
InaccessibleMessage and anything else selects Message. Encoding an
InaccessibleMessage through the union writes the ``date: 0`` marker back.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional, Union

from pydantic import Discriminator, Field, SerializerFunctionWrapHandler, Tag, WrapSerializer

from telegram_sdk.models.background import ChatBackground
from telegram_sdk.models.base import TelegramObject, decode, encode
from telegram_sdk.models.chat import Chat, Story
from telegram_sdk.models.checklists import Checklist, ChecklistTask
from telegram_sdk.models.common import Location, Venue
from telegram_sdk.models.files import Animation, Audio, Document, PaidMediaInfo, PhotoSize, Sticker, Video, VideoNote, Voice
from telegram_sdk.models.forum import (
    ForumTopicClosed,
    ForumTopicCreated,
    ForumTopicEdited,
    ForumTopicReopened,
    GeneralForumTopicHidden,
    GeneralForumTopicUnhidden,
)
from telegram_sdk.models.game import Game
from telegram_sdk.models.gift import GiftInfo, UniqueGiftInfo
from telegram_sdk.models.giveaway import Giveaway, GiveawayCreated, GiveawayWinners
from telegram_sdk.models.keyboard import InlineKeyboardMarkup, WebAppData
from telegram_sdk.models.passport import PassportData
from telegram_sdk.models.payments import Invoice, RefundedPayment, SuccessfulPayment
from telegram_sdk.models.polls import Dice, Poll
from telegram_sdk.models.reply import DirectMessagesTopic, ExternalReplyInfo, MessageOrigin
from telegram_sdk.models.service import (
    ChatBoostAdded,
    ChatShared,
    DirectMessagePriceChanged,
    MessageAutoDeleteTimerChanged,
    PaidMessagePriceChanged,
    ProximityAlertTriggered,
    UsersShared,
    VideoChatEnded,
    VideoChatParticipantsInvited,
    VideoChatScheduled,
    VideoChatStarted,
    WriteAccessAllowed,
)
from telegram_sdk.models.suggested_post import (
    StarAmount,
    SuggestedPostInfo,
    SuggestedPostPrice,
    SuggestedPostRefundReason,
)
from telegram_sdk.models.text import LinkPreviewOptions, MessageEntity, TextQuote, utf16_slice
from telegram_sdk.models.units import UnixTime
from telegram_sdk.models.user import Contact, User
from telegram_sdk.models.values import ChatId, ChecklistTaskId, MessageIdentifier

INACCESSIBLE_DATE = 0


class MessageId(TelegramObject):
    """Returned by methods that copy messages."""
    id: MessageIdentifier = Field(alias="message_id")


class InaccessibleMessage(TelegramObject):
    """A message that was deleted or is otherwise out of the bot's reach."""
    chat: Chat
    id: MessageIdentifier = Field(alias="message_id")

    @property
    def is_accessible(self) -> bool:
        return False


class Message(TelegramObject):
    id: MessageIdentifier = Field(alias="message_id")
    message_thread_id: Optional[int] = None
    direct_messages_topic: Optional[DirectMessagesTopic] = None
    from_: Optional[User] = Field(default=None, alias="from")
    sender_chat: Optional[Chat] = None
    sender_boost_count: Optional[int] = None
    sender_business_bot: Optional[User] = None
    date: UnixTime
    business_connection_id: Optional[str] = None
    chat: Chat
    forward_origin: Optional[MessageOrigin] = None
    is_topic_message: bool = False
    is_automatic_forward: bool = False
    reply_to: Optional[Message] = Field(default=None, alias="reply_to_message")
    external_reply: Optional[ExternalReplyInfo] = None
    quote: Optional[TextQuote] = None
    reply_to_story: Optional[Story] = None
    reply_to_checklist_task_id: Optional[ChecklistTaskId] = None
    via_bot: Optional[User] = None
    edit_date: Optional[UnixTime] = None
    has_protected_content: bool = False
    is_from_offline: bool = False
    is_paid_post: bool = False
    media_group_id: Optional[str] = None
    author_signature: Optional[str] = None
    paid_star_count: Optional[int] = None
    text: Optional[str] = None
    entities: tuple[MessageEntity, ...] = ()
    link_preview_options: Optional[LinkPreviewOptions] = None
    suggested_post_info: Optional[SuggestedPostInfo] = None
    effect_id: Optional[str] = None

    # Media
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
    caption: Optional[str] = None
    caption_entities: tuple[MessageEntity, ...] = ()
    show_caption_above_media: bool = False
    has_media_spoiler: bool = False
    checklist: Optional[Checklist] = None
    contact: Optional[Contact] = None
    dice: Optional[Dice] = None
    game: Optional[Game] = None
    poll: Optional[Poll] = None
    venue: Optional[Venue] = None
    location: Optional[Location] = None

    # Service messages
    new_chat_members: tuple[User, ...] = ()
    left_chat_member: Optional[User] = None
    new_chat_title: Optional[str] = None
    new_chat_photo: tuple[PhotoSize, ...] = ()
    delete_chat_photo: bool = False
    group_chat_created: bool = False
    supergroup_chat_created: bool = False
    channel_chat_created: bool = False
    message_auto_delete_timer_changed: Optional[MessageAutoDeleteTimerChanged] = None
    migrate_to_chat_id: Optional[ChatId] = None
    migrate_from_chat_id: Optional[ChatId] = None
    pinned_message: Optional[MaybeInaccessibleMessage] = None
    invoice: Optional[Invoice] = None
    successful_payment: Optional[SuccessfulPayment] = None
    refunded_payment: Optional[RefundedPayment] = None
    users_shared: Optional[UsersShared] = None
    chat_shared: Optional[ChatShared] = None
    gift: Optional[GiftInfo] = None
    unique_gift: Optional[UniqueGiftInfo] = None
    connected_website: Optional[str] = None
    write_access_allowed: Optional[WriteAccessAllowed] = None
    passport_data: Optional[PassportData] = None
    proximity_alert_triggered: Optional[ProximityAlertTriggered] = None
    boost_added: Optional[ChatBoostAdded] = None
    chat_background_set: Optional[ChatBackground] = None
    checklist_tasks_done: Optional[ChecklistTasksDone] = None
    checklist_tasks_added: Optional[ChecklistTasksAdded] = None
    direct_message_price_changed: Optional[DirectMessagePriceChanged] = None
    forum_topic_created: Optional[ForumTopicCreated] = None
    forum_topic_edited: Optional[ForumTopicEdited] = None
    forum_topic_closed: Optional[ForumTopicClosed] = None
    forum_topic_reopened: Optional[ForumTopicReopened] = None
    general_forum_topic_hidden: Optional[GeneralForumTopicHidden] = None
    general_forum_topic_unhidden: Optional[GeneralForumTopicUnhidden] = None
    giveaway_created: Optional[GiveawayCreated] = None
    giveaway: Optional[Giveaway] = None
    giveaway_winners: Optional[GiveawayWinners] = None
    giveaway_completed: Optional[GiveawayCompleted] = None
    paid_message_price_changed: Optional[PaidMessagePriceChanged] = None
    suggested_post_approved: Optional[SuggestedPostApproved] = None
    suggested_post_approval_failed: Optional[SuggestedPostApprovalFailed] = None
    suggested_post_declined: Optional[SuggestedPostDeclined] = None
    suggested_post_paid: Optional[SuggestedPostPaid] = None
    suggested_post_refunded: Optional[SuggestedPostRefunded] = None
    video_chat_scheduled: Optional[VideoChatScheduled] = None
    video_chat_started: Optional[VideoChatStarted] = None
    video_chat_ended: Optional[VideoChatEnded] = None
    video_chat_participants_invited: Optional[VideoChatParticipantsInvited] = None
    web_app_data: Optional[WebAppData] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None

    @property
    def is_accessible(self) -> bool:
        return True

    def entity_text(self, entity: MessageEntity) -> Optional[str]:
        """Return the text covered by ``entity``, looking in the text or, failing that, the caption."""
        source = self.text if self.text is not None else self.caption
        if source is None:
            return None
        return utf16_slice(source, entity.offset, entity.offset + entity.length)


class ChecklistTasksDone(TelegramObject):
    checklist_message: Optional[Message] = None
    marked_as_done_task_ids: tuple[ChecklistTaskId, ...] = ()
    marked_as_not_done_task_ids: tuple[ChecklistTaskId, ...] = ()


class ChecklistTasksAdded(TelegramObject):
    checklist_message: Optional[Message] = None
    tasks: tuple[ChecklistTask, ...]


class GiveawayCompleted(TelegramObject):
    winner_count: int
    unclaimed_prize_count: Optional[int] = None
    giveaway_message: Optional[Message] = None
    is_star_giveaway: bool = False


class SuggestedPostApproved(TelegramObject):
    suggested_post_message: Optional[Message] = None
    price: Optional[SuggestedPostPrice] = None
    send_date: UnixTime


class SuggestedPostApprovalFailed(TelegramObject):
    suggested_post_message: Optional[Message] = None
    price: SuggestedPostPrice


class SuggestedPostDeclined(TelegramObject):
    suggested_post_message: Optional[Message] = None
    comment: Optional[str] = None


class SuggestedPostPaid(TelegramObject):
    suggested_post_message: Optional[Message] = None
    currency: str
    amount: Optional[int] = None  # nanotoncoins, TON payments only
    star_amount: Optional[StarAmount] = None


class SuggestedPostRefunded(TelegramObject):
    suggested_post_message: Optional[Message] = None
    reason: SuggestedPostRefundReason


def _is_inaccessible_marker(date: Any) -> bool:
    # Only the JSON integer 0 counts: not 0.0, not false, not "0"
    return isinstance(date, int) and not isinstance(date, bool) and date == INACCESSIBLE_DATE


def _accessibility_tag(value: Any) -> str:
    if isinstance(value, InaccessibleMessage):
        return "inaccessible"
    if isinstance(value, Message):
        return "message"
    if isinstance(value, dict) and _is_inaccessible_marker(value.get("date")):
        return "inaccessible"
    # A missing date falls through to Message, which reports it as missing
    return "message"


def _write_inaccessible_marker(value: Any, handler: SerializerFunctionWrapHandler) -> Any:
    data = handler(value)
    if isinstance(value, InaccessibleMessage) and isinstance(data, dict):
        data["date"] = INACCESSIBLE_DATE
    return data


MaybeInaccessibleMessage = Annotated[
    Union[
        Annotated[Message, Tag("message")],
        Annotated[InaccessibleMessage, Tag("inaccessible")],
    ],
    Discriminator(_accessibility_tag),
    WrapSerializer(_write_inaccessible_marker),
]


def decode_maybe_inaccessible(tree: Any) -> Union[Message, InaccessibleMessage]:
    return decode(MaybeInaccessibleMessage, tree)


def encode_maybe_inaccessible(value: Union[Message, InaccessibleMessage]) -> dict[str, Any]:
    return encode(value, MaybeInaccessibleMessage)


Message.model_rebuild()
ChecklistTasksDone.model_rebuild()
ChecklistTasksAdded.model_rebuild()
GiveawayCompleted.model_rebuild()
SuggestedPostApproved.model_rebuild()
SuggestedPostApprovalFailed.model_rebuild()
SuggestedPostDeclined.model_rebuild()
SuggestedPostPaid.model_rebuild()
SuggestedPostRefunded.model_rebuild()
