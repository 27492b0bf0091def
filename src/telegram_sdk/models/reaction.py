"""
Reaction types — https://core.telegram.org/bots/api#reactiontype
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from telegram_sdk.models.base import TelegramObject


class ReactionTypeEmoji(TelegramObject):
    type: Literal["emoji"] = "emoji"
    emoji: str


class ReactionTypeCustomEmoji(TelegramObject):
    type: Literal["custom_emoji"] = "custom_emoji"
    custom_emoji_id: str


class ReactionTypePaid(TelegramObject):
    type: Literal["paid"] = "paid"


ReactionType = Annotated[
    Union[ReactionTypeEmoji, ReactionTypeCustomEmoji, ReactionTypePaid],
    Field(discriminator="type"),
]
