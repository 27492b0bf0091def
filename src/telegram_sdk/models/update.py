"""
Incoming updates — https://core.telegram.org/bots/api#update

At most one of the payload fields is set on any given update.
"""

from typing import Optional

from pydantic import Field

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.message import Message
from telegram_sdk.models.values import UpdateId


class Update(TelegramObject):
    id: UpdateId = Field(alias="update_id")
    message: Optional[Message] = None
    edited_message: Optional[Message] = None
    channel_post: Optional[Message] = None
    edited_channel_post: Optional[Message] = None

    @property
    def effective_message(self) -> Optional[Message]:
        """Whichever message this update carries, new or edited."""
        return self.message or self.edited_message or self.channel_post or self.edited_channel_post

    @property
    def next_offset(self) -> int:
        """The ``offset`` to pass to getUpdates to acknowledge this update."""
        return int(self.id) + 1
