"""
User models — https://core.telegram.org/bots/api#user
"""

from typing import Optional

from pydantic import Field

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.files import PhotoSize
from telegram_sdk.models.values import LanguageCode, UserId


class User(TelegramObject):
    """A Telegram user or bot."""
    id: UserId
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[LanguageCode] = None
    is_premium: bool = False
    added_to_attachment_menu: bool = False
    # Only returned by getMe
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None
    can_connect_to_business: Optional[bool] = None
    has_main_web_app: Optional[bool] = None

    @property
    def full_name(self) -> str:
        if self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name


class BirthDate(TelegramObject):
    day: int
    month: int
    year: Optional[int] = None


class Contact(TelegramObject):
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    user: Optional[UserId] = Field(default=None, alias="user_id")
    vcard: Optional[str] = None


class SharedUser(TelegramObject):
    """A user shared with the bot through a KeyboardButtonRequestUsers button."""
    user_id: UserId
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    photo: tuple[PhotoSize, ...] = ()
