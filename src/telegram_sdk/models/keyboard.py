"""
Inline keyboards and web apps — https://core.telegram.org/bots/api#inlinekeyboardmarkup
"""

from typing import Optional

from telegram_sdk.models.base import TelegramObject


class WebAppInfo(TelegramObject):
    url: str


class WebAppData(TelegramObject):
    """Data sent from a Web App to the bot."""
    data: str
    button_text: str


class LoginUrl(TelegramObject):
    url: str
    forward_text: Optional[str] = None
    bot_username: Optional[str] = None
    request_write_access: bool = False


class SwitchInlineQueryChosenChat(TelegramObject):
    query: Optional[str] = None
    allow_user_chats: bool = False
    allow_bot_chats: bool = False
    allow_group_chats: bool = False
    allow_channel_chats: bool = False


class CopyTextButton(TelegramObject):
    text: str


class CallbackGame(TelegramObject):
    pass


class InlineKeyboardButton(TelegramObject):
    """Exactly one of the optional fields is expected to be set; this is not checked."""
    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = None
    web_app: Optional[WebAppInfo] = None
    login_url: Optional[LoginUrl] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    switch_inline_query_chosen_chat: Optional[SwitchInlineQueryChosenChat] = None
    copy_text: Optional[CopyTextButton] = None
    callback_game: Optional[CallbackGame] = None
    pay: bool = False


class InlineKeyboardMarkup(TelegramObject):
    inline_keyboard: tuple[tuple[InlineKeyboardButton, ...], ...]
