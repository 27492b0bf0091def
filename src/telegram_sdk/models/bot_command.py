"""
Bot commands and their scopes — https://core.telegram.org/bots/api#botcommand
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.values import ChatId, LanguageCode, UserId


class BotCommand(TelegramObject):
    command: str  # 1-32 chars: lowercase letters, digits, underscores
    description: str


class BotCommandScopeDefault(TelegramObject):
    type: Literal["default"] = "default"


class BotCommandScopeAllPrivateChats(TelegramObject):
    type: Literal["all_private_chats"] = "all_private_chats"


class BotCommandScopeAllGroupChats(TelegramObject):
    type: Literal["all_group_chats"] = "all_group_chats"


class BotCommandScopeAllChatAdministrators(TelegramObject):
    type: Literal["all_chat_administrators"] = "all_chat_administrators"


class BotCommandScopeChat(TelegramObject):
    type: Literal["chat"] = "chat"
    chat_id: ChatId


class BotCommandScopeChatAdministrators(TelegramObject):
    type: Literal["chat_administrators"] = "chat_administrators"
    chat_id: ChatId


class BotCommandScopeChatMember(TelegramObject):
    type: Literal["chat_member"] = "chat_member"
    chat_id: ChatId
    user_id: UserId


BotCommandScope = Annotated[
    Union[
        BotCommandScopeDefault,
        BotCommandScopeAllPrivateChats,
        BotCommandScopeAllGroupChats,
        BotCommandScopeAllChatAdministrators,
        BotCommandScopeChat,
        BotCommandScopeChatAdministrators,
        BotCommandScopeChatMember,
    ],
    Field(discriminator="type"),
]


class SetMyCommandsParams(TelegramObject):
    """Request body of setMyCommands."""
    commands: tuple[BotCommand, ...]
    scope: Optional[BotCommandScope] = None
    language_code: Optional[LanguageCode] = None
