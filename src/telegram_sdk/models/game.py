"""
Games — https://core.telegram.org/bots/api#game
"""

from typing import Optional

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.files import Animation, PhotoSize
from telegram_sdk.models.text import MessageEntity


class Game(TelegramObject):
    title: str
    description: str
    photo: tuple[PhotoSize, ...]
    text: Optional[str] = None
    text_entities: tuple[MessageEntity, ...] = ()
    animation: Optional[Animation] = None
