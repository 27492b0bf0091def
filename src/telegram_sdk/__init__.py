"""
telegram-sdk — typed Telegram Bot API entities for Python.

Immutable models for Bot API objects, a decode/encode kernel for their wire
format, and a small client for getMe, getUpdates and setMyCommands.
"""

from telegram_sdk.client import AsyncTelegramBot, TelegramBot
from telegram_sdk.errors import (
    DecodeError,
    EncodeError,
    MissingDiscriminator,
    MissingField,
    RequestFailedError,
    TelegramError,
    TransportError,
    TypeMismatch,
    UnknownVariant,
)
from telegram_sdk.log import configure_logging
from telegram_sdk.models.base import TelegramObject, decode, encode
from telegram_sdk.settings import Settings, get_settings

__version__ = "0.1.0"
__all__ = [
    "TelegramBot",
    "AsyncTelegramBot",
    "TelegramObject",
    "decode",
    "encode",
    "Settings",
    "get_settings",
    "configure_logging",
    "TelegramError",
    "DecodeError",
    "MissingField",
    "UnknownVariant",
    "TypeMismatch",
    "MissingDiscriminator",
    "EncodeError",
    "RequestFailedError",
    "TransportError",
]
