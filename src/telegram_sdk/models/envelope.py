"""
Response envelope — https://core.telegram.org/bots/api#making-requests

Every Bot API call answers with ``{"ok": ..., "result": ...}`` on success and
``{"ok": false, "description": ..., "error_code": ...}`` on failure.
"""

from typing import Generic, Optional, TypeVar

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.values import ChatId

T = TypeVar("T")


class ResponseParameters(TelegramObject):
    """Extra hints attached to some failures."""
    migrate_to_chat_id: Optional[ChatId] = None
    retry_after: Optional[int] = None  # seconds


class Response(TelegramObject, Generic[T]):
    ok: bool
    result: Optional[T] = None
    description: Optional[str] = None
    error_code: Optional[int] = None
    parameters: Optional[ResponseParameters] = None
