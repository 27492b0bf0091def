"""
Suggested posts in channel direct messages — https://core.telegram.org/bots/api#suggestedpostinfo

The service messages about a suggested post embed the post itself and live
in telegram_sdk.models.message.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.units import UnixTime


class SuggestedPostPrice(TelegramObject):
    currency: str  # "XTR" or "TON"
    amount: int  # Telegram Stars, or nanotoncoins


class SuggestedPostState(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"


class SuggestedPostInfo(TelegramObject):
    state: SuggestedPostState
    price: Optional[SuggestedPostPrice] = None
    send_date: Optional[UnixTime] = None


class SuggestedPostRefundReason(str, Enum):
    POST_DELETED = "post_deleted"
    PAYMENT_REFUNDED = "payment_refunded"


class StarAmount(TelegramObject):
    amount: int
    nano_star_amount: Optional[int] = Field(default=None, alias="nanostar_amount")
