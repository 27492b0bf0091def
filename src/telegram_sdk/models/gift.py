"""
Gifts — https://core.telegram.org/bots/api#gift
"""

from typing import Optional

from pydantic import Field

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.chat import Chat
from telegram_sdk.models.files import Sticker
from telegram_sdk.models.text import MessageEntity
from telegram_sdk.models.units import UnixTime
from telegram_sdk.models.values import Rarity


class AcceptedGiftTypes(TelegramObject):
    unlimited_gifts: Optional[bool] = None
    limited_gifts: Optional[bool] = None
    unique_gifts: Optional[bool] = None
    premium_subscription: Optional[bool] = None


class Gift(TelegramObject):
    """A regular gift sold by Telegram."""
    id: str
    sticker: Sticker
    star_count: int
    upgrade_star_count: Optional[int] = None
    total_count: Optional[int] = None  # limited gifts only
    remaining_count: Optional[int] = None
    publisher_chat: Optional[Chat] = None


class GiftInfo(TelegramObject):
    """Service message about a regular gift that was sent or received."""
    gift: Gift
    owned_gift_id: Optional[str] = None
    convert_star_count: Optional[int] = None
    prepaid_upgrade_star_count: Optional[int] = None
    can_be_upgraded: bool = False
    text: Optional[str] = None
    entities: tuple[MessageEntity, ...] = ()
    is_private: bool = False


class UniqueGiftModel(TelegramObject):
    name: str
    sticker: Sticker
    rarity: Rarity = Field(alias="rarity_per_mille")


class UniqueGiftSymbol(TelegramObject):
    name: str
    sticker: Sticker
    rarity: Rarity = Field(alias="rarity_per_mille")


class UniqueGiftBackdropColors(TelegramObject):
    center_color: int
    edge_color: int
    symbol_color: int
    text_color: int


class UniqueGiftBackdrop(TelegramObject):
    name: str
    colors: UniqueGiftBackdropColors
    rarity: Rarity = Field(alias="rarity_per_mille")


class UniqueGift(TelegramObject):
    """A gift upgraded to a unique one."""
    base_name: str
    name: str  # unique, usable in https://t.me/nft/<name>
    number: int
    model: UniqueGiftModel
    symbol: UniqueGiftSymbol
    backdrop: UniqueGiftBackdrop
    publisher_chat: Optional[Chat] = None


class UniqueGiftInfo(TelegramObject):
    gift: UniqueGift
    origin: str  # "upgrade" | "transfer" | "resale"
    last_resale_star_count: Optional[int] = None
    owned_gift_id: Optional[str] = None
    transfer_star_count: Optional[int] = None
    next_transfer_date: Optional[UnixTime] = None
