"""
Giveaways — https://core.telegram.org/bots/api#giveaway

GiveawayCompleted embeds a message and lives in telegram_sdk.models.message.
"""

from typing import Optional

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.chat import Chat
from telegram_sdk.models.units import UnixTime
from telegram_sdk.models.user import User
from telegram_sdk.models.values import CountryCode


class GiveawayCreated(TelegramObject):
    prize_star_count: Optional[int] = None


class Giveaway(TelegramObject):
    chats: tuple[Chat, ...]
    winners_selection_date: UnixTime
    winner_count: int
    only_new_members: bool = False
    has_public_winners: bool = False
    prize_description: Optional[str] = None
    country_codes: tuple[CountryCode, ...] = ()
    prize_star_count: Optional[int] = None
    premium_subscription_month_count: Optional[int] = None


class GiveawayWinners(TelegramObject):
    chat: Chat
    giveaway_message_id: int
    winners_selection_date: UnixTime
    winner_count: int
    winners: tuple[User, ...]
    additional_chat_count: Optional[int] = None
    prize_star_count: Optional[int] = None
    premium_subscription_month_count: Optional[int] = None
    unclaimed_prize_count: Optional[int] = None
    only_new_members: bool = False
    was_refunded: bool = False
    prize_description: Optional[str] = None
