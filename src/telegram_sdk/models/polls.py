"""
Polls and dice — https://core.telegram.org/bots/api#poll
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.chat import Chat
from telegram_sdk.models.text import MessageEntity
from telegram_sdk.models.units import Seconds, UnixTime
from telegram_sdk.models.user import User
from telegram_sdk.models.values import PollId


class Dice(TelegramObject):
    emoji: str
    value: int


class PollType(str, Enum):
    REGULAR = "regular"
    QUIZ = "quiz"


class PollOption(TelegramObject):
    text: str
    text_entities: tuple[MessageEntity, ...] = ()
    voter_count: int


class Poll(TelegramObject):
    id: PollId
    question: str
    question_entities: tuple[MessageEntity, ...] = ()
    options: tuple[PollOption, ...]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: PollType
    allows_multiple_answers: bool
    # Quiz only, and only visible to the bot once the poll is closed
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_entities: tuple[MessageEntity, ...] = ()
    open_duration: Optional[Seconds] = Field(default=None, alias="open_period")
    close_date: Optional[UnixTime] = None


class InputPollOption(TelegramObject):
    text: str
    text_parse_mode: Optional[str] = None
    text_entities: Optional[tuple[MessageEntity, ...]] = None


class PollAnswer(TelegramObject):
    """A vote in a non-anonymous poll. Either voter_chat or user is set."""
    poll_id: PollId
    voter_chat: Optional[Chat] = None
    user: Optional[User] = None
    option_ids: tuple[int, ...]  # empty if the vote was retracted
