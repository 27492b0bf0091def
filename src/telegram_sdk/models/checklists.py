"""
Checklists — https://core.telegram.org/bots/api#checklist
"""

from typing import Optional

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.text import MessageEntity
from telegram_sdk.models.units import UnixTime
from telegram_sdk.models.user import User
from telegram_sdk.models.values import ChecklistTaskId


class ChecklistTask(TelegramObject):
    id: ChecklistTaskId
    text: str
    text_entities: tuple[MessageEntity, ...] = ()
    completed_by_user: Optional[User] = None
    completion_date: Optional[UnixTime] = None


class Checklist(TelegramObject):
    title: str
    title_entities: tuple[MessageEntity, ...] = ()
    tasks: tuple[ChecklistTask, ...]
    others_can_add_tasks: bool = False
    others_can_mark_tasks_as_done: bool = False


class InputChecklistTask(TelegramObject):
    id: ChecklistTaskId
    text: str
    parse_mode: Optional[str] = None
    text_entities: Optional[tuple[MessageEntity, ...]] = None


class InputChecklist(TelegramObject):
    """A checklist to send."""
    title: str
    parse_mode: Optional[str] = None
    title_entities: Optional[tuple[MessageEntity, ...]] = None
    tasks: tuple[InputChecklistTask, ...]
    others_can_add_tasks: Optional[bool] = None
    others_can_mark_tasks_as_done: Optional[bool] = None
