"""
Forum topic service messages — https://core.telegram.org/bots/api#forumtopiccreated
"""

from typing import Optional

from telegram_sdk.models.base import TelegramObject


class ForumTopicCreated(TelegramObject):
    name: str
    icon_color: int  # RGB
    icon_custom_emoji_id: Optional[str] = None


class ForumTopicEdited(TelegramObject):
    name: Optional[str] = None
    icon_custom_emoji_id: Optional[str] = None  # empty string if the icon was removed


class ForumTopicClosed(TelegramObject):
    pass


class ForumTopicReopened(TelegramObject):
    pass


class GeneralForumTopicHidden(TelegramObject):
    pass


class GeneralForumTopicUnhidden(TelegramObject):
    pass
