"""
Formatted text — https://core.telegram.org/bots/api#messageentity

Entity offsets and lengths are counted in UTF-16 code units, not in Python
characters: an emoji outside the BMP counts as 2.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.user import User


class _Entity(TelegramObject):
    type: str
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length

    def extract(self, text: str) -> str:
        """Return the part of ``text`` covered by this entity."""
        return utf16_slice(text, self.offset, self.end)


class MessageEntityMention(_Entity):
    type: Literal["mention"] = "mention"


class MessageEntityHashtag(_Entity):
    type: Literal["hashtag"] = "hashtag"


class MessageEntityCashtag(_Entity):
    type: Literal["cashtag"] = "cashtag"


class MessageEntityBotCommand(_Entity):
    type: Literal["bot_command"] = "bot_command"


class MessageEntityUrl(_Entity):
    type: Literal["url"] = "url"


class MessageEntityEmail(_Entity):
    type: Literal["email"] = "email"


class MessageEntityPhoneNumber(_Entity):
    type: Literal["phone_number"] = "phone_number"


class MessageEntityBold(_Entity):
    type: Literal["bold"] = "bold"


class MessageEntityItalic(_Entity):
    type: Literal["italic"] = "italic"


class MessageEntityUnderline(_Entity):
    type: Literal["underline"] = "underline"


class MessageEntityStrikethrough(_Entity):
    type: Literal["strikethrough"] = "strikethrough"


class MessageEntitySpoiler(_Entity):
    type: Literal["spoiler"] = "spoiler"


class MessageEntityBlockQuote(_Entity):
    type: Literal["blockquote"] = "blockquote"


class MessageEntityExpandableBlockQuote(_Entity):
    type: Literal["expandable_blockquote"] = "expandable_blockquote"


class MessageEntityCode(_Entity):
    type: Literal["code"] = "code"


class MessageEntityPre(_Entity):
    type: Literal["pre"] = "pre"
    programming_language: Optional[str] = Field(default=None, alias="language")


class MessageEntityTextLink(_Entity):
    type: Literal["text_link"] = "text_link"
    url: str


class MessageEntityTextMention(_Entity):
    """Mention of a user without a username."""
    type: Literal["text_mention"] = "text_mention"
    user: User


class MessageEntityCustomEmoji(_Entity):
    type: Literal["custom_emoji"] = "custom_emoji"
    emoji_id: str = Field(alias="custom_emoji_id")


MessageEntity = Annotated[
    Union[
        MessageEntityMention,
        MessageEntityHashtag,
        MessageEntityCashtag,
        MessageEntityBotCommand,
        MessageEntityUrl,
        MessageEntityEmail,
        MessageEntityPhoneNumber,
        MessageEntityBold,
        MessageEntityItalic,
        MessageEntityUnderline,
        MessageEntityStrikethrough,
        MessageEntitySpoiler,
        MessageEntityBlockQuote,
        MessageEntityExpandableBlockQuote,
        MessageEntityCode,
        MessageEntityPre,
        MessageEntityTextLink,
        MessageEntityTextMention,
        MessageEntityCustomEmoji,
    ],
    Field(discriminator="type"),
]


class TextQuote(TelegramObject):
    """The quoted part of a message replied to."""
    text: str
    entities: tuple[MessageEntity, ...] = ()
    position: int  # in UTF-16 code units
    is_manual: bool = False


class LinkPreviewOptions(TelegramObject):
    is_disabled: bool = False
    url: Optional[str] = None
    prefer_small_media: bool = False
    prefer_large_media: bool = False
    show_above_text: bool = False


def utf16_slice(text: str, start: int, end: int) -> str:
    # lone surrogates survive JSON decoding and still count as one unit each
    data = text.encode("utf-16-le", errors="surrogatepass")
    return data[start * 2:end * 2].decode("utf-16-le", errors="surrogatepass")
