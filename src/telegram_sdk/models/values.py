"""
Single-value wrappers for identifiers, codes and amounts.

Each wrapper is a subclass of ``int`` or ``str``: it compares and orders like
the primitive it wraps and travels on the wire as that bare primitive.
"""

from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from telegram_sdk.errors import EncodeError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class IntValue(int):
    __slots__ = ()

    min_value = INT64_MIN
    max_value = INT64_MAX

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    @classmethod
    def _encode(cls, value: int) -> int:
        if not cls.min_value <= value <= cls.max_value:
            raise EncodeError(f"{cls.__name__} {int(value)} does not fit in a signed 64-bit integer")
        return int(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.int_schema(ge=cls.min_value, le=cls.max_value, strict=True),
            serialization=core_schema.plain_serializer_function_ser_schema(cls._encode, return_schema=core_schema.int_schema()),
        )


class StrValue(str):
    __slots__ = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(str, return_schema=core_schema.str_schema()),
        )


class UserId(IntValue):
    __slots__ = ()


class ChatId(IntValue):
    __slots__ = ()


class MessageIdentifier(IntValue):
    __slots__ = ()


class UpdateId(IntValue):
    __slots__ = ()


class ChecklistTaskId(IntValue):
    __slots__ = ()


class AccentColor(IntValue):
    """https://core.telegram.org/bots/api#accent-colors"""

    __slots__ = ()


class Rarity(IntValue):
    """How rare an item is, in permille."""

    __slots__ = ()

    @property
    def permille(self) -> int:
        return int(self)

    @property
    def percent(self) -> int:
        return int(self) // 10


class CurrencyAmount(IntValue):
    """Amount in the smallest units of a currency (cents for USD)."""

    __slots__ = ()


class FileId(StrValue):
    """Identifier usable to download or reuse a file."""

    __slots__ = ()


class FileUniqueId(StrValue):
    """Identifier that stays the same over time and across bots, not usable to download the file."""

    __slots__ = ()


class PollId(StrValue):
    __slots__ = ()


class LanguageCode(StrValue):
    """IETF language tag."""

    __slots__ = ()


class CountryCode(StrValue):
    """Two-letter ISO 3166-1 alpha-2 country code."""

    __slots__ = ()


class Currency(StrValue):
    """Three-letter ISO 4217 currency code, or ``XTR`` for Telegram Stars."""

    __slots__ = ()

    @property
    def is_telegram_stars(self) -> bool:
        return self == "XTR"
