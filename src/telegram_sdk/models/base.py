"""
Base model and generic decode/encode for Bot API objects.

Decoding turns a JSON-like tree (dicts, lists, strings, numbers, booleans,
None) into immutable entities; encoding goes the other way. Both are pure
and synchronous.

Field conventions used by every entity:

- optional fields default to ``None`` and are omitted when encoding
- arrays are tuples and default to an empty tuple when absent
- "True"-only flags the API omits when false default to ``False``
- wire names that differ from the Python name are declared as aliases
- unknown wire fields are ignored
"""

from functools import lru_cache
from typing import Any, Optional, Self

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from telegram_sdk.errors import DecodeError, EncodeError


@lru_cache(maxsize=256)
def _cached_adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def _adapter(tp: Any) -> TypeAdapter:
    # generic aliases such as list[Update] compare and hash by value
    try:
        hash(tp)
    except TypeError:
        return TypeAdapter(tp)
    return _cached_adapter(tp)


def decode(tp: Any, tree: Any) -> Any:
    """Decode ``tree`` as ``tp``: a model, a union such as ``ReactionType``, or a container of those."""
    try:
        return _adapter(tp).validate_python(tree)
    except ValidationError as e:
        raise DecodeError.from_validation_error(e) from e


def encode(value: Any, tp: Optional[Any] = None) -> Any:
    """Encode ``value`` to a JSON-like tree using wire names.

    ``tp`` selects the declared type to serialize with. It matters for unions
    whose encoding differs from their variants' (``MaybeInaccessibleMessage``).
    """
    if tp is None:
        tp = type(value)
    try:
        return _adapter(tp).dump_python(value, mode="json", by_alias=True, exclude_none=True)
    except PydanticSerializationError as e:
        if isinstance(e.__cause__, EncodeError):
            raise e.__cause__ from None
        raise EncodeError(str(e)) from e


class TelegramObject(BaseModel):
    """Base for every Bot API object."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    @classmethod
    def decode(cls, tree: Any) -> Self:
        return decode(cls, tree)

    def encode(self) -> dict[str, Any]:
        return encode(self)
