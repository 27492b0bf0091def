"""
Time conversions between wire integers and Python temporal types.

The Bot API sends instants as Unix time in whole seconds and durations as
whole seconds. Conversions use integer arithmetic only, so every value that
``datetime``/``timedelta`` can hold round-trips exactly.
"""

from datetime import datetime, timedelta, timezone
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from telegram_sdk.errors import EncodeError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_SECOND = timedelta(seconds=1)


def _require_int(value: Any, what: str) -> int:
    # bool is an int subclass, but True is not a timestamp
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer number of seconds")
    return value


def from_epoch_seconds(seconds: int) -> datetime:
    try:
        return EPOCH + timedelta(seconds=seconds)
    except OverflowError as e:
        raise ValueError(f"Unix time {seconds} is outside the supported range") from e


def to_epoch_seconds(instant: datetime) -> int:
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    delta = instant - EPOCH
    if delta.microseconds:
        raise EncodeError(f"{instant.isoformat()} has sub-second precision and cannot be sent as Unix time")
    return delta // ONE_SECOND


def from_seconds(seconds: int) -> timedelta:
    try:
        return timedelta(seconds=seconds)
    except OverflowError as e:
        raise ValueError(f"Duration of {seconds}s is outside the supported range") from e


def to_seconds(duration: timedelta) -> int:
    if duration.microseconds:
        raise EncodeError(f"{duration} has sub-second precision and cannot be sent as seconds")
    return duration // ONE_SECOND


def _validate_instant(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
    return from_epoch_seconds(_require_int(value, "Unix time"))


def _validate_duration(value: Any) -> timedelta:
    if isinstance(value, timedelta):
        return value
    return from_seconds(_require_int(value, "Duration"))


UnixTime = Annotated[
    datetime,
    PlainValidator(_validate_instant),
    PlainSerializer(to_epoch_seconds, return_type=int),
]
"""An instant, sent as Unix time in seconds."""

Seconds = Annotated[
    timedelta,
    PlainValidator(_validate_duration),
    PlainSerializer(to_seconds, return_type=int),
]
"""A duration, sent as a whole number of seconds."""
