"""Unix time and duration conversions."""

from datetime import datetime, timedelta, timezone

import pytest

from telegram_sdk.errors import EncodeError, MissingField, TypeMismatch
from telegram_sdk.models.base import decode, encode
from telegram_sdk.models.service import VideoChatEnded, VideoChatScheduled
from telegram_sdk.models.units import EPOCH, from_epoch_seconds, from_seconds, to_epoch_seconds, to_seconds


@pytest.mark.parametrize("n", [0, 1, -1, 2147483647, 1700000000])
def test_epoch_round_trip(n):
    assert to_epoch_seconds(from_epoch_seconds(n)) == n


def test_epoch_values():
    assert from_epoch_seconds(0) == EPOCH
    assert from_epoch_seconds(1700000000) == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
    assert from_epoch_seconds(-1) == datetime(1969, 12, 31, 23, 59, 59, tzinfo=timezone.utc)


def test_extreme_datetimes_round_trip():
    for instant in (datetime.min.replace(tzinfo=timezone.utc), datetime.max.replace(microsecond=0, tzinfo=timezone.utc)):
        assert from_epoch_seconds(to_epoch_seconds(instant)) == instant


def test_naive_datetime_is_utc():
    assert to_epoch_seconds(datetime(1970, 1, 1, 0, 0, 1)) == 1


def test_other_timezones_are_converted():
    plus_two = timezone(timedelta(hours=2))
    assert to_epoch_seconds(datetime(1970, 1, 1, 2, 0, 0, tzinfo=plus_two)) == 0


@pytest.mark.parametrize("microsecond", [1, 500000, 999999])
def test_sub_second_instant_cannot_be_encoded(microsecond):
    with pytest.raises(EncodeError):
        to_epoch_seconds(datetime(2024, 1, 1, microsecond=microsecond, tzinfo=timezone.utc))


def test_sub_second_instant_before_epoch_cannot_be_encoded():
    with pytest.raises(EncodeError):
        to_epoch_seconds(EPOCH - timedelta(milliseconds=500))


@pytest.mark.parametrize("n", [0, 1, 3600, 86400 * 365])
def test_duration_round_trip(n):
    assert to_seconds(from_seconds(n)) == n


def test_sub_second_duration_cannot_be_encoded():
    with pytest.raises(EncodeError):
        to_seconds(timedelta(seconds=1.5))


def test_out_of_range_unix_time_is_rejected():
    with pytest.raises(ValueError):
        from_epoch_seconds(10**12)
    with pytest.raises(ValueError):
        from_seconds(10**18)


class TestModelFields:
    def test_decode_unix_time(self):
        scheduled = VideoChatScheduled.decode({"start_date": 1700000000})
        assert scheduled.start_date == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
        assert scheduled.start_date.tzinfo is not None

    def test_encode_unix_time(self):
        scheduled = VideoChatScheduled(start_date=datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc))
        assert scheduled.encode() == {"start_date": 1700000000}

    def test_decode_duration(self):
        ended = VideoChatEnded.decode({"duration": 90})
        assert ended.duration == timedelta(minutes=1, seconds=30)
        assert ended.encode() == {"duration": 90}

    def test_sub_second_field_fails_to_encode(self):
        ended = VideoChatEnded(duration=timedelta(milliseconds=1500))
        with pytest.raises(EncodeError):
            encode(ended)

    @pytest.mark.parametrize("bad", ["1700000000", 1.5, True, None])
    def test_non_integer_time_is_a_type_mismatch(self, bad):
        with pytest.raises(TypeMismatch) as exc:
            decode(VideoChatScheduled, {"start_date": bad})
        assert exc.value.field == "start_date"

    def test_unrepresentable_time_is_a_type_mismatch(self):
        with pytest.raises(TypeMismatch):
            decode(VideoChatScheduled, {"start_date": 10**12})

    def test_missing_time(self):
        with pytest.raises(MissingField) as exc:
            decode(VideoChatScheduled, {})
        assert exc.value.name == "start_date"
