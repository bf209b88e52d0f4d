"""Unit tests for pycaststatus.convert."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
import logging

import pytest

from pycaststatus import convert
from pycaststatus.const import (
    ConnectivityStatus,
    MetadataType,
    OnOff,
    PlayerState,
    PlayPause,
)
from pycaststatus.convert import MetadataValue, ValueKind
from pycaststatus.state import (
    UNDEF,
    DateTimeState,
    DecimalState,
    PercentState,
    PointState,
    QuantityState,
    RawImage,
    StringState,
)

NOW = datetime(2021, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "value,kind",
    [
        (None, ValueKind.Absent),
        (1.5, ValueKind.Number),
        (3, ValueKind.Integer),
        ("abc", ValueKind.String),
        (NOW, ValueKind.DateTime),
        (True, ValueKind.Unsupported),
        ([1, 2], ValueKind.Unsupported),
        ({"a": 1}, ValueKind.Unsupported),
    ],
)
def test_classify(value, kind):
    assert convert.classify(value).kind == kind


@pytest.mark.parametrize(
    "value,state",
    [
        (None, UNDEF),
        (1.1, DecimalState(Decimal("1.1"))),
        (42, DecimalState(Decimal(42))),
        ("abc", StringState("abc")),
        (NOW, DateTimeState(NOW)),
    ],
)
def test_to_channel_state(value, state):
    assert convert.to_channel_state("test", convert.classify(value)) == state


def test_int_and_float_share_representation():
    as_int = convert.to_channel_state("test", convert.classify(2))
    as_float = convert.to_channel_state("test", convert.classify(2.0))
    assert type(as_int) is type(as_float)
    assert as_int == as_float


def test_unsupported_value_logs_warning(caplog):
    caplog.set_level(logging.WARNING)
    state = convert.to_channel_state(
        "title", MetadataValue(ValueKind.Unsupported, [1])
    )

    assert state is UNDEF
    assert "Update channel title: Unsupported value type list" in caplog.text


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2020-01-02T03:04:05Z", datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)),
        (
            "2020-01-02T03:04:05.250Z",
            datetime(2020, 1, 2, 3, 4, 5, 250000, tzinfo=timezone.utc),
        ),
        (
            "2020-01-02T03:04:05.5Z",
            datetime(2020, 1, 2, 3, 4, 5, 500000, tzinfo=timezone.utc),
        ),
        (
            "2020-01-02T03:04:05.12+00:00",
            datetime(2020, 1, 2, 3, 4, 5, 120000, tzinfo=timezone.utc),
        ),
        (
            "2020-01-02T03:04:05.12345Z",
            datetime(2020, 1, 2, 3, 4, 5, 123450, tzinfo=timezone.utc),
        ),
        (
            "2020-01-02T03:04:05.123456789Z",
            datetime(2020, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc),
        ),
        (
            "2020-01-02T04:04:05+01:00",
            datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        ),
        ("2020-01-02T03:04:05", datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)),
    ],
)
def test_parse_instant(value, expected):
    parsed = convert.parse_instant(value)
    assert parsed == expected
    assert parsed.tzinfo is not None


def test_parse_instant_is_local_time():
    parsed = convert.parse_instant("2020-01-02T03:04:05Z")
    local_offset = datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc).astimezone()
    assert parsed.utcoffset() == local_offset.utcoffset()


@pytest.mark.parametrize("value", ["", "garbage", "2020-02-30T00:00:00Z", 123, None])
def test_parse_invalid_instant(value):
    assert convert.parse_instant(value) is None


@pytest.mark.parametrize(
    "state,output",
    [
        (PlayerState.Idle, "IDLE"),
        (PlayerState.Buffering, "BUFFERING"),
        (PlayerState.Playing, "PLAYING"),
        (PlayerState.Paused, "PAUSED"),
        (PlayerState.Unknown, "UNKNOWN"),
        ("LOADING", "LOADING"),
    ],
)
def test_player_state_str(state, output):
    assert convert.player_state_str(state) == output


@pytest.mark.parametrize(
    "metadata_type,output",
    [
        (MetadataType.Generic, "GENERIC"),
        (MetadataType.Movie, "MOVIE"),
        (MetadataType.TvShow, "TV_SHOW"),
        (MetadataType.MusicTrack, "MUSIC_TRACK"),
        (MetadataType.Photo, "PHOTO"),
        (99, "GENERIC"),
    ],
)
def test_metadata_type_str(metadata_type, output):
    assert convert.metadata_type_str(metadata_type) == output


@pytest.mark.parametrize(
    "status,output",
    [
        (ConnectivityStatus.Unknown, "Unknown"),
        (ConnectivityStatus.Online, "Online"),
        (ConnectivityStatus.Offline, "Offline"),
        (1234, "Unsupported"),
    ],
)
def test_connectivity_str(status, output):
    assert convert.connectivity_str(status) == output


@pytest.mark.parametrize(
    "state,output",
    [
        (UNDEF, None),
        (OnOff.On, "ON"),
        (PlayPause.Pause, "PAUSE"),
        (StringState("abc"), "abc"),
        (DecimalState(Decimal("1.5")), "1.5"),
        (PercentState(37), "37"),
        (QuantityState(12.5), "12.5 s"),
        (PointState(Decimal("59.3"), Decimal("18.1")), "59.3,18.1"),
        (
            DateTimeState(datetime(2020, 1, 2, tzinfo=timezone(timedelta(hours=1)))),
            "2020-01-02T00:00:00+01:00",
        ),
        (RawImage(b"1234", "image/jpeg"), "<image/jpeg, 4 bytes>"),
    ],
)
def test_state_str(state, output):
    assert convert.state_str(state) == output
