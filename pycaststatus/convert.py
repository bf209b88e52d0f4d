"""Various types of extraction and conversion functions."""

from datetime import datetime, timezone
from enum import Enum
import logging
import re
from typing import Any, NamedTuple, Optional, Union

from pycaststatus.const import (
    ConnectivityStatus,
    MetadataType,
    OnOff,
    PlayerState,
    PlayPause,
)
from pycaststatus.state import (
    UNDEF,
    DateTimeState,
    DecimalState,
    PercentState,
    PointState,
    QuantityState,
    RawImage,
    State,
    StringState,
)

_LOGGER = logging.getLogger(__name__)

# Seconds with fraction, e.g. "05.5" in 2020-01-02T03:04:05.5Z
_SECONDS_FRACTION = re.compile(r"(?<=:\d\d)\.(\d+)")


class ValueKind(Enum):
    """Kind of an untyped metadata value."""

    Absent = 0
    Number = 1
    Integer = 2
    String = 3
    DateTime = 4
    Unsupported = 5


class MetadataValue(NamedTuple):
    """Metadata value tagged with its kind."""

    kind: ValueKind
    value: Any = None


ABSENT = MetadataValue(ValueKind.Absent)


def classify(value: Any) -> MetadataValue:
    """Tag an untyped metadata value with its kind."""
    if value is None:
        return ABSENT
    # bool is a subclass of int but has no numeric meaning in metadata
    if isinstance(value, bool):
        return MetadataValue(ValueKind.Unsupported, value)
    if isinstance(value, float):
        return MetadataValue(ValueKind.Number, value)
    if isinstance(value, int):
        return MetadataValue(ValueKind.Integer, value)
    if isinstance(value, str):
        return MetadataValue(ValueKind.String, value)
    if isinstance(value, datetime):
        return MetadataValue(ValueKind.DateTime, value)
    return MetadataValue(ValueKind.Unsupported, value)


def to_channel_state(channel: str, value: MetadataValue) -> State:
    """Convert a tagged metadata value into a channel state.

    Unsupported values result in UNDEF and a logged warning.
    """
    if value.kind == ValueKind.Absent:
        return UNDEF
    if value.kind in (ValueKind.Number, ValueKind.Integer):
        return DecimalState.of(value.value)
    if value.kind == ValueKind.String:
        return StringState(value.value)
    if value.kind == ValueKind.DateTime:
        return DateTimeState(value.value)

    _LOGGER.warning(
        "Update channel %s: Unsupported value type %s",
        channel,
        type(value.value).__name__,
    )
    return UNDEF


def parse_instant(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 instant and return it in local time zone.

    Returns None if value is not a string or not a valid instant. Instants without
    time zone are assumed to be in UTC.
    """
    if not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    # Fraction must have exactly six digits for fromisoformat on older Pythons
    text = _SECONDS_FRACTION.sub(
        lambda match: "." + match.group(1)[:6].ljust(6, "0"), text, count=1
    )

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone()


def player_state_str(state: Union[PlayerState, str]) -> str:
    """Convert player state to the string used by receivers.

    States not known by pycaststatus are kept as strings and returned unchanged.
    """
    if isinstance(state, str):
        return state
    return {
        PlayerState.Idle: "IDLE",
        PlayerState.Buffering: "BUFFERING",
        PlayerState.Playing: "PLAYING",
        PlayerState.Paused: "PAUSED",
        PlayerState.Unknown: "UNKNOWN",
    }.get(state, "UNKNOWN")


def metadata_type_str(metadata_type: MetadataType) -> str:
    """Convert metadata type to the name used by receivers."""
    return {
        MetadataType.Generic: "GENERIC",
        MetadataType.Movie: "MOVIE",
        MetadataType.TvShow: "TV_SHOW",
        MetadataType.MusicTrack: "MUSIC_TRACK",
        MetadataType.Photo: "PHOTO",
    }.get(metadata_type, "GENERIC")


def connectivity_str(status: ConnectivityStatus) -> str:
    """Convert connectivity status to string."""
    return {
        ConnectivityStatus.Unknown: "Unknown",
        ConnectivityStatus.Online: "Online",
        ConnectivityStatus.Offline: "Offline",
    }.get(status, "Unsupported")


def state_str(  # pylint: disable=too-many-return-statements
    state: State,
) -> Optional[str]:
    """Convert a channel state to a readable string.

    UNDEF is converted to None.
    """
    if state is UNDEF:
        return None
    if isinstance(state, (OnOff, PlayPause)):
        return state.name.upper()
    if isinstance(state, StringState):
        return state.value
    if isinstance(state, (DecimalState, PercentState)):
        return str(state.value)
    if isinstance(state, QuantityState):
        return f"{state.value} {state.unit}"
    if isinstance(state, PointState):
        return f"{state.latitude},{state.longitude}"
    if isinstance(state, DateTimeState):
        return state.value.isoformat()
    if isinstance(state, RawImage):
        return f"<{state.mimetype}, {len(state.data)} bytes>"
    return str(state)
