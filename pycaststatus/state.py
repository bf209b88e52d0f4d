"""Typed values published to channels.

Every value handed to `pycaststatus.interface.StateSink.update_channel` is one of
the types in this module. `UNDEF` is used whenever a value is not known, e.g. when
nothing is playing or a metadata field is missing.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import NamedTuple, Union

from pycaststatus.const import OnOff, PlayPause
from pycaststatus.support import prettydataclass


class UnDefType(Enum):
    """Marker type for an undefined channel value."""

    UNDEF = 0

    def __repr__(self) -> str:
        """Return string representation of marker."""
        return "UNDEF"


UNDEF = UnDefType.UNDEF


@dataclass(frozen=True)
class StringState:
    """Text value."""

    value: str


@dataclass(frozen=True)
class DecimalState:
    """Numeric value.

    Both integers and floating point numbers from metadata end up here.
    """

    value: Decimal

    @classmethod
    def of(cls, number: Union[int, float]) -> "DecimalState":
        """Create a new DecimalState from an int or float."""
        if isinstance(number, float):
            # Going via str gives the shortest representation, i.e. 1.1 and not
            # 1.100000000000000088817841970012523233890533447265625
            return cls(Decimal(str(number)))
        return cls(Decimal(number))


@dataclass(frozen=True)
class PercentState:
    """Percentage in the range 0-100."""

    value: int


@dataclass(frozen=True)
class QuantityState:
    """Number with a unit, e.g. a duration in seconds."""

    value: float
    unit: str = "s"


@dataclass(frozen=True)
class PointState:
    """Geographic location."""

    latitude: Decimal
    longitude: Decimal


@dataclass(frozen=True)
class DateTimeState:
    """Point in time in local time zone."""

    value: datetime


@prettydataclass(max_length=64)
@dataclass(frozen=True)
class RawImage:
    """Binary image data."""

    data: bytes
    mimetype: str = "application/octet-stream"


class ChannelUpdate(NamedTuple):
    """A single value published to a channel."""

    channel: str
    state: "State"


State = Union[
    UnDefType,
    StringState,
    DecimalState,
    PercentState,
    QuantityState,
    PointState,
    DateTimeState,
    RawImage,
    OnOff,
    PlayPause,
]
