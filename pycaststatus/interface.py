"""Public interface exposed by library.

This module contains the data model of status messages reported by a receiver as
well as the interfaces of the collaborators a `pycaststatus.core.StatusUpdater`
talks to: a state sink receiving channel values and an image resolver.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from pycaststatus import convert
from pycaststatus.const import (
    ConnectivityDetail,
    ConnectivityStatus,
    MetadataType,
    PlayerState,
)
from pycaststatus.state import RawImage, State
from pycaststatus.support import prettydataclass


@prettydataclass()
@dataclass
class RunningApplication:
    """Application currently running on a receiver."""

    name: Optional[str] = None
    id: Optional[str] = None  # pylint: disable=invalid-name
    status_text: Optional[str] = None
    is_idle_screen: bool = False
    session_id: Optional[str] = None
    transport_id: Optional[str] = None


@dataclass
class Volume:
    """Receiver volume."""

    level: float = 0.0
    """Volume level in range 0.0-1.0."""

    muted: bool = False


@dataclass
class DeviceStatus:
    """Overall status of a receiver."""

    applications: Optional[List[RunningApplication]] = None
    volume: Optional[Volume] = None

    @property
    def running_app(self) -> Optional[RunningApplication]:
        """Return the application currently running (if any)."""
        if self.applications:
            return self.applications[0]
        return None


@prettydataclass()
@dataclass
class Media:
    """Media loaded by a receiver."""

    duration: Optional[float] = None
    """Duration in seconds.

    This is None for a short while when a new track is about to start.
    """

    metadata_type: MetadataType = MetadataType.Generic
    metadata: Optional[Dict[str, Any]] = None
    content_id: Optional[str] = None
    content_type: Optional[str] = None
    stream_type: Optional[str] = None


@dataclass
class MediaStatus:
    """Playback state of a receiver."""

    player_state: Union[PlayerState, str] = PlayerState.Unknown
    current_time: float = 0.0
    """Current playback position in seconds."""

    media: Optional[Media] = None
    media_session_id: Optional[int] = None
    idle_reason: Optional[str] = None

    def __str__(self) -> str:
        """Convert media status to readable string."""
        output = [f"Player state: {convert.player_state_str(self.player_state)}"]
        if self.idle_reason:
            output.append(f" Idle reason: {self.idle_reason}")
        output.append(f"    Position: {self.current_time}s")
        if self.media is not None:
            metadata_type = convert.metadata_type_str(self.media.metadata_type)
            output.append(f"  Media type: {metadata_type}")
            if self.media.duration is not None:
                output.append(f"    Duration: {self.media.duration}s")
            if self.media.content_id:
                output.append(f"     Content: {self.media.content_id}")
        return "\n".join(output)


class StateSink(ABC):
    """Receiver of channel values produced from status messages.

    A sink is typically backed by some kind of home automation system that
    exposes each channel to users. Channels nobody observes are skipped by the
    updater when they are expensive to compute.
    """

    @abstractmethod
    def set_connectivity(
        self,
        status: ConnectivityStatus,
        detail: ConnectivityDetail = ConnectivityDetail.NoDetail,
        description: Optional[str] = None,
    ) -> None:
        """Change overall connectivity of the device."""
        raise NotImplementedError()

    @abstractmethod
    def update_channel(self, channel: str, state: State) -> None:
        """Publish a new value to a channel."""
        raise NotImplementedError()

    @abstractmethod
    def is_observed(self, channel: str) -> bool:
        """Return if a channel has at least one subscriber."""
        raise NotImplementedError()

    @property
    @abstractmethod
    def channels(self) -> Sequence[str]:
        """Return identifiers of all channels bound to the device."""
        raise NotImplementedError()


class ImageResolver(ABC):  # pylint: disable=too-few-public-methods
    """Fetches binary image content for an image URL."""

    @abstractmethod
    def resolve(self, url: str) -> Optional[RawImage]:
        """Return image found at URL or None if it could not be fetched.

        This call is blocking and performed on the thread delivering status
        updates.
        """
        raise NotImplementedError()
