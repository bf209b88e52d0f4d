"""State sink module."""

from typing import Dict, Iterable, Optional, Sequence, Set

from pycaststatus.const import ALL_CHANNELS, ConnectivityDetail, ConnectivityStatus
from pycaststatus.interface import StateSink
from pycaststatus.state import UNDEF, State


class AbstractStateSink(StateSink):
    """Abstract base class handling bookkeeping of channels.

    Keeps track of bound and observed channels, the latest value of each channel and
    device connectivity. New sinks should generally inherit from this class and
    implement `publish` to forward values somewhere.
    """

    def __init__(
        self,
        channels: Optional[Iterable[str]] = None,
        observed: Optional[Iterable[str]] = None,
    ) -> None:
        """Initialize a new AbstractStateSink instance.

        All known channels are bound if channels is None and all bound channels are
        observed if observed is None.
        """
        self._channels = list(ALL_CHANNELS if channels is None else channels)
        self._observed: Set[str] = set(
            self._channels if observed is None else observed
        )
        self._values: Dict[str, State] = {}
        self.connectivity = ConnectivityStatus.Unknown
        self.connectivity_detail = ConnectivityDetail.NoDetail
        self.connectivity_description: Optional[str] = None

    @property
    def channels(self) -> Sequence[str]:
        """Return identifiers of all bound channels."""
        return self._channels

    def is_observed(self, channel: str) -> bool:
        """Return if a channel has at least one subscriber."""
        return channel in self._observed

    def observe(self, channel: str) -> None:
        """Start observing a channel."""
        self._observed.add(channel)

    def unobserve(self, channel: str) -> None:
        """Stop observing a channel."""
        self._observed.discard(channel)

    def get(self, channel: str) -> State:
        """Return latest value of a channel (UNDEF if never updated)."""
        return self._values.get(channel, UNDEF)

    def set_connectivity(
        self,
        status: ConnectivityStatus,
        detail: ConnectivityDetail = ConnectivityDetail.NoDetail,
        description: Optional[str] = None,
    ) -> None:
        """Change overall connectivity of the device."""
        self.connectivity = status
        self.connectivity_detail = detail
        self.connectivity_description = description

    def update_channel(self, channel: str, state: State) -> None:
        """Store and publish a new value for a channel."""
        self._values[channel] = state
        self.publish(channel, state)

    def publish(self, channel: str, state: State) -> None:
        """Forward a new channel value, does nothing by default."""
