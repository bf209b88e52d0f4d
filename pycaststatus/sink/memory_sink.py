"""Memory sink module."""

from typing import List

from pycaststatus.sink import AbstractStateSink
from pycaststatus.state import ChannelUpdate, State


class MemoryStateSink(AbstractStateSink):
    """Memory based state sink.

    Values are kept in memory only. Every update since the last call to `clear` is
    also recorded in order, which makes it easy to see what an updater published.
    """

    def __init__(self, *args, **kwargs) -> None:
        """Initialize a new MemoryStateSink instance."""
        super().__init__(*args, **kwargs)
        self.updates: List[ChannelUpdate] = []

    def publish(self, channel: str, state: State) -> None:
        """Record channel update."""
        self.updates.append(ChannelUpdate(channel, state))

    def updates_for(self, channel: str) -> List[State]:
        """Return all recorded values published to a channel."""
        return [update.state for update in self.updates if update.channel == channel]

    def clear(self) -> None:
        """Forget recorded updates (but not latest values)."""
        self.updates.clear()

    def __str__(self) -> str:
        """Return string representation of MemoryStateSink."""
        return "MemoryStateSink"
