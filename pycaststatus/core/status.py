"""Mappers for receiver status, i.e. running application and volume."""

import logging
from typing import Optional

from pycaststatus import const
from pycaststatus.core import UpdaterState
from pycaststatus.interface import RunningApplication, StateSink, Volume
from pycaststatus.state import UNDEF, PercentState, State, StringState

_LOGGER = logging.getLogger(__name__)


def _string_or_undef(value: Optional[str]) -> State:
    return UNDEF if value is None else StringState(value)


class AppStatusMapper:
    """Publish information about the running application."""

    def __init__(self, sink: StateSink) -> None:
        """Initialize a new AppStatusMapper instance."""
        self.sink = sink

    def update(self, application: Optional[RunningApplication]) -> None:
        """Publish application channels.

        All channels are always published. If no application is running, they are
        cleared and the device is considered idling.
        """
        name: State = UNDEF
        app_id: State = UNDEF
        status_text: State = UNDEF
        idling = const.OnOff.On

        if application is not None:
            name = _string_or_undef(application.name)
            app_id = _string_or_undef(application.id)
            status_text = _string_or_undef(application.status_text)
            idling = const.OnOff.from_bool(application.is_idle_screen)

        self.sink.update_channel(const.CHANNEL_APP_NAME, name)
        self.sink.update_channel(const.CHANNEL_APP_ID, app_id)
        self.sink.update_channel(const.CHANNEL_STATUS_TEXT, status_text)
        self.sink.update_channel(const.CHANNEL_IDLING, idling)


class VolumeMapper:
    """Publish volume and mute state and remember current volume."""

    def __init__(self, sink: StateSink, state: UpdaterState) -> None:
        """Initialize a new VolumeMapper instance."""
        self.sink = sink
        self.state = state

    @property
    def volume(self) -> Optional[int]:
        """Return last published volume in percent (None if not known yet)."""
        return self.state.volume

    def update(self, volume: Optional[Volume]) -> None:
        """Publish volume channels.

        A missing volume does not change anything.
        """
        if volume is None:
            return

        percent = min(max(round(volume.level * 100), 0), 100)
        self.state.volume = percent
        _LOGGER.debug("Volume is now %d%% (muted=%s)", percent, volume.muted)

        self.sink.update_channel(const.CHANNEL_VOLUME, PercentState(percent))
        self.sink.update_channel(
            const.CHANNEL_MUTE, const.OnOff.from_bool(volume.muted)
        )
