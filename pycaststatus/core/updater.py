"""Entry point for status messages received from a receiver."""

import logging
from typing import Optional

from pycaststatus.const import ConnectivityDetail, ConnectivityStatus
from pycaststatus.core import UpdaterState
from pycaststatus.core.media import MediaStatusMapper, MetadataMapper
from pycaststatus.core.status import AppStatusMapper, VolumeMapper
from pycaststatus.interface import (
    DeviceStatus,
    ImageResolver,
    MediaStatus,
    RunningApplication,
    StateSink,
    Volume,
)
from pycaststatus.settings import Settings

_LOGGER = logging.getLogger(__name__)


class StatusUpdater:
    """Update channels of a device based on messages received from it.

    This doesn't query anything, it just maps messages onto channels of a
    `pycaststatus.interface.StateSink`. Receiving and scheduling of messages is done
    elsewhere. All methods are expected to be called from one thread at a time,
    except for `volume` which may be read from any thread.

    The updater also keeps track of current volume and the session id of an
    application started by the session owner.
    """

    def __init__(
        self,
        sink: StateSink,
        image_resolver: Optional[ImageResolver] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """Initialize a new StatusUpdater instance."""
        self.sink = sink
        self.settings = settings or Settings()
        self.state = UpdaterState()
        self.app_mapper = AppStatusMapper(sink)
        self.volume_mapper = VolumeMapper(sink, self.state)
        self.metadata_mapper = MetadataMapper(
            sink,
            self.state,
            image_resolver,
            extra_channels=self.settings.metadata.extra_channels,
        )
        self.media_mapper = MediaStatusMapper(sink, self.metadata_mapper)

    @property
    def volume(self) -> Optional[int]:
        """Return last known volume in percent."""
        return self.volume_mapper.volume

    @property
    def app_session_id(self) -> Optional[str]:
        """Return session id of application started by us (if any)."""
        return self.state.app_session_id

    @app_session_id.setter
    def app_session_id(self, session_id: Optional[str]) -> None:
        """Change session id of application started by us."""
        self.state.app_session_id = session_id

    def process_status_update(self, status: Optional[DeviceStatus]) -> None:
        """Handle a new receiver status.

        A missing status means the device is gone and it is marked offline.
        """
        if status is None:
            self.update_status(ConnectivityStatus.Offline)
            self.update_app_status(None)
            self.update_volume_status(None)
            return

        if not status.applications:
            self.state.app_session_id = None

        self.update_status(ConnectivityStatus.Online)
        self.update_app_status(status.running_app)
        self.update_volume_status(status.volume)

    def update_app_status(self, application: Optional[RunningApplication]) -> None:
        """Publish information about running application."""
        self.app_mapper.update(application)

    def update_volume_status(self, volume: Optional[Volume]) -> None:
        """Publish volume information."""
        self.volume_mapper.update(volume)

    def update_media_status(self, media_status: Optional[MediaStatus]) -> None:
        """Publish playback state and metadata."""
        self.media_mapper.update(media_status)

    def update_status(
        self,
        status: ConnectivityStatus,
        detail: ConnectivityDetail = ConnectivityDetail.NoDetail,
        description: Optional[str] = None,
    ) -> None:
        """Change connectivity of device."""
        _LOGGER.debug("Device is now %s (%s)", status.name, detail.name)
        self.sink.set_connectivity(status, detail, description)
