"""Mappers for media status and metadata of what is currently playing."""

from decimal import Decimal
import logging
from typing import Any, Iterable, Mapping, Optional

from pycaststatus import const
from pycaststatus.convert import (
    ABSENT,
    MetadataValue,
    ValueKind,
    classify,
    metadata_type_str,
    parse_instant,
    to_channel_state,
)
from pycaststatus.core import UpdaterState
from pycaststatus.interface import ImageResolver, Media, MediaStatus, StateSink
from pycaststatus.state import UNDEF, PointState, QuantityState, State, StringState

_LOGGER = logging.getLogger(__name__)

# Media information is kept in these states even if no media is reported
_ACTIVE_STATES = (
    const.PlayerState.Playing,
    const.PlayerState.Paused,
    const.PlayerState.Buffering,
)


class MetadataMapper:
    """Publish duration, metadata type and metadata derived channels."""

    def __init__(
        self,
        sink: StateSink,
        state: UpdaterState,
        image_resolver: Optional[ImageResolver] = None,
        extra_channels: Iterable[str] = (),
    ) -> None:
        """Initialize a new MetadataMapper instance."""
        self.sink = sink
        self.state = state
        self.image_resolver = image_resolver
        self.simple_channels = const.METADATA_SIMPLE_CHANNELS.union(extra_channels)

    def update(self, media: Optional[Media]) -> None:
        """Publish everything derived from media.

        Passing None clears all channels.
        """
        duration: State = UNDEF
        metadata_type = const.MetadataType.Generic
        if media is not None:
            metadata_type = media.metadata_type

            # duration can be None when a new track is about to play
            if media.duration is not None:
                duration = QuantityState(media.duration)

        self.sink.update_channel(const.CHANNEL_DURATION, duration)
        self.sink.update_channel(
            const.CHANNEL_METADATA_TYPE, StringState(metadata_type_str(metadata_type))
        )

        metadata = {} if media is None or media.metadata is None else media.metadata
        self.update_location(metadata)
        self.update_image(metadata)

        for channel in self.sink.channels:
            if channel in self.simple_channels:
                self.update_channel(channel, metadata)

    def update_location(self, metadata: Mapping[str, Any]) -> None:
        """Publish latitude and longitude combined into one channel."""
        if not self.sink.is_observed(const.CHANNEL_LOCATION):
            return

        lat = classify(metadata.get(const.LOCATION_METADATA_LATITUDE))
        lon = classify(metadata.get(const.LOCATION_METADATA_LONGITUDE))
        numeric = (ValueKind.Number, ValueKind.Integer)

        if lat.kind not in numeric or lon.kind not in numeric:
            if lat != ABSENT and lon != ABSENT:
                _LOGGER.warning("Ignoring location with bad values: %s, %s", lat, lon)
            self.sink.update_channel(const.CHANNEL_LOCATION, UNDEF)
        else:
            self.sink.update_channel(
                const.CHANNEL_LOCATION,
                PointState(Decimal(str(lat.value)), Decimal(str(lon.value))),
            )

    def update_image(self, metadata: Mapping[str, Any]) -> None:
        """Publish image source and image data if it changed."""
        src_observed = self.sink.is_observed(const.CHANNEL_IMAGE_SRC)
        image_observed = self.sink.is_observed(const.CHANNEL_IMAGE)
        if not (src_observed or image_observed):
            return

        image_src = self._find_image_src(metadata.get(const.IMAGES_METADATA))

        # Same image as last time, nothing to do
        if image_src == self.state.image_src:
            return
        self.state.image_src = image_src

        if src_observed:
            self.sink.update_channel(
                const.CHANNEL_IMAGE_SRC,
                UNDEF if image_src is None else StringState(image_src),
            )

        if image_observed:
            self.sink.update_channel(const.CHANNEL_IMAGE, self._resolve(image_src))

    def update_channel(self, channel: str, metadata: Mapping[str, Any]) -> None:
        """Publish a metadata value using channel id as key."""
        if not self.sink.is_observed(channel):
            return

        self.sink.update_channel(
            channel, to_channel_state(channel, self._get_value(channel, metadata))
        )

    def _resolve(self, image_src: Optional[str]) -> State:
        if image_src is None:
            return UNDEF
        if self.image_resolver is None:
            _LOGGER.debug("No image resolver, not fetching %s", image_src)
            return UNDEF

        image = self.image_resolver.resolve(image_src)
        return UNDEF if image is None else image

    @staticmethod
    def _find_image_src(images: Any) -> Optional[str]:
        if not isinstance(images, list):
            if images is not None:
                _LOGGER.debug("Expected list of images, got %s", type(images).__name__)
            return None

        for image in images:
            if isinstance(image, Mapping):
                url = image.get(const.IMAGE_URL_METADATA)
                if url is not None:
                    return str(url)
        return None

    @staticmethod
    def _get_value(channel: str, metadata: Mapping[str, Any]) -> MetadataValue:
        value = metadata.get(channel)
        if channel not in const.DATE_CHANNELS or value is None:
            return classify(value)

        instant = parse_instant(value)
        if instant is None:
            _LOGGER.warning("Update channel %s: Invalid date %r", channel, value)
            return ABSENT
        return classify(instant)


class MediaStatusMapper:
    """Publish playback state and position of current media."""

    def __init__(self, sink: StateSink, metadata_mapper: MetadataMapper) -> None:
        """Initialize a new MediaStatusMapper instance."""
        self.sink = sink
        self.metadata_mapper = metadata_mapper

    def update(self, media_status: Optional[MediaStatus]) -> None:
        """Publish channels derived from media status.

        A missing media status (e.g. in-between tracks) clears everything.
        """
        _LOGGER.debug("MEDIA_STATUS %s", media_status)

        if media_status is None:
            self.sink.update_channel(const.CHANNEL_CURRENT_TIME, UNDEF)
            self.metadata_mapper.update(None)
            return

        player_state = media_status.player_state
        if player_state == const.PlayerState.Paused:
            self.sink.update_channel(const.CHANNEL_CONTROL, const.PlayPause.Pause)
        elif player_state in (const.PlayerState.Buffering, const.PlayerState.Playing):
            self.sink.update_channel(const.CHANNEL_CONTROL, const.PlayPause.Play)
        elif player_state != const.PlayerState.Idle:
            _LOGGER.debug("Unknown player state: %s", player_state)

        self.sink.update_channel(
            const.CHANNEL_CURRENT_TIME, QuantityState(media_status.current_time)
        )

        # Keep what is shown if playing, paused or buffering without media info
        media = media_status.media
        if media is None and player_state in _ACTIVE_STATES:
            return

        self.metadata_mapper.update(media)
