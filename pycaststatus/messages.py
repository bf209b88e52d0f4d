"""Parse decoded JSON messages sent by a receiver into status objects.

Only the two message types carrying status are supported: RECEIVER_STATUS (sent on
the receiver namespace) and MEDIA_STATUS (sent on the media namespace). Fields that
are not used by pycaststatus are ignored.
"""

import logging
from typing import Any, Mapping, Optional, Tuple, Union

from pycaststatus.const import MetadataType, PlayerState
from pycaststatus.exceptions import InvalidMessageError
from pycaststatus.interface import (
    DeviceStatus,
    Media,
    MediaStatus,
    RunningApplication,
    Volume,
)

_LOGGER = logging.getLogger(__name__)

TYPE_RECEIVER_STATUS = "RECEIVER_STATUS"
TYPE_MEDIA_STATUS = "MEDIA_STATUS"

_PLAYER_STATES = {
    "IDLE": PlayerState.Idle,
    "BUFFERING": PlayerState.Buffering,
    "PLAYING": PlayerState.Playing,
    "PAUSED": PlayerState.Paused,
    "UNKNOWN": PlayerState.Unknown,
}

_NUMBER = (int, float)


def _get_with_type(data: Mapping[str, Any], field: str, default, expected_type):
    value = data.get(field, default)
    if value is None:
        return default
    # bool is an int, but never a valid number in a message
    if isinstance(value, bool) and expected_type is not bool:
        raise InvalidMessageError(
            f"expected {expected_type} for '{field}' but got bool"
        )
    if isinstance(value, expected_type):
        return value
    raise InvalidMessageError(
        f"expected {expected_type} for '{field}' but got {type(value)}"
    )


def _parse_application(data: Any) -> RunningApplication:
    if not isinstance(data, Mapping):
        raise InvalidMessageError(f"application is not an object: {data}")
    return RunningApplication(
        name=_get_with_type(data, "displayName", None, str),
        id=_get_with_type(data, "appId", None, str),
        status_text=_get_with_type(data, "statusText", None, str),
        is_idle_screen=_get_with_type(data, "isIdleScreen", False, bool),
        session_id=_get_with_type(data, "sessionId", None, str),
        transport_id=_get_with_type(data, "transportId", None, str),
    )


def _parse_volume(data: Optional[Mapping[str, Any]]) -> Optional[Volume]:
    if data is None:
        return None
    return Volume(
        level=float(_get_with_type(data, "level", 0.0, _NUMBER)),
        muted=_get_with_type(data, "muted", False, bool),
    )


def _parse_metadata_type(value: Any) -> MetadataType:
    try:
        return MetadataType(value)
    except ValueError:
        _LOGGER.debug("Unknown metadata type %s, using generic", value)
        return MetadataType.Generic


def _parse_media(data: Optional[Mapping[str, Any]]) -> Optional[Media]:
    if not data:
        return None

    metadata = _get_with_type(data, "metadata", None, dict)
    duration = _get_with_type(data, "duration", None, _NUMBER)
    metadata_type = MetadataType.Generic
    if metadata is not None:
        metadata_type = _parse_metadata_type(metadata.get("metadataType", 0))

    return Media(
        duration=None if duration is None else float(duration),
        metadata_type=metadata_type,
        metadata=metadata,
        content_id=_get_with_type(data, "contentId", None, str),
        content_type=_get_with_type(data, "contentType", None, str),
        stream_type=_get_with_type(data, "streamType", None, str),
    )


def parse_receiver_status(payload: Mapping[str, Any]) -> Optional[DeviceStatus]:
    """Parse payload of a RECEIVER_STATUS message.

    Returns None if the message carries no status.
    """
    status = _get_with_type(payload, "status", None, dict)
    if status is None:
        return None

    applications = _get_with_type(status, "applications", None, list)
    return DeviceStatus(
        applications=(
            None
            if applications is None
            else [_parse_application(app) for app in applications]
        ),
        volume=_parse_volume(_get_with_type(status, "volume", None, dict)),
    )


def parse_media_status(payload: Mapping[str, Any]) -> Optional[MediaStatus]:
    """Parse payload of a MEDIA_STATUS message.

    Only the first status entry is used. Returns None if there is no entry, which is
    what receivers send when nothing is loaded.
    """
    statuses = _get_with_type(payload, "status", [], list)
    if not statuses:
        return None

    status = statuses[0]
    if not isinstance(status, Mapping):
        raise InvalidMessageError(f"media status is not an object: {status}")

    raw_state = _get_with_type(status, "playerState", "UNKNOWN", str)
    player_state: Union[PlayerState, str] = _PLAYER_STATES.get(raw_state, raw_state)

    return MediaStatus(
        player_state=player_state,
        current_time=float(_get_with_type(status, "currentTime", 0.0, _NUMBER)),
        media=_parse_media(_get_with_type(status, "media", None, dict)),
        media_session_id=_get_with_type(status, "mediaSessionId", None, int),
        idle_reason=_get_with_type(status, "idleReason", None, str),
    )


def parse_message(
    payload: Mapping[str, Any]
) -> Tuple[str, Union[DeviceStatus, MediaStatus, None]]:
    """Parse a status message and return its type and content."""
    message_type = _get_with_type(payload, "type", None, str)
    if message_type == TYPE_RECEIVER_STATUS:
        return message_type, parse_receiver_status(payload)
    if message_type == TYPE_MEDIA_STATUS:
        return message_type, parse_media_status(payload)
    raise InvalidMessageError(f"unsupported message type: {message_type}")
