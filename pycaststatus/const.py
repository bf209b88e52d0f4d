"""Constants used in the public API."""

# pylint: disable=invalid-name

from enum import Enum

MAJOR_VERSION = "0"
MINOR_VERSION = "3"
PATCH_VERSION = "0"
__short_version__ = f"{MAJOR_VERSION}.{MINOR_VERSION}"
__version__ = f"{__short_version__}.{PATCH_VERSION}"


class PlayerState(Enum):
    """All player states reported by a receiver."""

    Unknown = 0
    """Player state is not known or not recognized."""

    Idle = 1
    """Player is idling, i.e. nothing is loaded."""

    Buffering = 2
    """Media is buffering and will start playing shortly."""

    Playing = 3
    """Media is playing."""

    Paused = 4
    """Media is paused."""


class MetadataType(Enum):
    """Category of metadata attached to media."""

    Generic = 0
    """Generic media (default)."""

    Movie = 1
    """Media is a movie."""

    TvShow = 2
    """Media is an episode of a TV show."""

    MusicTrack = 3
    """Media is a music track."""

    Photo = 4
    """Media is a photo."""


class ConnectivityStatus(Enum):
    """Overall availability of a device."""

    Unknown = 0
    """Availability has not been determined yet."""

    Online = 1
    """Device is reachable and reporting status."""

    Offline = 2
    """Device is not reachable or reported no status."""


class ConnectivityDetail(Enum):
    """Additional detail accompanying a connectivity status."""

    NoDetail = 0
    """No additional detail."""

    CommunicationError = 1
    """Communication with the device failed."""

    ConfigurationError = 2
    """Device is not configured correctly."""


class PlayPause(Enum):
    """Value of the control channel."""

    Play = 0
    """Media is playing (or about to)."""

    Pause = 1
    """Media is paused."""


class OnOff(Enum):
    """Boolean switch value."""

    Off = 0
    """Switched off."""

    On = 1
    """Switched on."""

    @classmethod
    def from_bool(cls, value: bool) -> "OnOff":
        """Return On for True and Off for False."""
        return cls.On if value else cls.Off


# pylint: enable=invalid-name

# Application channels
CHANNEL_APP_NAME = "appName"
CHANNEL_APP_ID = "appId"
CHANNEL_STATUS_TEXT = "statustext"
CHANNEL_IDLING = "idling"

# Volume channels
CHANNEL_VOLUME = "volume"
CHANNEL_MUTE = "mute"

# Playback channels
CHANNEL_CONTROL = "control"
CHANNEL_CURRENT_TIME = "currentTime"
CHANNEL_DURATION = "duration"
CHANNEL_METADATA_TYPE = "metadataType"

# Metadata channels
CHANNEL_ALBUM_ARTIST = "albumArtist"
CHANNEL_ALBUM_NAME = "albumName"
CHANNEL_ARTIST = "artist"
CHANNEL_BROADCAST_DATE = "broadcastDate"
CHANNEL_COMPOSER = "composer"
CHANNEL_CREATION_DATE = "creationDate"
CHANNEL_DISC_NUMBER = "discNumber"
CHANNEL_EPISODE_NUMBER = "episodeNumber"
CHANNEL_IMAGE = "image"
CHANNEL_IMAGE_SRC = "imageSrc"
CHANNEL_LOCATION = "location"
CHANNEL_LOCATION_NAME = "locationName"
CHANNEL_RELEASE_DATE = "releaseDate"
CHANNEL_SEASON_NUMBER = "seasonNumber"
CHANNEL_SERIES_TITLE = "seriesTitle"
CHANNEL_STUDIO = "studio"
CHANNEL_SUBTITLE = "subtitle"
CHANNEL_TITLE = "title"
CHANNEL_TRACK_NUMBER = "trackNumber"

# Metadata keys that differ from the channels they end up in
LOCATION_METADATA_LATITUDE = "locationLatitude"
LOCATION_METADATA_LONGITUDE = "locationLongitude"
IMAGES_METADATA = "images"
IMAGE_URL_METADATA = "url"
METADATA_TYPE_METADATA = "metadataType"

DATE_CHANNELS = frozenset(
    [CHANNEL_BROADCAST_DATE, CHANNEL_RELEASE_DATE, CHANNEL_CREATION_DATE]
)

# Channels whose value is looked up in metadata using the channel id as key
METADATA_SIMPLE_CHANNELS = frozenset(
    [
        CHANNEL_ALBUM_ARTIST,
        CHANNEL_ALBUM_NAME,
        CHANNEL_ARTIST,
        CHANNEL_BROADCAST_DATE,
        CHANNEL_COMPOSER,
        CHANNEL_CREATION_DATE,
        CHANNEL_DISC_NUMBER,
        CHANNEL_EPISODE_NUMBER,
        CHANNEL_LOCATION_NAME,
        CHANNEL_RELEASE_DATE,
        CHANNEL_SEASON_NUMBER,
        CHANNEL_SERIES_TITLE,
        CHANNEL_STUDIO,
        CHANNEL_SUBTITLE,
        CHANNEL_TITLE,
        CHANNEL_TRACK_NUMBER,
    ]
)

ALL_CHANNELS = (
    CHANNEL_APP_NAME,
    CHANNEL_APP_ID,
    CHANNEL_STATUS_TEXT,
    CHANNEL_IDLING,
    CHANNEL_VOLUME,
    CHANNEL_MUTE,
    CHANNEL_CONTROL,
    CHANNEL_CURRENT_TIME,
    CHANNEL_DURATION,
    CHANNEL_METADATA_TYPE,
    CHANNEL_LOCATION,
    CHANNEL_IMAGE_SRC,
    CHANNEL_IMAGE,
) + tuple(sorted(METADATA_SIMPLE_CHANNELS))
