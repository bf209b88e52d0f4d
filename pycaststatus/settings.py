"""Settings for configuring pycaststatus."""

from typing import List

from pydantic import BaseModel, Field, field_validator

from pycaststatus import const

DEFAULT_IMAGE_TIMEOUT = 5.0  # Seconds
DEFAULT_USER_AGENT = f"pycaststatus/{const.__version__}"


class ImageSettings(BaseModel, extra="ignore"):  # type: ignore[call-arg]
    """Settings related to image download."""

    timeout: float = Field(default=DEFAULT_IMAGE_TIMEOUT, gt=0.0)
    """Timeout in seconds for a single image download."""

    user_agent: str = DEFAULT_USER_AGENT

    max_size: int = Field(default=0, ge=0)
    """Maximum accepted image size in bytes.

    Images larger than this are treated as missing. Set to 0 for no limit.
    """


class MetadataSettings(BaseModel, extra="ignore"):  # type: ignore[call-arg]
    """Settings related to metadata projection."""

    extra_channels: List[str] = Field(default_factory=list)
    """Additional channels passed through from metadata using channel id as key."""

    @field_validator("extra_channels")
    @classmethod
    def channels_validator(cls, channels: List[str]) -> List[str]:
        """Validate that channel ids are usable."""
        for channel in channels:
            if not channel or channel != channel.strip():
                raise ValueError(f"{channel!r} is not a valid channel id")
        return channels


class Settings(BaseModel, extra="ignore"):  # type: ignore[call-arg]
    """Settings container class."""

    image: ImageSettings = Field(default_factory=ImageSettings)
    metadata: MetadataSettings = Field(default_factory=MetadataSettings)
