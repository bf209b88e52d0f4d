"""Module for downloading images over HTTP."""

import logging
from typing import Optional

import requests

from pycaststatus.exceptions import ImageFetchError
from pycaststatus.interface import ImageResolver
from pycaststatus.settings import ImageSettings
from pycaststatus.state import RawImage
from pycaststatus.support import log_binary

_LOGGER = logging.getLogger(__name__)

DEFAULT_MIMETYPE = "application/octet-stream"
CHUNK_SIZE = 8192


def download_image(url: str, settings: ImageSettings) -> RawImage:
    """Download an image and return it.

    Raises ImageFetchError if download fails, the response is not successful or the
    image is larger than allowed by settings.
    """
    headers = {"User-Agent": settings.user_agent}
    try:
        with requests.get(
            url, headers=headers, stream=True, timeout=settings.timeout
        ) as handle:
            if handle.status_code < 200 or handle.status_code >= 300:
                raise ImageFetchError(
                    f"Got status {handle.status_code} with message: {handle.reason}"
                )

            data = bytearray()
            for chunk in handle.iter_content(CHUNK_SIZE):
                data.extend(chunk)
                if settings.max_size and len(data) > settings.max_size:
                    raise ImageFetchError(
                        f"image exceeds maximum size of {settings.max_size} bytes"
                    )

            content_type = handle.headers.get("Content-Type") or DEFAULT_MIMETYPE
    except requests.RequestException as ex:
        raise ImageFetchError(str(ex)) from ex

    return RawImage(bytes(data), content_type.split(";")[0].strip())


class HttpImageResolver(ImageResolver):
    """Image resolver fetching images with blocking HTTP requests.

    Failing downloads are logged and reported as a missing image. Nothing is
    retried.
    """

    def __init__(self, settings: Optional[ImageSettings] = None) -> None:
        """Initialize a new HttpImageResolver instance."""
        self.settings = settings or ImageSettings()

    def resolve(self, url: str) -> Optional[RawImage]:
        """Return image found at URL or None if it could not be fetched."""
        try:
            image = download_image(url, self.settings)
        except ImageFetchError as ex:
            _LOGGER.warning("Failed to download image %s: %s", url, ex)
            return None

        log_binary(
            _LOGGER, f"Downloaded image {url}", mimetype=image.mimetype, data=image.data
        )
        return image
