"""Map status reported by Cast receivers onto typed channels."""

import logging
from typing import Optional

from pycaststatus.const import __version__  # noqa: F401
from pycaststatus.core.updater import StatusUpdater
from pycaststatus.interface import ImageResolver, StateSink
from pycaststatus.settings import Settings
from pycaststatus.support.http import HttpImageResolver

_LOGGER = logging.getLogger(__name__)


def create_updater(
    sink: StateSink,
    settings: Optional[Settings] = None,
    image_resolver: Optional[ImageResolver] = None,
    fetch_images: bool = True,
) -> StatusUpdater:
    """Create a new status updater publishing to a sink.

    Images are downloaded over HTTP unless another resolver is given or
    fetch_images is False, in which case the image channel is always UNDEF.
    """
    settings = settings or Settings()
    if image_resolver is None and fetch_images:
        image_resolver = HttpImageResolver(settings.image)

    _LOGGER.debug("Creating updater for %s", sink)
    return StatusUpdater(sink, image_resolver=image_resolver, settings=settings)
