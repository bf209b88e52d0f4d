from unittest.mock import MagicMock

import pytest

from pycaststatus.core.updater import StatusUpdater
from pycaststatus.interface import ImageResolver
from pycaststatus.settings import Settings
from pycaststatus.sink.memory_sink import MemoryStateSink
from pycaststatus.state import RawImage

from tests.utils import IMAGE_DATA


@pytest.fixture(name="sink")
def sink_fixture():
    yield MemoryStateSink()


@pytest.fixture(name="image_resolver")
def image_resolver_fixture():
    resolver = MagicMock(spec=ImageResolver)
    resolver.resolve.side_effect = lambda url: RawImage(IMAGE_DATA, "image/png")
    yield resolver


@pytest.fixture(name="settings")
def settings_fixture():
    yield Settings()


@pytest.fixture(name="updater")
def updater_fixture(sink, image_resolver, settings):
    yield StatusUpdater(sink, image_resolver=image_resolver, settings=settings)
