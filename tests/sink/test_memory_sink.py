"""Unit tests for pycaststatus.sink.memory_sink."""

from pycaststatus import const
from pycaststatus.const import ConnectivityDetail, ConnectivityStatus, OnOff
from pycaststatus.sink.memory_sink import MemoryStateSink
from pycaststatus.state import UNDEF, ChannelUpdate, StringState


def test_all_channels_bound_and_observed_by_default():
    sink = MemoryStateSink()

    assert list(sink.channels) == list(const.ALL_CHANNELS)
    assert all(sink.is_observed(channel) for channel in const.ALL_CHANNELS)


def test_custom_channels():
    sink = MemoryStateSink(
        channels=[const.CHANNEL_TITLE, "custom"], observed=[const.CHANNEL_TITLE]
    )

    assert sink.channels == [const.CHANNEL_TITLE, "custom"]
    assert sink.is_observed(const.CHANNEL_TITLE)
    assert not sink.is_observed("custom")
    assert not sink.is_observed(const.CHANNEL_IMAGE)


def test_observe_and_unobserve():
    sink = MemoryStateSink(observed=[])
    assert not sink.is_observed(const.CHANNEL_IMAGE)

    sink.observe(const.CHANNEL_IMAGE)
    assert sink.is_observed(const.CHANNEL_IMAGE)

    sink.unobserve(const.CHANNEL_IMAGE)
    sink.unobserve(const.CHANNEL_IMAGE)
    assert not sink.is_observed(const.CHANNEL_IMAGE)


def test_initial_state():
    sink = MemoryStateSink()

    assert sink.connectivity == ConnectivityStatus.Unknown
    assert sink.get(const.CHANNEL_TITLE) is UNDEF
    assert sink.updates == []


def test_update_channel_records_updates():
    sink = MemoryStateSink()

    sink.update_channel(const.CHANNEL_TITLE, StringState("a"))
    sink.update_channel(const.CHANNEL_MUTE, OnOff.On)
    sink.update_channel(const.CHANNEL_TITLE, UNDEF)

    assert sink.get(const.CHANNEL_TITLE) is UNDEF
    assert sink.get(const.CHANNEL_MUTE) == OnOff.On
    assert sink.updates == [
        ChannelUpdate(const.CHANNEL_TITLE, StringState("a")),
        ChannelUpdate(const.CHANNEL_MUTE, OnOff.On),
        ChannelUpdate(const.CHANNEL_TITLE, UNDEF),
    ]
    assert sink.updates_for(const.CHANNEL_TITLE) == [StringState("a"), UNDEF]


def test_clear_keeps_latest_values():
    sink = MemoryStateSink()
    sink.update_channel(const.CHANNEL_TITLE, StringState("a"))

    sink.clear()

    assert sink.updates == []
    assert sink.get(const.CHANNEL_TITLE) == StringState("a")


def test_set_connectivity():
    sink = MemoryStateSink()

    sink.set_connectivity(
        ConnectivityStatus.Offline, ConnectivityDetail.ConfigurationError, "bad"
    )
    assert sink.connectivity == ConnectivityStatus.Offline
    assert sink.connectivity_detail == ConnectivityDetail.ConfigurationError
    assert sink.connectivity_description == "bad"

    sink.set_connectivity(ConnectivityStatus.Online)
    assert sink.connectivity_detail == ConnectivityDetail.NoDetail
    assert sink.connectivity_description is None
