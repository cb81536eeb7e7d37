import pytest

from trafficwatch.protocols import ByteMultiple
from trafficwatch.notifications import (
    BytesNotification,
    FavoriteNotification,
    Notifications,
    PacketsNotification,
    PacketsThresholdExceeded,
    Sound,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("123", BytesNotification(previous_threshold=123, threshold=123, byte_multiple=ByteMultiple.B)),
        ("500k", BytesNotification(previous_threshold=500_000, threshold=500_000, byte_multiple=ByteMultiple.KB)),
        ("420 m", BytesNotification(previous_threshold=420_000_000, threshold=420_000_000, byte_multiple=ByteMultiple.MB)),
        ("foob@r", BytesNotification(threshold=800000)),
        (" 888 g", BytesNotification(previous_threshold=888_000_000_000, threshold=888_000_000_000, byte_multiple=ByteMultiple.GB)),
    ],
)
def test_can_instantiate_bytes_notification_from_string(value, expected):
    assert BytesNotification.from_str(value, None) == expected


@pytest.mark.parametrize("value", ["foob@r", "2O6"])
def test_will_reuse_previous_value_if_cannot_parse(value):
    existing = BytesNotification(previous_threshold=420_000_000_000, byte_multiple=ByteMultiple.GB)
    expected = BytesNotification(
        previous_threshold=420_000_000_000,
        threshold=420_000_000_000,
        byte_multiple=ByteMultiple.GB,
    )
    assert BytesNotification.from_str(value, existing) == expected


def test_bytes_notification_empty_input_is_zero():
    result = BytesNotification.from_str("", None)
    assert result.threshold == 0
    assert result.previous_threshold == 0
    assert result.byte_multiple is ByteMultiple.B


def test_bytes_notification_keeps_existing_sound():
    existing = BytesNotification(sound=Sound.NONE)
    assert BytesNotification.from_str("500k", existing).sound is Sound.NONE


def test_can_instantiate_favourite_notification():
    assert FavoriteNotification.on(Sound.GULP) == FavoriteNotification(notify_on_favorite=True, sound=Sound.GULP)
    assert FavoriteNotification.on(Sound.SWHOOSH) == FavoriteNotification(notify_on_favorite=True, sound=Sound.SWHOOSH)
    assert FavoriteNotification.off(Sound.POP) == FavoriteNotification(notify_on_favorite=False, sound=Sound.POP)
    assert FavoriteNotification.off(Sound.NONE) == FavoriteNotification(notify_on_favorite=False, sound=Sound.NONE)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("123", PacketsNotification(previous_threshold=123, threshold=123)),
        ("8888", PacketsNotification(previous_threshold=8888, threshold=8888)),
        ("420 m", PacketsNotification(threshold=750)),
        ("foob@r", PacketsNotification(threshold=750)),
    ],
)
def test_can_instantiate_packet_notification_from_string(value, expected):
    assert PacketsNotification.from_str(value, None) == expected


def test_packets_notification_empty_input_is_zero():
    result = PacketsNotification.from_str("", None)
    assert result.threshold == 0
    assert result.previous_threshold == 0


def test_default_notifications():
    notifications = Notifications()
    assert notifications.volume == 60
    assert notifications.packets_notification == PacketsNotification(threshold=None, sound=Sound.GULP, previous_threshold=750)
    assert notifications.bytes_notification == BytesNotification(
        threshold=None, byte_multiple=ByteMultiple.KB, sound=Sound.POP, previous_threshold=800000
    )
    assert notifications.favorite_notification == FavoriteNotification(notify_on_favorite=False, sound=Sound.SWHOOSH)


def test_sound_display():
    assert str(FavoriteNotification.on(Sound.GULP).sound) == "Gulp"
    assert str(FavoriteNotification.off(Sound.SWHOOSH).sound) == "Swhoosh"


def test_logged_notification_fields():
    logged = PacketsThresholdExceeded(threshold=0, incoming=0, outgoing=0, timestamp="")
    assert logged == PacketsThresholdExceeded(0, 0, 0, "")
    assert logged.timestamp == ""