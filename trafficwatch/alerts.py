"""Runtime traffic statistics and the notifications raised from them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional

from trafficwatch.notifications import (
    BytesThresholdExceeded,
    FavoriteTransmitted,
    LoggedNotification,
    Notifications,
    PacketsThresholdExceeded,
    Sound,
)
from trafficwatch.records import InfoTraffic

MAX_LOGGED_NOTIFICATIONS = 30
_U32_MAX = (1 << 32) - 1

SoundPlayer = Callable[[Sound, int], None]


@dataclass
class RunTimeData:
    """Traffic statistics displayed to the user and the log of notifications."""

    all_bytes: int = 0
    all_packets: int = 0
    tot_sent_bytes: int = 0
    tot_received_bytes: int = 0
    tot_sent_packets: int = 0
    tot_received_packets: int = 0
    dropped_packets: int = 0
    tot_sent_bytes_prev: int = 0
    tot_received_bytes_prev: int = 0
    tot_sent_packets_prev: int = 0
    tot_received_packets_prev: int = 0
    logged_notifications: deque[LoggedNotification] = field(default_factory=deque)
    tot_emitted_notifications: int = 0


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _as_u32(value: int) -> int:
    if not 0 <= value <= _U32_MAX:
        raise OverflowError(f"value does not fit in 32 bits: {value}")
    return value


def _log(runtime_data: RunTimeData, entry: LoggedNotification) -> None:
    """Add ``entry`` as the newest notification, dropping the oldest beyond the limit."""
    if len(runtime_data.logged_notifications) >= MAX_LOGGED_NOTIFICATIONS:
        runtime_data.logged_notifications.pop()
    runtime_data.logged_notifications.appendleft(entry)


def _play(player: Optional[SoundPlayer], sound: Sound, volume: int) -> None:
    if player is None or sound is Sound.NONE or volume == 0:
        return
    player(sound, volume)


def notify_and_log(
    runtime_data: RunTimeData,
    notifications: Notifications,
    info_traffic: InfoTraffic,
    player: Optional[SoundPlayer] = None,
) -> int:
    """Log the notifications due for the last interval and return how many were emitted.

    ``player`` is called with a sound and a volume to emit at most one sound.
    """
    already_emitted_sound = False
    emitted = 0

    packets = notifications.packets_notification
    if packets.threshold is not None:
        sent = runtime_data.tot_sent_packets - runtime_data.tot_sent_packets_prev
        received = runtime_data.tot_received_packets - runtime_data.tot_received_packets_prev
        if received + sent > packets.threshold:
            emitted += 1
            _log(
                runtime_data,
                PacketsThresholdExceeded(
                    threshold=packets.previous_threshold,
                    incoming=_as_u32(received),
                    outgoing=_as_u32(sent),
                    timestamp=_timestamp(),
                ),
            )
            if packets.sound is not Sound.NONE:
                _play(player, packets.sound, notifications.volume)
                already_emitted_sound = True

    bytes_notification = notifications.bytes_notification
    if bytes_notification.threshold is not None:
        sent = runtime_data.tot_sent_bytes - runtime_data.tot_sent_bytes_prev
        received = runtime_data.tot_received_bytes - runtime_data.tot_received_bytes_prev
        if received + sent > bytes_notification.threshold:
            emitted += 1
            _log(
                runtime_data,
                BytesThresholdExceeded(
                    threshold=bytes_notification.previous_threshold,
                    incoming=_as_u32(received),
                    outgoing=_as_u32(sent),
                    timestamp=_timestamp(),
                ),
            )
            if not already_emitted_sound and bytes_notification.sound is not Sound.NONE:
                _play(player, bytes_notification.sound, notifications.volume)
                already_emitted_sound = True

    favorite = notifications.favorite_notification
    if favorite.notify_on_favorite:
        with info_traffic.lock:
            favorites = set(info_traffic.favorites_last_interval)
            for host in favorites:
                emitted += 1
                _log(
                    runtime_data,
                    FavoriteTransmitted(
                        host=host,
                        data_info_host=info_traffic.hosts[host],
                        timestamp=_timestamp(),
                    ),
                )
        if favorites and not already_emitted_sound and favorite.sound is not Sound.NONE:
            _play(player, favorite.sound, notifications.volume)

    return emitted