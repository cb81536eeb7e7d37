"""Notification settings, sounds and the logged notification events."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from trafficwatch.protocols import ByteMultiple, from_char_to_multiple
from trafficwatch.traffic import DataInfoHost, Host

_UINT = re.compile(r"\+?[0-9]+")


def _parse_uint(text: str, bits: int) -> Optional[int]:
    """Parse an unsigned integer of the given width, or return None."""
    if not _UINT.fullmatch(text):
        return None
    value = int(text)
    return value if value < 1 << bits else None


class Sound(Enum):
    """Sound emitted with a notification."""

    GULP = "Gulp"
    POP = "Pop"
    SWHOOSH = "Swhoosh"
    NONE = "None"

    def __str__(self) -> str:
        return self.value


SOUND_CHOICES: tuple[Sound, ...] = (Sound.GULP, Sound.POP, Sound.SWHOOSH, Sound.NONE)


@dataclass(frozen=True)
class PacketsNotification:
    """Notify when sent plus received packets exceed a threshold."""

    threshold: Optional[int] = None
    sound: Sound = Sound.GULP
    previous_threshold: int = 750

    @classmethod
    def from_str(
        cls, value: str, existing: Optional[PacketsNotification] = None
    ) -> PacketsNotification:
        """Build from user input, falling back to ``existing`` or the defaults."""
        default = existing if existing is not None else cls()
        if not value:
            new_threshold = 0
        else:
            parsed = _parse_uint(value, 32)
            new_threshold = default.previous_threshold if parsed is None else parsed
        return replace(default, threshold=new_threshold, previous_threshold=new_threshold)


@dataclass(frozen=True)
class BytesNotification:
    """Notify when sent plus received bytes exceed a threshold."""

    threshold: Optional[int] = None
    byte_multiple: ByteMultiple = ByteMultiple.KB
    sound: Sound = Sound.POP
    previous_threshold: int = 800_000

    @classmethod
    def from_str(
        cls, value: str, existing: Optional[BytesNotification] = None
    ) -> BytesNotification:
        """Build from user input such as ``"500k"``, falling back to ``existing`` or defaults."""
        default = existing if existing is not None else cls()
        multiple = ByteMultiple.B
        if not value:
            new_threshold = 0
        elif all(ch.isnumeric() for ch in value.strip()):
            parsed = _parse_uint(value, 64)
            new_threshold = default.previous_threshold if parsed is None else parsed
        else:
            multiple = from_char_to_multiple(value[-1])
            without_multiple = value[:-1].strip()
            parsed = _parse_uint(without_multiple, 64)
            if parsed is not None and parsed * multiple.multiplier() < 1 << 64:
                new_threshold = parsed * multiple.multiplier()
            elif not without_multiple:
                multiple = ByteMultiple.B
                new_threshold = 0
            else:
                multiple = default.byte_multiple
                new_threshold = default.previous_threshold
        return replace(
            default,
            threshold=new_threshold,
            previous_threshold=new_threshold,
            byte_multiple=multiple,
        )


@dataclass(frozen=True)
class FavoriteNotification:
    """Notify when a favourite host exchanges data."""

    notify_on_favorite: bool = False
    sound: Sound = Sound.SWHOOSH

    @classmethod
    def on(cls, sound: Sound) -> FavoriteNotification:
        return cls(notify_on_favorite=True, sound=sound)

    @classmethod
    def off(cls, sound: Sound) -> FavoriteNotification:
        """Disabled notification; the sound is kept for when it is re-enabled."""
        return cls(notify_on_favorite=False, sound=sound)


Notification = Union[PacketsNotification, BytesNotification, FavoriteNotification]


@dataclass
class Notifications:
    """Notification configuration set by the user."""

    volume: int = 60
    packets_notification: PacketsNotification = PacketsNotification()
    bytes_notification: BytesNotification = BytesNotification()
    favorite_notification: FavoriteNotification = FavoriteNotification()


@dataclass(frozen=True)
class PacketsThresholdExceeded:
    threshold: int
    incoming: int
    outgoing: int
    timestamp: str


@dataclass(frozen=True)
class BytesThresholdExceeded:
    threshold: int
    incoming: int
    outgoing: int
    timestamp: str


@dataclass(frozen=True)
class FavoriteTransmitted:
    host: Host
    data_info_host: DataInfoHost
    timestamp: str


LoggedNotification = Union[
    PacketsThresholdExceeded, BytesThresholdExceeded, FavoriteTransmitted
]