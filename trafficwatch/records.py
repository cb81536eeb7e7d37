"""Per-connection records, the shared traffic state and the inspected device."""

from __future__ import annotations

import ipaddress
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Union

from trafficwatch.protocols import AppProtocol, ByteMultiple, TrafficDirection
from trafficwatch.traffic import AddressPortPair, DataInfo, DataInfoHost, Host

IpAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def _epoch() -> datetime:
    return datetime.fromtimestamp(0, tz=timezone.utc).astimezone()


def _stamp(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%d %H:%M:%S")


def _format_bytes(amount: int) -> str:
    for multiple in (ByteMultiple.GB, ByteMultiple.MB, ByteMultiple.KB):
        if amount >= multiple.multiplier():
            return f"{amount / multiple.multiplier():.1f} {multiple.suffix()}B"
    return f"{amount} B"


@dataclass
class InfoAddressPortPair:
    """Statistics about the traffic exchanged by one address:port pair."""

    mac_address1: str = ""
    mac_address2: str = ""
    transmitted_bytes: int = 0
    transmitted_packets: int = 0
    initial_timestamp: datetime = field(default_factory=_epoch)
    final_timestamp: datetime = field(default_factory=_epoch)
    app_protocol: AppProtocol = AppProtocol.OTHER
    very_long_address: bool = False
    index: int = 0
    traffic_direction: TrafficDirection = TrafficDirection.INCOMING

    def __str__(self) -> str:
        app_string = self.app_protocol.value
        line = (
            f"{app_string:^9}|{self.transmitted_packets:>10}  "
            f"|{_format_bytes(self.transmitted_bytes):>9}   "
            f"| {_stamp(self.initial_timestamp)} | {_stamp(self.final_timestamp)} |"
        )
        if self.very_long_address:
            return line
        return line + " " * 40

    def print_gui(self) -> str:
        """Leading report columns without separators."""
        return str(self)[:35].replace("|", "")


@dataclass
class InfoTraffic:
    """Traffic state shared between the capture and reporting threads."""

    tot_received_bytes: int = 0
    tot_sent_bytes: int = 0
    tot_received_packets: int = 0
    tot_sent_packets: int = 0
    all_packets: int = 0
    all_bytes: int = 0
    dropped_packets: int = 0
    map: dict[AddressPortPair, InfoAddressPortPair] = field(default_factory=dict)
    addresses_last_interval: set[int] = field(default_factory=set)
    favorite_hosts: set[Host] = field(default_factory=set)
    favorites_last_interval: set[Host] = field(default_factory=set)
    app_protocols: dict[AppProtocol, DataInfo] = field(default_factory=dict)
    addresses_waiting_resolution: dict[str, DataInfo] = field(default_factory=dict)
    addresses_resolved: dict[str, tuple[str, Host]] = field(default_factory=dict)
    hosts: dict[Host, DataInfoHost] = field(default_factory=dict)
    lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )


def _to_ip(value: Union[str, IpAddress, None]) -> Optional[IpAddress]:
    if value is None:
        return None
    return ipaddress.ip_address(value)


@dataclass(frozen=True)
class Address:
    """One address assigned to a network interface."""

    addr: IpAddress
    netmask: Optional[IpAddress] = None
    broadcast_addr: Optional[IpAddress] = None
    dst_addr: Optional[IpAddress] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "addr", _to_ip(self.addr))
        object.__setattr__(self, "netmask", _to_ip(self.netmask))
        object.__setattr__(self, "broadcast_addr", _to_ip(self.broadcast_addr))
        object.__setattr__(self, "dst_addr", _to_ip(self.dst_addr))


@dataclass
class MyDevice:
    """The inspected network adapter, with addresses kept in sync under a lock."""

    name: str
    desc: Optional[str] = None
    addresses: list[Address] = field(default_factory=list)
    lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )