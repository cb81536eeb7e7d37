"""Value types describing connections, hosts and exchanged data."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable

from trafficwatch.protocols import (
    AppProtocol,
    IpVersion,
    TrafficDirection,
    TrafficType,
    TransProtocol,
)


@dataclass(frozen=True)
class AddressPortPair:
    """Source and destination address:port pair of a connection."""

    address1: str
    port1: int
    address2: str
    port2: int
    trans_protocol: TransProtocol

    def __str__(self) -> str:
        width = 45 if len(self.address1) > 25 or len(self.address2) > 25 else 25
        return (
            f"|{self.address1:^{width}}|{self.port1:>8}  "
            f"|{self.address2:^{width}}|{self.port2:>8}  "
            f"|   {self.trans_protocol!s}   |"
        )

    def print_gui(self) -> str:
        """Report line without column separators."""
        return str(self).replace("|", "")


@dataclass(frozen=True)
class Asn:
    """An Autonomous System."""

    number: int = 0
    name: str = ""


@dataclass(frozen=True)
class Host:
    """A remote network host."""

    domain: str = ""
    asn: Asn = field(default_factory=Asn)
    country: Hashable = ""


@dataclass
class DataInfo:
    """Incoming and outgoing packets and bytes."""

    incoming_packets: int = 0
    outgoing_packets: int = 0
    incoming_bytes: int = 0
    outgoing_bytes: int = 0

    def tot_packets(self) -> int:
        return self.incoming_packets + self.outgoing_packets

    def tot_bytes(self) -> int:
        return self.incoming_bytes + self.outgoing_bytes

    def add_packet(self, size: int, traffic_direction: TrafficDirection) -> None:
        """Account for one more packet of ``size`` bytes."""
        if traffic_direction is TrafficDirection.OUTGOING:
            self.outgoing_packets += 1
            self.outgoing_bytes += size
        else:
            self.incoming_packets += 1
            self.incoming_bytes += size

    @classmethod
    def new_with_first_packet(cls, size: int, traffic_direction: TrafficDirection) -> DataInfo:
        info = cls()
        info.add_packet(size, traffic_direction)
        return info

    def __iadd__(self, other: DataInfo) -> DataInfo:
        self.incoming_packets += other.incoming_packets
        self.outgoing_packets += other.outgoing_packets
        self.incoming_bytes += other.incoming_bytes
        self.outgoing_bytes += other.outgoing_bytes
        return self

    def __add__(self, other: DataInfo) -> DataInfo:
        result = DataInfo(
            self.incoming_packets,
            self.outgoing_packets,
            self.incoming_bytes,
            self.outgoing_bytes,
        )
        result += other
        return result


@dataclass
class DataInfoHost:
    """Data exchanged with a host, plus its classification."""

    data_info: DataInfo = field(default_factory=DataInfo)
    is_favorite: bool = False
    is_local: bool = False
    traffic_type: TrafficType = TrafficType.UNICAST


@dataclass
class Filters:
    """Filters applicable to observed traffic."""

    ip: IpVersion = IpVersion.OTHER
    transport: TransProtocol = TransProtocol.OTHER
    application: AppProtocol = AppProtocol.OTHER


@dataclass(frozen=True)
class SearchParameters:
    """Search filters applied to the inspected connections."""

    app: str = ""
    domain: str = ""
    country: str = ""
    as_name: str = ""
    only_favorites: bool = False

    def is_some_filter_active(self) -> bool:
        return bool(
            self.only_favorites or self.app or self.domain or self.country or self.as_name
        )


class FilterInputType(Enum):
    """Which search field an input refers to."""

    APP = "App"
    DOMAIN = "Domain"
    COUNTRY = "Country"
    AS = "AS"