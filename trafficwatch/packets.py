"""Decoding of link, network and transport headers into report-ready values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from trafficwatch.protocols import (
    AppProtocol,
    IpVersion,
    TransProtocol,
    from_port_to_application_protocol,
)


def _octets(value: Union[bytes, Iterable[int]], length: int, what: str) -> bytes:
    try:
        data = bytes(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{what} must be {length} bytes") from exc
    if len(data) != length:
        raise ValueError(f"{what} must be {length} bytes, got {len(data)}")
    return data


def _check_port(port: int) -> int:
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"port out of range: {port}")
    return port


@dataclass(frozen=True)
class EthernetHeader:
    """Ethernet II header: source and destination MAC addresses."""

    source: bytes
    destination: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", _octets(self.source, 6, "MAC address"))
        object.__setattr__(
            self, "destination", _octets(self.destination, 6, "MAC address")
        )


@dataclass(frozen=True)
class Ipv4Header:
    """IPv4 header fields relevant to traffic accounting."""

    source: bytes
    destination: bytes
    payload_len: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", _octets(self.source, 4, "IPv4 address"))
        object.__setattr__(
            self, "destination", _octets(self.destination, 4, "IPv4 address")
        )


@dataclass(frozen=True)
class Ipv6Header:
    """IPv6 header fields relevant to traffic accounting."""

    source: bytes
    destination: bytes
    payload_length: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", _octets(self.source, 16, "IPv6 address"))
        object.__setattr__(
            self, "destination", _octets(self.destination, 16, "IPv6 address")
        )


@dataclass(frozen=True)
class TcpHeader:
    """TCP header ports."""

    source_port: int
    destination_port: int

    def __post_init__(self) -> None:
        _check_port(self.source_port)
        _check_port(self.destination_port)


@dataclass(frozen=True)
class UdpHeader:
    """UDP header ports."""

    source_port: int
    destination_port: int

    def __post_init__(self) -> None:
        _check_port(self.source_port)
        _check_port(self.destination_port)


def analyze_link_header(
    link_header: Optional[EthernetHeader],
) -> Optional[tuple[str, str]]:
    """Return (source MAC, destination MAC), or None if the packet must be skipped."""
    if not isinstance(link_header, EthernetHeader):
        return None
    return (
        mac_from_dec_to_hex(link_header.source),
        mac_from_dec_to_hex(link_header.destination),
    )


def analyze_network_header(
    network_header: Union[Ipv4Header, Ipv6Header, None],
) -> Optional[tuple[IpVersion, str, str, int]]:
    """Return (IP version, source, destination, payload bytes), or None to skip."""
    if isinstance(network_header, Ipv4Header):
        return (
            IpVersion.IPV4,
            ".".join(str(octet) for octet in network_header.source),
            ".".join(str(octet) for octet in network_header.destination),
            network_header.payload_len,
        )
    if isinstance(network_header, Ipv6Header):
        return (
            IpVersion.IPV6,
            ipv6_from_long_dec_to_short_hex(network_header.source),
            ipv6_from_long_dec_to_short_hex(network_header.destination),
            network_header.payload_length,
        )
    return None


def analyze_transport_header(
    transport_header: Union[TcpHeader, UdpHeader, None],
) -> Optional[tuple[int, int, AppProtocol, TransProtocol]]:
    """Return (source port, destination port, app protocol, transport), or None to skip."""
    if isinstance(transport_header, UdpHeader):
        trans_protocol = TransProtocol.UDP
    elif isinstance(transport_header, TcpHeader):
        trans_protocol = TransProtocol.TCP
    else:
        return None
    port1 = transport_header.source_port
    port2 = transport_header.destination_port
    app_protocol = from_port_to_application_protocol(port1)
    if app_protocol is AppProtocol.OTHER:
        app_protocol = from_port_to_application_protocol(port2)
    return port1, port2, app_protocol, trans_protocol


def mac_from_dec_to_hex(mac_dec: Union[bytes, Iterable[int]]) -> str:
    """Format six bytes as a colon-separated lower-case MAC address."""
    return ":".join(f"{octet:02x}" for octet in _octets(mac_dec, 6, "MAC address"))


def ipv6_from_long_dec_to_short_hex(ipv6_long: Union[bytes, Iterable[int]]) -> str:
    """Format sixteen bytes as a compressed IPv6 address.

    The first longest run of at least two zero groups is replaced by ``::``.
    """
    data = _octets(ipv6_long, 16, "IPv6 address")
    groups = [f"{(data[i] << 8) | data[i + 1]:x}" for i in range(0, 16, 2)]

    longest_len = 0
    longest_start = 0
    run_len = 0
    run_start = 0
    for position, group in enumerate(groups):
        if group == "0":
            if run_len == 0:
                run_start = position
            run_len += 1
            if run_len > longest_len:
                longest_len = run_len
                longest_start = run_start
        else:
            run_len = 0

    if longest_len < 2:
        return ":".join(groups)

    head = groups[:longest_start]
    tail = groups[longest_start + longest_len :]
    return ":".join(head) + "::" + ":".join(tail)