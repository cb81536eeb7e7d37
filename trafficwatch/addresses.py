"""Classification of addresses and bookkeeping of observed connections."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import replace
from datetime import datetime
from typing import Sequence, Union

from trafficwatch.protocols import AppProtocol, TrafficDirection, TrafficType
from trafficwatch.records import Address, InfoAddressPortPair, InfoTraffic, MyDevice
from trafficwatch.traffic import AddressPortPair

_LIMITED_BROADCAST = "255.255.255.255"
_UNSPECIFIED_V4 = "0.0.0.0"
_OCTET = re.compile(r"\+?[0-9]+")

IpAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def modify_or_insert_in_map(
    info_traffic: InfoTraffic,
    key: AddressPortPair,
    my_device: MyDevice,
    mac_addresses: tuple[str, str],
    exchanged_bytes: int,
    application_protocol: AppProtocol,
) -> InfoAddressPortPair:
    """Record one packet of ``key`` in the shared traffic state.

    Returns a snapshot of the connection's statistics after the update.
    """
    now = datetime.now().astimezone()
    traffic_direction = TrafficDirection.INCOMING
    very_long_address = len(key.address1) > 25 or len(key.address2) > 25

    with info_traffic.lock:
        existing = info_traffic.map.get(key)
        if existing is None:
            index = len(info_traffic.map)
            with my_device.lock:
                my_interface_addresses = list(my_device.addresses)
            traffic_direction = get_traffic_direction(
                key.address1, key.address2, my_interface_addresses
            )
            info = InfoAddressPortPair(
                mac_address1=mac_addresses[0],
                mac_address2=mac_addresses[1],
                transmitted_bytes=exchanged_bytes,
                transmitted_packets=1,
                initial_timestamp=now,
                final_timestamp=now,
                app_protocol=application_protocol,
                very_long_address=very_long_address,
                traffic_direction=traffic_direction,
                index=index,
            )
            info_traffic.map[key] = info
        else:
            index = existing.index
            existing.transmitted_bytes += exchanged_bytes
            existing.transmitted_packets += 1
            existing.final_timestamp = now
            info = existing

        snapshot = replace(info)
        info_traffic.addresses_last_interval.add(index)

        resolved = info_traffic.addresses_resolved.get(
            get_address_to_lookup(key, traffic_direction)
        )
        if resolved is not None:
            host = resolved[1]
            if host in info_traffic.favorite_hosts:
                info_traffic.favorites_last_interval.add(host)

    return snapshot


def get_traffic_direction(
    source_ip: str,
    destination_ip: str,
    my_interface_addresses: Sequence[Address],
) -> TrafficDirection:
    """Tell whether traffic from ``source_ip`` to ``destination_ip`` is incoming or outgoing."""
    mine = {str(address.addr) for address in my_interface_addresses}
    if source_ip in mine:
        return TrafficDirection.OUTGOING
    if source_ip != _UNSPECIFIED_V4:
        return TrafficDirection.INCOMING
    # the local side has not been assigned an address yet
    if destination_ip not in mine:
        return TrafficDirection.OUTGOING
    return TrafficDirection.INCOMING


def get_traffic_type(
    destination_ip: str,
    my_interface_addresses: Sequence[Address],
    traffic_direction: TrafficDirection,
) -> TrafficType:
    """Classify the remote host as unicast, multicast or broadcast."""
    if traffic_direction is not TrafficDirection.OUTGOING:
        return TrafficType.UNICAST
    if is_multicast_address(destination_ip):
        return TrafficType.MULTICAST
    if is_broadcast_address(destination_ip, my_interface_addresses):
        return TrafficType.BROADCAST
    return TrafficType.UNICAST


def is_multicast_address(address: str) -> bool:
    """Tell whether an IPv4 or IPv6 address string is a multicast address.

    Raises ValueError if an IPv4 address does not start with a valid octet.
    """
    if ":" in address:
        return address.startswith("ff")
    first_group = address.split(".", 1)[0]
    if not _OCTET.fullmatch(first_group) or int(first_group) > 255:
        raise ValueError(f"invalid IPv4 address: {address!r}")
    return 224 <= int(first_group) <= 239


def is_broadcast_address(address: str, my_interface_addresses: Sequence[Address]) -> bool:
    """Tell whether ``address`` is the limited or a directed broadcast address."""
    if address == _LIMITED_BROADCAST:
        return True
    broadcasts = {
        str(item.broadcast_addr) if item.broadcast_addr is not None else _LIMITED_BROADCAST
        for item in my_interface_addresses
    }
    return address in broadcasts


def _same_subnet(netmask: IpAddress, local: IpAddress, remote: IpAddress) -> bool:
    mask = int(netmask)
    return mask & int(local) == mask & int(remote)


def is_local_connection(
    address_to_lookup: str, my_interface_addresses: Sequence[Address]
) -> bool:
    """Tell whether ``address_to_lookup`` is link-local or in one of the local subnets."""
    lookup_is_v6 = ":" in address_to_lookup
    result = False

    for address in my_interface_addresses:
        local = address.addr
        netmask = address.netmask
        if isinstance(local, ipaddress.IPv4Address) and not lookup_is_v6:
            try:
                remote: IpAddress = ipaddress.IPv4Address(address_to_lookup)
            except ValueError:
                remote = ipaddress.IPv4Address(0)
            if remote.is_link_local:
                result = True
            elif isinstance(netmask, ipaddress.IPv4Address) and _same_subnet(
                netmask, local, remote
            ):
                result = True
        elif isinstance(local, ipaddress.IPv6Address) and lookup_is_v6:
            try:
                remote = ipaddress.IPv6Address(address_to_lookup)
            except ValueError:
                remote = ipaddress.IPv6Address(0)
            if address_to_lookup.startswith("fe80"):
                result = True
            elif isinstance(netmask, ipaddress.IPv6Address) and _same_subnet(
                netmask, local, remote
            ):
                result = True

    return result


def is_my_address(address_to_lookup: str, my_interface_addresses: Sequence[Address]) -> bool:
    """Tell whether ``address_to_lookup`` belongs to the chosen adapter."""
    return any(str(address.addr) == address_to_lookup for address in my_interface_addresses)


def get_address_to_lookup(key: AddressPortPair, traffic_direction: TrafficDirection) -> str:
    """Return the remote address of a connection."""
    if traffic_direction is TrafficDirection.OUTGOING:
        return key.address2
    return key.address1