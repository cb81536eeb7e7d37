import ipaddress
from datetime import datetime

import pytest

from trafficwatch.protocols import AppProtocol, TrafficDirection
from trafficwatch.records import Address, InfoAddressPortPair, InfoTraffic, MyDevice


def _info(**kwargs):
    moment = datetime(2023, 5, 17, 10, 20, 30).astimezone()
    return InfoAddressPortPair(initial_timestamp=moment, final_timestamp=moment, **kwargs)


def test_info_defaults():
    info = InfoAddressPortPair()
    assert info.app_protocol is AppProtocol.OTHER
    assert info.transmitted_bytes == 0
    assert info.transmitted_packets == 0
    assert info.index == 0
    assert info.traffic_direction is TrafficDirection.INCOMING
    assert info.very_long_address is False


def test_info_str_other_protocol_is_spelled_out():
    info = _info(app_protocol=AppProtocol.OTHER)
    assert str(info)[:9].strip() == "Other"


def test_info_str_named_protocol():
    info = _info(app_protocol=AppProtocol.HTTPS)
    assert str(info)[:9].strip() == "HTTPS"


def test_info_str_contains_packets_and_timestamps():
    info = _info(transmitted_packets=42)
    text = str(info)
    assert text.split("|")[1].strip() == "42"
    assert text.count("2023-05-17 10:20:30") == 2


def test_info_str_padding_depends_on_address_length():
    short = str(_info(very_long_address=False))
    long = str(_info(very_long_address=True))
    assert short == long + " " * 40
    assert long.endswith("|")


def test_info_print_gui():
    info = _info(app_protocol=AppProtocol.DNS, transmitted_packets=7)
    gui = info.print_gui()
    assert "|" not in gui
    assert gui == str(info)[:35].replace("|", "")


def test_info_traffic_defaults_are_empty_and_independent():
    first = InfoTraffic()
    second = InfoTraffic()
    assert first.tot_sent_packets + first.tot_received_packets == 0
    assert first.all_bytes == 0 and first.dropped_packets == 0
    assert first.map == {} and first.hosts == {}
    first.favorite_hosts.add("x")
    assert second.favorite_hosts == set()


def test_info_traffic_map_keeps_insertion_order():
    traffic = InfoTraffic()
    traffic.map["b"] = _info(index=0)
    traffic.map["a"] = _info(index=1)
    assert list(traffic.map) == ["b", "a"]


def test_address_parses_strings():
    address = Address("172.20.10.9", netmask="255.255.255.240", broadcast_addr="172.20.10.15")
    assert address.addr == ipaddress.ip_address("172.20.10.9")
    assert str(address.broadcast_addr) == "172.20.10.15"
    assert address.dst_addr is None


def test_address_parses_ipv6():
    address = Address("fe80::8b1:1234:5678:d065", netmask="ffff:ffff:ffff:ffff::")
    assert address.addr.version == 6
    assert address.netmask == ipaddress.ip_address("ffff:ffff:ffff:ffff::")


def test_address_rejects_invalid():
    with pytest.raises(ValueError):
        Address("not-an-ip")


def test_my_device_defaults():
    device = MyDevice("eth0")
    assert device.name == "eth0"
    assert device.desc is None
    assert device.addresses == []
    with device.lock:
        device.addresses.append(Address("10.0.0.1"))
    assert [str(a.addr) for a in device.addresses] == ["10.0.0.1"]