import pytest

from trafficwatch.protocols import (
    APP_PROTOCOL_CHOICES,
    AppProtocol,
    ByteMultiple,
    IpVersion,
    TransProtocol,
    from_char_to_multiple,
    from_port_to_application_protocol,
)


def test_from_port_to_application_protocol_ftp():
    assert from_port_to_application_protocol(20) == AppProtocol.FTP
    assert from_port_to_application_protocol(21) == AppProtocol.FTP


def test_from_port_to_application_protocol_ssh():
    assert from_port_to_application_protocol(22) == AppProtocol.SSH


def test_from_port_to_application_protocol_other():
    assert from_port_to_application_protocol(500) == AppProtocol.OTHER


@pytest.mark.parametrize(
    "port, expected",
    [
        (443, AppProtocol.HTTPS),
        (8080, AppProtocol.HTTP),
        (80, AppProtocol.HTTP),
        (5353, AppProtocol.MDNS),
        (199, AppProtocol.SNMP),
        (220, AppProtocol.IMAP),
        (139, AppProtocol.NETBIOS),
        (140, AppProtocol.OTHER),
        (24, AppProtocol.OTHER),
    ],
)
def test_port_mapping_table(port, expected):
    assert from_port_to_application_protocol(port) == expected


def test_app_protocol_display_ftp():
    assert str(from_port_to_application_protocol(21)) == "FTP"


def test_app_protocol_display_other():
    assert str(from_port_to_application_protocol(500)) == "-"


def test_app_protocol_display_mdns():
    assert str(from_port_to_application_protocol(5353)) == "mDNS"


def test_choices_cover_every_protocol_once():
    assert len(APP_PROTOCOL_CHOICES) == len(set(APP_PROTOCOL_CHOICES)) == len(AppProtocol)
    assert from_port_to_application_protocol(9999) == APP_PROTOCOL_CHOICES[0]
    mapped = {from_port_to_application_protocol(port) for port in range(0, 6000)}
    assert mapped == set(APP_PROTOCOL_CHOICES)


def test_interpret_suffix_correctly():
    assert from_char_to_multiple("B") == ByteMultiple.B
    assert from_char_to_multiple("k") == ByteMultiple.KB
    assert from_char_to_multiple("M") == ByteMultiple.MB
    assert from_char_to_multiple("g") == ByteMultiple.GB


def test_interpret_unknown_suffix_correctly():
    assert from_char_to_multiple("T") == ByteMultiple.B
    assert from_char_to_multiple("p") == ByteMultiple.B


def test_multipliers_and_suffixes():
    assert ByteMultiple.B.multiplier() == 1
    assert ByteMultiple.KB.multiplier() == 1_000
    assert ByteMultiple.MB.multiplier() == 1_000_000
    assert ByteMultiple.GB.multiplier() == 1_000_000_000
    assert [m.suffix() for m in ByteMultiple] == ["", "K", "M", "G"]


def test_suffix_round_trip():
    for multiple in (ByteMultiple.KB, ByteMultiple.MB, ByteMultiple.GB):
        assert from_char_to_multiple(multiple.suffix()) == multiple


def test_display_names():
    assert str(from_char_to_multiple("k")) == "KB"
    assert str(from_char_to_multiple("x")) == "B"
    assert str(IpVersion.IPV6) == "IPv6"
    assert str(TransProtocol.UDP) == "UDP"