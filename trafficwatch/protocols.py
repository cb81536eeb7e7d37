"""Enumerations describing observed traffic: protocols, directions, sizes and status."""

from __future__ import annotations

from enum import Enum


class AppProtocol(Enum):
    """Application layer protocol inferred from a transport port."""

    FTP = "FTP"
    SSH = "SSH"
    TELNET = "Telnet"
    SMTP = "SMTP"
    TACACS = "TACACS"
    DNS = "DNS"
    DHCP = "DHCP"
    TFTP = "TFTP"
    HTTP = "HTTP"
    POP = "POP"
    NTP = "NTP"
    NETBIOS = "NetBIOS"
    POP3S = "POP3S"
    IMAP = "IMAP"
    SNMP = "SNMP"
    BGP = "BGP"
    LDAP = "LDAP"
    HTTPS = "HTTPS"
    LDAPS = "LDAPS"
    FTPS = "FTPS"
    MDNS = "mDNS"
    IMAPS = "IMAPS"
    SSDP = "SSDP"
    XMPP = "XMPP"
    OTHER = "Other"

    def __str__(self) -> str:
        return "-" if self is AppProtocol.OTHER else self.value


APP_PROTOCOL_CHOICES: tuple[AppProtocol, ...] = (
    AppProtocol.OTHER,
    AppProtocol.BGP,
    AppProtocol.DHCP,
    AppProtocol.DNS,
    AppProtocol.FTP,
    AppProtocol.FTPS,
    AppProtocol.HTTP,
    AppProtocol.HTTPS,
    AppProtocol.IMAP,
    AppProtocol.IMAPS,
    AppProtocol.LDAP,
    AppProtocol.LDAPS,
    AppProtocol.MDNS,
    AppProtocol.NETBIOS,
    AppProtocol.NTP,
    AppProtocol.POP,
    AppProtocol.POP3S,
    AppProtocol.SMTP,
    AppProtocol.SNMP,
    AppProtocol.SSDP,
    AppProtocol.SSH,
    AppProtocol.TACACS,
    AppProtocol.TELNET,
    AppProtocol.TFTP,
    AppProtocol.XMPP,
)

_PORT_RANGES: tuple[tuple[range, AppProtocol], ...] = (
    (range(20, 22), AppProtocol.FTP),
    (range(22, 23), AppProtocol.SSH),
    (range(23, 24), AppProtocol.TELNET),
    (range(25, 26), AppProtocol.SMTP),
    (range(49, 50), AppProtocol.TACACS),
    (range(53, 54), AppProtocol.DNS),
    (range(67, 69), AppProtocol.DHCP),
    (range(69, 70), AppProtocol.TFTP),
    (range(80, 81), AppProtocol.HTTP),
    (range(8080, 8081), AppProtocol.HTTP),
    (range(109, 111), AppProtocol.POP),
    (range(123, 124), AppProtocol.NTP),
    (range(137, 140), AppProtocol.NETBIOS),
    (range(143, 144), AppProtocol.IMAP),
    (range(220, 221), AppProtocol.IMAP),
    (range(161, 163), AppProtocol.SNMP),
    (range(199, 200), AppProtocol.SNMP),
    (range(179, 180), AppProtocol.BGP),
    (range(389, 390), AppProtocol.LDAP),
    (range(443, 444), AppProtocol.HTTPS),
    (range(636, 637), AppProtocol.LDAPS),
    (range(989, 991), AppProtocol.FTPS),
    (range(993, 994), AppProtocol.IMAPS),
    (range(995, 996), AppProtocol.POP3S),
    (range(1900, 1901), AppProtocol.SSDP),
    (range(5222, 5223), AppProtocol.XMPP),
    (range(5353, 5354), AppProtocol.MDNS),
)


def from_port_to_application_protocol(port: int) -> AppProtocol:
    """Map a transport port to a well-known application protocol, or OTHER."""
    return next(
        (protocol for ports, protocol in _PORT_RANGES if port in ports),
        AppProtocol.OTHER,
    )


class ByteMultiple(Enum):
    """Decimal multiple of a byte quantity."""

    B = "B"
    KB = "KB"
    MB = "MB"
    GB = "GB"

    def __str__(self) -> str:
        return self.value

    def multiplier(self) -> int:
        """Number of bytes represented by one unit of this multiple."""
        return _MULTIPLIERS[self]

    def suffix(self) -> str:
        """Single-letter prefix of this multiple (empty for plain bytes)."""
        return _SUFFIXES[self]


_MULTIPLIERS = {
    ByteMultiple.B: 1,
    ByteMultiple.KB: 1_000,
    ByteMultiple.MB: 1_000_000,
    ByteMultiple.GB: 1_000_000_000,
}

_SUFFIXES = {
    ByteMultiple.B: "",
    ByteMultiple.KB: "K",
    ByteMultiple.MB: "M",
    ByteMultiple.GB: "G",
}

_CHAR_TO_MULTIPLE = {
    "K": ByteMultiple.KB,
    "M": ByteMultiple.MB,
    "G": ByteMultiple.GB,
}


def from_char_to_multiple(ch: str) -> ByteMultiple:
    """Interpret a suffix letter (case-insensitive) as a byte multiple."""
    key = ch.upper() if ch.isascii() else ch
    return _CHAR_TO_MULTIPLE.get(key, ByteMultiple.B)


class IpVersion(Enum):
    """Internet Protocol version of observed traffic."""

    IPV4 = "IPv4"
    IPV6 = "IPv6"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


IP_VERSION_CHOICES: tuple[IpVersion, ...] = (IpVersion.IPV4, IpVersion.IPV6, IpVersion.OTHER)


class TransProtocol(Enum):
    """Transport layer protocol of observed traffic."""

    TCP = "TCP"
    UDP = "UDP"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


TRANS_PROTOCOL_CHOICES: tuple[TransProtocol, ...] = (
    TransProtocol.TCP,
    TransProtocol.UDP,
    TransProtocol.OTHER,
)


class TrafficDirection(Enum):
    """Direction of traffic relative to the local interface."""

    INCOMING = "Incoming"
    OUTGOING = "Outgoing"


class TrafficType(Enum):
    """Kind of addressing used by the remote host."""

    UNICAST = "Unicast"
    MULTICAST = "Multicast"
    BROADCAST = "Broadcast"


class Status(Enum):
    """State of the sniffing process."""

    INIT = "Init"
    RUNNING = "Running"