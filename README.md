# trafficwatch

Building blocks for a network traffic monitor. The package models observed
connections, hosts and protocols. It decodes header fields into report-ready
strings and classifies traffic by direction and type. It also raises
threshold and favourite-host notifications from the collected statistics.

It has no dependencies outside the standard library.

## Installation

```
pip install trafficwatch
```

## Modules

- `trafficwatch.protocols`: enumerations for the values in use. These are
  `AppProtocol`, `TransProtocol`, `IpVersion`, `ByteMultiple`,
  `TrafficDirection`, `TrafficType` and `Status`.
  `from_port_to_application_protocol(port)` maps a well-known port to an
  `AppProtocol`. Unknown ports map to `AppProtocol.OTHER`, which prints as
  `-`. `from_char_to_multiple(ch)` turns a `k`/`m`/`g` suffix (any case) into
  a `ByteMultiple`. Any other character gives `ByteMultiple.B`.
  `ByteMultiple.multiplier()` returns the number of bytes in one unit and
  `ByteMultiple.suffix()` returns its letter.
- `trafficwatch.traffic`: value types. `AddressPortPair` is a hashable
  connection key that formats as a fixed-width report row. `print_gui()`
  returns the same row without separators. The module also defines `Asn` and
  `Host`. `DataInfo` counts incoming and outgoing packets and bytes and
  provides `add_packet`, `new_with_first_packet`, `tot_packets`, `tot_bytes`
  and `+=`. The remaining types are `DataInfoHost`, `Filters`,
  `SearchParameters` (with `is_some_filter_active()`) and `FilterInputType`.
- `trafficwatch.records`: `InfoAddressPortPair` holds the statistics of one
  connection. `InfoTraffic` is the shared traffic state and carries its own
  re-entrant `lock`. `Address` is an interface address; strings are accepted
  and parsed with `ipaddress`. `MyDevice` is the monitored adapter, with its
  address list and a `lock`.
- `trafficwatch.notifications`: settings for notifications. These are
  `Notifications`, `PacketsNotification`, `BytesNotification`,
  `FavoriteNotification` and `Sound`. `PacketsNotification.from_str` and
  `BytesNotification.from_str` parse user input such as `"1200"` or
  `"500k"`. Input that cannot be parsed falls back to the previous threshold.
  The logged events are `PacketsThresholdExceeded`, `BytesThresholdExceeded`
  and `FavoriteTransmitted`.
- `trafficwatch.packets`: header records `EthernetHeader`, `Ipv4Header`,
  `Ipv6Header`, `TcpHeader` and `UdpHeader`. `analyze_link_header`,
  `analyze_network_header` and `analyze_transport_header` return a tuple of
  decoded values, or `None` when the packet should be skipped.
  `mac_from_dec_to_hex` formats a MAC address. `ipv6_from_long_dec_to_short_hex`
  formats 16 bytes as a compressed IPv6 address.
- `trafficwatch.addresses`: `get_traffic_direction`, `get_traffic_type`,
  `is_multicast_address`, `is_broadcast_address`, `is_local_connection`,
  `is_my_address` and `get_address_to_lookup`.
  `modify_or_insert_in_map` records one packet of a connection in an
  `InfoTraffic` and returns a snapshot of that connection's record.
- `trafficwatch.alerts`: `RunTimeData` holds the displayed statistics.
  `notify_and_log(runtime_data, notifications, info_traffic, player=None)`
  checks the packet and byte thresholds and the favourite hosts for the last
  interval. It keeps the 30 most recent notifications, newest first, and
  returns how many it emitted. If you pass a `player(sound, volume)` callable,
  it is called for at most one sound per check.

## Examples

```python
from trafficwatch.protocols import AppProtocol, from_port_to_application_protocol
from trafficwatch.packets import ipv6_from_long_dec_to_short_hex
from trafficwatch.notifications import BytesNotification
from trafficwatch.records import Address
from trafficwatch.addresses import is_local_connection

assert from_port_to_application_protocol(443) is AppProtocol.HTTPS
assert str(AppProtocol.OTHER) == "-"

addr = ipv6_from_long_dec_to_short_hex(
    [255, 10, 10, 255, 0, 0, 0, 0, 28, 4, 4, 28, 255, 1, 0, 0]
)
assert addr == "ff0a:aff::1c04:41c:ff01:0"

setting = BytesNotification.from_str("500k", None)
assert setting.threshold == 500_000

mine = [Address("172.20.10.9", netmask="255.255.255.240")]
assert is_local_connection("172.20.10.7", mine)
assert not is_local_connection("172.20.10.16", mine)
```

## What it does not do

This is a library of data types and analysis functions, not a finished
monitor. It does not capture packets from a network interface, and it does not
list adapters or their addresses. You supply the decoded headers and the
interface addresses yourself. It performs no reverse DNS or geolocation
lookups, writes no report files, stores no settings on disk and has no user
interface or command. It plays no audio either. `notify_and_log` only calls
the `player` callable you pass in.

## Running the tests

```
pip install "trafficwatch[test]"
pytest
```