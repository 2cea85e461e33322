"""
Prefix math: masks, network/broadcast addresses, host counts and
network classification for IPv4 and IPv6 prefixes.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from subnetcalc.ip.codec import (
    Address,
    IPVersion,
    collapse_zero_run,
    format_address,
    format_ipv4,
    format_ipv6,
    groups_to_int,
    ipv4_octets,
    ipv6_groups,
)
from subnetcalc.ip.errors import InvalidCidr

logger = logging.getLogger(__name__)

# Host-bit count from which IPv6 address totals are no longer reported exactly
EXACT_COUNT_BITS = 64

PRIVATE_RANGES_V4 = [
    (0x0A000000, 8),   # 10.0.0.0/8
    (0xAC100000, 12),  # 172.16.0.0/12
    (0xC0A80000, 16),  # 192.168.0.0/16
]

# First-octet boundaries of the classful addressing scheme
NETWORK_CLASSES = [
    (1, 126, "A"),
    (128, 191, "B"),
    (192, 223, "C"),
    (224, 239, "D (Multicast)"),
    (240, 255, "E (Reserved)"),
]


@dataclass(frozen=True)
class ExactCount:
    """Address count small enough to report exactly."""
    value: int
    exact = True

    def __str__(self) -> str:
        return f"{self.value:,}"


@dataclass(frozen=True)
class TooLargeCount:
    """Address count known only as 2^host_bits, less an optional offset."""
    host_bits: int
    offset: int = 0
    exact = False

    def __str__(self) -> str:
        if self.offset:
            return f"2^{self.host_bits} - {self.offset}"
        return f"2^{self.host_bits}"


AddressCount = ExactCount | TooLargeCount


def check_cidr(version: IPVersion, cidr: int) -> None:
    if not 0 <= cidr <= version.max_prefix:
        raise InvalidCidr(
            f"CIDR must be between 0 and {version.max_prefix} for IPv{version.value}, got {cidr}",
            cidr,
        )


def netmask_value(version: IPVersion, cidr: int) -> int:
    """Mask with the leading ``cidr`` bits set."""
    host_bits = version.bits - cidr
    return (version.all_ones << host_bits) & version.all_ones


def _ipv4_network(value: int, cidr: int) -> int:
    return value & netmask_value(IPVersion.V4, cidr)


def _ipv6_network(value: int, cidr: int) -> int:
    """Clear host bits one 16-bit group at a time."""
    network = []
    remaining = cidr
    for group in ipv6_groups(value):
        if remaining >= 16:
            network.append(group)
            remaining -= 16
        elif remaining > 0:
            mask = (0xFFFF << (16 - remaining)) & 0xFFFF
            network.append(group & mask)
            remaining = 0
        else:
            network.append(0)
    return groups_to_int(network)


_NETWORK_FUNCS: dict[IPVersion, Callable[[int, int], int]] = {
    IPVersion.V4: _ipv4_network,
    IPVersion.V6: _ipv6_network,
}


def ipv6_prefix_notation(value: int, cidr: int) -> str:
    """Network text with the zero run collapsed, e.g. ``2001:0db8::/64``."""
    groups = [f"{group:04x}" for group in ipv6_groups(value)]
    return f"{collapse_zero_run(groups)}/{cidr}"


@dataclass(frozen=True)
class Prefix:
    """A network address paired with its prefix length.

    Host bits beyond ``cidr`` are always cleared on construction.
    """
    network: Address
    cidr: int

    def __post_init__(self):
        check_cidr(self.network.version, self.cidr)
        masked = _NETWORK_FUNCS[self.network.version](self.network.value, self.cidr)
        if masked != self.network.value:
            object.__setattr__(self, "network", Address(self.network.version, masked))

    @property
    def version(self) -> IPVersion:
        return self.network.version

    @property
    def host_bits(self) -> int:
        return self.version.bits - self.cidr

    @property
    def netmask(self) -> int:
        return netmask_value(self.version, self.cidr)

    @property
    def hostmask(self) -> int:
        return ~self.netmask & self.version.all_ones

    @property
    def first(self) -> int:
        return self.network.value

    @property
    def last(self) -> int:
        return self.network.value | self.hostmask

    def __str__(self) -> str:
        if self.version is IPVersion.V6:
            return ipv6_prefix_notation(self.network.value, self.cidr)
        return f"{format_address(self.network)}/{self.cidr}"


@dataclass(frozen=True)
class SubnetInfo:
    """Derived, read-only view over a Prefix."""
    subnet: Prefix = field(repr=False)
    network: str
    cidr: int
    version: int
    first_host: str
    last_host: str
    total_hosts: AddressCount
    usable_hosts: AddressCount
    is_private: bool
    broadcast: str | None = None
    netmask: str | None = None
    wildcard_mask: str | None = None
    network_class: str | None = None
    prefix: str | None = None
    compressed: str | None = None

    @property
    def host_bits(self) -> int:
        return self.subnet.host_bits

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return {
            "network": self.network,
            "cidr": self.cidr,
            "version": self.version,
            "broadcast": self.broadcast,
            "first_host": self.first_host,
            "last_host": self.last_host,
            "netmask": self.netmask,
            "wildcard_mask": self.wildcard_mask,
            "total_hosts": self.total_hosts.value if self.total_hosts.exact else str(self.total_hosts),
            "usable_hosts": self.usable_hosts.value if self.usable_hosts.exact else str(self.usable_hosts),
            "network_class": self.network_class,
            "is_private": self.is_private,
            "prefix": self.prefix,
            "compressed": self.compressed,
        }


def network_class(value: int) -> str | None:
    """Classful label from the first octet; None for 0.x and 127.x."""
    first_octet = ipv4_octets(value)[0]
    for low, high, label in NETWORK_CLASSES:
        if low <= first_octet <= high:
            return label
    return None


def is_private_ipv4(value: int) -> bool:
    """Check RFC1918 membership."""
    for network, cidr in PRIVATE_RANGES_V4:
        if value & netmask_value(IPVersion.V4, cidr) == network:
            return True
    return False


def is_private_ipv6(value: int) -> bool:
    """Unique-local, link-local or the loopback address."""
    first_group = ipv6_groups(value)[0]
    return (
        first_group & 0xFE00 == 0xFC00     # fc00::/7
        or first_group & 0xFFC0 == 0xFE80  # fe80::/10
        or value == 1                      # ::1
    )


def derive_ipv4(address: Address, cidr: int) -> SubnetInfo:
    """Compute subnet information for an IPv4 address and prefix length."""
    check_cidr(IPVersion.V4, cidr)
    subnet = Prefix(address, cidr)

    network = subnet.first
    broadcast = subnet.last
    if subnet.host_bits > 1:
        first_host, last_host = network + 1, broadcast - 1
    else:
        # /31 and /32 have no distinct host range
        first_host = last_host = network

    total = 1 << subnet.host_bits

    return SubnetInfo(
        subnet=subnet,
        network=format_ipv4(network),
        cidr=cidr,
        version=4,
        first_host=format_ipv4(first_host),
        last_host=format_ipv4(last_host),
        total_hosts=ExactCount(total),
        usable_hosts=ExactCount(max(0, total - 2)),
        is_private=is_private_ipv4(network),
        broadcast=format_ipv4(broadcast),
        netmask=format_ipv4(subnet.netmask),
        wildcard_mask=format_ipv4(subnet.hostmask),
        network_class=network_class(address.value),
    )


def derive_ipv6(address: Address, cidr: int) -> SubnetInfo:
    """Compute subnet information for an IPv6 address and prefix length.

    First and last host are both reported as the network address.
    """
    check_cidr(IPVersion.V6, cidr)
    subnet = Prefix(address, cidr)

    host_bits = subnet.host_bits
    if host_bits >= EXACT_COUNT_BITS:
        total: AddressCount = TooLargeCount(host_bits)
        usable: AddressCount = TooLargeCount(host_bits, offset=2)
    else:
        total = ExactCount(1 << host_bits)
        usable = ExactCount(max(0, total.value - 2))

    network = format_ipv6(subnet.first)

    return SubnetInfo(
        subnet=subnet,
        network=network,
        cidr=cidr,
        version=6,
        first_host=network,
        last_host=network,
        total_hosts=total,
        usable_hosts=usable,
        is_private=is_private_ipv6(address.value),
        prefix=ipv6_prefix_notation(subnet.first, cidr),
        compressed=collapse_zero_run([f"{g:x}" for g in ipv6_groups(subnet.first)]),
    )


_DERIVE_FUNCS: dict[IPVersion, Callable[[Address, int], SubnetInfo]] = {
    IPVersion.V4: derive_ipv4,
    IPVersion.V6: derive_ipv6,
}


def derive(address: Address, cidr: int) -> SubnetInfo:
    """Dispatch to the IPv4 or IPv6 calculation."""
    info = _DERIVE_FUNCS[address.version](address, cidr)
    logger.debug("Derived %s/%s from %s", info.network, cidr, address)
    return info


def derive_prefix(prefix: Prefix) -> SubnetInfo:
    return derive(prefix.network, prefix.cidr)
