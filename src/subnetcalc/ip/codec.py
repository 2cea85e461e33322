"""
Address parsing and rendering.

Converts dotted-decimal IPv4 and colon-hex IPv6 text to fixed-width
integers and back, including IPv6 zero-run compression for display.
"""

import string
from dataclasses import dataclass
from enum import IntEnum

from subnetcalc.ip.errors import GroupOutOfRange, InvalidFormat, OctetOutOfRange


IPV6_GROUPS = 8
HEX_DIGITS = frozenset(string.hexdigits)


class IPVersion(IntEnum):
    """IP protocol version."""
    V4 = 4
    V6 = 6

    @property
    def bits(self) -> int:
        return 32 if self is IPVersion.V4 else 128

    @property
    def max_prefix(self) -> int:
        return self.bits

    @property
    def all_ones(self) -> int:
        return (1 << self.bits) - 1


@dataclass(frozen=True)
class Address:
    """An IP address held as an unsigned integer."""
    version: IPVersion
    value: int

    def __post_init__(self):
        if not 0 <= self.value <= self.version.all_ones:
            raise ValueError(f"{self.value} does not fit in an IPv{self.version} address")

    def __str__(self) -> str:
        return format_address(self)


def _is_decimal(text: str) -> bool:
    return text.isascii() and text.isdigit()


def parse_ipv4(text: str) -> Address:
    """Parse dotted-decimal IPv4 text."""
    octets = text.split(".")
    if len(octets) != 4:
        raise InvalidFormat(
            f"Invalid IPv4 address '{text}': expected 4 octets, got {len(octets)}", text
        )

    value = 0
    for octet in octets:
        if not _is_decimal(octet) or int(octet) > 255:
            raise OctetOutOfRange(
                f"Invalid IPv4 address '{text}': octet '{octet}' is not a number between 0 and 255",
                octet,
            )
        value = (value << 8) | int(octet)

    return Address(IPVersion.V4, value)


def _parse_group(group: str, text: str) -> int:
    if not group or not all(c in HEX_DIGITS for c in group):
        raise InvalidFormat(f"Invalid IPv6 address '{text}': bad group '{group}'", text)
    if len(group) > 4:
        raise GroupOutOfRange(
            f"Invalid IPv6 address '{text}': group '{group}' exceeds 16 bits", group
        )
    return int(group, 16)


def parse_ipv6(text: str) -> Address:
    """Parse full or ``::``-compressed IPv6 text."""
    if text.count("::") > 1:
        raise InvalidFormat(f"Invalid IPv6 address '{text}': more than one '::'", text)

    if "::" in text:
        left, right = text.split("::")
        left_groups = left.split(":") if left else []
        right_groups = right.split(":") if right else []
        missing = IPV6_GROUPS - len(left_groups) - len(right_groups)
        if missing < 1:
            raise InvalidFormat(f"Invalid IPv6 address '{text}': too many groups", text)
        groups = left_groups + ["0"] * missing + right_groups
    else:
        groups = text.split(":")
        if len(groups) != IPV6_GROUPS:
            raise InvalidFormat(
                f"Invalid IPv6 address '{text}': expected 8 groups, got {len(groups)}", text
            )

    value = 0
    for group in groups:
        value = (value << 16) | _parse_group(group, text)

    return Address(IPVersion.V6, value)


def detect_version(text: str) -> IPVersion:
    """IPv6 if the text contains a colon, IPv4 otherwise."""
    return IPVersion.V6 if ":" in text else IPVersion.V4


def parse_address(text: str, version: IPVersion | None = None) -> Address:
    """Parse address text, detecting the version unless one is given."""
    if version is None:
        version = detect_version(text)
    return parse_ipv4(text) if version is IPVersion.V4 else parse_ipv6(text)


def ipv4_octets(value: int) -> list[int]:
    return [(value >> shift) & 0xFF for shift in (24, 16, 8, 0)]


def ipv6_groups(value: int) -> list[int]:
    return [(value >> (16 * (IPV6_GROUPS - 1 - i))) & 0xFFFF for i in range(IPV6_GROUPS)]


def groups_to_int(groups: list[int]) -> int:
    value = 0
    for group in groups:
        value = (value << 16) | group
    return value


def format_ipv4(address: Address | int) -> str:
    value = address.value if isinstance(address, Address) else address
    return ".".join(str(octet) for octet in ipv4_octets(value))


def format_ipv6(address: Address | int) -> str:
    """Render eight lowercase 4-digit hex groups."""
    value = address.value if isinstance(address, Address) else address
    return ":".join(f"{group:04x}" for group in ipv6_groups(value))


def format_address(address: Address) -> str:
    if address.version is IPVersion.V4:
        return format_ipv4(address)
    return format_ipv6(address)


def _longest_zero_run(groups: list[str]) -> tuple[int, int]:
    """Start and length of the leftmost longest run of zero groups."""
    best_start, best_len = -1, 0
    run_start, run_len = -1, 0
    for i, group in enumerate(groups):
        if int(group, 16) == 0:
            if run_len == 0:
                run_start = i
            run_len += 1
            if run_len > best_len:
                best_start, best_len = run_start, run_len
        else:
            run_len = 0
    return best_start, best_len


def collapse_zero_run(groups: list[str]) -> str:
    """Join groups with the longest run of two or more zero groups as '::'."""
    start, length = _longest_zero_run(groups)
    if length < 2:
        return ":".join(groups)
    head = ":".join(groups[:start])
    tail = ":".join(groups[start + length:])
    return f"{head}::{tail}"


def expand_ipv6(text: str) -> str:
    return format_ipv6(parse_ipv6(text))


def compress_ipv6(text: str) -> str:
    """Shortest display form: zero run collapsed, leading zeros stripped."""
    groups = [f"{group:x}" for group in ipv6_groups(parse_ipv6(text).value)]
    return collapse_zero_run(groups)
