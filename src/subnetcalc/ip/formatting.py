"""
Text renderings of subnet calculation results.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from datetime import datetime
from enum import Enum

from subnetcalc.ip.codec import ipv4_octets
from subnetcalc.ip.core import EnumerationResult
from subnetcalc.ip.prefix import SubnetInfo


class OutputFormat(str, Enum):
    """Verbosity of the main result."""
    DEFAULT = "default"
    COMPACT = "compact"
    DETAILED = "detailed"


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def format_default(info: SubnetInfo) -> str:
    if info.version == 4:
        return "\n".join([
            f"Network: {info.network}/{info.cidr}",
            f"Broadcast: {info.broadcast}",
            f"Usable Hosts: {info.usable_hosts}",
            f"Subnet Mask: {info.netmask}",
        ])
    return "\n".join([
        f"Network: {info.network}/{info.cidr}",
        f"Prefix: {info.prefix}",
        f"Host Addresses: {info.total_hosts}",
    ])


def format_compact(info: SubnetInfo) -> str:
    if info.version == 4:
        return f"{info.network}/{info.cidr} | {info.usable_hosts.value} hosts | {info.netmask}"
    return f"{info.network}/{info.cidr} | IPv6 network"


def format_detailed(info: SubnetInfo, calculated_at: datetime | None = None) -> str:
    timestamp = (calculated_at or datetime.now()).strftime("%H:%M:%S")

    if info.version == 4:
        lines = [
            f"Network Address: {info.network}",
            f"Broadcast Address: {info.broadcast}",
            f"First Host: {info.first_host}",
            f"Last Host: {info.last_host}",
            f"Subnet Mask: {info.netmask}",
            f"Wildcard Mask: {info.wildcard_mask}",
            f"CIDR: /{info.cidr}",
            f"Network Class: {info.network_class or 'N/A'}",
            f"Total Addresses: {info.total_hosts}",
            f"Usable Hosts: {info.usable_hosts}",
        ]
    else:
        lines = [
            f"Network Address: {info.network}",
            f"Prefix Notation: {info.prefix}",
            f"CIDR: /{info.cidr}",
            f"Host Bits: {info.host_bits}",
            f"Total Addresses: {info.total_hosts}",
        ]

    lines.append(f"Private Network: {_yes_no(info.is_private)}")
    lines.append(f"Calculated at: {timestamp}")
    return "\n".join(lines)


def format_info(
    info: SubnetInfo,
    fmt: OutputFormat = OutputFormat.DEFAULT,
    calculated_at: datetime | None = None,
) -> str:
    """Render subnet information in the requested format."""
    fmt = OutputFormat(fmt)
    if fmt is OutputFormat.COMPACT:
        return format_compact(info)
    if fmt is OutputFormat.DETAILED:
        return format_detailed(info, calculated_at)
    return format_default(info)


def calculation_sections(info: SubnetInfo) -> dict[str, str]:
    """Supplementary calculations, keyed by section title."""
    sections: dict[str, str] = {}

    if info.version == 4:
        octets = ipv4_octets(info.subnet.first)
        sections["Network Info"] = (
            f"Network: {info.network}\n"
            f"Class: {info.network_class or 'N/A'}\n"
            f"Private: {_yes_no(info.is_private)}"
        )
        sections["Host Range"] = f"First Host: {info.first_host}\nLast Host: {info.last_host}"
    else:
        sections["Network Info"] = (
            f"Network: {info.network}\n"
            f"IPv6 Prefix: {info.prefix}\n"
            f"Private: {_yes_no(info.is_private)}"
        )
        sections["Host Range"] = f"Network: {info.network}\n(IPv6 addressing differs from IPv4)"

    sections["Subnet Summary"] = (
        f"CIDR: /{info.cidr}\nTotal: {info.total_hosts}\nUsable: {info.usable_hosts}"
    )

    if info.version == 4:
        sections["Network Classes"] = (
            f"Class: {info.network_class or 'N/A'}\n"
            f"Subnet Mask: {info.netmask}\n"
            f"Wildcard Mask: {info.wildcard_mask}"
        )
        sections["Binary Notation"] = "Binary: " + ".".join(f"{o:08b}" for o in octets)
        sections["Hexadecimal"] = "Hex: " + ".".join(f"{o:02X}" for o in octets)
    else:
        sections["Network Classes"] = "Network classes apply to IPv4 only"
        sections["Binary Notation"] = "Binary notation: IPv6 binary representation is very long"
        sections["Hexadecimal"] = f"Hex: {info.network} (already in hexadecimal)"
        sections["IPv6 Compression"] = (
            f"Compressed: {info.network} can be written as {info.compressed}"
        )

    if info.cidr > 0:
        sections["Supernet Info"] = (
            f"Supernet: /{info.cidr - 1} (combines 2 networks of /{info.cidr})"
        )
    else:
        sections["Supernet Info"] = "Supernet: none (/0 already spans the whole address space)"

    sections["VLSM Analysis"] = (
        f"VLSM: /{info.cidr} provides {info.usable_hosts} usable addresses"
    )
    sections["Route Aggregation"] = (
        f"Route Summary: {info.network}/{info.cidr} represents {info.total_hosts} addresses"
    )

    return sections


def format_subnet_list(result: EnumerationResult) -> str:
    """One subnet per line, with a trailer when the list was capped."""
    lines = list(result.subnets)
    if result.truncated:
        lines.append(f"... and {result.remaining:,} more subnets")
    return "\n".join(lines)


def subnet_list_title(result: EnumerationResult) -> str:
    shown = len(result.subnets)
    if result.truncated:
        return f"Subnet List ({shown} of {result.total_count:,} subnets)"
    return f"Subnet List ({shown} subnets)"
