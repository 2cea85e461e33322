"""
Subnet membership checks.
"""

import logging

from subnetcalc.ip.codec import detect_version, parse_address
from subnetcalc.ip.errors import VersionMismatch
from subnetcalc.ip.prefix import Prefix, SubnetInfo

logger = logging.getLogger(__name__)


def as_prefix(network: Prefix | SubnetInfo) -> Prefix:
    return network.subnet if isinstance(network, SubnetInfo) else network


def contains(candidate: str, network: Prefix | SubnetInfo) -> bool:
    """Check if an address lies within a network.

    Any ``/cidr`` suffix on the candidate is ignored. This is exact subnet
    membership, not a longest-prefix match.
    """
    prefix = as_prefix(network)
    text = candidate.strip().split("/", 1)[0]

    version = detect_version(text)
    if version is not prefix.version:
        raise VersionMismatch(
            f"Cannot check IPv{version.value} address {text} against IPv{prefix.version.value} network {prefix}",
            text,
        )

    address = parse_address(text, prefix.version)
    result = address.value & prefix.netmask == prefix.network.value
    logger.debug("%s in %s: %s", text, prefix, result)
    return result
