"""
Bounded enumeration of the child networks produced by subnetting.
"""

import logging
from dataclasses import dataclass

from subnetcalc.ip.codec import Address, IPVersion, groups_to_int, ipv6_groups
from subnetcalc.ip.prefix import Prefix, check_cidr

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 256


@dataclass(frozen=True)
class SubnetList:
    """The first children of a split, plus how many exist in total."""
    subnets: tuple[Prefix, ...]
    total_count: int

    @property
    def truncated(self) -> bool:
        return self.total_count > len(self.subnets)

    @property
    def remaining(self) -> int:
        return self.total_count - len(self.subnets)


def _ipv4_children(parent: Prefix, new_cidr: int, count: int) -> list[int]:
    subnet_size = 1 << (32 - new_cidr)
    return [parent.first + i * subnet_size for i in range(count)]


def _ipv6_child(groups: list[int], new_cidr: int, index: int) -> int:
    """Add ``index`` at the new prefix boundary, carrying leftward."""
    part = (new_cidr - 1) // 16
    shift = 16 * (part + 1) - new_cidr
    result = list(groups)

    carry = index << shift
    j = part
    while carry and j >= 0:
        total = result[j] + (carry & 0xFFFF)
        result[j] = total & 0xFFFF
        carry = (carry >> 16) + (total >> 16)
        j -= 1

    return groups_to_int(result)


def _ipv6_children(parent: Prefix, new_cidr: int, count: int) -> list[int]:
    groups = ipv6_groups(parent.first)
    return [_ipv6_child(groups, new_cidr, i) for i in range(count)]


def enumerate_subnets(
    prefix: Prefix,
    new_cidr: int,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> SubnetList:
    """Split a prefix into /new_cidr children, in increasing address order.

    Only the first ``max_results`` children are built; ``total_count``
    always reports the full number. A new length that does not narrow the
    prefix yields an empty list with a total of zero.
    """
    check_cidr(prefix.version, new_cidr)
    if new_cidr <= prefix.cidr:
        return SubnetList(subnets=(), total_count=0)

    total_count = 1 << (new_cidr - prefix.cidr)
    display_count = min(total_count, max(0, max_results))

    if prefix.version is IPVersion.V4:
        values = _ipv4_children(prefix, new_cidr, display_count)
    else:
        values = _ipv6_children(prefix, new_cidr, display_count)

    subnets = tuple(Prefix(Address(prefix.version, value), new_cidr) for value in values)
    logger.debug(
        "Split %s into /%d: showing %d of %d", prefix, new_cidr, len(subnets), total_count
    )
    return SubnetList(subnets=subnets, total_count=total_count)
