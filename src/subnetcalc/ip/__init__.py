"""
IP/CIDR Tools Module

Provides address parsing, subnet calculations, membership checks and
subnet enumeration for IPv4 and IPv6.
"""

from subnetcalc.ip.codec import (
    Address,
    IPVersion,
    compress_ipv6,
    expand_ipv6,
    format_address,
    parse_address,
    parse_ipv4,
    parse_ipv6,
)
from subnetcalc.ip.containment import contains
from subnetcalc.ip.core import (
    CalculationResult,
    ContainmentResult,
    EnumerationResult,
    ShiftDirection,
    ShiftResult,
    calculate,
    check_contains,
    evaluate,
    list_subnets,
    shift,
)
from subnetcalc.ip.enumerator import DEFAULT_MAX_RESULTS, SubnetList, enumerate_subnets
from subnetcalc.ip.errors import (
    ErrorKind,
    GroupOutOfRange,
    InvalidCidr,
    InvalidFormat,
    NotEnumerable,
    OctetOutOfRange,
    SubnetError,
    VersionMismatch,
)
from subnetcalc.ip.prefix import (
    AddressCount,
    ExactCount,
    Prefix,
    SubnetInfo,
    TooLargeCount,
    derive,
    derive_ipv4,
    derive_ipv6,
)

__all__ = [
    "Address",
    "IPVersion",
    "compress_ipv6",
    "expand_ipv6",
    "format_address",
    "parse_address",
    "parse_ipv4",
    "parse_ipv6",
    "contains",
    "CalculationResult",
    "ContainmentResult",
    "EnumerationResult",
    "ShiftDirection",
    "ShiftResult",
    "calculate",
    "check_contains",
    "evaluate",
    "list_subnets",
    "shift",
    "DEFAULT_MAX_RESULTS",
    "SubnetList",
    "enumerate_subnets",
    "ErrorKind",
    "GroupOutOfRange",
    "InvalidCidr",
    "InvalidFormat",
    "NotEnumerable",
    "OctetOutOfRange",
    "SubnetError",
    "VersionMismatch",
    "AddressCount",
    "ExactCount",
    "Prefix",
    "SubnetInfo",
    "TooLargeCount",
    "derive",
    "derive_ipv4",
    "derive_ipv6",
]
