"""
Error types raised by the subnet engine.

Engine functions raise these; the facade in ``subnetcalc.ip.core`` hands
them back as values on its result objects.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Error classification."""
    INVALID_FORMAT = "invalid_format"
    OCTET_OUT_OF_RANGE = "octet_out_of_range"
    GROUP_OUT_OF_RANGE = "group_out_of_range"
    INVALID_CIDR = "invalid_cidr"
    VERSION_MISMATCH = "version_mismatch"
    NOT_ENUMERABLE = "not_enumerable"


class SubnetError(ValueError):
    """Base exception for subnet calculation errors."""

    kind: ErrorKind

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.message = message
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message}


class InvalidFormat(SubnetError):
    """Malformed address syntax."""
    kind = ErrorKind.INVALID_FORMAT


class OctetOutOfRange(SubnetError):
    """IPv4 octet not a decimal number in [0, 255]."""
    kind = ErrorKind.OCTET_OUT_OF_RANGE


class GroupOutOfRange(SubnetError):
    """IPv6 group wider than 16 bits."""
    kind = ErrorKind.GROUP_OUT_OF_RANGE


class InvalidCidr(SubnetError):
    """Prefix length not an integer or outside the version's range."""
    kind = ErrorKind.INVALID_CIDR


class VersionMismatch(SubnetError):
    """IPv4 and IPv6 operands mixed in one operation."""
    kind = ErrorKind.VERSION_MISMATCH


class NotEnumerable(SubnetError):
    """Enumeration requested without narrowing the prefix."""
    kind = ErrorKind.NOT_ENUMERABLE
