"""
Core subnet calculation entry points.

``calculate`` raises ``SubnetError``; ``evaluate``, ``check_contains``,
``list_subnets`` and ``shift`` return result objects whose ``error`` field
carries the failure instead.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from subnetcalc.ip.codec import IPVersion, detect_version, parse_address
from subnetcalc.ip.containment import as_prefix, contains
from subnetcalc.ip.enumerator import DEFAULT_MAX_RESULTS, enumerate_subnets
from subnetcalc.ip.errors import InvalidCidr, InvalidFormat, NotEnumerable, SubnetError
from subnetcalc.ip.prefix import Prefix, SubnetInfo, check_cidr, derive, derive_prefix

logger = logging.getLogger(__name__)


class ShiftDirection(str, Enum):
    """How a new prefix length relates to the original one."""
    SUBNETTING = "subnetting"
    SUPERNETTING = "supernetting"
    UNCHANGED = "unchanged"


@dataclass
class CalculationResult:
    """Outcome of evaluating address/CIDR text."""
    input: str
    info: SubnetInfo | None = None
    error: SubnetError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ContainmentResult:
    """Outcome of a membership check."""
    address: str
    network: str
    result: bool = False
    error: SubnetError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class EnumerationResult:
    """Child networks of a split, as prefix strings."""
    network: str
    new_cidr: int
    subnets: list[str] = field(default_factory=list)
    total_count: int = 0
    error: SubnetError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def truncated(self) -> bool:
        return self.total_count > len(self.subnets)

    @property
    def remaining(self) -> int:
        return self.total_count - len(self.subnets)


@dataclass
class ShiftResult:
    """A network recomputed at a different prefix length."""
    original: SubnetInfo
    new_cidr: int
    direction: ShiftDirection | None = None
    shifted: SubnetInfo | None = None
    subnets: EnumerationResult | None = None
    error: SubnetError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_cidr(text: str, version: IPVersion) -> int:
    """Parse a prefix length, accepting only plain decimal digits."""
    text = text.strip()
    if not (text.isascii() and text.isdigit()):
        raise InvalidCidr(f"Invalid CIDR '{text}': not an integer", text)
    cidr = int(text)
    check_cidr(version, cidr)
    return cidr


def calculate(text: str) -> SubnetInfo:
    """Calculate subnet information from address or CIDR notation.

    Without a ``/cidr`` suffix the input is treated as a single host
    (/32 for IPv4, /128 for IPv6).
    """
    text = text.strip()
    if not text:
        raise InvalidFormat("IP address cannot be empty", text)

    address_text, sep, cidr_text = text.partition("/")
    address_text = address_text.strip()
    version = detect_version(address_text)

    if sep:
        cidr = parse_cidr(cidr_text, version)
    else:
        cidr = version.max_prefix

    address = parse_address(address_text, version)
    return derive(address, cidr)


def evaluate(text: str) -> CalculationResult:
    """Evaluate address/CIDR text, returning errors as values."""
    try:
        info = calculate(text)
    except SubnetError as e:
        logger.debug("Rejected %r: %s", text, e)
        return CalculationResult(input=text, error=e)
    return CalculationResult(input=text, info=info)


def check_contains(candidate: str, network: SubnetInfo | Prefix) -> ContainmentResult:
    """Check whether ``candidate`` lies within ``network``."""
    prefix = as_prefix(network)
    outcome = ContainmentResult(address=candidate, network=str(prefix))
    try:
        outcome.result = contains(candidate, prefix)
    except SubnetError as e:
        logger.debug("Containment check of %r failed: %s", candidate, e)
        outcome.error = e
    return outcome


def list_subnets(
    network: SubnetInfo | Prefix,
    new_cidr: int,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> EnumerationResult:
    """List up to ``max_results`` /new_cidr children of ``network``."""
    prefix = as_prefix(network)
    outcome = EnumerationResult(network=str(prefix), new_cidr=new_cidr)

    try:
        check_cidr(prefix.version, new_cidr)
        if new_cidr <= prefix.cidr:
            raise NotEnumerable(
                f"New prefix /{new_cidr} must be longer than current /{prefix.cidr}", new_cidr
            )
        children = enumerate_subnets(prefix, new_cidr, max_results)
    except SubnetError as e:
        logger.debug("Cannot split %s into /%s: %s", prefix, new_cidr, e)
        outcome.error = e
        return outcome

    outcome.subnets = [str(child) for child in children.subnets]
    outcome.total_count = children.total_count
    return outcome


def shift(
    network: SubnetInfo,
    new_cidr: int,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> ShiftResult:
    """Recompute a network at a new prefix length.

    Narrowing also lists the resulting subnets; widening yields the single
    enclosing supernet.
    """
    outcome = ShiftResult(original=network, new_cidr=new_cidr)
    prefix = network.subnet

    try:
        outcome.shifted = derive_prefix(Prefix(prefix.network, new_cidr))
    except SubnetError as e:
        outcome.error = e
        return outcome

    if new_cidr > prefix.cidr:
        outcome.direction = ShiftDirection.SUBNETTING
        outcome.subnets = list_subnets(prefix, new_cidr, max_results)
    elif new_cidr < prefix.cidr:
        outcome.direction = ShiftDirection.SUPERNETTING
    else:
        outcome.direction = ShiftDirection.UNCHANGED

    return outcome
