import pytest

from subnetcalc.ip.codec import (
    Address,
    IPVersion,
    compress_ipv6,
    detect_version,
    expand_ipv6,
    format_ipv4,
    format_ipv6,
    parse_address,
    parse_ipv4,
    parse_ipv6,
)
from subnetcalc.ip.errors import (
    ErrorKind,
    GroupOutOfRange,
    InvalidFormat,
    OctetOutOfRange,
    SubnetError,
)


def test_parse_ipv4_value():
    addr = parse_ipv4("192.168.1.100")
    assert addr.version is IPVersion.V4
    assert addr.value == 0xC0A80164


@pytest.mark.parametrize("text,canonical", [
    ("0.0.0.0", "0.0.0.0"),
    ("255.255.255.255", "255.255.255.255"),
    ("010.001.000.009", "10.1.0.9"),
    ("172.16.5.4", "172.16.5.4"),
])
def test_ipv4_round_trip_is_canonical(text, canonical):
    assert format_ipv4(parse_ipv4(text)) == canonical


@pytest.mark.parametrize("text", ["1.2.3", "1.2.3.4.5", "", "1234"])
def test_parse_ipv4_wrong_segment_count(text):
    with pytest.raises(InvalidFormat) as exc_info:
        parse_ipv4(text)
    assert exc_info.value.kind is ErrorKind.INVALID_FORMAT


@pytest.mark.parametrize("text", [
    "256.1.1.1", "1.2.3.999", "a.b.c.d", "1..2.3", "1.2.3.-4", "1.2.3.+4", " 1.2.3.4", "1.2.3.4 ",
])
def test_parse_ipv4_bad_octet(text):
    with pytest.raises(OctetOutOfRange):
        parse_ipv4(text)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_ipv4("300.0.0.1")
    with pytest.raises(SubnetError):
        parse_ipv6("1:::2")


def test_parse_ipv6_full_form():
    addr = parse_ipv6("2001:0db8:0000:0000:0000:ff00:0042:8329")
    assert addr.version is IPVersion.V6
    assert addr.value == 0x20010DB8000000000000FF0000428329


@pytest.mark.parametrize("text,expanded", [
    ("::", "0000:0000:0000:0000:0000:0000:0000:0000"),
    ("::1", "0000:0000:0000:0000:0000:0000:0000:0001"),
    ("2001:db8::", "2001:0db8:0000:0000:0000:0000:0000:0000"),
    ("fe80::1:2", "fe80:0000:0000:0000:0000:0000:0001:0002"),
    ("2001:DB8:0:0:1::1", "2001:0db8:0000:0000:0001:0000:0000:0001"),
    ("1:2:3:4:5:6:7::", "0001:0002:0003:0004:0005:0006:0007:0000"),
])
def test_expand_ipv6(text, expanded):
    assert expand_ipv6(text) == expanded


@pytest.mark.parametrize("text", [
    "1::2::3",           # two markers
    "1:2:3:4:5:6:7",     # too few groups
    "1:2:3:4:5:6:7:8:9", # too many groups
    "1:2:3:4::5:6:7:8",  # marker standing for no groups
    "1:::2",
    "12g4::1",
    "::ffff:1.2.3.4",
    ":1:2:3:4:5:6:7",
    "fe80::1%eth0",
])
def test_parse_ipv6_invalid_format(text):
    with pytest.raises(InvalidFormat):
        parse_ipv6(text)


def test_parse_ipv6_group_too_wide():
    with pytest.raises(GroupOutOfRange) as exc_info:
        parse_ipv6("2001:db8::12345")
    assert exc_info.value.value == "12345"


@pytest.mark.parametrize("text,compressed", [
    ("2001:0db8:0000:0000:0000:0000:0000:0001", "2001:db8::1"),
    ("0000:0000:0000:0000:0000:0000:0000:0000", "::"),
    ("0000:0000:0000:0000:0000:0000:0000:0001", "::1"),
    ("fe80:0000:0000:0000:0000:0000:0000:0000", "fe80::"),
    # leftmost of two equally long runs
    ("2001:0db8:0000:0000:0001:0000:0000:0001", "2001:db8::1:0:0:1"),
    # longer run wins over an earlier shorter one
    ("2001:0000:0000:0001:0000:0000:0000:0001", "2001:0:0:1::1"),
    # a single zero group is not collapsed
    ("2001:0db8:0000:0001:0001:0001:0001:0001", "2001:db8:0:1:1:1:1:1"),
])
def test_compress_ipv6(text, compressed):
    assert compress_ipv6(text) == compressed


@pytest.mark.parametrize("text", ["::", "::1", "2001:db8::", "1:0:0:2::3", "fe80::abcd:0:0:1"])
def test_compress_keeps_address_value(text):
    assert parse_ipv6(compress_ipv6(expand_ipv6(text))) == parse_ipv6(text)


def test_format_ipv6_is_lowercase_and_padded():
    assert format_ipv6(parse_ipv6("ABCD::F")) == "abcd:0000:0000:0000:0000:0000:0000:000f"


def test_detect_version_and_parse_address():
    assert detect_version("10.0.0.1") is IPVersion.V4
    assert detect_version("::1") is IPVersion.V6
    assert parse_address("10.0.0.1") == Address(IPVersion.V4, 0x0A000001)
    assert str(parse_address("::1")) == "0000:0000:0000:0000:0000:0000:0000:0001"


def test_address_rejects_out_of_range_value():
    with pytest.raises(ValueError):
        Address(IPVersion.V4, 1 << 32)
