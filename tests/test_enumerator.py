from itertools import islice

import pytest
from netaddr import IPNetwork

from subnetcalc.ip.codec import parse_ipv4, parse_ipv6
from subnetcalc.ip.enumerator import DEFAULT_MAX_RESULTS, enumerate_subnets
from subnetcalc.ip.errors import InvalidCidr
from subnetcalc.ip.prefix import Prefix


def test_scenario_split_slash_24_into_slash_26():
    result = enumerate_subnets(Prefix(parse_ipv4("192.168.1.0"), 24), 26)
    assert [str(p) for p in result.subnets] == [
        "192.168.1.0/26",
        "192.168.1.64/26",
        "192.168.1.128/26",
        "192.168.1.192/26",
    ]
    assert result.total_count == 4
    assert not result.truncated


@pytest.mark.parametrize("text,cidr", [("10.0.0.0", 8), ("172.16.4.0", 22), ("0.0.0.0", 0)])
def test_two_added_bits_give_four_children(text, cidr):
    parent = Prefix(parse_ipv4(text), cidr)
    size = 1 << (32 - (cidr + 2))
    result = enumerate_subnets(parent, cidr + 2)
    assert [p.first for p in result.subnets] == [parent.first + i * size for i in range(4)]


@pytest.mark.parametrize("new_cidr", [24, 23, 0])
def test_non_narrowing_request_is_empty(new_cidr):
    result = enumerate_subnets(Prefix(parse_ipv4("192.168.1.0"), 24), new_cidr)
    assert result.subnets == ()
    assert result.total_count == 0


def test_new_cidr_beyond_version_range():
    with pytest.raises(InvalidCidr):
        enumerate_subnets(Prefix(parse_ipv4("192.168.1.0"), 24), 33)


def test_display_is_capped_but_total_is_exact():
    result = enumerate_subnets(Prefix(parse_ipv4("10.0.0.0"), 8), 24)
    assert len(result.subnets) == DEFAULT_MAX_RESULTS
    assert result.total_count == 65536
    assert result.truncated
    assert result.remaining == 65536 - 256
    assert str(result.subnets[-1]) == "10.0.255.0/24"


def test_custom_cap():
    result = enumerate_subnets(Prefix(parse_ipv4("10.0.0.0"), 8), 16, max_results=3)
    assert [str(p) for p in result.subnets] == ["10.0.0.0/16", "10.1.0.0/16", "10.2.0.0/16"]
    assert enumerate_subnets(Prefix(parse_ipv4("10.0.0.0"), 8), 16, max_results=0).subnets == ()


def test_parent_with_host_bits_set():
    parent = Prefix(parse_ipv4("192.168.1.77"), 24)
    assert str(enumerate_subnets(parent, 25).subnets[1]) == "192.168.1.128/25"


@pytest.mark.parametrize("network,new_cidr", [
    ("10.0.0.0/8", 12),
    ("192.168.0.0/16", 30),
    ("0.0.0.0/0", 32),
])
def test_ipv4_matches_netaddr(network, new_cidr):
    text, cidr = network.split("/")
    result = enumerate_subnets(Prefix(parse_ipv4(text), int(cidr)), new_cidr)
    expected = [str(n) for n in islice(IPNetwork(network).subnet(new_cidr), DEFAULT_MAX_RESULTS)]
    assert [str(p) for p in result.subnets] == expected


@pytest.mark.parametrize("network,new_cidr", [
    ("2001:db8::/32", 48),     # boundary on a group edge
    ("2001:db8::/32", 36),     # boundary inside a group
    ("2001:db8::/60", 66),     # children cross into the next group
    ("2001:db8:ff00::/40", 52),
    ("2001:db8::/120", 128),
    ("::/0", 9),
    ("2001:db8:0:fff0::/60", 72),
])
def test_ipv6_matches_netaddr(network, new_cidr):
    text, cidr = network.split("/")
    result = enumerate_subnets(Prefix(parse_ipv6(text), int(cidr)), new_cidr)
    expected = [n.first for n in islice(IPNetwork(network).subnet(new_cidr), DEFAULT_MAX_RESULTS)]
    assert [p.first for p in result.subnets] == expected
    assert result.total_count == 2 ** (new_cidr - int(cidr))


def test_ipv6_carry_into_previous_group():
    result = enumerate_subnets(Prefix(parse_ipv6("2001:db8::"), 63), 66)
    assert result.total_count == 8
    assert str(result.subnets[3]) == "2001:0db8:0000:0000:c000::/66"
    assert str(result.subnets[4]) == "2001:0db8:0000:0001::/66"
    assert str(result.subnets[5]) == "2001:0db8:0000:0001:4000::/66"


def test_ipv6_astronomical_total_is_bounded():
    result = enumerate_subnets(Prefix(parse_ipv6("2001:db8::"), 32), 128, max_results=10)
    assert len(result.subnets) == 10
    assert result.total_count == 2 ** 96
    assert str(result.subnets[9]) == "2001:0db8::0009/128"
