import pytest
from netaddr import IPNetwork

from subnetkit.ip import ip_to_integer, parse_cidr


def test_class_c_block():
    block = parse_cidr("192.168.1.0/24")
    assert block.is_valid
    assert block.error is None
    assert block.network == "192.168.1.0"
    assert block.subnet_mask == "255.255.255.0"
    assert block.broadcast == "192.168.1.255"
    assert block.first_host == "192.168.1.1"
    assert block.last_host == "192.168.1.254"
    assert block.host_count == 254
    assert block.prefix_length == 24


def test_slash_30():
    block = parse_cidr("10.0.0.0/30")
    assert block.host_count == 2
    assert block.first_host == "10.0.0.1"
    assert block.last_host == "10.0.0.2"
    assert block.broadcast == "10.0.0.3"


def test_host_bits_are_masked_off():
    block = parse_cidr("192.168.1.130/25")
    assert block.network == "192.168.1.128"
    assert block.subnet_mask == "255.255.255.128"
    assert block.broadcast == "192.168.1.255"
    assert block.first_host == "192.168.1.129"
    assert block.host_count == 126


def test_slash_31_clamps_host_count():
    block = parse_cidr("10.0.0.0/31")
    assert block.is_valid
    assert block.network == "10.0.0.0"
    assert block.broadcast == "10.0.0.1"
    assert block.first_host == "10.0.0.1"
    assert block.last_host == "10.0.0.0"
    assert block.host_count == 0


def test_slash_32_clamps_host_count():
    block = parse_cidr("10.0.0.5/32")
    assert block.network == "10.0.0.5"
    assert block.broadcast == "10.0.0.5"
    assert block.subnet_mask == "255.255.255.255"
    assert block.first_host == "10.0.0.6"
    assert block.last_host == "10.0.0.4"
    assert block.host_count == 0


def test_slash_32_at_address_space_edges_wraps():
    low = parse_cidr("0.0.0.0/32")
    assert low.last_host == "255.255.255.255"
    assert low.host_count == 0

    high = parse_cidr("255.255.255.255/32")
    assert high.first_host == "0.0.0.0"
    assert high.host_count == 0


def test_slash_0_covers_everything():
    block = parse_cidr("8.8.8.8/0")
    assert block.subnet_mask == "0.0.0.0"
    assert block.network == "0.0.0.0"
    assert block.broadcast == "255.255.255.255"
    assert block.first_host == "0.0.0.1"
    assert block.last_host == "255.255.255.254"
    assert block.host_count == 2 ** 32 - 2


@pytest.mark.parametrize("cidr", [
    "10.0.0.0/8",
    "172.16.0.0/12",
    "192.168.10.77/20",
    "203.0.113.9/27",
    "128.0.0.1/1",
    "1.2.3.4/30",
])
def test_matches_netaddr(cidr):
    block = parse_cidr(cidr)
    net = IPNetwork(cidr)
    assert block.network == str(net.network)
    assert block.broadcast == str(net.broadcast)
    assert block.subnet_mask == str(net.netmask)
    assert block.host_count == net.size - 2


@pytest.mark.parametrize("prefix", range(0, 33))
def test_host_count_never_negative(prefix):
    block = parse_cidr(f"198.51.100.23/{prefix}")
    assert block.is_valid
    assert block.host_count >= 0
    assert ip_to_integer(block.network) <= ip_to_integer(block.broadcast)


@pytest.mark.parametrize("cidr,error", [
    ("192.168.1.0", "Invalid CIDR format"),
    ("1.2.3.4/24/8", "Invalid CIDR format"),
    ("192.168.1.0/", "Invalid CIDR format: missing IP or prefix"),
    ("/24", "Invalid CIDR format: missing IP or prefix"),
    ("300.1.1.1/24", "Invalid IP address"),
    ("2001:db8::/32", "Invalid IP address"),
    ("10.0.0.0/abc", "Invalid prefix length"),
    ("10.0.0.0/-1", "Invalid prefix length"),
    ("10.0.0.0/ 8", "Invalid prefix length"),
    ("10.0.0.0/33", "Prefix length must be between 0 and 32"),
])
def test_invalid_cidr(cidr, error):
    block = parse_cidr(cidr)
    assert not block.is_valid
    assert block.error == error
    assert block.network == ""
    assert block.subnet_mask == ""
    assert block.broadcast == ""
    assert block.first_host == ""
    assert block.last_host == ""
    assert block.host_count == 0


def test_non_string_cidr_is_invalid():
    block = parse_cidr(None)
    assert not block.is_valid
    assert block.error == "Invalid CIDR format"


def test_parse_cidr_is_pure():
    assert parse_cidr("10.10.0.0/16") == parse_cidr("10.10.0.0/16")


def test_over_long_prefix_is_out_of_range():
    block = parse_cidr("10.0.0.0/" + "9" * 5000)
    assert not block.is_valid
    assert block.error == "Prefix length must be between 0 and 32"
    assert block.host_count == 0


def test_over_long_address_is_invalid():
    block = parse_cidr("1" * 5000 + ".0.0.0/8")
    assert block.error == "Invalid IP address"


def test_zero_padded_prefix_is_accepted():
    assert parse_cidr("10.0.0.0/0024").prefix_length == 24
