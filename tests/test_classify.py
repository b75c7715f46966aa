from dataclasses import FrozenInstanceError

import pytest

from subnetkit.ip import analyze_ip


def test_private_address():
    info = analyze_ip("10.0.0.1")
    assert info.is_valid
    assert info.version == 4
    assert info.is_private
    assert not info.is_public


def test_loopback_address():
    info = analyze_ip("127.0.0.1")
    assert info.is_loopback
    assert info.is_reserved
    assert not info.is_private
    assert not info.is_public


def test_public_address():
    info = analyze_ip("8.8.8.8")
    assert not info.is_private
    assert not info.is_reserved
    assert not info.is_loopback
    assert not info.is_multicast
    assert info.is_public


def test_multicast_address():
    info = analyze_ip("224.0.0.1")
    assert info.is_multicast
    assert info.is_reserved
    assert not info.is_private
    assert not info.is_public


def test_invalid_address():
    info = analyze_ip("300.1.1.1")
    assert not info.is_valid
    assert info.version is None
    assert not any([
        info.is_private,
        info.is_public,
        info.is_reserved,
        info.is_loopback,
        info.is_multicast,
        info.is_link_local,
    ])
    assert info.binary is None
    assert info.hex is None
    assert info.integer is None


def test_ipv4_representations():
    info = analyze_ip("192.168.1.1")
    assert info.binary == "11000000.10101000.00000001.00000001"
    assert info.hex == "c0:a8:01:01"
    assert info.integer == 3232235777
    assert not info.is_link_local


def test_zero_address_keeps_integer():
    info = analyze_ip("0.0.0.0")
    assert info.integer == 0
    assert info.is_reserved
    assert not info.is_public


@pytest.mark.parametrize("address", [
    "0.0.0.0", "1.1.1.1", "10.1.2.3", "100.64.0.1", "127.0.0.1",
    "172.16.5.4", "192.168.0.1", "224.0.0.1", "239.255.255.255",
    "240.0.0.1", "255.255.255.255",
])
def test_ipv4_public_is_complement_of_other_categories(address):
    info = analyze_ip(address)
    assert info.is_public == (
        not (info.is_private or info.is_reserved or info.is_loopback or info.is_multicast)
    )
    if info.is_loopback or info.is_multicast:
        assert not info.is_private


def test_ipv6_link_local():
    info = analyze_ip("fe80::1")
    assert info.version == 6
    assert info.is_link_local
    assert info.is_private
    assert not info.is_public


def test_ipv6_loopback():
    info = analyze_ip("::1")
    assert info.is_loopback
    assert not info.is_public
    assert not info.is_reserved


def test_ipv6_unique_local_and_multicast():
    assert analyze_ip("fd00::10").is_private
    multicast = analyze_ip("ff02::1")
    assert multicast.is_multicast
    assert not multicast.is_public


def test_ipv6_public_has_no_ipv4_representations():
    info = analyze_ip("2001:db8::1")
    assert info.is_public
    assert info.binary is None
    assert info.integer is None
    assert info.hex == "2001db81"


def test_analyze_ip_is_pure():
    assert analyze_ip("172.20.1.1") == analyze_ip("172.20.1.1")
    assert analyze_ip("garbage") == analyze_ip("garbage")


def test_classification_is_immutable():
    info = analyze_ip("8.8.8.8")
    with pytest.raises(FrozenInstanceError):
        info.is_public = False


def test_over_long_octet_is_an_invalid_record():
    info = analyze_ip("1" * 5000 + ".1.1.1")
    assert not info.is_valid
    assert info.version is None
