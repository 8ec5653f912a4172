import socket
from unittest import mock

import pytest

from confcheck.network import hostname, is_loopback


@pytest.mark.parametrize(
    "ref, expected",
    [
        ("", ""),
        ("hostname", "hostname"),
        ("hostname:1234", "hostname"),
        ("hostname/path", "hostname"),
        ("hostname:1234/path", "hostname"),
        ("hostname/path:1234", "hostname"),
        ("oci://hostname", "hostname"),
        ("oci://hostname:1234", "hostname"),
        ("oci://hostname/path", "hostname"),
        ("oci://hostname:1234/path", "hostname"),
        ("oci://hostname/path:1234", "hostname"),
    ],
)
def test_hostname(ref, expected):
    assert hostname(ref) == expected


@pytest.mark.parametrize(
    "host, expected",
    [
        ("", False),
        ("1.1.1.1", False),
        ("2606:4700:4700::1111", False),
        ("localhost", True),
        ("127.0.0.1", True),
        ("127.0.0.2", True),
        ("::1", True),
        ("0:0:0:0:0:0:0:1", True),
    ],
)
def test_is_loopback(host, expected):
    assert is_loopback(host) is expected


def _info(address):
    return [(socket.AF_INET, socket.SOCK_STREAM, 6, "", (address, 0))]


@mock.patch("socket.getaddrinfo", return_value=_info("93.184.216.34"))
def test_resolved_public_name_is_not_loopback(_lookup):
    assert is_loopback("registry.example.com") is False


@mock.patch("socket.getaddrinfo", return_value=_info("127.0.0.1"))
def test_resolved_loopback_name(_lookup):
    assert is_loopback("127.0.0.1.nip.example.com") is True


@mock.patch("socket.getaddrinfo", side_effect=socket.gaierror("no such host"))
def test_unresolvable_name_is_not_loopback(_lookup):
    assert is_loopback("missing.example.com") is False