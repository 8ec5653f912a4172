"""Helpers for registry host names."""

from __future__ import annotations

import ipaddress
import socket

_LOOPBACK_NAMES = {"localhost", "127.0.0.1", "::1", "0:0:0:0:0:0:0:1"}


def hostname(ref: str) -> str:
    """Return the host part of a registry reference, without port or path."""
    if ref.startswith("oci://"):
        ref = ref[len("oci://"):]

    colon = ref.find(":")
    slash = ref.find("/")

    cut = colon
    if colon == -1 or (colon > slash and slash != -1):
        cut = slash

    if cut < 0:
        return ref
    return ref[:cut]


def _is_loopback_address(address: str) -> bool:
    try:
        return ipaddress.ip_address(address.split("%", 1)[0]).is_loopback
    except ValueError:
        return False


def is_loopback(host: str) -> bool:
    """True if *host* is, or resolves to, a loopback address."""
    if host in _LOOPBACK_NAMES:
        return True
    if not host:
        return False

    try:
        return ipaddress.ip_address(host).is_loopback
    except ValueError:
        pass

    try:
        infos = socket.getaddrinfo(host, None)
    except (OSError, UnicodeError):
        return False

    return any(_is_loopback_address(str(info[4][0])) for info in infos)