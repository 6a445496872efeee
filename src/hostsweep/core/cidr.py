"""Parsing of ``dotted-ip/prefix-length`` strings."""

from __future__ import annotations

from hostsweep.errors import InvalidFormat
from hostsweep.models import CidrSpec

from .addressing import parse_decimal, to_integer


def parse_cidr(text: str) -> CidrSpec:
    """Parse ``a.b.c.d/n`` into a :class:`CidrSpec`.

    Raises InvalidFormat for anything not shaped exactly like four decimal
    octets, a slash and a decimal prefix, and InvalidRange when an octet
    exceeds 255 or the prefix exceeds 32.
    """
    address_text, slash, prefix_text = text.partition("/")
    if not slash:
        raise InvalidFormat(f"missing '/prefix' in {text!r}")
    if "/" in prefix_text:
        raise InvalidFormat(f"more than one '/' in {text!r}")

    address = to_integer(address_text)
    prefix_length = parse_decimal(prefix_text, "prefix length", 32)
    return CidrSpec(address=address, prefix_length=prefix_length)
