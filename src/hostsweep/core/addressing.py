"""IPv4 address arithmetic on 32-bit integers."""

from __future__ import annotations

from hostsweep.errors import InvalidFormat, InvalidRange
from hostsweep.models import MAX_ADDRESS, NetworkRange


def parse_decimal(field: str, what: str, upper: int) -> int:
    # str.isdigit() also accepts non-ASCII digits such as "²"
    if not field or not field.isascii() or not field.isdigit():
        raise InvalidFormat(f"{what} must be a decimal number, got {field!r}")
    if len(field) > 1 and field.startswith("0"):
        raise InvalidFormat(f"{what} has a leading zero: {field!r}")
    if len(field) > len(str(upper)):
        raise InvalidRange(f"{what} {field[:8]}... is outside 0-{upper}")
    value = int(field)
    if value > upper:
        raise InvalidRange(f"{what} {value} is outside 0-{upper}")
    return value


def to_integer(dotted: str) -> int:
    """Convert ``a.b.c.d`` to a big-endian 32-bit integer."""
    fields = dotted.split(".")
    if len(fields) != 4:
        raise InvalidFormat(
            f"expected four dot-separated octets, got {len(fields)} in {dotted!r}"
        )
    value = 0
    for field in fields:
        value = (value << 8) | parse_decimal(field, "octet", 255)
    return value


def to_dotted(value: int) -> str:
    """Convert a 32-bit integer to ``a.b.c.d``."""
    value &= MAX_ADDRESS
    return ".".join(str((value >> shift) & 0xFF) for shift in (24, 16, 8, 0))


def compute_netmask(prefix_length: int) -> int:
    if not 0 <= prefix_length <= 32:
        raise InvalidRange(f"prefix length {prefix_length} is outside 0-32")
    if prefix_length == 0:
        return 0
    return (MAX_ADDRESS << (32 - prefix_length)) & MAX_ADDRESS


def compute_network_range(address: int, prefix_length: int) -> NetworkRange:
    """Derive the enclosing block of ``address/prefix_length``.

    ``address`` may be any host inside the block; the network address is
    obtained by masking. /31 blocks keep both addresses usable (RFC 3021)
    and /32 blocks describe a single host.
    """
    if not 0 <= address <= MAX_ADDRESS:
        raise InvalidRange(f"address {address} does not fit in 32 bits")
    netmask = compute_netmask(prefix_length)
    network = address & netmask
    broadcast = network | (~netmask & MAX_ADDRESS)

    if prefix_length >= 31:
        first, last = network, broadcast
    else:
        first, last = network + 1, broadcast - 1

    return NetworkRange(
        prefix_length=prefix_length,
        network_addr=network,
        broadcast_addr=broadcast,
        netmask=netmask,
        first_host=first,
        last_host=last,
    )
