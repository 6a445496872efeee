from __future__ import annotations

from .addressing import (
    compute_netmask,
    compute_network_range,
    to_dotted,
    to_integer,
)
from .cidr import parse_cidr
from .hosts import HostRange
from .policy import ModePolicy, format_dns_names, policy_for
from .prober import PingProber, Prober
from .resolver import DnsResolver, Resolver, system_search_domain
from .sweeper import check_host, sweep

__all__ = [
    "DnsResolver",
    "HostRange",
    "ModePolicy",
    "PingProber",
    "Prober",
    "Resolver",
    "check_host",
    "compute_netmask",
    "compute_network_range",
    "format_dns_names",
    "parse_cidr",
    "policy_for",
    "sweep",
    "system_search_domain",
    "to_dotted",
    "to_integer",
]
