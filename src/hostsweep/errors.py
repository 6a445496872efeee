"""Exception hierarchy for hostsweep."""

from __future__ import annotations


class HostsweepError(Exception):
    """Base class for hostsweep errors."""


class ConfigError(HostsweepError):
    """Fatal configuration problem detected before a sweep starts."""


class InvalidFormat(ConfigError):
    """Address or CIDR text is not shaped like ``a.b.c.d/n``."""


class InvalidRange(ConfigError):
    """An octet or prefix length is outside its allowed bounds."""


class ResolutionFailure(HostsweepError):
    """A reverse lookup failed. Recovered inside the resolver."""


class ProbeFailure(HostsweepError):
    """A reachability probe could not be run. Recovered inside the prober."""
