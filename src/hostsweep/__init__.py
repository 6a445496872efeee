"""hostsweep - reverse DNS and ping sweep of an IPv4 CIDR block."""

from __future__ import annotations

from importlib.metadata import version

from .config import DnsConfig, ScanConfig, Settings, get_settings
from .errors import ConfigError, InvalidFormat, InvalidRange
from .models import CidrSpec, HostResult, NetworkRange, ProbeMode, SweepOptions

__all__ = [
    "CidrSpec",
    "ConfigError",
    "DnsConfig",
    "HostResult",
    "InvalidFormat",
    "InvalidRange",
    "NetworkRange",
    "ProbeMode",
    "ScanConfig",
    "Settings",
    "SweepOptions",
    "__version__",
    "get_settings",
]

__version__ = version("hostsweep")
