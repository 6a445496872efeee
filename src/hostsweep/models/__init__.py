"""Data models for hostsweep."""

from hostsweep.models.network import MAX_ADDRESS, CidrSpec, NetworkRange
from hostsweep.models.sweep import NO_ENTRY, HostResult, ProbeMode, SweepOptions

__all__ = [
    "MAX_ADDRESS",
    "NO_ENTRY",
    "CidrSpec",
    "HostResult",
    "NetworkRange",
    "ProbeMode",
    "SweepOptions",
]
