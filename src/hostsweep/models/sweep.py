"""Sweep configuration and per-host results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field

NO_ENTRY = "No entry"


class ProbeMode(str, Enum):
    """Which collaborators run for each host."""

    FULL_DNS_THEN_PING = "full"
    PING_IF_IN_DNS = "dns-gated"
    DNS_ONLY = "dns-only"
    PING_ONLY = "ping-only"


class SweepOptions(BaseModel):
    """Resolved run configuration, built once from CLI flags and settings."""

    model_config = {"frozen": True, "extra": "forbid"}

    mode: ProbeMode = ProbeMode.FULL_DNS_THEN_PING
    domain: str = ""
    wait: float = Field(default=0.125, ge=0)
    probe_timeout: float = Field(default=1.0, gt=0)
    confirm_threshold: int = Field(default=512, ge=1)
    quiet: bool = False
    verbose: bool = False
    assume_yes: bool = False


@dataclass
class HostResult:
    """Outcome for a single host address."""

    address: str
    dns_name: str | None = None  # None when DNS was not queried
    reachable: bool | None = None  # None when the probe was skipped

    @property
    def status(self) -> str | None:
        if self.reachable is None:
            return None
        return "Active" if self.reachable else "Offline"

    def columns(self) -> list[str]:
        values = [self.address]
        if self.dns_name is not None:
            values.append(self.dns_name)
        if self.status is not None:
            values.append(self.status)
        return values
