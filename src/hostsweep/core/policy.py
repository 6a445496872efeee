"""Per-mode decision table and DNS name formatting."""

from __future__ import annotations

from dataclasses import dataclass

from hostsweep.models import ProbeMode


@dataclass(frozen=True)
class ModePolicy:
    queries_dns: bool
    probes: bool
    # skip the probe and the whole row when DNS has no entry
    requires_dns_entry: bool
    description: str

    @property
    def columns(self) -> list[str]:
        columns = ["IP address"]
        if self.queries_dns:
            columns.append("DNS Name")
        if self.probes:
            columns.append("Status")
        return columns


POLICIES: dict[ProbeMode, ModePolicy] = {
    ProbeMode.FULL_DNS_THEN_PING: ModePolicy(
        queries_dns=True,
        probes=True,
        requires_dns_entry=False,
        description="DNS lookup and ping for every host",
    ),
    ProbeMode.PING_IF_IN_DNS: ModePolicy(
        queries_dns=True,
        probes=True,
        requires_dns_entry=True,
        description="ping only hosts that have a DNS entry",
    ),
    ProbeMode.DNS_ONLY: ModePolicy(
        queries_dns=True,
        probes=False,
        requires_dns_entry=False,
        description="DNS lookup only, no ping",
    ),
    ProbeMode.PING_ONLY: ModePolicy(
        queries_dns=False,
        probes=True,
        requires_dns_entry=False,
        description="ping only, no DNS lookup",
    ),
}


def policy_for(mode: ProbeMode) -> ModePolicy:
    return POLICIES[mode]


def _short_name(name: str, domain: str) -> str | None:
    """Strip ``domain`` from ``name``; None when the name is outside it."""
    name = name.rstrip(".")
    if not domain:
        return name
    if name.lower() == domain.lower():
        return name
    suffix = f".{domain}"
    if name.lower().endswith(suffix.lower()):
        return name[: -len(suffix)]
    return None


def format_dns_names(names: list[str], domain: str) -> str | None:
    """Join in-domain names with ``/``; None when none match ``domain``."""
    domain = domain.strip(".")
    short = [s for s in (_short_name(name, domain) for name in names) if s]
    if not short:
        return None
    return "/".join(short)

