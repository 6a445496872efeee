"""Text rendering of sweep headers and rows."""

from __future__ import annotations

from rich.table import Table

from hostsweep.core import HostRange, ModePolicy, to_dotted
from hostsweep.models import HostResult, NetworkRange, SweepOptions

SEPARATOR = ", "


def preamble_lines(
    cidr: str,
    network: NetworkRange,
    hosts: HostRange,
    options: SweepOptions,
    policy: ModePolicy,
) -> list[str]:
    lines = [
        f"# Sweep of {cidr}",
        f"# Network address: {to_dotted(network.network_addr)}",
        f"# Netmask: {to_dotted(network.netmask)} (/{network.prefix_length})",
        f"# Broadcast address: {to_dotted(network.broadcast_addr)}",
        (
            f"# Host range: {to_dotted(hosts.first)} - {to_dotted(hosts.last)}"
            f" ({len(hosts)} hosts)"
        ),
        f"# Mode: {policy.description}",
    ]
    if policy.queries_dns:
        lines.append(f"# DNS domain: {options.domain or '(any)'}")
    return lines


def header_line(policy: ModePolicy) -> str:
    return SEPARATOR.join(policy.columns)


def format_row(result: HostResult) -> str:
    return SEPARATOR.join(result.columns())


def options_table(options: SweepOptions, config_source: str) -> Table:
    table = Table(title="hostsweep configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Config file", config_source)
    table.add_row("Mode", options.mode.value)
    table.add_row("DNS domain", options.domain or "(any)")
    table.add_row("Wait", f"{options.wait}s")
    table.add_row("Probe timeout", f"{options.probe_timeout}s")
    table.add_row("Confirm threshold", f"{options.confirm_threshold} addresses")
    table.add_row("Quiet", str(options.quiet))
    table.add_row("Assume yes", str(options.assume_yes))
    return table
