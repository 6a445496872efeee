from __future__ import annotations

import logging
import sys
from typing import Annotated

import typer
from rich.console import Console

from hostsweep import __version__
from hostsweep.core import (
    HostRange,
    compute_network_range,
    parse_cidr,
    policy_for,
    sweep,
)
from hostsweep.errors import ConfigError
from hostsweep.models import SweepOptions
from hostsweep.utils.logging import setup_logging

from . import common
from .output import format_row, header_line, options_table, preamble_lines

logger = logging.getLogger(__name__)

# status click uses for bad options and arguments
USAGE_ERROR_EXIT = 2

app = typer.Typer(
    help="Sweep an IPv4 CIDR block with reverse DNS lookups and pings, printing CSV.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"hostsweep version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    ctx: typer.Context,
    cidr: Annotated[
        str | None,
        typer.Argument(
            help="Block to sweep, e.g. 192.168.129.23/25. Host bits are ignored.",
            show_default=False,
        ),
    ] = None,
    dns_gated: Annotated[
        bool,
        typer.Option("-d", "--dns-gated", help="Ping only hosts found in DNS"),
    ] = False,
    dns_only: Annotated[
        bool,
        typer.Option("-o", "--dns-only", help="DNS lookup only, no ping"),
    ] = False,
    ping_only: Annotated[
        bool,
        typer.Option("-p", "--ping-only", help="Ping only, skip DNS"),
    ] = False,
    domain: Annotated[
        str | None,
        typer.Option(
            "-n",
            "--domain",
            help="DNS suffix to match and strip (default: resolver search domain)",
            show_default=False,
        ),
    ] = None,
    wait: Annotated[
        float | None,
        typer.Option(
            "-w",
            "--wait",
            min=0,
            help="Seconds to wait before each host (default from config: 0.125)",
            show_default=False,
        ),
    ] = None,
    probe_timeout: Annotated[
        float | None,
        typer.Option(
            "--probe-timeout",
            min=0.001,
            help="Seconds to wait for a ping reply (default from config: 1.0)",
            show_default=False,
        ),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("-q", "--quiet", help="Print only column headings and rows"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show resolved configuration first"),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("-y", "--yes", help="Do not ask before sweeping large blocks"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Reverse-resolve and/or ping every usable host in CIDR."""
    setup_logging("INFO" if verbose else None)
    settings = common.load_settings_or_exit()

    try:
        mode = common.select_mode(dns_gated, dns_only, ping_only)
        if cidr is None:
            raise ConfigError("missing CIDR address argument")
        spec = parse_cidr(cidr)
    except ConfigError as exc:
        common.exit_with_usage(ctx, str(exc))

    policy = policy_for(mode)
    if domain is None:
        domain = common.default_domain(settings) if policy.queries_dns else ""

    options = SweepOptions(
        mode=mode,
        domain=domain,
        wait=settings.scan.wait if wait is None else wait,
        probe_timeout=(
            settings.scan.probe_timeout if probe_timeout is None else probe_timeout
        ),
        confirm_threshold=settings.scan.confirm_threshold,
        quiet=quiet,
        verbose=verbose,
        assume_yes=yes,
    )

    network = compute_network_range(spec.address, spec.prefix_length)
    hosts = HostRange.from_network(network)

    if options.verbose:
        path, exists = common.resolve_config_path_or_exit(allow_missing=True)
        source = str(path) if exists else "defaults"
        Console(stderr=True).print(options_table(options, source))

    if network.size >= options.confirm_threshold and not options.assume_yes:
        proceed = typer.confirm(
            f"{cidr} spans {network.size} addresses ({len(hosts)} hosts). Continue?",
            default=False,
            err=True,
        )
        if not proceed:
            typer.echo("Sweep cancelled.", err=True)
            raise typer.Exit(0)

    if not options.quiet:
        for line in preamble_lines(cidr, network, hosts, options, policy):
            typer.echo(line)
    typer.echo(header_line(policy))

    logger.info("Sweeping %d hosts in %s (mode=%s)", len(hosts), cidr, mode.value)
    resolver = common.build_resolver(settings)
    prober = common.build_prober(settings)
    try:
        for result in sweep(hosts.addresses(), options, resolver, prober):
            typer.echo(format_row(result))
    except KeyboardInterrupt:
        typer.echo("Interrupted.", err=True)
        raise typer.Exit(130) from None


def run() -> None:
    """Console entry point; usage errors exit with status 1."""
    try:
        app()
    except SystemExit as exc:
        if exc.code == USAGE_ERROR_EXIT:
            sys.exit(1)
        raise


if __name__ == "__main__":
    run()
