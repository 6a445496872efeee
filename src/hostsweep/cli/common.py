from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from hostsweep.config import Settings, get_settings, resolve_config_path
from hostsweep.core import DnsResolver, PingProber, system_search_domain
from hostsweep.errors import ConfigError
from hostsweep.models import ProbeMode


def load_settings_or_exit() -> Settings:
    try:
        return get_settings()
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def resolve_config_path_or_exit(allow_missing: bool = False) -> tuple[Path, bool]:
    try:
        return resolve_config_path(allow_missing=allow_missing)
    except FileNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def exit_with_usage(ctx: typer.Context, message: str) -> NoReturn:
    typer.echo(ctx.get_usage(), err=True)
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


def select_mode(dns_gated: bool, dns_only: bool, ping_only: bool) -> ProbeMode:
    chosen = [
        mode
        for flag, mode in (
            (dns_gated, ProbeMode.PING_IF_IN_DNS),
            (dns_only, ProbeMode.DNS_ONLY),
            (ping_only, ProbeMode.PING_ONLY),
        )
        if flag
    ]
    if len(chosen) > 1:
        raise ConfigError("options -d, -o and -p are mutually exclusive")
    return chosen[0] if chosen else ProbeMode.FULL_DNS_THEN_PING


def default_domain(settings: Settings) -> str:
    return system_search_domain() or settings.dns.fallback_domain


def build_resolver(settings: Settings) -> DnsResolver:
    return DnsResolver(
        timeout=settings.dns.timeout, nameservers=settings.dns.nameservers
    )


def build_prober(settings: Settings) -> PingProber:
    return PingProber(executable=settings.scan.ping_command)
