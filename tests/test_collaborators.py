from __future__ import annotations

import subprocess
from types import SimpleNamespace

import dns.exception
import dns.name
import dns.resolver
import pytest

from hostsweep.core import prober as prober_module
from hostsweep.core import resolver as resolver_module
from hostsweep.core.prober import PingProber, ping_command
from hostsweep.core.resolver import DnsResolver, system_search_domain


def _ptr(name: str) -> SimpleNamespace:
    return SimpleNamespace(target=dns.name.from_text(name))


@pytest.fixture
def dns_resolver() -> DnsResolver:
    return DnsResolver(timeout=0.5, nameservers=["192.0.2.53"])


def test_reverse_lookup_returns_ptr_targets(dns_resolver, monkeypatch):
    queried: list[str] = []

    def _resolve_address(address: str):
        queried.append(address)
        return [_ptr("web.example.com"), _ptr("www.example.com")]

    monkeypatch.setattr(dns_resolver._resolver, "resolve_address", _resolve_address)

    assert dns_resolver.reverse_lookup("192.0.2.10") == [
        "web.example.com.",
        "www.example.com.",
    ]
    assert queried == ["192.0.2.10"]


@pytest.mark.parametrize(
    "error",
    [
        dns.resolver.NXDOMAIN(),
        dns.resolver.NoAnswer(),
        dns.exception.Timeout(),
        dns.resolver.NoNameservers(),
    ],
)
def test_reverse_lookup_failures_mean_no_names(dns_resolver, monkeypatch, error):
    def _resolve_address(address: str):
        raise error

    monkeypatch.setattr(dns_resolver._resolver, "resolve_address", _resolve_address)

    assert dns_resolver.reverse_lookup("192.0.2.10") == []


def test_resolver_settings_are_applied(dns_resolver):
    assert dns_resolver._resolver.timeout == 0.5
    assert dns_resolver._resolver.lifetime == 0.5


class _StubSystemResolver:
    search: list[dns.name.Name] = []
    domain: dns.name.Name = dns.name.root


def test_system_search_domain_prefers_search_list(monkeypatch):
    class Stub(_StubSystemResolver):
        search = [dns.name.from_text("corp.example.com")]
        domain = dns.name.from_text("example.com")

    monkeypatch.setattr(resolver_module.dns.resolver, "Resolver", Stub)
    assert system_search_domain() == "corp.example.com"


def test_system_search_domain_falls_back_to_domain(monkeypatch):
    class Stub(_StubSystemResolver):
        domain = dns.name.from_text("example.net")

    monkeypatch.setattr(resolver_module.dns.resolver, "Resolver", Stub)
    assert system_search_domain() == "example.net"


def test_system_search_domain_none_when_unconfigured(monkeypatch):
    monkeypatch.setattr(resolver_module.dns.resolver, "Resolver", _StubSystemResolver)
    assert system_search_domain() is None


def test_system_search_domain_none_without_resolv_conf(monkeypatch):
    def _missing():
        raise dns.resolver.NoResolverConfiguration()

    monkeypatch.setattr(resolver_module.dns.resolver, "Resolver", _missing)
    assert system_search_domain() is None


@pytest.mark.parametrize(
    ("platform", "expected"),
    [
        ("linux", ["ping", "-c", "1", "-W", "1", "10.0.0.1"]),
        ("darwin", ["ping", "-c", "1", "-W", "125", "10.0.0.1"]),
        ("win32", ["ping", "-n", "1", "-w", "125", "10.0.0.1"]),
    ],
)
def test_ping_command_per_platform(platform, expected):
    assert ping_command("10.0.0.1", 0.125, platform=platform) == expected


def test_ping_command_rounds_linux_timeout_up():
    assert ping_command("10.0.0.1", 2.5, platform="linux")[4] == "3"


def test_probe_reports_exit_status(monkeypatch):
    calls: list[dict[str, object]] = []

    def _run(cmd, **kwargs):
        calls.append({"cmd": cmd, **kwargs})
        return SimpleNamespace(returncode=0 if cmd[-1] == "10.0.0.1" else 1)

    monkeypatch.setattr(prober_module.subprocess, "run", _run)
    prober = PingProber(executable="/bin/ping")

    assert prober.probe("10.0.0.1", 1.0) is True
    assert prober.probe("10.0.0.2", 1.0) is False
    assert calls[0]["cmd"][0] == "/bin/ping"
    assert calls[0]["timeout"] == 1.0 + prober_module.PROCESS_GRACE


@pytest.mark.parametrize(
    "error",
    [
        FileNotFoundError("ping"),
        PermissionError("ping"),
        subprocess.TimeoutExpired(cmd="ping", timeout=2.0),
    ],
)
def test_probe_failures_count_as_offline(monkeypatch, error):
    def _run(cmd, **kwargs):
        raise error

    monkeypatch.setattr(prober_module.subprocess, "run", _run)

    assert PingProber().probe("10.0.0.1", 1.0) is False
