"""Reverse DNS collaborator backed by dnspython."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

import dns.exception
import dns.name
import dns.resolver

from hostsweep.errors import ResolutionFailure

logger = logging.getLogger(__name__)


class Resolver(Protocol):
    def reverse_lookup(self, address: str) -> list[str]: ...


def _build_resolver(nameservers: Sequence[str]) -> dns.resolver.Resolver:
    try:
        resolver = dns.resolver.Resolver()
    except dns.resolver.NoResolverConfiguration:
        if not nameservers:
            logger.warning("No system resolver configuration; lookups will fail")
        resolver = dns.resolver.Resolver(configure=False)
    if nameservers:
        resolver.nameservers = list(nameservers)
    return resolver


class DnsResolver:
    """PTR lookups with a bounded lifetime and no retries across calls."""

    def __init__(self, timeout: float = 2.0, nameservers: Sequence[str] = ()) -> None:
        self._resolver = _build_resolver(nameservers)
        self._resolver.timeout = timeout
        self._resolver.lifetime = timeout

    def _query(self, address: str) -> list[str]:
        try:
            answer = self._resolver.resolve_address(address)
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
            return []
        except dns.exception.DNSException as exc:
            raise ResolutionFailure(
                f"reverse lookup of {address} failed: {exc}"
            ) from exc
        return [rdata.target.to_text() for rdata in answer]

    def reverse_lookup(self, address: str) -> list[str]:
        try:
            names = self._query(address)
        except ResolutionFailure as exc:
            logger.debug("%s", exc)
            return []
        logger.debug("PTR %s -> %s", address, names or "nothing")
        return names


def system_search_domain() -> str | None:
    """First search domain from the system resolver, else its ``domain``."""
    try:
        resolver = dns.resolver.Resolver()
    except dns.exception.DNSException as exc:
        logger.debug("Cannot read resolver configuration: %s", exc)
        return None

    candidates = [*resolver.search, resolver.domain]
    for name in candidates:
        if name != dns.name.root and len(name) > 0:
            return name.to_text(omit_final_dot=True)
    return None
