from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Iterator

from hostsweep.models import NO_ENTRY, HostResult, SweepOptions

from .policy import format_dns_names, policy_for
from .prober import Prober
from .resolver import Resolver

logger = logging.getLogger(__name__)

Sleep = Callable[[float], None]


def check_host(
    address: str,
    options: SweepOptions,
    resolver: Resolver,
    prober: Prober,
    sleep: Sleep = time.sleep,
) -> HostResult | None:
    """Run the collaborators ``options.mode`` calls for and build the row.

    Returns None when the mode drops hosts that have no DNS entry.
    """
    policy = policy_for(options.mode)
    result = HostResult(address=address)

    # pacing applies to every host, even when DNS is skipped
    if options.wait > 0:
        sleep(options.wait)

    if policy.queries_dns:
        names = format_dns_names(resolver.reverse_lookup(address), options.domain)
        if names is None and policy.requires_dns_entry:
            logger.debug("Skipping %s: not in DNS", address)
            return None
        result.dns_name = names or NO_ENTRY

    if policy.probes:
        result.reachable = prober.probe(address, options.probe_timeout)

    return result


def sweep(
    addresses: Iterable[str],
    options: SweepOptions,
    resolver: Resolver,
    prober: Prober,
    sleep: Sleep = time.sleep,
) -> Iterator[HostResult]:
    """Check hosts one at a time, yielding rows in input order."""
    checked = 0
    emitted = 0
    for address in addresses:
        checked += 1
        result = check_host(address, options, resolver, prober, sleep)
        if result is None:
            continue
        emitted += 1
        yield result
    logger.info("Sweep complete: %d hosts checked, %d rows", checked, emitted)
