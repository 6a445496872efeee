"""ICMP reachability collaborator using the system ``ping`` command."""

from __future__ import annotations

import logging
import math
import subprocess
import sys
from typing import Protocol

from hostsweep.errors import ProbeFailure

logger = logging.getLogger(__name__)

# extra time allowed for the ping process itself to start and exit
PROCESS_GRACE = 1.0


class Prober(Protocol):
    def probe(self, address: str, timeout: float) -> bool: ...


def ping_command(
    address: str,
    timeout: float,
    executable: str = "ping",
    platform: str = sys.platform,
) -> list[str]:
    """Build a single-echo ping invocation for ``platform``."""
    millis = str(max(1, round(timeout * 1000)))
    if platform.startswith("win"):
        return [executable, "-n", "1", "-w", millis, address]
    if platform == "darwin" or "bsd" in platform:
        return [executable, "-c", "1", "-W", millis, address]
    # iputils and busybox only take whole seconds
    return [executable, "-c", "1", "-W", str(max(1, math.ceil(timeout))), address]


class PingProber:
    def __init__(self, executable: str = "ping") -> None:
        self.executable = executable

    def _run(self, address: str, timeout: float) -> bool:
        cmd = ping_command(address, timeout, self.executable)
        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=timeout + PROCESS_GRACE,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise ProbeFailure(f"ping {address} timed out") from exc
        except OSError as exc:
            raise ProbeFailure(f"could not run {cmd[0]}: {exc}") from exc
        return result.returncode == 0

    def probe(self, address: str, timeout: float) -> bool:
        try:
            reachable = self._run(address, timeout)
        except ProbeFailure as exc:
            logger.debug("%s", exc)
            return False
        logger.debug("Ping %s: %s", address, "reply" if reachable else "no reply")
        return reachable
