"""Lazy enumeration of host addresses."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from hostsweep.models import NetworkRange

from .addressing import to_dotted


@dataclass(frozen=True)
class HostRange:
    """Ascending, inclusive run of host integers. Iterable any number of times."""

    first: int
    last: int

    def __post_init__(self) -> None:
        if self.first > self.last:
            raise ValueError(f"first host {self.first} is above last host {self.last}")

    @classmethod
    def from_network(cls, network: NetworkRange) -> HostRange:
        return cls(network.first_host, network.last_host)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.first, self.last + 1))

    def __len__(self) -> int:
        return self.last - self.first + 1

    def addresses(self) -> Iterator[str]:
        for value in self:
            yield to_dotted(value)
