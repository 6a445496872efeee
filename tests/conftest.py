from __future__ import annotations

import pytest

from hostsweep.config import get_settings


class FakeResolver:
    def __init__(self) -> None:
        self.table: dict[str, list[str]] = {}
        self.calls: list[str] = []

    def reverse_lookup(self, address: str) -> list[str]:
        self.calls.append(address)
        return list(self.table.get(address, []))


class FakeProber:
    def __init__(self) -> None:
        self.alive: set[str] = set()
        self.calls: list[tuple[str, float]] = []

    def probe(self, address: str, timeout: float) -> bool:
        self.calls.append((address, timeout))
        return address in self.alive


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    monkeypatch.delenv("HOSTSWEEP_CONFIG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("LOGLEVEL", "WARNING")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def resolver() -> FakeResolver:
    return FakeResolver()


@pytest.fixture
def prober() -> FakeProber:
    return FakeProber()
