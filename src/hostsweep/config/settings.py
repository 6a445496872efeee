from __future__ import annotations

import os
import tomllib
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .paths import default_config_path, expand_path

CONFIG_ENV_VAR = "HOSTSWEEP_CONFIG"
FALLBACK_DOMAIN = "localdomain"


class DnsConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    fallback_domain: str = FALLBACK_DOMAIN
    timeout: float = Field(default=2.0, gt=0)
    nameservers: list[str] = Field(default_factory=list)


class ScanConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    wait: float = Field(default=0.125, ge=0)
    probe_timeout: float = Field(default=1.0, gt=0)
    # blocks with at least this many addresses need confirmation
    confirm_threshold: int = Field(default=512, ge=1)
    ping_command: str = "ping"


class Settings(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    dns: DnsConfig = Field(default_factory=DnsConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)


def resolve_config_path(allow_missing: bool = False) -> tuple[Path, bool]:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = expand_path(env_path)
        if not allow_missing and not path.exists():
            raise FileNotFoundError(f"{CONFIG_ENV_VAR} points to missing file: {path}")
        return path, path.exists()

    path = default_config_path()
    return path, path.exists()


def load_settings(path: Path) -> Settings:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in config file: {path}\n{exc}") from exc

    try:
        return Settings.model_validate(data or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid config file: {path}\n{exc}") from exc


@lru_cache
def get_settings() -> Settings:
    path, exists = resolve_config_path(allow_missing=False)
    if exists:
        return load_settings(path)
    return Settings()
