from __future__ import annotations

from .paths import APP_NAME, CONFIG_FILENAME, default_config_path, expand_path
from .settings import (
    CONFIG_ENV_VAR,
    FALLBACK_DOMAIN,
    DnsConfig,
    ScanConfig,
    Settings,
    get_settings,
    load_settings,
    resolve_config_path,
)

__all__ = [
    "APP_NAME",
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAME",
    "FALLBACK_DOMAIN",
    "DnsConfig",
    "ScanConfig",
    "Settings",
    "default_config_path",
    "expand_path",
    "get_settings",
    "load_settings",
    "resolve_config_path",
]
