from __future__ import annotations

from .settings import (
    APP_NAME,
    CONFIG_ENV_VAR,
    DEFAULT_PALETTE,
    DEVICES_ENV_VAR,
    DiscoveryConfig,
    ProtocolConfig,
    RegistryConfig,
    Settings,
    config_path,
    default_registry_path,
    get_settings,
    load_settings,
    registry_path_from_settings,
    render_settings_toml,
    write_settings,
)

__all__ = [
    "APP_NAME",
    "CONFIG_ENV_VAR",
    "DEFAULT_PALETTE",
    "DEVICES_ENV_VAR",
    "DiscoveryConfig",
    "ProtocolConfig",
    "RegistryConfig",
    "Settings",
    "config_path",
    "default_registry_path",
    "get_settings",
    "load_settings",
    "registry_path_from_settings",
    "render_settings_toml",
    "write_settings",
]
