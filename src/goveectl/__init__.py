"""goveectl - control Govee lights over the LAN API."""

from __future__ import annotations

from importlib.metadata import version

from .config import DiscoveryConfig, ProtocolConfig, Settings, get_settings
from .errors import (
    DeviceNotFound,
    GoveeCtlError,
    InvalidBrightness,
    InvalidColor,
    RegistryUnavailable,
    TransportError,
)
from .models import Color, Device, DeviceRegistry, DiscoveryReply
from .storage import RegistryStore

__all__ = [
    "Color",
    "Device",
    "DeviceNotFound",
    "DeviceRegistry",
    "DiscoveryConfig",
    "DiscoveryReply",
    "GoveeCtlError",
    "InvalidBrightness",
    "InvalidColor",
    "ProtocolConfig",
    "RegistryStore",
    "RegistryUnavailable",
    "Settings",
    "TransportError",
    "__version__",
    "get_settings",
]

__version__ = version("goveectl")
