"""Data models for goveectl."""

from goveectl.models.command import (
    BrightnessCommand,
    Color,
    ColorCommand,
    CommandResult,
    ControlCommand,
    CommandT,
    PowerCommand,
)
from goveectl.models.device import Device, DeviceRegistry, DiscoveryReply

__all__ = [
    "BrightnessCommand",
    "Color",
    "ColorCommand",
    "CommandResult",
    "CommandT",
    "ControlCommand",
    "Device",
    "DeviceRegistry",
    "DiscoveryReply",
    "PowerCommand",
]
