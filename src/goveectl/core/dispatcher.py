from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from goveectl.config import DEFAULT_PALETTE, ProtocolConfig
from goveectl.errors import DeviceNotFound, InvalidBrightness
from goveectl.models import (
    BrightnessCommand,
    ColorCommand,
    CommandResult,
    CommandT,
    Device,
    DeviceRegistry,
    PowerCommand,
)

from .colors import resolve_color
from .protocol import encode_command
from .resolver import resolve_device
from .transport import send_unicast

logger = logging.getLogger(__name__)

BRIGHTNESS_RE = re.compile(r"[0-9]+")


def _require_device(registry: DeviceRegistry, query: str) -> Device:
    device = resolve_device(registry, query)
    if device is None:
        raise DeviceNotFound(query)
    return device


def _send(
    device: Device, command: CommandT, protocol: ProtocolConfig
) -> CommandResult[CommandT]:
    payload = encode_command(command)
    send_unicast(device.ip, protocol.control_port, payload)
    logger.info("Sent %s command to %s (%s)", command.kind, device.name, device.ip)
    return CommandResult(device=device, command=command, payload=payload)


def parse_brightness(level: str) -> int:
    if not BRIGHTNESS_RE.fullmatch(level):
        raise InvalidBrightness(level)
    value = int(level)
    if value > 100:
        raise InvalidBrightness(level)
    return value


def power(
    registry: DeviceRegistry, query: str, on: bool, protocol: ProtocolConfig
) -> CommandResult[PowerCommand]:
    device = _require_device(registry, query)
    return _send(device, PowerCommand(on=on), protocol)


def set_color(
    registry: DeviceRegistry,
    query: str,
    token: str,
    protocol: ProtocolConfig,
    palette: Mapping[str, str] = DEFAULT_PALETTE,
) -> CommandResult[ColorCommand]:
    device = _require_device(registry, query)
    color = resolve_color(token, palette)
    return _send(device, ColorCommand(color=color), protocol)


def set_brightness(
    registry: DeviceRegistry, query: str, level: str, protocol: ProtocolConfig
) -> CommandResult[BrightnessCommand]:
    device = _require_device(registry, query)
    value = parse_brightness(level)
    return _send(device, BrightnessCommand(level=value), protocol)
