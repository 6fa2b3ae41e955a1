from __future__ import annotations

from .colors import resolve_color
from .dispatcher import parse_brightness, power, set_brightness, set_color
from .protocol import (
    SCAN_REQUEST,
    encode_brightness,
    encode_color,
    encode_command,
    encode_power,
    parse_scan_reply,
)
from .resolver import resolve_device
from .transport import DiscoverySession, ScanState, discover, send_unicast

__all__ = [
    "SCAN_REQUEST",
    "DiscoverySession",
    "ScanState",
    "discover",
    "encode_brightness",
    "encode_color",
    "encode_command",
    "encode_power",
    "parse_brightness",
    "parse_scan_reply",
    "power",
    "resolve_color",
    "resolve_device",
    "send_unicast",
    "set_brightness",
    "set_color",
]
