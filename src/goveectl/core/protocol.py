"""JSON payloads of the LAN control protocol.

Every message is a single object wrapped as ``{"msg": {"cmd": ..., "data": ...}}``
and sent as compact UTF-8 text.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from goveectl.models import (
    BrightnessCommand,
    Color,
    ColorCommand,
    ControlCommand,
    DiscoveryReply,
    PowerCommand,
)


def _message(cmd: str, data: dict[str, Any]) -> bytes:
    message = {"msg": {"cmd": cmd, "data": data}}
    return json.dumps(message, separators=(",", ":")).encode("utf-8")


def encode_power(on: bool) -> bytes:
    return _message("turn", {"value": 1 if on else 0})


def encode_color(color: Color) -> bytes:
    # colorTemInKelvin 0 selects RGB mode instead of white temperature
    return _message(
        "colorwc",
        {"color": {"r": color.r, "g": color.g, "b": color.b}, "colorTemInKelvin": 0},
    )


def encode_brightness(level: int) -> bytes:
    return _message("brightness", {"value": level})


def encode_command(command: ControlCommand) -> bytes:
    if isinstance(command, PowerCommand):
        return encode_power(command.on)
    if isinstance(command, ColorCommand):
        return encode_color(command.color)
    if isinstance(command, BrightnessCommand):
        return encode_brightness(command.level)
    raise TypeError(f"Unsupported command: {command!r}")


def encode_scan() -> bytes:
    return _message("scan", {"account_topic": "reserve"})


SCAN_REQUEST = encode_scan()


def parse_scan_reply(data: bytes) -> DiscoveryReply:
    """Parse a scan reply datagram; raises ValueError if it is not one."""
    try:
        message = json.loads(data.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise ValueError("reply is not UTF-8 text") from exc

    if not isinstance(message, dict):
        raise ValueError("reply is not a JSON object")
    body = message.get("msg")
    if not isinstance(body, dict) or not isinstance(body.get("data"), dict):
        raise ValueError("reply has no msg.data object")

    try:
        return DiscoveryReply.model_validate(body["data"])
    except ValidationError as exc:
        raise ValueError(f"unexpected reply data: {exc}") from exc
