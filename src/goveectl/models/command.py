from __future__ import annotations

from typing import Generic, Literal, TypeVar, Union

from pydantic import BaseModel, Field

from .device import Device


class Color(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    hex: str = Field(pattern=r"^[0-9a-f]{6}$")
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


class PowerCommand(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["power"] = "power"
    on: bool


class ColorCommand(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["color"] = "color"
    color: Color


class BrightnessCommand(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["brightness"] = "brightness"
    level: int = Field(ge=0, le=100)


ControlCommand = Union[PowerCommand, ColorCommand, BrightnessCommand]

CommandT = TypeVar("CommandT", PowerCommand, ColorCommand, BrightnessCommand)


class CommandResult(BaseModel, Generic[CommandT]):
    """What a dispatched command resolved to and put on the wire."""

    model_config = {"frozen": True}

    device: Device
    command: CommandT
    payload: bytes
