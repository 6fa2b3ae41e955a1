from __future__ import annotations

from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from goveectl.cli.common import (
    exit_on_error,
    load_registry_or_exit,
    load_settings_or_exit,
)
from goveectl.core import dispatcher
from goveectl.models import CommandResult

DEVICE_HELP = "Device name (partial, case-insensitive) or IP address"


def _label(result: CommandResult[Any]) -> str:
    return f"{escape(result.device.name)} ({result.device.ip})"


def turn_on(device: str = typer.Argument(..., help=DEVICE_HELP)) -> None:
    """Turn a device on."""
    console = Console()
    settings = load_settings_or_exit()
    registry = load_registry_or_exit(settings, console)

    with exit_on_error(console):
        result = dispatcher.power(registry, device, True, settings.protocol)

    console.print(f"[green]✓[/green] Turned on: {_label(result)}")


def turn_off(device: str = typer.Argument(..., help=DEVICE_HELP)) -> None:
    """Turn a device off."""
    console = Console()
    settings = load_settings_or_exit()
    registry = load_registry_or_exit(settings, console)

    with exit_on_error(console):
        result = dispatcher.power(registry, device, False, settings.protocol)

    console.print(f"[green]✓[/green] Turned off: {_label(result)}")


def color(
    device: str = typer.Argument(..., help=DEVICE_HELP),
    value: str = typer.Argument(
        ...,
        metavar="COLOR",
        help="Hex like ff5500 or #ff5500, or a name: red, green, blue, white, "
        "warm, cool, purple, orange, yellow, cyan, pink",
    ),
) -> None:
    """Set a device's color."""
    console = Console()
    settings = load_settings_or_exit()
    registry = load_registry_or_exit(settings, console)

    with exit_on_error(console):
        result = dispatcher.set_color(
            registry, device, value, settings.protocol, settings.palette
        )

    rgb = result.command.color
    console.print(
        f"[green]✓[/green] Set color on {_label(result)} to #{rgb.hex} "
        f"(RGB: {rgb.r},{rgb.g},{rgb.b})"
    )


def brightness(
    device: str = typer.Argument(..., help=DEVICE_HELP),
    level: str = typer.Argument(..., metavar="LEVEL", help="Brightness 0-100"),
) -> None:
    """Set a device's brightness."""
    console = Console()
    settings = load_settings_or_exit()
    registry = load_registry_or_exit(settings, console)

    with exit_on_error(console):
        result = dispatcher.set_brightness(registry, device, level, settings.protocol)

    console.print(
        f"[green]✓[/green] Set brightness on {_label(result)} "
        f"to {result.command.level}%"
    )


def register(app: typer.Typer) -> None:
    app.command("on")(turn_on)
    app.command("off")(turn_off)
    app.command()(color)
    # let negative levels through as arguments so they are rejected as out of range
    app.command(context_settings={"ignore_unknown_options": True})(brightness)
