from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from goveectl.cli.common import (
    build_store,
    load_registry_or_exit,
    load_settings_or_exit,
)


def list_devices() -> None:
    """List configured devices."""
    settings = load_settings_or_exit()
    console = Console()
    registry = load_registry_or_exit(settings, console)

    if not registry.devices:
        console.print("No devices configured.")
        console.print(f"Add entries to {build_store(settings).path}")
        return

    table = Table(title="Configured Govee Devices")
    table.add_column("Name", style="cyan")
    table.add_column("IP", style="green")
    table.add_column("Model")

    for device in registry.devices:
        table.add_row(device.name, device.ip, device.model)

    console.print(table)


def register(app: typer.Typer) -> None:
    app.command("list")(list_devices)
