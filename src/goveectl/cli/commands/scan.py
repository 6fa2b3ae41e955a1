from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.markup import escape

from goveectl.cli.common import exit_on_error, load_settings_or_exit
from goveectl.core import discover

logger = logging.getLogger(__name__)


def scan(
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        "-t",
        min=0.1,
        help="Stop listening after this many seconds. Uses config default if omitted.",
    ),
) -> None:
    """Scan the network for Govee devices."""
    console = Console()
    settings = load_settings_or_exit()

    discovery = settings.discovery
    if timeout is not None:
        discovery = discovery.model_copy(update={"session_timeout": timeout})

    console.print("[blue]Scanning for Govee devices...[/blue]")
    logger.info(
        "Scan settings: receive_timeout=%.2fs, session_timeout=%.2fs",
        discovery.receive_timeout,
        discovery.session_timeout,
    )

    found = 0
    with exit_on_error(console):
        for reply in discover(settings.protocol, discovery):
            found += 1
            console.print(
                f"Found: {escape(reply.ip)} - {escape(reply.sku)} "
                f"({escape(reply.device)})",
                highlight=False,
            )

    if not found:
        console.print("No Govee devices found.")
        return

    console.print(f"\n[green]Found {found} device(s)[/green]")


def register(app: typer.Typer) -> None:
    app.command()(scan)
