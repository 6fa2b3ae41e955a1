from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.markup import escape

from goveectl.config import (
    Settings,
    get_settings,
    registry_path_from_settings,
)
from goveectl.errors import GoveeCtlError
from goveectl.models import DeviceRegistry
from goveectl.storage import RegistryStore


def load_settings_or_exit() -> Settings:
    try:
        return get_settings()
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def build_store(settings: Settings) -> RegistryStore:
    return RegistryStore(registry_path_from_settings(settings))


def load_registry_or_exit(settings: Settings, console: Console) -> DeviceRegistry:
    with exit_on_error(console):
        return build_store(settings).load()


@contextmanager
def exit_on_error(console: Console) -> Iterator[None]:
    """Report a GoveeCtlError to the user and exit with status 1."""
    try:
        yield
    except GoveeCtlError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", highlight=False)
        raise typer.Exit(1) from exc
