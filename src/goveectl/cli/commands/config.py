from __future__ import annotations

from typing import Annotated

import typer

from goveectl.cli.common import load_settings_or_exit
from goveectl.config import Settings, config_path, render_settings_toml, write_settings

app = typer.Typer(help="Show or create the configuration file.", no_args_is_help=True)


@app.command("show")
def show_config() -> None:
    """Show current configuration."""
    settings = load_settings_or_exit()
    path = config_path()

    typer.echo(f"Config source: {path if path.exists() else 'defaults'}")
    typer.echo(render_settings_toml(settings))


@app.command("init")
def init_config(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing config"),
    ] = False,
) -> None:
    """Write a default configuration file."""
    path = config_path()

    if path.exists() and not force:
        typer.echo(f"Config already exists at {path}")
        return

    write_settings(Settings(), path)
    typer.echo(f"Wrote default config to {path}")
