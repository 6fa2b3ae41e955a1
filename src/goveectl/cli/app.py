from __future__ import annotations

from typing import Annotated, Any, NoReturn

import typer
from typer.core import TyperGroup

from goveectl.utils.logging import setup_logging

from .commands import config as config_cmd
from .commands.control import register as register_control
from .commands.devices import register as register_devices
from .commands.scan import register as register_scan

EXAMPLES = """\
Device can be given by name (partial match) or IP address.

Examples:

  goveectl list

  goveectl on monitor

  goveectl off "living room"

  goveectl color monitor ff5500

  goveectl color tv blue

  goveectl brightness monitor 50
"""


class CommandGroup(TyperGroup):
    """Root group: unrecognised commands and options fail with status 1."""

    def parse_args(  # type: ignore[override]
        self, ctx: typer.Context, args: list[str]
    ) -> list[str]:
        if ctx.resilient_parsing:
            return super().parse_args(ctx, args)
        known = {
            opt
            for param in self.get_params(ctx)
            for opt in (*param.opts, *param.secondary_opts)
        }
        for arg in args:
            if arg == "--" or not arg.startswith("-"):
                break
            if arg.split("=", 1)[0] not in known:
                _usage_error(ctx, f"No such option: {arg}")
        return super().parse_args(ctx, args)

    def resolve_command(  # type: ignore[override]
        self, ctx: typer.Context, args: list[str]
    ) -> tuple[str | None, Any, list[str]]:
        if ctx.resilient_parsing or not args:
            return super().resolve_command(ctx, args)
        if self.get_command(ctx, args[0]) is None:
            _usage_error(ctx, f"No such command '{args[0]}'.")
        return super().resolve_command(ctx, args)


def _usage_error(ctx: typer.Context, message: str) -> NoReturn:
    typer.echo(ctx.get_usage(), err=True)
    typer.echo(f"Try '{ctx.command_path} -h' for help.\n", err=True)
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


app = typer.Typer(
    cls=CommandGroup,
    help="Control Govee lights over the LAN API.",
    epilog=EXAMPLES,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(config_cmd.app, name="config")

register_devices(app)
register_scan(app)
register_control(app)


@app.command("help")
def show_help(ctx: typer.Context) -> None:
    """Show this message and exit."""
    root = ctx.find_root()
    typer.echo(root.get_help())


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging"),
    ] = False,
) -> None:
    """goveectl CLI."""
    setup_logging("DEBUG" if verbose else None)

    if version:
        from importlib.metadata import version as get_version

        typer.echo(f"goveectl version {get_version('goveectl')}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()
