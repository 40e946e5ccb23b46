"""Root CLI group for travelctl with global flags and command registration."""

from __future__ import annotations

import click

from travelctl import __version__
from travelctl.commands import register_commands
from travelctl.commands._context import AppContext
from travelctl.config.settings import TravelSettings
from travelctl.domain.types import StorageBackend


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="travelctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (codes or names only).")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--backend",
    type=click.Choice([b.value for b in StorageBackend]),
    default=None,
    help="Storage backend (default: from config, else sql).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    backend: str | None,
) -> None:
    """travelctl: track the countries you have visited."""
    ctx.ensure_object(dict)
    settings = TravelSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        backend=backend,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


def main() -> None:
    """Console-script entry point."""
    cli()
