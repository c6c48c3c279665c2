"""Root CLI group for bombadil with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from bombadil import __version__
from bombadil.commands import register_commands
from bombadil.commands._context import AppContext
from bombadil.config.options import CliOptions


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="bombadil")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding bombadil.toml (default: $XDG_CONFIG_HOME).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_dir: Path | None,
) -> None:
    """bombadil — a dotfile manager."""
    ctx.ensure_object(dict)
    options = CliOptions.from_cli(
        config_dir=config_dir,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(options)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
