"""The ``notekit`` command: global output flags, then field/seq/sort subcommands."""

from __future__ import annotations

import click

from notekit import __version__
from notekit.commands import register_commands
from notekit.commands._context import AppContext
from notekit.config.settings import NotekitSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="notekit")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print bare values only.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and error details.")
@click.option("--log-json", is_flag=True, help="Log to stderr as JSON lines.")
@click.option("-c", "--config", "config_path", default=None, help="Use this notekit.toml instead of searching.")
@click.option("--no-plugins", is_flag=True, help="Skip field types from installed plugins.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    no_plugins: bool,
) -> None:
    """notekit: typed fields, sequence numbers and note sorting."""
    settings = NotekitSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings, load_plugins=settings.plugins.enabled and not no_plugins)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
