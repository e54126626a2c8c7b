"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__
from selectorkit.config import SelectorKitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (defaults to $SELECTORKIT_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """selectorkit - build CSS selector strings from typed fragments."""
    config = SelectorKitConfig.from_env()
    if log_level:
        config = SelectorKitConfig(log_level=log_level.upper(), log_format=config.log_format)
    logging.basicConfig(level=config.log_level, format=config.log_format)
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.combine import combine  # noqa: E402

cli.add_command(build)
cli.add_command(combine)
