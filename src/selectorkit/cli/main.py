"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__
from selectorkit.config import SelectorkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """selectorkit - build CSS selectors with ordering checks."""
    config = SelectorkitConfig(log_level="DEBUG" if verbose else "WARNING")
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.rectangle import rectangle  # noqa: E402

cli.add_command(build)
cli.add_command(rectangle)
