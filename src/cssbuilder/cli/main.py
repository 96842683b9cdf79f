"""cssbuilder CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import LOG_LEVELS, CssBuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: CSSBUILDER_LOG_LEVEL or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """cssbuilder - build, combine and parse CSS selectors."""
    try:
        config = CssBuilderConfig.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    if log_level:
        config = CssBuilderConfig(
            log_level=log_level.upper(), output_format=config.output_format
        )
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from cssbuilder.cli.build import build, combine  # noqa: E402
from cssbuilder.cli.parse import inspect, parse  # noqa: E402

cli.add_command(build)
cli.add_command(combine)
cli.add_command(parse)
cli.add_command(inspect)
