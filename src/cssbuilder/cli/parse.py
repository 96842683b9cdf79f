"""CLI commands: cssbuilder parse / cssbuilder inspect."""

from __future__ import annotations

import sys
from typing import Callable, TypeVar

import click

from cssbuilder.config import OUTPUT_FORMATS, CssBuilderConfig
from cssbuilder.errors import SelectorError, SelectorParseError
from cssbuilder.parser import combine_compounds, parse_selector, split_selector
from cssbuilder.serialization import to_json

T = TypeVar("T")


def _parse_or_exit(parse_fn: Callable[[str], T], selector: str) -> T:
    try:
        return parse_fn(selector)
    except SelectorParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@click.command()
@click.argument("selector")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default: CSSBUILDER_OUTPUT_FORMAT or text).",
)
@click.pass_obj
def parse(
    config: CssBuilderConfig | None, selector: str, output_format: str | None
) -> None:
    """Parse SELECTOR and print it in normalised form."""
    output_format = output_format or (config or CssBuilderConfig()).output_format
    parsed = _parse_or_exit(parse_selector, selector)
    if output_format == "json":
        click.echo(to_json(parsed))
    else:
        click.echo(parsed.stringify())


@click.command()
@click.argument("selector")
def inspect(selector: str) -> None:
    """Parse SELECTOR and list the fragments of each compound selector."""
    compounds = _parse_or_exit(split_selector, selector)

    click.echo(f"Selector: {combine_compounds(compounds).stringify()}")
    click.echo(f"Compounds: {len(compounds)}")
    click.echo()
    for builder, token in compounds:
        click.echo(f"  {builder.stringify()}")
        for kind, rendered in builder.fragments():
            click.echo(f"    {kind:<15} {rendered}")
        if token is not None:
            click.echo(f"  combinator {token!r}")
