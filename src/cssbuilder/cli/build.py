"""CLI commands: cssbuilder build / cssbuilder combine."""

from __future__ import annotations

import sys

import click

from cssbuilder.builder import SelectorBuilder
from cssbuilder.combinator import SelectorCombinator
from cssbuilder.errors import SelectorError, SelectorParseError
from cssbuilder.model.kinds import FragmentKind
from cssbuilder.parser import parse_selector

# Accepted spellings of each kind on the command line.
_KIND_NAMES: dict[str, FragmentKind] = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "attribute": FragmentKind.ATTRIBUTE,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}


def _split_part(part: str) -> tuple[FragmentKind, str]:
    name, sep, value = part.partition("=")
    if not sep:
        raise click.BadParameter(f"expected KIND=VALUE, got {part!r}", param_hint="PART")
    kind = _KIND_NAMES.get(name.strip().lower())
    if kind is None:
        choices = ", ".join(_KIND_NAMES)
        raise click.BadParameter(
            f"unknown kind {name!r} (choose from {choices})", param_hint="PART"
        )
    return kind, value


@click.command()
@click.argument("parts", nargs=-1, required=True)
def build(parts: tuple[str, ...]) -> None:
    """Build a compound selector from KIND=VALUE parts, applied in order.

    Example: cssbuilder build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    fragments = [_split_part(part) for part in parts]
    builder = SelectorBuilder()
    try:
        for kind, value in fragments:
            builder.append(kind, value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(builder.stringify())


@click.command()
@click.argument("left")
@click.argument("token")
@click.argument("right")
def combine(left: str, token: str, right: str) -> None:
    """Combine LEFT and RIGHT with a combinator TOKEN (' ', '>', '+', '~')."""
    try:
        combined = SelectorCombinator(parse_selector(left), token, parse_selector(right))
    except SelectorParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(combined.stringify())
