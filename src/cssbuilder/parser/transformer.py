"""Lark Transformer that turns selector text into builders and combinators."""

from __future__ import annotations

import logging
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from cssbuilder.builder import SelectorBuilder
from cssbuilder.combinator import SelectorCombinator
from cssbuilder.errors import SelectorParseError
from cssbuilder.model.kinds import FragmentKind

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Terminal name -> (kind, prefix length, suffix length) of the rendered text.
_TERMINALS: dict[str, tuple[FragmentKind, int, int]] = {
    "ELEMENT": (FragmentKind.ELEMENT, 0, 0),
    "ID": (FragmentKind.ID, 1, 0),
    "CLASS": (FragmentKind.CLASS, 1, 0),
    "ATTRIBUTE": (FragmentKind.ATTRIBUTE, 1, 1),
    "PSEUDO_CLASS": (FragmentKind.PSEUDO_CLASS, 1, 0),
    "PSEUDO_ELEMENT": (FragmentKind.PSEUDO_ELEMENT, 2, 0),
}


def _unwrap(token: Token) -> tuple[FragmentKind, str]:
    """Split a simple-selector token into its kind and raw value."""
    kind, prefix, suffix = _TERMINALS[token.type]
    raw = str(token)
    return kind, raw[prefix : len(raw) - suffix]


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Build one SelectorBuilder per compound, keeping the tokens between them."""

    def compound(self, items: list[Token]) -> SelectorBuilder:
        # Parts go through the builder in source order so its ordering and
        # cardinality checks apply to parsed text too.
        builder = SelectorBuilder()
        for token in items:
            kind, value = _unwrap(token)
            builder.append(kind, value)
        return builder

    def COMBINATOR(self, token: Token) -> str:
        return str(token).strip() or " "

    def start(
        self, items: list[SelectorBuilder | str]
    ) -> list[tuple[SelectorBuilder, str | None]]:
        compounds: list[SelectorBuilder] = items[0::2]  # type: ignore[assignment]
        tokens: list[str | None] = items[1::2]  # type: ignore[assignment]
        return list(zip(compounds, tokens + [None]))


def split_selector(source: str) -> list[tuple[SelectorBuilder, str | None]]:
    """Parse selector text into compound selectors.

    Returns ``(builder, token)`` pairs in source order, where *token* is the
    combinator following that compound (``None`` for the last one). The
    descendant combinator is returned as ``" "``.
    """
    text = source.strip()
    if not text:
        raise SelectorParseError("Empty selector")
    parser = Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )
    try:
        tree = parser.parse(text)
    except UnexpectedInput as e:
        logger.debug("Failed to parse selector %r: %s", text, e)
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise SelectorParseError(str(e), line=line, column=column) from e
    try:
        return SelectorTransformer().transform(tree)
    except VisitError as e:
        # Builder errors surface unwrapped.
        raise e.orig_exc from None


def parse_selector(source: str) -> SelectorBuilder | SelectorCombinator:
    """Parse selector text into a SelectorBuilder or SelectorCombinator.

    Compounds are combined right to left, so ``a + b ~ c`` is
    ``combine(a, "+", combine(b, "~", c))``. Raises SelectorParseError for
    text that is not a selector, and the builder's DuplicateFragmentError /
    OutOfOrderError for repeated or misordered parts.
    """
    return combine_compounds(split_selector(source))


def combine_compounds(
    compounds: list[tuple[SelectorBuilder, str | None]],
) -> SelectorBuilder | SelectorCombinator:
    """Fold ``split_selector`` output right to left into one selector."""
    result: SelectorBuilder | SelectorCombinator = compounds[-1][0]
    for builder, token in reversed(compounds[:-1]):
        result = SelectorCombinator(builder, token or " ", result)
    return result
