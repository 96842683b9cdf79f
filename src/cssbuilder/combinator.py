"""SelectorCombinator: two rendered selectors joined by a combinator token."""
from __future__ import annotations

from enum import StrEnum
from typing import Any

from cssbuilder.builder import Renderable


class Combinator(StrEnum):
    """CSS combinator symbols."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    COLUMN = "||"


class SelectorCombinator:
    """Joins two selectors with a combinator token.

    Both operands are rendered when the combinator is created, so changing
    a builder afterwards does not change the combined text. The token is
    stored verbatim and always padded with one space on each side; the
    descendant token ``" "`` therefore renders as three spaces.
    """

    __slots__ = ("_left", "_token", "_right")

    def __init__(
        self, left: Renderable, token: Combinator | str, right: Renderable
    ) -> None:
        self._left = left.stringify()
        self._token = str(token)
        self._right = right.stringify()

    @property
    def left(self) -> str:
        return self._left

    @property
    def token(self) -> str:
        return self._token

    @property
    def right(self) -> str:
        return self._right

    def stringify(self) -> str:
        return f"{self._left} {self._token} {self._right}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "combined",
            "selector": self.stringify(),
            "left": self._left,
            "token": self._token,
            "right": self._right,
        }

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorCombinator({self.stringify()!r})"
