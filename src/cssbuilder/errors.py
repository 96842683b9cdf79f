"""Error hierarchy for the selector builder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.model.kinds import FragmentKind

DUPLICATE_FRAGMENT_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
OUT_OF_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all cssbuilder errors."""


class DuplicateFragmentError(SelectorError):
    """A single-occurrence part (element, id, pseudo-element) was added twice."""

    def __init__(self, kind: FragmentKind) -> None:
        super().__init__(DUPLICATE_FRAGMENT_MESSAGE)
        self.kind = kind


class OutOfOrderError(SelectorError):
    """A part was added after a part that must follow it."""

    def __init__(self, kind: FragmentKind, last_kind: FragmentKind) -> None:
        super().__init__(OUT_OF_ORDER_MESSAGE)
        self.kind = kind
        self.last_kind = last_kind


class SelectorParseError(SelectorError):
    """Raised when selector text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(message)
