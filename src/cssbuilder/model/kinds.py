"""Fragment kinds: the six parts of a compound selector, in canonical order."""
from __future__ import annotations

from enum import StrEnum


class FragmentKind(StrEnum):
    """Kind of a selector fragment.

    Declaration order is the order parts must appear in a compound
    selector::

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def unique(self) -> bool:
        """Whether the kind may occur at most once per selector."""
        return self in _UNIQUE

    def render(self, value: str) -> str:
        """Wrap *value* in this kind's syntax."""
        prefix, suffix = _SYNTAX[self]
        return f"{prefix}{value}{suffix}"


_RANKS: dict[FragmentKind, int] = {kind: i for i, kind in enumerate(FragmentKind)}

_UNIQUE = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_SYNTAX: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}
