"""SelectorBuilder: fluent construction of a single compound selector."""
from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from cssbuilder.errors import DuplicateFragmentError, OutOfOrderError
from cssbuilder.model.kinds import FragmentKind

logger = logging.getLogger(__name__)


@runtime_checkable
class Renderable(Protocol):
    """Anything that renders to selector text."""

    def stringify(self) -> str: ...


class SelectorBuilder:
    """Accumulates selector fragments and renders them in canonical order.

    Every fragment method mutates the builder and returns it, so calls
    chain::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")

    Parts must be added in the order element, id, class, attribute,
    pseudo-class, pseudo-element. Element, id and pseudo-element may be
    added at most once. A rejected call leaves the builder untouched.
    """

    def __init__(self) -> None:
        self._fragments: dict[FragmentKind, list[str]] = {
            kind: [] for kind in FragmentKind
        }
        self._last_kind: FragmentKind | None = None

    # --- fragment operations --------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    def append(self, kind: FragmentKind | str, value: str) -> SelectorBuilder:
        """Add one fragment of *kind*; raises ValueError for an unknown kind."""
        kind = FragmentKind(kind)
        if kind.unique and self._fragments[kind]:
            logger.debug("Rejected duplicate %s fragment %r", kind, value)
            raise DuplicateFragmentError(kind)
        self._check_order(kind)
        self._fragments[kind].append(kind.render(value))
        self._last_kind = kind
        return self

    def _check_order(self, kind: FragmentKind) -> None:
        if self._last_kind is None:
            return
        if kind.rank < self._last_kind.rank:
            logger.debug(
                "Rejected %s fragment after %s fragment", kind, self._last_kind
            )
            raise OutOfOrderError(kind, self._last_kind)

    # --- inspection -----------------------------------------------------------

    @property
    def last_kind(self) -> FragmentKind | None:
        return self._last_kind

    @property
    def is_empty(self) -> bool:
        return self._last_kind is None

    def fragments(self) -> list[tuple[FragmentKind, str]]:
        """Return ``(kind, rendered)`` pairs in render order."""
        return [
            (kind, rendered)
            for kind in FragmentKind
            for rendered in self._fragments[kind]
        ]

    def stringify(self) -> str:
        return "".join(rendered for _, rendered in self.fragments())

    def copy(self) -> SelectorBuilder:
        """Return an independent builder with the same fragments and state."""
        clone = SelectorBuilder()
        clone._fragments = {kind: list(parts) for kind, parts in self._fragments.items()}
        clone._last_kind = self._last_kind
        return clone

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "compound",
            "selector": self.stringify(),
            "fragments": [
                {"kind": str(kind), "value": rendered}
                for kind, rendered in self.fragments()
            ],
        }

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"
