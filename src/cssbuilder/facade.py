"""Facade: one factory per fragment kind plus ``combine``.

Each call returns a fresh object; nothing is shared between calls.

    >>> from cssbuilder import facade as css
    >>> css.id("main").class_("container").class_("editable").stringify()
    '#main.container.editable'
"""
from __future__ import annotations

from cssbuilder.builder import Renderable, SelectorBuilder
from cssbuilder.combinator import Combinator, SelectorCombinator

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:
    return SelectorBuilder().id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)


def combine(
    selector1: Renderable, combinator: Combinator | str, selector2: Renderable
) -> SelectorCombinator:
    return SelectorCombinator(selector1, combinator, selector2)
