"""Tests for the selector text parser."""

import logging

import pytest

from cssbuilder import facade as builder
from cssbuilder.builder import SelectorBuilder
from cssbuilder.combinator import SelectorCombinator
from cssbuilder.errors import DuplicateFragmentError, OutOfOrderError, SelectorParseError
from cssbuilder.model.kinds import FragmentKind
from cssbuilder.parser import parse_selector, split_selector


# ---------------------------------------------------------------------------
# Compound selectors
# ---------------------------------------------------------------------------


class TestCompound:
    def test_element(self):
        sel = parse_selector("div")
        assert isinstance(sel, SelectorBuilder)
        assert sel.fragments() == [(FragmentKind.ELEMENT, "div")]

    def test_universal(self):
        assert parse_selector("*").stringify() == "*"

    def test_all_parts(self):
        sel = parse_selector('a#home.nav.active[href$=".png"]:hover::after')
        assert isinstance(sel, SelectorBuilder)
        assert sel.fragments() == [
            (FragmentKind.ELEMENT, "a"),
            (FragmentKind.ID, "#home"),
            (FragmentKind.CLASS, ".nav"),
            (FragmentKind.CLASS, ".active"),
            (FragmentKind.ATTRIBUTE, '[href$=".png"]'),
            (FragmentKind.PSEUDO_CLASS, ":hover"),
            (FragmentKind.PSEUDO_ELEMENT, "::after"),
        ]

    def test_pseudo_class_argument(self):
        sel = parse_selector("tr:nth-of-type(even)")
        assert sel.stringify() == "tr:nth-of-type(even)"

    def test_nested_pseudo_class_argument(self):
        sel = parse_selector("li:not(:nth-child(2n + 1))")
        assert isinstance(sel, SelectorBuilder)
        assert sel.fragments()[-1] == (FragmentKind.PSEUDO_CLASS, ":not(:nth-child(2n + 1))")

    def test_attribute_with_bracket_in_quotes(self):
        sel = parse_selector('input[value="a]b"]')
        assert sel.stringify() == 'input[value="a]b"]'

    def test_attribute_with_spaces(self):
        sel = parse_selector("[title='hello world']")
        assert sel.fragments() == [(FragmentKind.ATTRIBUTE, "[title='hello world']")]

    def test_surrounding_whitespace_ignored(self):
        assert parse_selector("  p.x \n").stringify() == "p.x"


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class TestCombinators:
    @pytest.mark.parametrize("token", [">", "+", "~", "||"])
    def test_explicit_combinators(self, token: str):
        sel = parse_selector(f"ul {token} li")
        assert isinstance(sel, SelectorCombinator)
        assert sel.token == token
        assert sel.stringify() == f"ul {token} li"

    def test_combinator_without_spaces(self):
        assert parse_selector("ul>li").stringify() == "ul > li"

    def test_whitespace_is_descendant(self):
        sel = parse_selector("tr td")
        assert isinstance(sel, SelectorCombinator)
        assert sel.token == " "
        assert sel.stringify() == "tr   td"

    def test_right_associative(self):
        sel = parse_selector("a + b ~ c")
        assert isinstance(sel, SelectorCombinator)
        assert sel.left == "a"
        assert sel.token == "+"
        assert sel.right == "b ~ c"

    def test_matches_facade_nesting(self):
        expected = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        ).stringify()
        text = "div#main.container.draggable + table#data ~ tr:nth-of-type(even) td:nth-of-type(even)"
        assert parse_selector(text).stringify() == expected

    @pytest.mark.parametrize(
        "built",
        [
            builder.element("é").class_("x"),
            builder.element("-custom").class_("_private"),
            builder.element("_x").id("-main").class_("é").class_("b-2"),
            builder.element("ñandú")
            .id("ünï")
            .class_("-a")
            .attr('data-é="1"')
            .pseudo_class("nth-child(2n + 1)")
            .pseudo_element("before"),
            builder.attr("lang|=en").pseudo_class("not(:first-child)"),
            builder.pseudo_element("-webkit-scrollbar"),
            builder.combine(builder.element("é"), " ", builder.element("ü")),
            builder.combine(builder.element("ul"), ">", builder.class_("_item")),
            builder.combine(builder.id("a"), "+", builder.element("-x-y")),
            builder.combine(builder.class_("é"), "~", builder.attr("href")),
            builder.combine(builder.element("col"), "||", builder.element("td")),
            builder.combine(
                builder.element("nav").class_("menu"),
                ">",
                builder.combine(builder.element("li"), " ", builder.element("a").attr("href")),
            ),
        ],
        ids=lambda sel: sel.stringify(),
    )
    def test_round_trip(self, built):
        assert parse_selector(built.stringify()).stringify() == built.stringify()

    def test_non_ascii_element(self):
        sel = parse_selector("é.x")
        assert isinstance(sel, SelectorBuilder)
        assert sel.fragments() == [(FragmentKind.ELEMENT, "é"), (FragmentKind.CLASS, ".x")]

    def test_element_with_leading_hyphen(self):
        sel = parse_selector("-x-widget")
        assert sel.fragments() == [(FragmentKind.ELEMENT, "-x-widget")]

    def test_element_cannot_start_with_digit(self):
        with pytest.raises(SelectorParseError):
            parse_selector("1div")


class TestSplitSelector:
    def test_compounds_and_tokens(self):
        parts = split_selector("div > p.intro span")
        assert [(b.stringify(), t) for b, t in parts] == [
            ("div", ">"),
            ("p.intro", " "),
            ("span", None),
        ]

    def test_single_compound(self):
        parts = split_selector("#main")
        assert len(parts) == 1
        assert parts[0][1] is None


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_empty(self):
        with pytest.raises(SelectorParseError):
            parse_selector("")

    def test_whitespace_only(self):
        with pytest.raises(SelectorParseError):
            parse_selector("   ")

    def test_dangling_combinator(self):
        with pytest.raises(SelectorParseError):
            parse_selector("div >")

    def test_invalid_character(self):
        with pytest.raises(SelectorParseError) as exc_info:
            parse_selector("div$")
        assert exc_info.value.line == 1
        assert exc_info.value.column == 4

    def test_unclosed_attribute(self):
        with pytest.raises(SelectorParseError):
            parse_selector("a[href")

    def test_out_of_order_parts(self):
        with pytest.raises(OutOfOrderError):
            parse_selector(".container#main")

    def test_duplicate_parts(self):
        with pytest.raises(DuplicateFragmentError):
            parse_selector("div#a#b")

    def test_error_in_later_compound(self):
        with pytest.raises(OutOfOrderError):
            parse_selector("div > p::before:hover")

    def test_parse_failure_logged(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="cssbuilder.parser.transformer"):
            with pytest.raises(SelectorParseError):
                parse_selector("div$")
        assert any("Failed to parse selector" in r.message for r in caplog.records)
