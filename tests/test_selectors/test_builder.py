"""Tests for the fluent CSS selector builder."""

from __future__ import annotations

import logging

import pytest

from objkit.errors import DuplicateSelectorPartError
from objkit.selectors import (
    Category,
    CombinedSelector,
    Fragment,
    Selector,
    css_selector_builder as builder,
)


# ---------------------------------------------------------------------------
# Simple selectors
# ---------------------------------------------------------------------------


class TestSimpleSelectors:
    def test_element(self):
        assert builder.element("div").stringify() == "div"

    def test_id(self):
        assert builder.id("main").stringify() == "#main"

    def test_class(self):
        assert builder.class_("container").stringify() == ".container"

    def test_attr(self):
        assert builder.attr("href").stringify() == "[href]"

    def test_pseudo_class(self):
        assert builder.pseudo_class("hover").stringify() == ":hover"

    def test_pseudo_element(self):
        assert builder.pseudo_element("before").stringify() == "::before"

    def test_id_with_classes(self):
        s = builder.id("main").class_("container").class_("editable")
        assert s.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self):
        s = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert s.stringify() == 'a[href$=".png"]:focus'

    def test_full_compound(self):
        s = (
            builder.element("input")
            .id("name")
            .class_("wide")
            .attr("type=text")
            .pseudo_class("focus")
            .pseudo_element("placeholder")
        )
        assert s.stringify() == "input#name.wide[type=text]:focus::placeholder"

    def test_call_order_preserved(self):
        assert builder.class_("x").id("y").stringify() == ".x#y"
        assert builder.pseudo_class("hover").element("a").stringify() == ":hovera"

    def test_values_are_stringified(self):
        assert builder.pseudo_class("nth-child").attr(2).stringify() == ":nth-child[2]"

    def test_empty_values_accepted(self):
        assert builder.class_("").stringify() == "."

    def test_str_matches_stringify(self):
        s = builder.element("p").class_("lead")
        assert str(s) == s.stringify() == "p.lead"


# ---------------------------------------------------------------------------
# Repeatable / unique parts
# ---------------------------------------------------------------------------


class TestRepeatableParts:
    def test_classes_repeat(self):
        assert builder.class_("a").class_("b").stringify() == ".a.b"

    def test_attrs_repeat(self):
        assert builder.attr("a").attr("b").stringify() == "[a][b]"

    def test_pseudo_classes_repeat(self):
        s = builder.pseudo_class("first-child").pseudo_class("hover")
        assert s.stringify() == ":first-child:hover"


class TestDuplicateParts:
    def test_duplicate_element(self):
        with pytest.raises(DuplicateSelectorPartError):
            builder.element("a").element("b")

    def test_duplicate_id(self):
        with pytest.raises(DuplicateSelectorPartError):
            builder.id("a").class_("x").id("b")

    def test_duplicate_pseudo_element(self):
        with pytest.raises(DuplicateSelectorPartError):
            builder.pseudo_element("before").pseudo_element("after")

    def test_message(self):
        with pytest.raises(DuplicateSelectorPartError) as exc_info:
            builder.element("a").element("b")
        assert str(exc_info.value) == (
            "Element, id and pseudo-element should not occur more than one time "
            "inside the selector"
        )

    def test_category_recorded(self):
        with pytest.raises(DuplicateSelectorPartError) as exc_info:
            builder.pseudo_element("a").pseudo_element("b")
        assert exc_info.value.category == "pseudoElement"

    def test_same_value_still_duplicate(self):
        with pytest.raises(DuplicateSelectorPartError):
            builder.id("main").id("main")

    def test_independent_builders(self):
        builder.element("div")
        # A fresh entry point never sees parts of earlier selectors.
        assert builder.element("span").stringify() == "span"


# ---------------------------------------------------------------------------
# Immutability / repeatable stringify
# ---------------------------------------------------------------------------


class TestSelectorValue:
    def test_chaining_returns_new_selector(self):
        base = builder.element("div")
        left = base.class_("a")
        right = base.class_("b")
        assert base.stringify() == "div"
        assert left.stringify() == "div.a"
        assert right.stringify() == "div.b"

    def test_shared_prefix_allows_unique_part_per_branch(self):
        base = builder.element("div")
        assert base.id("a").stringify() == "div#a"
        assert base.id("b").stringify() == "div#b"

    def test_stringify_is_idempotent(self):
        s = builder.element("li").class_("item")
        assert s.stringify() == s.stringify() == "li.item"
        assert s.class_("more").stringify() == "li.item.more"

    def test_fragments(self):
        s = builder.element("a").class_("x")
        assert s.fragments == (
            Fragment(Category.ELEMENT, "a"),
            Fragment(Category.CLASS, "x"),
        )

    def test_add_by_category(self):
        s = Selector().add(Category.ATTR, "lang")
        assert s.stringify() == "[lang]"

    def test_frozen(self):
        s = builder.element("a")
        with pytest.raises(AttributeError):
            s.fragments = ()  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class TestCombine:
    def test_adjacent_sibling(self):
        s = builder.combine(
            builder.element("div").id("main"), "+", builder.element("table").id("data")
        )
        assert isinstance(s, CombinedSelector)
        assert s.stringify() == "div#main + table#data"

    def test_child(self):
        s = builder.combine(builder.element("ul"), ">", builder.element("li"))
        assert s.stringify() == "ul > li"

    def test_descendant_keeps_three_spaces(self):
        s = builder.combine(builder.element("p"), " ", builder.element("a"))
        assert s.stringify() == "p   a"

    def test_nested(self):
        s = builder.combine(
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
        )
        assert s.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_unknown_combinator_accepted(self, caplog):
        with caplog.at_level(logging.WARNING, logger="objkit.selectors.builder"):
            s = builder.combine(builder.element("a"), "||", builder.element("b"))
        assert s.stringify() == "a || b"
        assert "Non-standard combinator" in caplog.text

    def test_standard_combinator_not_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="objkit.selectors.builder"):
            builder.combine(builder.element("a"), "~", builder.element("b"))
        assert caplog.records == []

    def test_str(self):
        s = builder.combine(builder.class_("a"), ">", builder.class_("b"))
        assert str(s) == ".a > .b"

    def test_chaining_after_combine(self):
        s = builder.combine(builder.element("a"), ">", builder.element("b")).class_("x")
        assert isinstance(s, CombinedSelector)
        assert s.stringify() == "a > b.x"

    def test_chaining_applies_to_rightmost_selector(self):
        s = builder.combine(
            builder.element("ul"),
            " ",
            builder.combine(builder.element("li"), "+", builder.element("li")),
        )
        assert s.pseudo_class("hover").stringify() == "ul   li + li:hover"

    def test_all_fragments_chain_after_combine(self):
        s = (
            builder.combine(builder.element("div"), "~", builder.class_("c"))
            .id("x")
            .attr("y")
            .pseudo_element("after")
        )
        assert s.stringify() == "div ~ .c#x[y]::after"

    def test_duplicates_checked_on_rightmost_selector(self):
        s = builder.combine(builder.id("a"), ">", builder.element("p"))
        assert s.id("b").stringify() == "#a > p#b"
        with pytest.raises(DuplicateSelectorPartError):
            s.element("span")

    def test_chaining_leaves_combined_selector_untouched(self):
        s = builder.combine(builder.element("a"), ">", builder.element("b"))
        s.class_("x")
        assert s.stringify() == "a > b"


# ---------------------------------------------------------------------------
# Specificity
# ---------------------------------------------------------------------------


class TestSpecificity:
    def test_empty(self):
        assert Selector().specificity == 0

    def test_weights(self):
        assert builder.element("div").specificity == 1
        assert builder.id("x").specificity == 100
        assert builder.class_("x").specificity == 10
        assert builder.attr("x").specificity == 1
        assert builder.pseudo_class("x").specificity == 1
        assert builder.pseudo_element("x").specificity == 0

    def test_sum(self):
        s = builder.element("div").id("main").class_("a").class_("b")
        assert s.specificity == 121

    def test_combined_takes_max(self):
        s = builder.combine(
            builder.element("div").class_("a"), " ", builder.id("main")
        )
        assert s.specificity == 100
