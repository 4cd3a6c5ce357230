"""
Tests for SelectorBuilder.

These tests verify:
    - Fragment concatenation in append order
    - Cardinality limits for element, id and pseudo-element
    - Category order validation over first occurrences
    - Combination and stringify consumption semantics
"""

import logging
import warnings

import pytest
from cssbuilder.builder import (
    DuplicateOrMisplacedError,
    OrderError,
    SelectorBuilder,
    SelectorError,
    check_order,
)
from cssbuilder.fragments import Combinator, Fragment, FragmentKind


ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class TestCompoundSelectors:
    """Test rendering of valid fragment chains."""

    def test_every_kind_in_order(self):
        selector = (
            SelectorBuilder().element("a").id("main").class_("x").attr("href")
            .pseudo_class("focus").pseudo_element("before").stringify()
        )
        assert selector == "a#main.x[href]:focus::before"

    def test_id_with_classes(self):
        selector = SelectorBuilder().id("main").class_("container").class_("editable").stringify()
        assert selector == "#main.container.editable"

    def test_attribute_value_verbatim(self):
        selector = SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        assert selector == 'a[href$=".png"]:focus'

    def test_repeated_kinds_keep_append_order(self):
        """Repeatable kinds concatenate with their own prefixes intact."""
        assert SelectorBuilder().class_("b").class_("a").class_("c").stringify() == ".b.a.c"
        assert SelectorBuilder().attr("x").attr("y=1").stringify() == "[x][y=1]"
        assert SelectorBuilder().pseudo_class("hover").pseudo_class("focus").stringify() == ":hover:focus"

    def test_single_pseudo_element(self):
        """Absent categories must not be treated as position zero."""
        assert SelectorBuilder().pseudo_element("before").stringify() == "::before"

    def test_sparse_categories(self):
        assert SelectorBuilder().element("p").pseudo_element("first-line").stringify() == "p::first-line"
        assert SelectorBuilder().id("nav").pseudo_class("hover").stringify() == "#nav:hover"

    def test_returns_same_builder(self):
        builder = SelectorBuilder()
        assert builder.element("a") is builder
        assert builder.class_("x") is builder

    def test_fragments_snapshot(self):
        builder = SelectorBuilder().element("a").class_("x")
        assert builder.fragments == (
            Fragment(FragmentKind.ELEMENT, "a"),
            Fragment(FragmentKind.CLASS, "x"),
        )


class TestCardinality:
    """Test element, id and pseudo-element limits."""

    def test_second_id(self):
        with pytest.raises(DuplicateOrMisplacedError):
            SelectorBuilder().id("main").id("other")

    def test_second_element(self):
        with pytest.raises(DuplicateOrMisplacedError):
            SelectorBuilder().element("div").element("span")

    def test_second_pseudo_element(self):
        with pytest.raises(DuplicateOrMisplacedError):
            SelectorBuilder().pseudo_element("before").pseudo_element("after")

    def test_element_after_id(self):
        with pytest.raises(DuplicateOrMisplacedError):
            SelectorBuilder().id("main").element("div")

    def test_element_after_pseudo_element(self):
        with pytest.raises(DuplicateOrMisplacedError):
            SelectorBuilder().pseudo_element("after").element("div")

    def test_repeatable_kinds_never_rejected(self):
        """Only single-occurrence kinds are limited."""
        selector = (
            SelectorBuilder().element("a").class_("x").class_("y")
            .attr("href").attr("title").pseudo_class("hover").pseudo_class("focus").stringify()
        )
        assert selector == "a.x.y[href][title]:hover:focus"

    def test_append_tagged_fragment(self):
        """append() applies the same checks as the named methods."""
        builder = SelectorBuilder().append(Fragment(FragmentKind.ID, "main"))
        with pytest.raises(DuplicateOrMisplacedError):
            builder.append(Fragment(FragmentKind.ID, "other"))

    def test_append_from_text(self):
        builder = SelectorBuilder()
        for token in ["div", "#main", ".x", "::before"]:
            builder.append(Fragment.from_text(token))
        assert builder.stringify() == "div#main.x::before"

    def test_error_message(self):
        with pytest.raises(DuplicateOrMisplacedError, match="should not occur more then one time"):
            SelectorBuilder().id("a").id("b")

    def test_errors_share_base(self):
        assert issubclass(DuplicateOrMisplacedError, SelectorError)
        assert issubclass(OrderError, SelectorError)


class TestOrder:
    """Test category order validation."""

    def test_class_before_element(self):
        with pytest.raises(OrderError):
            SelectorBuilder().class_("x").element("a")

    def test_order_message(self):
        with pytest.raises(OrderError) as exc_info:
            SelectorBuilder().attr("href").class_("x")
        assert str(exc_info.value) == ORDER_MESSAGE

    @pytest.mark.parametrize("build", [
        lambda b: b.class_("x").id("main"),
        lambda b: b.attr("href").id("main"),
        lambda b: b.pseudo_class("focus").attr("href"),
        lambda b: b.pseudo_element("after").pseudo_class("hover"),
        lambda b: b.pseudo_element("after").id("main"),
        lambda b: b.id("x").attr("y").class_("z"),
    ])
    def test_inversions(self, build):
        with pytest.raises(OrderError):
            build(SelectorBuilder())

    def test_only_first_occurrence_counts(self):
        """A repeat after a later category is accepted."""
        assert SelectorBuilder().class_("a").attr("x").class_("b").stringify() == ".a[x].b"

    def test_check_order_empty(self):
        check_order([])

    def test_check_order_direct(self):
        with pytest.raises(OrderError):
            check_order([
                Fragment(FragmentKind.PSEUDO_CLASS, "hover"),
                Fragment(FragmentKind.CLASS, "x"),
            ])


class TestCombine:
    """Test combining two built selectors."""

    def test_next_sibling(self):
        selector = SelectorBuilder().combine(
            SelectorBuilder().element("div").id("main"),
            "+",
            SelectorBuilder().element("table").id("data"),
        ).stringify()
        assert selector == "div#main + table#data"

    def test_combinator_enum(self):
        selector = SelectorBuilder().combine(
            SelectorBuilder().element("ul"),
            Combinator.CHILD,
            SelectorBuilder().element("li"),
        ).stringify()
        assert selector == "ul > li"

    def test_descendant_keeps_joining_spaces(self):
        selector = SelectorBuilder().combine(
            SelectorBuilder().element("tr"),
            " ",
            SelectorBuilder().element("td"),
        ).stringify()
        assert selector == "tr   td"

    def test_nested(self):
        inner = SelectorBuilder().combine(
            SelectorBuilder().element("table").id("data"),
            "~",
            SelectorBuilder().element("tr"),
        )
        selector = SelectorBuilder().combine(SelectorBuilder().element("div"), "+", inner).stringify()
        assert selector == "div + table#data ~ tr"

    def test_unknown_combinator_passes_through(self, caplog):
        """Unknown symbols are kept verbatim and only noted at DEBUG level."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            with caplog.at_level(logging.DEBUG, logger="cssbuilder.builder"):
                builder = SelectorBuilder().combine(
                    SelectorBuilder().element("a"), "!!", SelectorBuilder().element("b")
                )
        assert builder.stringify() == "a !! b"
        assert any("Unknown combinator" in record.getMessage() for record in caplog.records)

    def test_operands_consumed(self):
        left = SelectorBuilder().element("a")
        SelectorBuilder().combine(left, ">", SelectorBuilder().element("b"))
        assert left.stringify() == ""


class TestStringify:
    """Test stringify consumption semantics."""

    def test_clears_plain_chain(self):
        builder = SelectorBuilder().element("div").class_("x")
        assert builder.stringify() == "div.x"
        assert builder.stringify() == ""

    def test_chain_reusable_after_clear(self):
        builder = SelectorBuilder().id("a")
        builder.stringify()
        assert builder.id("b").stringify() == "#b"

    def test_combined_is_idempotent(self):
        builder = SelectorBuilder().combine(
            SelectorBuilder().element("div"), "+", SelectorBuilder().element("p")
        )
        assert builder.stringify() == "div + p"
        assert builder.stringify() == "div + p"

    def test_empty_builder(self):
        assert SelectorBuilder().stringify() == ""


class TestLogging:
    """Test debug records emitted by the builder."""

    def test_append_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="cssbuilder.builder"):
            SelectorBuilder().element("div")
        assert any("'div'" in record.getMessage() for record in caplog.records)

    def test_rejection_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="cssbuilder.builder"):
            with pytest.raises(OrderError):
                SelectorBuilder().class_("x").element("a")
        assert any("Out of order" in record.getMessage() for record in caplog.records)
