"""Tests for the selector parser."""

import pytest

from scoped_css.errors import ParseError
from scoped_css.model import (
    Attribute,
    ClassSelector,
    Combinator,
    ElementSelector,
    IdSelector,
    PseudoClass,
    PseudoClassKind,
    PseudoElement,
    PseudoElementKind,
    UniversalSelector,
)
from scoped_css.parser import parse_selector, parse_selector_list


def _parse(text: str):
    rest, selector = parse_selector(text)
    assert rest == ""
    return selector


# ---------------------------------------------------------------------------
# Base selectors
# ---------------------------------------------------------------------------


class TestBaseSelectors:
    def test_class(self) -> None:
        assert _parse(".class") == ClassSelector(name="class")

    def test_element(self) -> None:
        assert _parse("div") == ElementSelector(name="div")

    def test_id(self) -> None:
        assert _parse("#unique") == IdSelector(name="unique")

    def test_universal(self) -> None:
        assert _parse("*") == UniversalSelector()

    def test_variants_are_distinct(self) -> None:
        assert ClassSelector(name="x") != IdSelector(name="x")
        assert ClassSelector(name="x") != ElementSelector(name="x")

    def test_name_with_digits_and_dashes(self) -> None:
        assert _parse(".col-2_b") == ClassSelector(name="col-2_b")


# ---------------------------------------------------------------------------
# Full compound selectors
# ---------------------------------------------------------------------------


class TestCompoundSelectors:
    def test_full_class(self) -> None:
        parsed = _parse(".class:active[attr] > div")
        expected = ClassSelector(
            name="class",
            combinator=(Combinator.CHILD, ElementSelector(name="div")),
            pseudo_classes=(PseudoClass(PseudoClassKind.ACTIVE),),
            attribute=Attribute(name="attr"),
        )
        assert parsed == expected

    def test_attribute_before_pseudo_class(self) -> None:
        parsed = _parse("a[href]:hover")
        assert parsed == ElementSelector(
            name="a",
            pseudo_classes=(PseudoClass(PseudoClassKind.HOVER),),
            attribute=Attribute(name="href"),
        )

    def test_pseudo_class_then_element(self) -> None:
        parsed = _parse("div:active::after")
        assert parsed == ElementSelector(
            name="div",
            pseudo_classes=(PseudoClass(PseudoClassKind.ACTIVE),),
            pseudo_element=PseudoElement(PseudoElementKind.AFTER),
        )

    def test_pseudo_order_is_irrelevant(self) -> None:
        assert _parse("div:active::after") == _parse("div::after:active")

    def test_pseudo_order_with_several_classes(self) -> None:
        assert _parse("a:hover:focus::before") == _parse("a::before:hover:focus")

    def test_universal_with_pseudo_element(self) -> None:
        assert _parse("*::before") == UniversalSelector(
            pseudo_element=PseudoElement(PseudoElementKind.BEFORE)
        )

    def test_class_with_pseudo_element(self) -> None:
        parsed = _parse(".quote::first-line")
        assert parsed.pseudo_element == PseudoElement(PseudoElementKind.FIRST_LINE)

    def test_not_owns_nested_selector(self) -> None:
        parsed = _parse("li:not(.hidden)")
        assert parsed == ElementSelector(
            name="li",
            pseudo_classes=(
                PseudoClass(PseudoClassKind.NOT, selector=ClassSelector(name="hidden")),
            ),
        )

    def test_not_with_nested_chain(self) -> None:
        parsed = _parse("p:not( .a > .b )")
        nested = parsed.pseudo_classes[0].selector
        assert nested == ClassSelector(
            name="a", combinator=(Combinator.CHILD, ClassSelector(name="b"))
        )


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class TestCombinators:
    def test_descendant(self) -> None:
        assert _parse("nav a") == ElementSelector(
            name="nav", combinator=(Combinator.DESCENDANT, ElementSelector(name="a"))
        )

    def test_child_with_extra_whitespace(self) -> None:
        assert _parse("ul  >  li") == ElementSelector(
            name="ul", combinator=(Combinator.CHILD, ElementSelector(name="li"))
        )

    def test_child_without_whitespace(self) -> None:
        assert _parse("ul>li") == _parse("ul > li")

    def test_adjacent(self) -> None:
        assert _parse("h1 + p").combinator == (Combinator.ADJACENT, ElementSelector(name="p"))

    def test_general_sibling(self) -> None:
        assert _parse("h1 ~ p").combinator == (
            Combinator.GENERAL_SIBLING,
            ElementSelector(name="p"),
        )

    def test_chain(self) -> None:
        parsed = _parse(".a .b > #c")
        assert parsed == ClassSelector(
            name="a",
            combinator=(
                Combinator.DESCENDANT,
                ClassSelector(
                    name="b", combinator=(Combinator.CHILD, IdSelector(name="c"))
                ),
            ),
        )

    def test_links_walks_the_chain(self) -> None:
        names = [link.name for link in _parse(".a .b > #c").links()]
        assert names == ["a", "b", "c"]

    def test_trailing_whitespace_is_left(self) -> None:
        rest, selector = parse_selector("div {")
        assert rest == " {"
        assert selector == ElementSelector(name="div")

    def test_stops_at_comma(self) -> None:
        rest, _ = parse_selector("div, p")
        assert rest == ", p"


# ---------------------------------------------------------------------------
# Rejection
# ---------------------------------------------------------------------------


class TestRejection:
    def test_open_brace_fails(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_selector("{")
        assert exc_info.value.remaining == "{"

    def test_empty_input_fails(self) -> None:
        with pytest.raises(ParseError):
            parse_selector("")

    def test_bare_dot_fails(self) -> None:
        with pytest.raises(ParseError):
            parse_selector(". a")

    def test_leading_combinator_fails(self) -> None:
        with pytest.raises(ParseError):
            parse_selector("> a")


# ---------------------------------------------------------------------------
# Selector lists
# ---------------------------------------------------------------------------


class TestSelectorList:
    def test_two_selectors(self) -> None:
        rest, selectors = parse_selector_list("h1, .title > a")
        assert rest == ""
        assert selectors == (
            ElementSelector(name="h1"),
            ClassSelector(
                name="title", combinator=(Combinator.CHILD, ElementSelector(name="a"))
            ),
        )

    def test_single_selector(self) -> None:
        rest, selectors = parse_selector_list("  #main ")
        assert selectors == (IdSelector(name="main"),)
        assert rest == " "

    def test_dangling_comma_fails(self) -> None:
        with pytest.raises(ParseError):
            parse_selector_list(".a, {")
