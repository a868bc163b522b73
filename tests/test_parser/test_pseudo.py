"""Tests for the pseudo-class and pseudo-element parsers."""

import pytest

from scoped_css.errors import ParseError
from scoped_css.model import (
    ClassSelector,
    PseudoClass,
    PseudoClassKind,
    PseudoElement,
    PseudoElementKind,
)
from scoped_css.parser import parse_pseudo_classes, parse_pseudo_element


# ---------------------------------------------------------------------------
# Pseudo-classes
# ---------------------------------------------------------------------------


class TestPseudoClassKeywords:
    def test_active(self) -> None:
        assert parse_pseudo_classes(":active") == ("", (PseudoClass(PseudoClassKind.ACTIVE),))

    def test_case_insensitive(self) -> None:
        _, parsed = parse_pseudo_classes(":HOVER")
        assert parsed == (PseudoClass(PseudoClassKind.HOVER),)

    @pytest.mark.parametrize(
        "name, kind",
        [
            ("first-child", PseudoClassKind.FIRST_CHILD),
            ("first-of-type", PseudoClassKind.FIRST_OF_TYPE),
            ("in-range", PseudoClassKind.IN_RANGE),
            ("invalid", PseudoClassKind.INVALID),
            ("valid", PseudoClassKind.VALID),
            ("read-only", PseudoClassKind.READ_ONLY),
            ("out-of-range", PseudoClassKind.OUT_OF_RANGE),
            ("only-of-type", PseudoClassKind.ONLY_OF_TYPE),
            ("visited", PseudoClassKind.VISITED),
        ],
    )
    def test_keyword_table(self, name: str, kind: PseudoClassKind) -> None:
        _, parsed = parse_pseudo_classes(f":{name}")
        assert parsed == (PseudoClass(kind),)

    def test_several(self) -> None:
        _, parsed = parse_pseudo_classes(":first-child:last-child")
        assert parsed == (
            PseudoClass(PseudoClassKind.FIRST_CHILD),
            PseudoClass(PseudoClassKind.LAST_CHILD),
        )

    def test_longer_name_is_not_a_keyword_prefix(self) -> None:
        _, parsed = parse_pseudo_classes(":focus-within")
        assert parsed == (PseudoClass.other("focus-within"),)


class TestPseudoClassArguments:
    def test_lang(self) -> None:
        _, parsed = parse_pseudo_classes(":lang(fr)")
        assert parsed == (PseudoClass(PseudoClassKind.LANG, argument="fr"),)

    def test_nth_child_is_raw_text(self) -> None:
        _, parsed = parse_pseudo_classes(":nth-child(some_garbage)")
        assert parsed == (PseudoClass(PseudoClassKind.NTH_CHILD, argument="some_garbage"),)

    def test_nth_child_keeps_spacing(self) -> None:
        _, parsed = parse_pseudo_classes(":nth-child(2n + 1)")
        assert parsed[0].argument == "2n + 1"

    def test_nth_last_of_type(self) -> None:
        _, parsed = parse_pseudo_classes(":nth-last-of-type(odd)")
        assert parsed == (PseudoClass(PseudoClassKind.NTH_LAST_OF_TYPE, argument="odd"),)

    def test_nth_last_child(self) -> None:
        _, parsed = parse_pseudo_classes(":nth-last-child(2)")
        assert parsed == (PseudoClass(PseudoClassKind.NTH_LAST_CHILD, argument="2"),)

    def test_missing_argument_fails(self) -> None:
        with pytest.raises(ParseError):
            parse_pseudo_classes(":nth-child")

    def test_unterminated_argument_fails(self) -> None:
        with pytest.raises(ParseError):
            parse_pseudo_classes(":lang(fr")

    def test_not(self) -> None:
        _, parsed = parse_pseudo_classes(":not(.a)")
        assert parsed == (
            PseudoClass(PseudoClassKind.NOT, selector=ClassSelector(name="a")),
        )

    def test_not_requires_parentheses(self) -> None:
        with pytest.raises(ParseError):
            parse_pseudo_classes(":not.a")


class TestPseudoClassOther:
    def test_other_variant(self) -> None:
        _, parsed = parse_pseudo_classes(":other")
        assert parsed == (PseudoClass.other("other"),)

    def test_garbage_with_paren(self) -> None:
        rest, parsed = parse_pseudo_classes(":aaaah(some_garbage) other")
        assert parsed == (PseudoClass.other("aaaah(some_garbage)"),)
        assert rest == " other"

    def test_garbage_with_nested_parens(self) -> None:
        _, parsed = parse_pseudo_classes(":is(a:not(b))")
        assert parsed == (PseudoClass.other("is(a:not(b))"),)

    def test_garbage_multiple(self) -> None:
        _, parsed = parse_pseudo_classes(":aaaah:active")
        assert parsed == (
            PseudoClass.other("aaaah"),
            PseudoClass(PseudoClassKind.ACTIVE),
        )


class TestPseudoClassBoundaries:
    def test_stops_before_pseudo_element(self) -> None:
        rest, parsed = parse_pseudo_classes(":hover::after")
        assert parsed == (PseudoClass(PseudoClassKind.HOVER),)
        assert rest == "::after"

    def test_pseudo_element_is_not_a_pseudo_class(self) -> None:
        with pytest.raises(ParseError):
            parse_pseudo_classes("::after")

    def test_empty_name_fails(self) -> None:
        with pytest.raises(ParseError):
            parse_pseudo_classes(": hover")

    def test_stops_at_whitespace(self) -> None:
        rest, _ = parse_pseudo_classes(":hover .child")
        assert rest == " .child"


# ---------------------------------------------------------------------------
# Pseudo-elements
# ---------------------------------------------------------------------------


class TestPseudoElement:
    def test_parses_after(self) -> None:
        assert parse_pseudo_element("::after") == ("", PseudoElement(PseudoElementKind.AFTER))

    @pytest.mark.parametrize(
        "text, kind",
        [
            ("::before", PseudoElementKind.BEFORE),
            ("::First-Line", PseudoElementKind.FIRST_LINE),
            ("::first-letter", PseudoElementKind.FIRST_LETTER),
            ("::SELECTION", PseudoElementKind.SELECTION),
        ],
    )
    def test_keywords(self, text: str, kind: PseudoElementKind) -> None:
        _, parsed = parse_pseudo_element(text)
        assert parsed == PseudoElement(kind)

    def test_other(self) -> None:
        _, parsed = parse_pseudo_element("::marker")
        assert parsed == PseudoElement.other("marker")

    def test_leaves_following_pseudo_class(self) -> None:
        rest, _ = parse_pseudo_element("::after:hover")
        assert rest == ":hover"

    def test_single_colon_fails(self) -> None:
        with pytest.raises(ParseError):
            parse_pseudo_element(":after")

    def test_missing_name_fails(self) -> None:
        with pytest.raises(ParseError):
            parse_pseudo_element(":: ")
