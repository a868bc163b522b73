"""Pseudo-class parser.

Names resolve case-insensitively against :class:`PseudoClassKind`.  ``lang``
and the ``nth-*`` family keep their parenthesized argument as raw text;
``not`` parses a nested selector; anything else is kept verbatim as
``OTHER`` so newer pseudo-classes survive a round trip.
"""

from __future__ import annotations

from scoped_css.errors import ParseError
from scoped_css.model.selector import (
    ARGUMENT_PSEUDO_CLASSES,
    PseudoClass,
    PseudoClassKind,
)
from scoped_css.parser.util import (
    expect,
    fragment,
    many1,
    skip_whitespace,
    take_balanced,
    take_identifier,
    take_while,
)

__all__ = ["parse_pseudo_class", "parse_pseudo_classes"]

_KEYWORDS = {
    kind.value: kind for kind in PseudoClassKind if kind is not PseudoClassKind.OTHER
}


def _parse_not(text: str) -> tuple[str, PseudoClass]:
    # Imported here: the selector parser depends on this module.
    from scoped_css.parser.selector import parse_selector

    rest = skip_whitespace(expect(text, "("))
    rest, selector = parse_selector(rest)
    rest = expect(skip_whitespace(rest), ")")
    return rest, PseudoClass(PseudoClassKind.NOT, selector=selector)


def parse_pseudo_class(text: str) -> tuple[str, PseudoClass]:
    """Parse a single ``:name`` or ``:name(argument)``."""
    rest = expect(text, ":")
    if rest.startswith(":"):
        raise ParseError(
            f"Expected a pseudo-class, found a pseudo-element at {fragment(text)!r}",
            remaining=text,
        )
    rest, name = take_identifier(rest, expected="a pseudo-class name")
    kind = _KEYWORDS.get(name.lower())

    if kind is PseudoClassKind.NOT:
        return _parse_not(rest)

    if kind in ARGUMENT_PSEUDO_CLASSES:
        rest = expect(rest, "(")
        rest, argument = take_while(lambda c: c != ")", rest)
        rest = expect(rest, ")")
        return rest, PseudoClass(kind, argument=argument)

    if kind is None:
        if rest.startswith("("):
            rest, argument = take_balanced(rest)
            name += argument
        return rest, PseudoClass.other(name)

    return rest, PseudoClass(kind)


def parse_pseudo_classes(text: str) -> tuple[str, tuple[PseudoClass, ...]]:
    """Parse one or more consecutive pseudo-classes."""
    rest, classes = many1(parse_pseudo_class, text)
    return rest, tuple(classes)
