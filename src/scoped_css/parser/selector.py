"""Recursive-descent selector parser.

A selector is a chain of compound selectors joined by combinators::

    .card:hover::after[data-x] > p

Each compound starts with a class, id, universal or element base, followed
by pseudo-classes and a pseudo-element (in either order) and at most one
attribute matcher.
"""

from __future__ import annotations

from scoped_css.errors import ParseError
from scoped_css.model.selector import (
    ClassSelector,
    Combinator,
    ElementSelector,
    IdSelector,
    PseudoClass,
    PseudoElement,
    Selector,
    UniversalSelector,
)
from scoped_css.parser.attribute import parse_attribute
from scoped_css.parser.pseudo_class import parse_pseudo_classes
from scoped_css.parser.pseudo_element import parse_pseudo_element
from scoped_css.parser.util import (
    expect,
    fragment,
    optional,
    skip_whitespace,
    take_identifier,
)

__all__ = ["parse_selector", "parse_selector_list"]

_SYMBOL_COMBINATORS = (
    Combinator.CHILD,
    Combinator.ADJACENT,
    Combinator.GENERAL_SIBLING,
)


def _parse_pseudo_part(
    text: str,
) -> tuple[str, tuple[PseudoClass, ...] | None, PseudoElement | None]:
    """Parse pseudo-classes and a pseudo-element in either order."""
    rest, pseudo_classes = optional(parse_pseudo_classes, text)
    rest, pseudo_element = optional(parse_pseudo_element, rest)
    if pseudo_classes is None and pseudo_element is not None:
        rest, pseudo_classes = optional(parse_pseudo_classes, rest)
    return rest, pseudo_classes, pseudo_element


def _parse_combinator(text: str) -> tuple[str, tuple[Combinator, Selector]]:
    stripped = skip_whitespace(text)
    for combinator in _SYMBOL_COMBINATORS:
        if stripped.startswith(combinator.value):
            rest = skip_whitespace(stripped[len(combinator.value) :])
            rest, selector = parse_selector(rest)
            return rest, (combinator, selector)
    if len(stripped) == len(text):
        raise ParseError(
            f"Expected a combinator at {fragment(text)!r}", remaining=text
        )
    rest, selector = parse_selector(stripped)
    return rest, (Combinator.DESCENDANT, selector)


def _parse_compound(
    text: str, selector_type: type[Selector], name: str
) -> tuple[str, Selector]:
    rest, attribute = optional(parse_attribute, text)
    rest, pseudo_classes, pseudo_element = _parse_pseudo_part(rest)
    if attribute is None:
        rest, attribute = optional(parse_attribute, rest)
    rest, combinator = optional(_parse_combinator, rest)
    return rest, selector_type(
        name=name,
        combinator=combinator,
        pseudo_classes=pseudo_classes,
        pseudo_element=pseudo_element,
        attribute=attribute,
    )


def _parse_class(text: str) -> tuple[str, Selector]:
    rest, name = take_identifier(expect(text, "."), expected="a class name")
    return _parse_compound(rest, ClassSelector, name)


def _parse_id(text: str) -> tuple[str, Selector]:
    rest, name = take_identifier(expect(text, "#"), expected="an id")
    return _parse_compound(rest, IdSelector, name)


def _parse_universal(text: str) -> tuple[str, Selector]:
    rest = expect(text, "*")
    return _parse_compound(rest, UniversalSelector, "*")


def _parse_element(text: str) -> tuple[str, Selector]:
    rest, name = take_identifier(text, expected="an element name")
    return _parse_compound(rest, ElementSelector, name)


_ALTERNATIVES = (_parse_class, _parse_id, _parse_universal, _parse_element)


def parse_selector(text: str) -> tuple[str, Selector]:
    """Parse one selector chain from the start of *text*.

    Returns the unconsumed input and the selector.  Raises
    :class:`ParseError` if *text* does not start with a selector.
    """
    for alternative in _ALTERNATIVES:
        try:
            return alternative(text)
        except ParseError:
            continue
    raise ParseError(f"Expected a selector at {fragment(text)!r}", remaining=text)


def parse_selector_list(text: str) -> tuple[str, tuple[Selector, ...]]:
    """Parse a comma-separated selector list such as ``h1, .title > a``."""
    rest, first = parse_selector(skip_whitespace(text))
    selectors = [first]
    while True:
        candidate = skip_whitespace(rest)
        if not candidate.startswith(","):
            return rest, tuple(selectors)
        rest, selector = parse_selector(skip_whitespace(candidate[1:]))
        selectors.append(selector)
