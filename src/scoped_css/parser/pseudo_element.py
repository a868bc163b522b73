"""Pseudo-element parser: ``::after``, ``::before``, ... or any other name."""

from __future__ import annotations

from scoped_css.model.selector import PseudoElement, PseudoElementKind
from scoped_css.parser.util import expect, take_identifier

__all__ = ["parse_pseudo_element"]

_KEYWORDS = {
    kind.value: kind for kind in PseudoElementKind if kind is not PseudoElementKind.OTHER
}


def parse_pseudo_element(text: str) -> tuple[str, PseudoElement]:
    rest = expect(text, "::")
    rest, name = take_identifier(rest, expected="a pseudo-element name")
    kind = _KEYWORDS.get(name.lower())
    if kind is None:
        return rest, PseudoElement.other(name)
    return rest, PseudoElement(kind)
