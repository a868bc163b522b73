"""Attribute matcher parser: ``[name]``, ``[name op value]``, ``[name op value i|s]``."""

from __future__ import annotations

from scoped_css.errors import ParseError
from scoped_css.model.selector import Attribute, AttributeOperator, CaseSensitivity
from scoped_css.parser.util import (
    WHITESPACE,
    expect,
    fragment,
    skip_whitespace,
    take_identifier,
    take_until_encountered,
)

__all__ = ["parse_attribute", "parse_attribute_operator"]

# Two-character operators are tried before "=".
_OPERATORS = sorted(AttributeOperator, key=lambda op: -len(op.value))

_CASE_FLAGS = {
    "i": CaseSensitivity.INSENSITIVE,
    "s": CaseSensitivity.SENSITIVE,
}


def parse_attribute_operator(text: str) -> tuple[str, AttributeOperator]:
    for operator in _OPERATORS:
        if text.startswith(operator.value):
            return text[len(operator.value) :], operator
    raise ParseError(
        f"Expected an attribute operator at {fragment(text)!r}", remaining=text
    )


def _parse_value(text: str) -> tuple[str, str]:
    """Parse an attribute value; quoted values are kept with their quotes."""
    quote = text[:1]
    if quote in ("'", '"'):
        end = text.find(quote, 1)
        if end == -1:
            raise ParseError(
                f"Unterminated string at {fragment(text)!r}", remaining=text
            )
        return text[end + 1 :], text[: end + 1]
    return take_identifier(text, expected="an attribute value")


def parse_attribute(text: str) -> tuple[str, Attribute]:
    """Parse an attribute matcher starting at ``[``."""
    rest = skip_whitespace(expect(text, "["))
    rest, name = take_until_encountered(rest, "", WHITESPACE + "]=~|^$*")
    if not name:
        raise ParseError(
            f"Expected an attribute name at {fragment(rest)!r}", remaining=rest
        )

    target = None
    rest = skip_whitespace(rest)
    if rest[:1] and rest[:1] in "=~|^$*":
        rest, operator = parse_attribute_operator(rest)
        rest, value = _parse_value(skip_whitespace(rest))
        target = (operator, value)

    case_sensitivity = CaseSensitivity.DEFAULT
    rest = skip_whitespace(rest)
    flag = rest[:1].lower()
    if flag in _CASE_FLAGS:
        case_sensitivity = _CASE_FLAGS[flag]
        rest = rest[1:]

    rest = skip_whitespace(rest)
    if not rest.startswith("]"):
        raise ParseError(
            f"Unexpected {fragment(rest)!r} in attribute {name!r}; "
            "expected a case flag ('i' or 's') or ']'",
            remaining=rest,
        )
    return rest[1:], Attribute(
        name=name, target=target, case_sensitivity=case_sensitivity
    )
