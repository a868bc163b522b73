"""Lexical helpers shared by the selector, pseudo and attribute parsers.

Every parser in this package is a plain function ``(text) -> (remaining,
value)`` that raises :class:`~scoped_css.errors.ParseError` when the input
does not match.  The helpers here are the small building blocks they are
written with.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from scoped_css.errors import ParseError

T = TypeVar("T")
Parser = Callable[[str], tuple[str, T]]

WHITESPACE = " \t\n\r\f"

# Characters that can never appear inside a selector identifier.
IDENT_RESERVED = frozenset(WHITESPACE + ":[](){}<>&*$#.,;")


def is_identifier_char(c: str) -> bool:
    return c not in IDENT_RESERVED


def is_whitespace(c: str) -> bool:
    return c in WHITESPACE


def fragment(text: str, length: int = 20) -> str:
    """Return the start of *text* for use in error messages."""
    if len(text) <= length:
        return text
    return text[:length] + "..."


def skip_whitespace(text: str) -> str:
    return text.lstrip(WHITESPACE)


def take_while(predicate: Callable[[str], bool], text: str) -> tuple[str, str]:
    """Split *text* after the longest prefix whose characters satisfy *predicate*."""
    end = 0
    while end < len(text) and predicate(text[end]):
        end += 1
    return text[end:], text[:end]


def take_while1(
    predicate: Callable[[str], bool], text: str, *, expected: str
) -> tuple[str, str]:
    """Like :func:`take_while` but fails unless at least one character matches."""
    rest, taken = take_while(predicate, text)
    if not taken:
        raise ParseError(f"Expected {expected} at {fragment(text)!r}", remaining=text)
    return rest, taken


def take_identifier(text: str, *, expected: str = "an identifier") -> tuple[str, str]:
    return take_while1(is_identifier_char, text, expected=expected)


def take_until_encountered(
    text: str, consumable: str, dont_consume: str
) -> tuple[str, str]:
    """Take characters until one from either delimiter set is reached.

    A delimiter from *consumable* is taken as the last captured character;
    a delimiter from *dont_consume* is left in the remaining input.
    """
    overlap = set(consumable) & set(dont_consume)
    if overlap:
        raise ValueError(
            f"Delimiters {''.join(sorted(overlap))!r} are both consumable and not"
        )
    stops = consumable + dont_consume
    rest, captured = take_while(lambda c: c not in stops, text)
    if rest and rest[0] in consumable:
        return rest[1:], captured + rest[0]
    return rest, captured


def expect(text: str, literal: str) -> str:
    """Consume *literal* from the start of *text* and return the rest."""
    if not text.startswith(literal):
        raise ParseError(
            f"Expected {literal!r} at {fragment(text)!r}", remaining=text
        )
    return text[len(literal) :]


def take_balanced(text: str, open_char: str = "(", close_char: str = ")") -> tuple[str, str]:
    """Take a bracketed group, nested groups included, verbatim."""
    rest = expect(text, open_char)
    depth = 1
    for index, c in enumerate(rest):
        if c == open_char:
            depth += 1
        elif c == close_char:
            depth -= 1
            if depth == 0:
                return rest[index + 1 :], open_char + rest[: index + 1]
    raise ParseError(
        f"Unbalanced {open_char!r} at {fragment(text)!r}", remaining=text
    )


def optional(parser: Parser[T], text: str) -> tuple[str, T | None]:
    """Run *parser*; on failure return the input untouched and ``None``."""
    try:
        return parser(text)
    except ParseError:
        return text, None


def many1(parser: Parser[T], text: str) -> tuple[str, list[T]]:
    """Apply *parser* one or more times, stopping at the first failure."""
    rest, first = parser(text)
    items = [first]
    while rest:
        try:
            next_rest, item = parser(rest)
        except ParseError:
            break
        if len(next_rest) == len(rest):
            break
        rest = next_rest
        items.append(item)
    return rest, items


def whitespace_delimited(parser: Parser[T]) -> Parser[T]:
    """Wrap *parser* so surrounding whitespace is consumed."""

    def wrapped(text: str) -> tuple[str, T]:
        rest, value = parser(skip_whitespace(text))
        return skip_whitespace(rest), value

    return wrapped
