"""Declaration parser: a Lark grammar plus a Transformer building Declarations."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer, Tree
from lark.exceptions import LarkError

from scoped_css.errors import ParseError
from scoped_css.model.rule import Declaration
from scoped_css.parser.util import fragment

__all__ = ["parse_declaration", "parse_declarations"]

GRAMMAR_PATH = Path(__file__).parent / "declarations.lark"

# Characters that end a declaration value.
_VALUE_TERMINATORS = ";}\n\t"


class DeclarationTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Declaration objects."""

    def declaration(self, items: list[Token]) -> Declaration:
        return Declaration(property=str(items[0]).strip(), value=str(items[1]).strip())

    def declaration_list(self, items: list[Declaration]) -> tuple[Declaration, ...]:
        return tuple(items)

    def start(self, items: list[tuple[Declaration, ...]]) -> tuple[Declaration, ...]:
        return items[0] if items else ()


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start=["start", "declaration"],
    )


def _parse(source: str, start: str) -> Tree:
    try:
        return _parser().parse(source, start=start)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        pos = getattr(e, "pos_in_stream", None)
        remaining = source[pos:] if isinstance(pos, int) and pos >= 0 else source
        raise ParseError(
            f"Invalid declarations at {fragment(remaining)!r}: {e}",
            remaining=remaining,
            line=line,
            column=column,
        ) from e


def parse_declaration(text: str) -> tuple[str, Declaration]:
    """Parse a single ``property: value`` pair from the start of *text*.

    The value ends at ``;``, ``}``, a newline or a tab, which is left in the
    remaining input.
    """
    colon = text.find(":")
    end = len(text)
    if colon != -1:
        for index in range(colon + 1, len(text)):
            if text[index] in _VALUE_TERMINATORS:
                end = index
                break
    tree = _parse(text[:end], "declaration")
    return text[end:], DeclarationTransformer().transform(tree)


def parse_declarations(text: str) -> tuple[str, tuple[Declaration, ...]]:
    """Parse a ``{ ... }`` declaration block from the start of *text*."""
    if not text.startswith("{"):
        raise ParseError(
            f"Expected '{{' at {fragment(text)!r}", remaining=text
        )
    close = text.find("}")
    if close == -1:
        raise ParseError(
            f"Unterminated declaration block at {fragment(text)!r}", remaining=text
        )
    tree = _parse(text[: close + 1], "start")
    return text[close + 1 :], DeclarationTransformer().transform(tree)
