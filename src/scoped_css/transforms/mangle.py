"""Scope-mangling transform: prefix class and id names in raw CSS text.

The text is split into sections in one left-to-right scan.  Any ``{ ... }``
rule body is captured as an opaque block, so declaration values such as
``color: #FF00FF`` are never mistaken for id selectors.  Only class and id
sections are rewritten; everything else is emitted verbatim.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

logger = logging.getLogger("scoped_css")

__all__ = ["MangleResult", "Section", "SectionKind", "mangle", "split_sections"]

# Characters that end an identifier run.  Digits only end it in first position.
_TERMINATORS = r"\s.#,$@%^&*(){}\[\]<>\"'/"
_NAME = rf"[^{_TERMINATORS}0-9:][^{_TERMINATORS}:]*"
# Pseudo-class text glued to a name (".btn:hover") travels with the name.
_SUFFIX = rf":[^{_TERMINATORS}]*"

_IDENT_RE = re.compile(rf"(?P<sigil>[#.]?)(?P<name>{_NAME})(?P<suffix>{_SUFFIX})?")
_COMMENT = r"/\*.*?\*/"
_STRING = r""""(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*'"""
# Strings and comments inside a body are skipped whole, so a quoted "}" does
# not end the block.
_BODY = rf"""\{{(?:{_STRING}|{_COMMENT}|[^{{}}"'/]|/(?!\*))*\}}"""

_BLOCK_RE = re.compile(rf"\s*{_BODY}", re.DOTALL)
_STANDALONE_BLOCK_RE = re.compile(_BODY, re.DOTALL)
_COMMENT_RE = re.compile(_COMMENT, re.DOTALL)
_STRING_RE = re.compile(_STRING, re.DOTALL)


class SectionKind(Enum):
    ID = "id"
    CLASS = "class"
    ELEMENT = "element"
    RULES_BLOCK = "rules_block"
    COMMENT = "comment"
    STRING = "string"
    OTHER = "other"


_SIGIL_KINDS = {
    "#": SectionKind.ID,
    ".": SectionKind.CLASS,
    "": SectionKind.ELEMENT,
}


@dataclass(frozen=True)
class Section:
    """A run of CSS text.  ``name`` and ``suffix`` are set for identifier runs."""

    kind: SectionKind
    text: str
    name: str = ""
    suffix: str = ""

    @property
    def is_mangled(self) -> bool:
        return self.kind in (SectionKind.ID, SectionKind.CLASS)

    def render(self, prefix: str) -> str:
        if not self.is_mangled:
            return self.text
        sigil = "#" if self.kind is SectionKind.ID else "."
        return f"{sigil}{prefix}{self.name}{self.suffix}"


class MangleResult(NamedTuple):
    """Mangled CSS text and the rename table for its class and id names."""

    css: str
    table: dict[str, str]


def _read_token(css: str, pos: int) -> tuple[list[Section], int] | None:
    """Read the token starting at *pos*, or return None if none starts there."""
    for pattern, kind in (
        (_COMMENT_RE, SectionKind.COMMENT),
        (_STRING_RE, SectionKind.STRING),
    ):
        match = pattern.match(css, pos)
        if match:
            return [Section(kind, match.group())], match.end()

    match = _IDENT_RE.match(css, pos)
    if match:
        section = Section(
            _SIGIL_KINDS[match.group("sigil")],
            match.group(),
            name=match.group("name"),
            suffix=match.group("suffix") or "",
        )
        block = _BLOCK_RE.match(css, match.end())
        if block:
            return [section, Section(SectionKind.RULES_BLOCK, block.group())], block.end()
        return [section], match.end()

    match = _STANDALONE_BLOCK_RE.match(css, pos)
    if match:
        return [Section(SectionKind.RULES_BLOCK, match.group())], match.end()
    return None


def split_sections(css: str) -> list[Section]:
    """Split *css* into sections whose texts concatenate back to *css*."""
    sections: list[Section] = []
    other_start = 0
    pos = 0
    while pos < len(css):
        found = _read_token(css, pos)
        if found is None:
            pos += 1
            continue
        if other_start < pos:
            sections.append(Section(SectionKind.OTHER, css[other_start:pos]))
        tokens, pos = found
        sections.extend(tokens)
        other_start = pos
    if other_start < len(css):
        sections.append(Section(SectionKind.OTHER, css[other_start:]))
    return sections


def mangle(css: str, prefix: str) -> MangleResult:
    """Prefix every selector-position class and id name in *css* with *prefix*.

    Returns the rewritten text and a table mapping each original name to its
    prefixed form.  A block ends at the first ``}`` outside a string or
    comment; nested or unbalanced braces are not supported.
    """
    sections = split_sections(css)
    table: dict[str, str] = {}
    for section in sections:
        if section.is_mangled:
            table.setdefault(section.name, prefix + section.name)
    mangled = "".join(section.render(prefix) for section in sections)
    logger.debug(
        "Mangled %d sections (%d names) with prefix %r",
        len(sections),
        len(table),
        prefix,
    )
    return MangleResult(css=mangled, table=table)
