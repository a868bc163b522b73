"""Selector model: selectors, combinators, pseudo-classes, pseudo-elements, attributes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterator


class Combinator(Enum):
    """Operator chaining one compound selector to the next."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT = "+"
    GENERAL_SIBLING = "~"

    def __str__(self) -> str:
        if self is Combinator.DESCENDANT:
            return " "
        return f" {self.value} "


class AttributeOperator(Enum):
    EQ = "="
    TILDE_EQ = "~="
    PIPE_EQ = "|="
    UP_EQ = "^="
    DOLLAR_EQ = "$="
    STAR_EQ = "*="


class CaseSensitivity(Enum):
    SENSITIVE = "s"
    INSENSITIVE = "i"
    DEFAULT = ""


@dataclass(frozen=True)
class Attribute:
    """An attribute matcher such as ``[lang|=en i]``."""

    name: str
    target: tuple[AttributeOperator, str] | None = None
    case_sensitivity: CaseSensitivity = CaseSensitivity.DEFAULT

    def __str__(self) -> str:
        text = self.name
        if self.target is not None:
            operator, value = self.target
            text += f"{operator.value}{value}"
        if self.case_sensitivity is not CaseSensitivity.DEFAULT:
            text += f" {self.case_sensitivity.value}"
        return f"[{text}]"


class PseudoClassKind(Enum):
    """Known pseudo-classes, keyed by their lower-case CSS name."""

    ACTIVE = "active"
    CHECKED = "checked"
    DISABLED = "disabled"
    EMPTY = "empty"
    ENABLED = "enabled"
    FIRST_CHILD = "first-child"
    FIRST_OF_TYPE = "first-of-type"
    FOCUS = "focus"
    HOVER = "hover"
    INDETERMINATE = "indeterminate"
    IN_RANGE = "in-range"
    INVALID = "invalid"
    LANG = "lang"
    LAST_CHILD = "last-child"
    LAST_OF_TYPE = "last-of-type"
    LEFT = "left"
    LINK = "link"
    NOT = "not"
    NTH_CHILD = "nth-child"
    NTH_LAST_CHILD = "nth-last-child"
    NTH_LAST_OF_TYPE = "nth-last-of-type"
    ONLY_CHILD = "only-child"
    ONLY_OF_TYPE = "only-of-type"
    OPTIONAL = "optional"
    OUT_OF_RANGE = "out-of-range"
    READ_ONLY = "read-only"
    READ_WRITE = "read-write"
    REQUIRED = "required"
    RIGHT = "right"
    ROOT = "root"
    TARGET = "target"
    VALID = "valid"
    VISITED = "visited"
    OTHER = ""


# Pseudo-classes whose parenthesized argument is kept as raw text.
ARGUMENT_PSEUDO_CLASSES = frozenset(
    {
        PseudoClassKind.LANG,
        PseudoClassKind.NTH_CHILD,
        PseudoClassKind.NTH_LAST_CHILD,
        PseudoClassKind.NTH_LAST_OF_TYPE,
    }
)


@dataclass(frozen=True)
class PseudoClass:
    """A single pseudo-class.

    ``argument`` holds the raw parenthesized text for ``lang`` and the
    ``nth-*`` family, or the verbatim source text of an unrecognized
    pseudo-class (kind ``OTHER``).  ``selector`` is set only for ``:not()``.
    """

    kind: PseudoClassKind
    argument: str | None = None
    selector: Selector | None = None

    @classmethod
    def other(cls, text: str) -> PseudoClass:
        return cls(PseudoClassKind.OTHER, argument=text)

    def __str__(self) -> str:
        if self.kind is PseudoClassKind.OTHER:
            return f":{self.argument}"
        if self.kind is PseudoClassKind.NOT:
            return f":not({self.selector})"
        if self.kind in ARGUMENT_PSEUDO_CLASSES:
            return f":{self.kind.value}({self.argument})"
        return f":{self.kind.value}"


class PseudoElementKind(Enum):
    AFTER = "after"
    BEFORE = "before"
    FIRST_LETTER = "first-letter"
    FIRST_LINE = "first-line"
    SELECTION = "selection"
    OTHER = ""


@dataclass(frozen=True)
class PseudoElement:
    """A pseudo-element; ``name`` is the verbatim identifier for ``OTHER``."""

    kind: PseudoElementKind
    name: str | None = None

    @classmethod
    def other(cls, name: str) -> PseudoElement:
        return cls(PseudoElementKind.OTHER, name=name)

    def __str__(self) -> str:
        if self.kind is PseudoElementKind.OTHER:
            return f"::{self.name}"
        return f"::{self.kind.value}"


@dataclass(frozen=True)
class Selector:
    """A compound selector and, through ``combinator``, the rest of its chain.

    Concrete selectors are the subclasses below; two selectors are equal only
    when they are the same variant with equal fields.
    """

    sigil: ClassVar[str] = ""

    name: str
    combinator: tuple[Combinator, Selector] | None = None
    pseudo_classes: tuple[PseudoClass, ...] | None = None
    pseudo_element: PseudoElement | None = None
    attribute: Attribute | None = None

    def links(self) -> Iterator[Selector]:
        """Yield this selector and every selector chained after it."""
        current: Selector | None = self
        while current is not None:
            yield current
            current = current.combinator[1] if current.combinator else None

    def compound_text(self) -> str:
        """Render this link only, without the combinator chain."""
        parts = [self.sigil, self.name]
        if self.attribute is not None:
            parts.append(str(self.attribute))
        for pseudo_class in self.pseudo_classes or ():
            parts.append(str(pseudo_class))
        if self.pseudo_element is not None:
            parts.append(str(self.pseudo_element))
        return "".join(parts)

    def __str__(self) -> str:
        text = self.compound_text()
        if self.combinator is not None:
            combinator, nested = self.combinator
            text += f"{combinator}{nested}"
        return text


@dataclass(frozen=True)
class ElementSelector(Selector):
    """Type selector, e.g. ``div``."""


@dataclass(frozen=True)
class ClassSelector(Selector):
    """Class selector, e.g. ``.card``."""

    sigil: ClassVar[str] = "."


@dataclass(frozen=True)
class IdSelector(Selector):
    """Id selector, e.g. ``#main``."""

    sigil: ClassVar[str] = "#"


@dataclass(frozen=True)
class UniversalSelector(Selector):
    """The universal selector ``*``."""

    name: str = "*"
