from scoped_css.model.selector import (
    Attribute,
    AttributeOperator,
    CaseSensitivity,
    ClassSelector,
    Combinator,
    ElementSelector,
    IdSelector,
    PseudoClass,
    PseudoClassKind,
    PseudoElement,
    PseudoElementKind,
    Selector,
    UniversalSelector,
)
from scoped_css.model.rule import CssRule, Declaration

__all__ = [
    "Attribute",
    "AttributeOperator",
    "CaseSensitivity",
    "ClassSelector",
    "Combinator",
    "CssRule",
    "Declaration",
    "ElementSelector",
    "IdSelector",
    "PseudoClass",
    "PseudoClassKind",
    "PseudoElement",
    "PseudoElementKind",
    "Selector",
    "UniversalSelector",
]
