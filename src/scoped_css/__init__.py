"""scoped_css - scope CSS class and id names and parse CSS selectors."""

from scoped_css.errors import ParseError, ScopedCssError, UnknownNameError
from scoped_css.model import (
    Attribute,
    AttributeOperator,
    CaseSensitivity,
    ClassSelector,
    Combinator,
    CssRule,
    Declaration,
    ElementSelector,
    IdSelector,
    PseudoClass,
    PseudoClassKind,
    PseudoElement,
    PseudoElementKind,
    Selector,
    UniversalSelector,
)
from scoped_css.parser import (
    parse_attribute,
    parse_declaration,
    parse_declarations,
    parse_pseudo_class,
    parse_pseudo_classes,
    parse_pseudo_element,
    parse_rule,
    parse_rules,
    parse_selector,
    parse_selector_list,
)
from scoped_css.stylesheet import (
    ScopeCounter,
    ScopedStylesheet,
    StylesheetService,
    format_scope_prefix,
)
from scoped_css.transforms import (
    MangleResult,
    PrefixSelectorTransform,
    mangle,
    prefix_selector,
    scope_selector,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ParseError",
    "ScopedCssError",
    "UnknownNameError",
    # Model
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
    # Parsers
    "parse_attribute",
    "parse_declaration",
    "parse_declarations",
    "parse_pseudo_class",
    "parse_pseudo_classes",
    "parse_pseudo_element",
    "parse_rule",
    "parse_rules",
    "parse_selector",
    "parse_selector_list",
    # Transforms
    "MangleResult",
    "PrefixSelectorTransform",
    "mangle",
    "prefix_selector",
    "scope_selector",
    # Stylesheets
    "ScopeCounter",
    "ScopedStylesheet",
    "StylesheetService",
    "format_scope_prefix",
]
