from scoped_css.errors import ParseError
from scoped_css.parser.attribute import parse_attribute
from scoped_css.parser.declaration import parse_declaration, parse_declarations
from scoped_css.parser.pseudo_class import parse_pseudo_class, parse_pseudo_classes
from scoped_css.parser.pseudo_element import parse_pseudo_element
from scoped_css.parser.rule import parse_rule, parse_rules
from scoped_css.parser.selector import parse_selector, parse_selector_list

__all__ = [
    "ParseError",
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
]
