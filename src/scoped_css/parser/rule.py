"""Rule parser: ``selector { declarations }``."""

from __future__ import annotations

from scoped_css.model.rule import CssRule
from scoped_css.parser.declaration import parse_declarations
from scoped_css.parser.selector import parse_selector
from scoped_css.parser.util import skip_whitespace, whitespace_delimited

__all__ = ["parse_rule", "parse_rules"]

_selector = whitespace_delimited(parse_selector)
_declarations = whitespace_delimited(parse_declarations)


def parse_rule(text: str) -> tuple[str, CssRule]:
    """Parse one rule; whitespace around the selector and the block is trimmed."""
    rest, selector = _selector(text)
    rest, declarations = _declarations(rest)
    return rest, CssRule(selector=selector, declarations=declarations)


def parse_rules(text: str) -> tuple[CssRule, ...]:
    """Parse consecutive rules until the end of *text*."""
    rules: list[CssRule] = []
    rest = skip_whitespace(text)
    while rest:
        rest, rule = parse_rule(rest)
        rules.append(rule)
    return tuple(rules)
