"""Selector-aware prefixing: rewrite class and id names inside a selector tree."""

from __future__ import annotations

from dataclasses import replace

from scoped_css.errors import ParseError
from scoped_css.model.selector import (
    ClassSelector,
    IdSelector,
    PseudoClass,
    PseudoClassKind,
    Selector,
)
from scoped_css.parser.selector import parse_selector_list
from scoped_css.parser.util import fragment, skip_whitespace


class PrefixSelectorTransform:
    """Prefix every class and id name in a selector.

    Unlike :func:`~scoped_css.transforms.mangle.mangle`, this walks the parsed
    tree, so names nested in ``:not(...)`` are prefixed as well.  Element,
    universal, attribute and pseudo-element parts are left unchanged.
    """

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    def apply(self, selector: Selector) -> Selector:
        name = selector.name
        if isinstance(selector, (ClassSelector, IdSelector)):
            name = self.prefix + name

        combinator = selector.combinator
        if combinator is not None:
            combinator = (combinator[0], self.apply(combinator[1]))

        pseudo_classes = selector.pseudo_classes
        if pseudo_classes is not None:
            pseudo_classes = tuple(self._apply_pseudo_class(pc) for pc in pseudo_classes)

        return replace(
            selector,
            name=name,
            combinator=combinator,
            pseudo_classes=pseudo_classes,
        )

    def _apply_pseudo_class(self, pseudo_class: PseudoClass) -> PseudoClass:
        if pseudo_class.kind is not PseudoClassKind.NOT or pseudo_class.selector is None:
            return pseudo_class
        return replace(pseudo_class, selector=self.apply(pseudo_class.selector))


def prefix_selector(selector: Selector, prefix: str) -> Selector:
    """Return *selector* with *prefix* prepended to every class and id name."""
    return PrefixSelectorTransform(prefix).apply(selector)


def scope_selector(text: str, prefix: str) -> str:
    """Parse a selector list, prefix it and render it back to CSS."""
    rest, selectors = parse_selector_list(text)
    if skip_whitespace(rest):
        raise ParseError(
            f"Unexpected {fragment(rest)!r} after selector", remaining=rest
        )
    return ", ".join(str(prefix_selector(s, prefix)) for s in selectors)
