"""CLI command: scoped-css selector -- display or prefix a parsed selector."""

from __future__ import annotations

import sys

import click

from scoped_css.model.selector import (
    ClassSelector,
    ElementSelector,
    IdSelector,
    Selector,
    UniversalSelector,
)
from scoped_css.parser import ParseError, parse_selector_list
from scoped_css.parser.util import fragment, skip_whitespace
from scoped_css.transforms import scope_selector

_KIND_NAMES = {
    ElementSelector: "element",
    ClassSelector: "class",
    IdSelector: "id",
    UniversalSelector: "universal",
}


def _describe(link: Selector) -> str:
    parts = [f"  {_KIND_NAMES[type(link)]} {link.name}"]
    if link.pseudo_classes:
        parts.append("pseudo-classes=" + "".join(str(pc) for pc in link.pseudo_classes))
    if link.pseudo_element is not None:
        parts.append(f"pseudo-element={link.pseudo_element}")
    if link.attribute is not None:
        parts.append(f"attribute={link.attribute}")
    if link.combinator is not None:
        parts.append(f"combinator={link.combinator[0].name.lower()}")
    return "  ".join(parts)


@click.command()
@click.argument("selector_text", metavar="SELECTOR")
@click.option("--prefix", default=None, help="Prefix class and id names and print the result")
def selector(selector_text: str, prefix: str | None) -> None:
    """Parse SELECTOR and display its structure.

    Shows one line per compound selector in each chain.  With --prefix,
    prints the selector with every class and id name prefixed instead.
    """
    try:
        if prefix is not None:
            click.echo(scope_selector(selector_text, prefix))
            return
        rest, selectors = parse_selector_list(selector_text)
        if skip_whitespace(rest):
            raise ParseError(
                f"Unexpected {fragment(rest)!r} after selector", remaining=rest
            )
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    for index, parsed in enumerate(selectors, start=1):
        click.echo(f"Selector {index}: {parsed}")
        for link in parsed.links():
            click.echo(_describe(link))
