"""CLI command: scoped-css rules -- parse a CSS file into rules."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from scoped_css.parser import ParseError, parse_rules


@click.command()
@click.argument("cssfile", type=click.File("r", encoding="utf-8"))
def rules(cssfile: TextIO) -> None:
    """Parse CSSFILE ("-" for stdin) and list each rule's declarations.

    Exits with code 1 if the file is not a sequence of plain rules.
    """
    try:
        parsed = parse_rules(cssfile.read())
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    for rule in parsed:
        click.echo(str(rule.selector))
        for declaration in rule.declarations:
            click.echo(f"  {declaration.property}: {declaration.value}")
    click.echo()
    click.echo(f"Summary: {len(parsed)} rule(s)")
