"""CLI command: scoped-css mangle -- prefix class and id names in a CSS file."""

from __future__ import annotations

import json
from typing import TextIO

import click

from scoped_css.config import ScopedCssConfig
from scoped_css.stylesheet import ScopedStylesheet


@click.command()
@click.argument("cssfile", type=click.File("r", encoding="utf-8"))
@click.option("--mangler", default="", help="Base name of the scope prefix")
@click.option("--scope-id", default=0, type=int, help="Scope id appended to the mangler")
@click.option("--json", "json_output", is_flag=True, help="Print CSS and rename table as JSON")
def mangle(cssfile: TextIO, mangler: str, scope_id: int, json_output: bool) -> None:
    """Mangle CSSFILE ("-" for stdin) and print the scoped CSS.

    With --json, prints an object holding the prefix, the scoped CSS and the
    table mapping each original name to its mangled name.
    """
    config = ScopedCssConfig(mangler=mangler, scope_id=scope_id, json_output=json_output)
    sheet = ScopedStylesheet.from_css(
        cssfile.read(), mangler=config.mangler, scope_id=config.scope_id
    )

    if config.json_output:
        payload = {"prefix": sheet.prefix, "css": sheet.css, "table": sheet.table}
        click.echo(json.dumps(payload, indent=config.json_indent))
        return

    click.echo(sheet.css, nl=not sheet.css.endswith("\n"))
