"""scoped-css CLI entry point: Click group with subcommands."""

import logging

import click

from scoped_css import __version__
from scoped_css.config import ScopedCssConfig


@click.group()
@click.version_option(version=__version__, prog_name="scoped-css")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """scoped-css - scope CSS class and id names with a unique prefix."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=ScopedCssConfig().log_format)


# Import and register subcommands
from scoped_css.cli.mangle import mangle  # noqa: E402
from scoped_css.cli.rules import rules  # noqa: E402
from scoped_css.cli.selector import selector  # noqa: E402

cli.add_command(mangle)
cli.add_command(rules)
cli.add_command(selector)
