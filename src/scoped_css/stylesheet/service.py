"""StylesheetService: hands out uniquely scoped stylesheets."""

from __future__ import annotations

import logging

from scoped_css.stylesheet.model import ScopedStylesheet
from scoped_css.stylesheet.scope import ScopeCounter

logger = logging.getLogger("scoped_css")


class StylesheetService:
    """Mangle stylesheets under one mangler name, each with a fresh scope id.

    The counter is injected so several services (or threads) can share one
    sequence of ids; by default each service owns its own.
    """

    def __init__(self, mangler: str = "", counter: ScopeCounter | None = None) -> None:
        self.mangler = mangler
        self.counter = counter if counter is not None else ScopeCounter()

    def attach(self, source: str) -> ScopedStylesheet:
        scope_id = self.counter.next_id()
        sheet = ScopedStylesheet.from_css(source, mangler=self.mangler, scope_id=scope_id)
        logger.debug(
            "Attached stylesheet with prefix %r (%d names)", sheet.prefix, len(sheet.table)
        )
        return sheet
