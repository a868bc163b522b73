"""Base protocol for selector transforms."""

from __future__ import annotations

from typing import Protocol

from scoped_css.model.selector import Selector


class Transform(Protocol):
    """A selector-to-selector transformation step."""

    def apply(self, selector: Selector) -> Selector: ...
