"""ScopedStylesheet: mangled CSS text plus its rename table."""

from __future__ import annotations

from dataclasses import dataclass, field

from scoped_css.errors import UnknownNameError
from scoped_css.stylesheet.scope import format_scope_prefix
from scoped_css.transforms.mangle import mangle


@dataclass
class ScopedStylesheet:
    """A stylesheet whose class and id names are scoped by a prefix.

    Look up mangled names with ``sheet["card"]``.  A name missing from the
    table raises :class:`UnknownNameError`; use :meth:`get` for an optional
    lookup.
    """

    mangler: str
    scope_id: int
    css: str = ""
    table: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_css(cls, source: str, mangler: str = "", scope_id: int = 0) -> ScopedStylesheet:
        sheet = cls(mangler=mangler, scope_id=scope_id)
        sheet.overwrite(source)
        return sheet

    @property
    def prefix(self) -> str:
        return format_scope_prefix(self.mangler, self.scope_id)

    def overwrite(self, source: str) -> None:
        """Replace the stylesheet with *source*, mangled with the same prefix."""
        result = mangle(source, self.prefix)
        self.css = result.css
        self.table = result.table

    def get(self, name: str) -> str | None:
        return self.table.get(name)

    def __getitem__(self, name: str) -> str:
        try:
            return self.table[name]
        except KeyError:
            raise UnknownNameError(name, prefix=self.prefix) from None

    def __contains__(self, name: object) -> bool:
        return name in self.table
