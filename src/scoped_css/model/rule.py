"""Rule model: Declaration and CssRule dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

from scoped_css.model.selector import Selector


@dataclass(frozen=True)
class Declaration:
    """A ``property: value`` pair; both sides trimmed, case preserved."""

    property: str
    value: str

    def __str__(self) -> str:
        return f"{self.property}: {self.value}"


@dataclass(frozen=True)
class CssRule:
    """A selector paired with its declarations in source order."""

    selector: Selector
    declarations: tuple[Declaration, ...] = ()

    def __str__(self) -> str:
        body = "; ".join(str(d) for d in self.declarations)
        if not body:
            return f"{self.selector} {{}}"
        return f"{self.selector} {{ {body}; }}"
