from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScopedCssConfig:
    mangler: str = ""
    scope_id: int = 0
    json_output: bool = False
    json_indent: int = 2
    log_format: str = "%(levelname)s %(name)s: %(message)s"
