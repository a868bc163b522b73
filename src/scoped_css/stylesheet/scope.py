"""Scope prefixes: formatting and a thread-safe id counter."""

from __future__ import annotations

import threading


def format_scope_prefix(mangler: str, scope_id: int) -> str:
    """Build the prefix for *mangler* and *scope_id*.

    Id 0 gives ``"{mangler}-"``; any other id gives ``"{mangler}__{id}-"``.
    """
    if scope_id == 0:
        return f"{mangler}-"
    return f"{mangler}__{scope_id}-"


class ScopeCounter:
    """Monotonically increasing scope ids, safe to share between threads."""

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """The last id handed out (or the start value)."""
        with self._lock:
            return self._value

    def next_id(self) -> int:
        with self._lock:
            self._value += 1
            return self._value
