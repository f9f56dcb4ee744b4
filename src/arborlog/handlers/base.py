"""Shared behaviour for arborlog handlers."""

from __future__ import annotations

from typing import Any

from ..types import Severity


class BaseHandler:
    """Handler that filters on its own minimum severity.

    Subclasses implement ``emit``; ``handle`` is the entry point used by the
    dispatch engine and silently drops messages below ``level``.

    Note: Handlers are regular mutable objects, not part of the immutable
    logger tree. Changing a handler's level affects every logger it is
    attached to.
    """

    def __init__(self, level: Any = Severity.DEBUG):
        self.level = Severity.parse(level)

    def handle(self, severity: Severity, message: str) -> None:
        if severity >= self.level:
            self.emit(severity, message)

    def emit(self, severity: Severity, message: str) -> None:
        raise NotImplementedError

    def set_level(self, level: Any) -> None:
        self.level = Severity.parse(level)

    def close(self) -> None:
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level={self.level.name})"
