"""Rich console output handler for arborlog."""

from __future__ import annotations

from typing import Any, Optional

from rich.console import Console
from rich.text import Text

from ..types import Severity
from .base import BaseHandler

SEVERITY_STYLES = {
    Severity.DEBUG: "dim",
    Severity.INFO: "blue",
    Severity.NOTICE: "cyan",
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
    Severity.CRITICAL: "bold red",
    Severity.ALERT: "bold white on red",
    Severity.EMERGENCY: "bold blink white on red",
}


class RichHandler(BaseHandler):
    def __init__(self, console: Optional[Console] = None, level: Any = Severity.DEBUG):
        super().__init__(level)
        self.console = console if console is not None else Console(stderr=True)

    def emit(self, severity: Severity, message: str) -> None:
        # Text() keeps rich markup in messages from being interpreted
        self.console.print(Text(message, style=SEVERITY_STYLES[severity]))
