"""Leveled logging calls on the process registry.

Each call names the logger by its dotted name; the logger and any missing
ancestors spring into existence on first use.

Examples:
    ```python
    from arborlog import api

    api.debug("app.component", "never seen with the default thresholds")
    api.warning("app.component", "goes to stderr through the root handler")
    ```
"""

from __future__ import annotations

from typing import Any

from .dispatch import dispatch, log_to
from .registry import get_registry
from .types import LoggerNode, Severity


def log(name: str, severity: Any, message: str) -> None:
    """Log ``message`` at ``severity`` to the logger called ``name``."""
    dispatch(get_registry(), name, severity, message)


def log_node(node: LoggerNode, severity: Any, message: str) -> None:
    """Log through a logger value instead of looking it up by name."""
    log_to(get_registry(), node, severity, message)


def debug(name: str, message: str) -> None:
    log(name, Severity.DEBUG, message)


def info(name: str, message: str) -> None:
    log(name, Severity.INFO, message)


def notice(name: str, message: str) -> None:
    log(name, Severity.NOTICE, message)


def warning(name: str, message: str) -> None:
    log(name, Severity.WARNING, message)


def error(name: str, message: str) -> None:
    log(name, Severity.ERROR, message)


def critical(name: str, message: str) -> None:
    log(name, Severity.CRITICAL, message)


def alert(name: str, message: str) -> None:
    log(name, Severity.ALERT, message)


def emergency(name: str, message: str) -> None:
    log(name, Severity.EMERGENCY, message)
