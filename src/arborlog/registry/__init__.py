"""
Process-wide logger registry for arborlog.

This package owns the single LoggerRegistry shared by a process and the
global accessors built on top of it. The registry instance is an explicit
object: application startup may build one from its own configuration and
install it with ``set_registry``; otherwise ``get_registry`` constructs a
default one, exactly once, on first use.

Typical usage:
    from functools import partial
    from arborlog.registry import update_global_logger
    from arborlog.nodes import set_level

    update_global_logger("app.db", partial(set_level, "DEBUG"))

Notes:
- Tests should build a fresh registry with ``reset_registry`` (or construct
  ``LoggerRegistry`` directly) instead of relying on shared state.
- ``update_global_logger`` is a read followed by a write; it is not atomic
  against a concurrent ``save_global_logger`` of the same name.
"""

from __future__ import annotations

import threading
from typing import Callable, Optional

from loguru import logger

from ..configs import RegistryConfig
from ..constants import ROOT_LOGGER_NAME
from ..types import LoggerNode
from .registry import LoggerRegistry

# -----------------------------------------------------------------------------
# Module-level singleton API
# -----------------------------------------------------------------------------

_registry: Optional[LoggerRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> LoggerRegistry:
    """Return the process registry, constructing the default one on first use."""
    global _registry
    registry = _registry
    if registry is not None:
        return registry
    with _registry_lock:
        if _registry is None:
            _registry = LoggerRegistry()
        return _registry


def set_registry(registry: LoggerRegistry) -> LoggerRegistry:
    """Install ``registry`` as the process registry and return it."""
    global _registry
    if not isinstance(registry, LoggerRegistry):
        msg = f"Expected a LoggerRegistry, got {type(registry).__name__}"
        raise TypeError(msg)
    with _registry_lock:
        _registry = registry
    logger.debug("Process logger registry replaced")
    return registry


def reset_registry(config: Optional[RegistryConfig] = None) -> LoggerRegistry:
    """Build a fresh registry from ``config`` and install it."""
    return set_registry(LoggerRegistry(config))


def get_logger(name: str) -> LoggerNode:
    """Return the global logger ``name``, creating it and its ancestors if needed."""
    return get_registry().get(name)


def get_root_logger() -> LoggerNode:
    """Return the global root logger."""
    return get_registry().get_root()


def save_global_logger(node: LoggerNode) -> None:
    """Commit ``node`` to the global registry under ``node.name``."""
    get_registry().save(node)


def update_global_logger(
    name: str, transform: Callable[[LoggerNode], LoggerNode]
) -> LoggerNode:
    """Apply ``transform`` to the global logger ``name`` and save the result."""
    return get_registry().update(name, transform)


__all__ = [
    "ROOT_LOGGER_NAME",
    "LoggerRegistry",
    "get_logger",
    "get_registry",
    "get_root_logger",
    "reset_registry",
    "save_global_logger",
    "set_registry",
    "update_global_logger",
]
