"""Message dispatch for arborlog.

A message is first gated by the threshold of the logger it is sent to.
Once it passes, it goes to every handler of every ancestor (root first,
regardless of the ancestors' own thresholds) and then to the logger's own
handlers. Each handler applies its own minimum severity.

The registry is only read to assemble the handler list; no registry lock is
held while handlers run.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from loguru import logger

from .registry import LoggerRegistry
from .types import Handler, LoggerNode, Severity


def _ancestor_handlers(nodes: Sequence[LoggerNode]) -> List[Handler]:
    handlers: List[Handler] = []
    for node in nodes:
        handlers.extend(node.handlers)
    return handlers


def effective_handlers(registry: LoggerRegistry, name: str) -> List[Handler]:
    """Return the handlers a message to ``name`` is offered to, in call order.

    Args:
        registry: Registry to resolve loggers in
        name: Dotted logger name

    Returns:
        Handlers of the proper ancestors, root first, followed by the
        logger's own handlers
    """
    *ancestors, node = registry.chain(name)
    return _ancestor_handlers(ancestors) + list(node.handlers)


def _run_handlers(
    registry: LoggerRegistry,
    name: str,
    handlers: Sequence[Handler],
    severity: Severity,
    message: str,
) -> None:
    if registry.config.handler_errors != "isolate":
        for handler in handlers:
            handler.handle(severity, message)
        return

    for handler in handlers:
        try:
            handler.handle(severity, message)
        except Exception as e:
            logger.warning(
                f"Handler {handler!r} failed while logging to '{name}': "
                f"{type(e).__name__}: {e}"
            )


def dispatch(registry: LoggerRegistry, name: str, severity: Any, message: str) -> None:
    """Log ``message`` at ``severity`` through the logger called ``name``.

    Args:
        registry: Registry to resolve loggers in
        name: Dotted logger name; created with its ancestors if missing
        severity: Message severity (anything ``Severity.parse`` accepts)
        message: Message text, passed to handlers verbatim

    Raises:
        Exception: Whatever a handler raises, when the registry's
            ``handler_errors`` policy is "raise"
    """
    severity = Severity.parse(severity)
    *ancestors, node = registry.chain(name)
    if not node.accepts(severity):
        return
    handlers = _ancestor_handlers(ancestors) + list(node.handlers)
    _run_handlers(registry, name, handlers, severity, message)


def log_to(
    registry: LoggerRegistry, node: LoggerNode, severity: Any, message: str
) -> None:
    """Log through a node value held by the caller.

    The gate is ``node``'s own threshold and its own handlers are used, even
    if the stored logger of the same name differs. Ancestors are resolved
    from the registry.
    """
    severity = Severity.parse(severity)
    if not node.accepts(severity):
        return
    ancestors = registry.chain(node.name)[:-1]
    handlers = _ancestor_handlers(ancestors) + list(node.handlers)
    _run_handlers(registry, node.name, handlers, severity, message)
