"""Core registry implementation for arborlog.

Contains the LoggerRegistry class, a thread-safe mapping from dotted logger
names to immutable LoggerNode values. Missing loggers are created on first
access together with any missing ancestors, so every stored name always has
its whole ancestor chain present.
"""

from __future__ import annotations

import threading
from typing import Callable, Dict, List, Optional, Tuple

from loguru import logger

from ..configs import RegistryConfig
from ..constants import ROOT_LOGGER_NAME
from ..handlers import RichHandler, StreamHandler
from ..types import Handler, LoggerNode, Severity
from ..utils.names import ancestor_chain

# -----------------------------------------------------------------------------
# Root seeding
# -----------------------------------------------------------------------------


def _root_handlers(config: RegistryConfig) -> Tuple[Handler, ...]:
    level = config.root_handler_severity
    if config.root_handler == "stream":
        return (StreamHandler(level=level),)
    if config.root_handler == "rich":
        return (RichHandler(level=level),)
    return ()


def _configure_diagnostics(config: RegistryConfig) -> None:
    # Applied on every construction so the newest registry decides
    if config.internal_diagnostics:
        logger.enable("arborlog")
        return
    logger.disable("arborlog")
    if config.handler_errors == "isolate":
        # Isolated handler failures are always reported
        logger.enable("arborlog.dispatch")


# -----------------------------------------------------------------------------
# Registry implementation
# -----------------------------------------------------------------------------


class LoggerRegistry:
    """Process-wide logger tree with read-through creation.

    The root logger is created by the constructor, before any other
    operation can observe the map. All reads and writes go through a single
    reentrant lock; no lock is held while handlers run.

    Examples:
        ```python
        registry = LoggerRegistry()
        node = registry.get("app.db")  # creates "app" and "app.db"
        registry.save(set_level(Severity.DEBUG, node))
        ```
    """

    def __init__(self, config: Optional[RegistryConfig] = None) -> None:
        self.config = config if config is not None else RegistryConfig()
        self._lock = threading.RLock()
        self._placeholder_level: Severity = self.config.placeholder_severity

        _configure_diagnostics(self.config)

        root = LoggerNode(
            name=ROOT_LOGGER_NAME,
            threshold=self.config.root_severity,
            handlers=_root_handlers(self.config),
        )
        self._nodes: Dict[str, LoggerNode] = {ROOT_LOGGER_NAME: root}

        for name, level in self.config.logger_levels:
            node = self.get(name)
            self.save(LoggerNode(name=name, threshold=level, handlers=node.handlers))

        logger.debug(
            f"LoggerRegistry initialized with root threshold {root.threshold.name} "
            f"and {len(root.handlers)} root handler(s)"
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> LoggerNode:
        """Return the logger called ``name``, creating it if needed.

        Any missing logger in the ancestor chain is created first, root to
        leaf, as a placeholder with the configured placeholder threshold and
        no handlers.

        Args:
            name: Dotted logger name

        Returns:
            The stored LoggerNode for ``name``
        """
        with self._lock:
            node = self._nodes.get(name)
            if node is not None:
                return node
            self._create_chain(name)
            return self._nodes[name]

    def get_root(self) -> LoggerNode:
        """Return the root logger."""
        return self.get(ROOT_LOGGER_NAME)

    def chain(self, name: str) -> List[LoggerNode]:
        """Return the nodes from the root down to ``name``, read in one step.

        Missing loggers are created exactly as ``get`` does. The result is a
        consistent snapshot: no concurrent ``save`` can interleave with it.
        """
        with self._lock:
            if name not in self._nodes:
                self._create_chain(name)
            return [self._nodes[n] for n in ancestor_chain(name)]

    def _create_chain(self, name: str) -> None:
        # Caller holds self._lock
        for component in ancestor_chain(name):
            if component not in self._nodes:
                self._nodes[component] = LoggerNode(
                    name=component, threshold=self._placeholder_level
                )
                logger.debug(f"Created placeholder logger '{component}'")

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def save(self, node: LoggerNode) -> None:
        """Store ``node`` under its name, replacing any existing entry.

        Missing ancestors of ``node.name`` are created so that every stored
        name keeps its full ancestor chain.
        """
        with self._lock:
            if node.name not in self._nodes:
                self._create_chain(node.name)
            self._nodes[node.name] = node
        logger.debug(
            f"Saved logger '{node.name}' (threshold={node.threshold.name}, "
            f"handlers={len(node.handlers)})"
        )

    def update(
        self, name: str, transform: Callable[[LoggerNode], LoggerNode]
    ) -> LoggerNode:
        """Read ``name``, apply ``transform`` and save the result.

        The read and the write are separate steps: a concurrent ``save`` of
        the same name between them is overwritten (last writer wins).

        Returns:
            The node that was saved
        """
        node = transform(self.get(name))
        self.save(node)
        return node

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def names(self) -> List[str]:
        """Return all known logger names, sorted."""
        with self._lock:
            return sorted(self._nodes)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._nodes

    def __len__(self) -> int:
        with self._lock:
            return len(self._nodes)

    def __repr__(self) -> str:
        return f"LoggerRegistry(loggers={len(self)})"
