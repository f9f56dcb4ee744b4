"""arborlog: hierarchical logging with named loggers in a dotted namespace tree.

Every logger has a severity threshold and a list of handlers. A message sent
to a logger is dropped if it falls below that logger's threshold; otherwise
it is offered to the handlers of every ancestor, root first, and then to the
logger's own handlers. Each handler applies its own minimum severity.

Key Features:
- Loggers created on first access, together with any missing ancestors
- Immutable logger values with pure transforms and explicit save-back
- Thread-safe process registry that can be replaced for tests
- Stream, file and rich console handlers
- Exception trapping that logs and re-raises

Examples:
    ```python
    from functools import partial

    import arborlog
    from arborlog import FileHandler, Severity

    # By default WARNING and above go to stderr through the root handler.
    arborlog.warning("app.component", "Something bad is about to happen")

    # Copy everything to a file from here on.
    arborlog.update_global_logger(
        arborlog.ROOT_LOGGER_NAME, partial(arborlog.add_handler, FileHandler("app.log"))
    )

    # Show DEBUG output from one noisy component only.
    arborlog.update_global_logger("app.buggy", partial(arborlog.set_level, Severity.DEBUG))
    arborlog.debug("app.buggy", "This buggy component is buggy")
    ```
"""

from __future__ import annotations

from loguru import logger

from ._version import version as __version__

# Library diagnostics are off unless a RegistryConfig enables them
logger.disable("arborlog")

from .api import (  # noqa: E402
    alert,
    critical,
    debug,
    emergency,
    error,
    info,
    log,
    log_node,
    notice,
    warning,
)
from .configs import ConfigValidationError, RegistryConfig, load_config  # noqa: E402
from .constants import ROOT_LOGGER_NAME  # noqa: E402
from .dispatch import dispatch, effective_handlers, log_to  # noqa: E402
from .handlers import BaseHandler, FileHandler, RichHandler, StreamHandler  # noqa: E402
from .nodes import add_handler, compose, get_level, set_handlers, set_level  # noqa: E402
from .registry import (  # noqa: E402
    LoggerRegistry,
    get_logger,
    get_registry,
    get_root_logger,
    reset_registry,
    save_global_logger,
    set_registry,
    update_global_logger,
)
from .traps import Failure, Success, capture, describe_exception, trapped, traplogging  # noqa: E402
from .types import Handler, LoggerNode, Severity  # noqa: E402
from .utils import ancestor_chain  # noqa: E402

__all__ = [
    "BaseHandler",
    "ConfigValidationError",
    "Failure",
    "FileHandler",
    "Handler",
    "LoggerNode",
    "LoggerRegistry",
    "ROOT_LOGGER_NAME",
    "RegistryConfig",
    "RichHandler",
    "Severity",
    "StreamHandler",
    "Success",
    "__version__",
    "add_handler",
    "alert",
    "ancestor_chain",
    "capture",
    "compose",
    "critical",
    "debug",
    "describe_exception",
    "dispatch",
    "effective_handlers",
    "emergency",
    "error",
    "get_level",
    "get_logger",
    "get_registry",
    "get_root_logger",
    "info",
    "load_config",
    "log",
    "log_node",
    "log_to",
    "notice",
    "reset_registry",
    "save_global_logger",
    "set_handlers",
    "set_level",
    "set_registry",
    "trapped",
    "traplogging",
    "update_global_logger",
    "warning",
]
