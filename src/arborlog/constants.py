"""Named constants for arborlog.

This module is intentionally dependency-free (no arborlog internal imports)
so it can be imported by types, configs and the registry without circular
dependencies.
"""

from __future__ import annotations

# Logger namespace
ROOT_LOGGER_NAME: str = ""  # The root logger is always present under this name
NAME_SEPARATOR: str = "."

# Configuration defaults (level names, parsed by Severity.parse)
DEFAULT_ROOT_LEVEL: str = "WARNING"
DEFAULT_PLACEHOLDER_LEVEL: str = "WARNING"
DEFAULT_ROOT_HANDLER_LEVEL: str = "DEBUG"

ROOT_HANDLER_CHOICES: tuple[str, ...] = ("stream", "rich", "none")
HANDLER_ERROR_POLICIES: tuple[str, ...] = ("raise", "isolate")

# Joins a trap prefix and the description of the trapped exception
TRAP_PREFIX_SEPARATOR: str = ": "
