"""Core types for arborlog.

This module defines the value types shared by every other part of the
package: the ordered ``Severity`` scale, the ``Handler`` capability that sinks
must satisfy, and the immutable ``LoggerNode`` stored in the registry.

Examples:
    ```python
    from arborlog.types import LoggerNode, Severity

    node = LoggerNode(name="app.db", threshold=Severity.INFO)
    assert Severity.ERROR >= node.threshold
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Protocol, Tuple, runtime_checkable


class Severity(IntEnum):
    """Ordered urgency of a log message, lowest first.

    Names follow the syslog priorities, ordered by urgency, so plain integer
    comparison gives the total order used for thresholds.
    """

    DEBUG = 0
    INFO = 1
    NOTICE = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5
    ALERT = 6
    EMERGENCY = 7

    @classmethod
    def parse(cls, value: Any) -> Severity:
        """Convert a level name, integer or ``Severity`` into a ``Severity``.

        Args:
            value: Severity member, integer in range, or case-insensitive name

        Returns:
            Matching Severity member

        Raises:
            ValueError: If the value does not name a severity
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            msg = f"Invalid severity: {value!r}"
            raise ValueError(msg)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                msg = f"Severity value out of range: {value}"
                raise ValueError(msg) from None
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls.__members__[key]
            msg = f"Unknown severity name '{value}', expected one of {tuple(cls.__members__)}"
            raise ValueError(msg)
        msg = f"Invalid severity: {value!r}"
        raise ValueError(msg)


@runtime_checkable
class Handler(Protocol):
    """Capability every log sink must provide.

    A handler owns its own minimum severity. ``handle`` is called for every
    message a logger accepts; the handler decides by itself whether to emit.
    """

    level: Severity

    def handle(self, severity: Severity, message: str) -> None: ...


@dataclass(frozen=True)
class LoggerNode:
    """Immutable logger value stored in the registry.

    Attributes:
        name: Dotted logger name; ``""`` is the root logger
        threshold: Minimum severity this logger accepts
        handlers: Handlers attached directly to this logger, in call order
    """

    name: str
    threshold: Severity = Severity.WARNING
    handlers: Tuple[Handler, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Normalise inputs; frozen dataclasses need object.__setattr__
        object.__setattr__(self, "threshold", Severity.parse(self.threshold))
        if not isinstance(self.handlers, tuple):
            object.__setattr__(self, "handlers", tuple(self.handlers))

    def accepts(self, severity: Severity) -> bool:
        """Return True if a message at ``severity`` passes this logger's gate."""
        return severity >= self.threshold
