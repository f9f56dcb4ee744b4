"""Log exceptions escaping a unit of work, then let them propagate.

``traplogging`` runs an action and inspects its outcome explicitly: a
``Success`` is unwrapped and returned, a ``Failure`` is logged and its
original exception re-raised unchanged (same object, same traceback).

Examples:
    ```python
    from arborlog import Severity, traplogging

    config = traplogging("app.config", Severity.ERROR, "loading config", read_config, path)

    @trapped("app.worker", Severity.CRITICAL, "worker crashed")
    def run_worker():
        ...
    ```
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from loguru import logger

from .constants import TRAP_PREFIX_SEPARATOR
from .dispatch import dispatch
from .registry import LoggerRegistry, get_registry

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Outcome of an action that returned normally."""

    value: T


@dataclass(frozen=True)
class Failure:
    """Outcome of an action that raised."""

    error: Exception


Outcome = Union[Success[T], Failure]


def capture(action: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome:
    """Run ``action`` and return its outcome instead of raising.

    Only ``Exception`` subclasses are captured; ``KeyboardInterrupt`` and
    ``SystemExit`` propagate immediately.
    """
    try:
        return Success(action(*args, **kwargs))
    except Exception as e:
        return Failure(e)


def describe_exception(exc: BaseException) -> str:
    """Return ``"TypeName: message"``, or just ``"TypeName"`` for an empty message."""
    text = str(exc)
    name = type(exc).__name__
    return f"{name}: {text}" if text else name


def trap_message(prefix: str, exc: BaseException) -> str:
    """Build the logged message for a trapped exception."""
    if not prefix:
        return describe_exception(exc)
    return f"{prefix}{TRAP_PREFIX_SEPARATOR}{describe_exception(exc)}"


def traplogging(
    name: str,
    severity: Any,
    prefix: str,
    action: Callable[..., T],
    *args: Any,
    registry: Optional[LoggerRegistry] = None,
    **kwargs: Any,
) -> T:
    """Run ``action``, logging any exception it raises before re-raising it.

    Args:
        name: Logger the failure is reported to
        severity: Severity of the failure message
        prefix: Text prepended to the exception description ("" for none)
        action: Callable to run
        *args: Positional arguments for ``action``
        registry: Registry to log through (defaults to the process registry).
            This keyword is always consumed here and never forwarded, so an
            action that itself takes ``registry=`` must be wrapped, e.g. in
            ``functools.partial``.
        **kwargs: Keyword arguments for ``action``

    Returns:
        Whatever ``action`` returns

    Raises:
        Exception: The exception raised by ``action``, unchanged
    """
    outcome = capture(action, *args, **kwargs)
    if isinstance(outcome, Success):
        return outcome.value

    error = outcome.error
    target = registry if registry is not None else get_registry()
    logger.debug(f"Trapped {type(error).__name__} for logger '{name}'")
    dispatch(target, name, severity, trap_message(prefix, error))
    raise error


def trapped(
    name: str,
    severity: Any,
    prefix: str = "",
    registry: Optional[LoggerRegistry] = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorator form of ``traplogging``."""

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            return traplogging(
                name, severity, prefix, func, *args, registry=registry, **kwargs
            )

        return wrapper

    return decorator
