from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..types import Severity


class ConfigValidationError(ValueError):
    """Custom exception for configuration validation errors."""


# ---------------------------------------------------------------------------
# Scalar validators
# ---------------------------------------------------------------------------


def validate_string_choice(
    value: str, field_name: str, choices: tuple[str, ...]
) -> None:
    """Validate that a string value is one of the allowed choices."""
    if not isinstance(value, str):
        msg = f"{field_name} must be a string, got {type(value).__name__}"
        raise ConfigValidationError(msg)
    if value not in choices:
        msg = f"{field_name} must be one of {choices}, got '{value}'"
        raise ConfigValidationError(msg)


def validate_severity(value: Any, field_name: str) -> None:
    """Validate that a value names a severity level."""
    try:
        Severity.parse(value)
    except ValueError as e:
        msg = f"{field_name}: {e}"
        raise ConfigValidationError(msg) from e


def validate_logger_name(value: Any, field_name: str) -> None:
    """Validate that a value is usable as a dotted logger name."""
    if not isinstance(value, str):
        msg = f"{field_name} must be a string, got {type(value).__name__}"
        raise ConfigValidationError(msg)


# ---------------------------------------------------------------------------
# Conversion helpers
# ---------------------------------------------------------------------------


def level_name(value: Any) -> Any:
    """Return the canonical name for a severity-like value.

    Values that do not parse are returned unchanged so that ``validate`` can
    report them instead of failing inside ``__init__``.
    """
    try:
        return Severity.parse(value).name
    except ValueError:
        return value


def ensure_level_pairs(value: Any) -> tuple[tuple[str, Any], ...]:
    """Convert a mapping or iterable of ``(name, level)`` pairs to a tuple.

    Used by config ``__init__`` methods that accept dicts from OmegaConf/YAML
    and must store tuples for Equinox hashability.
    """
    if value is None:
        return ()
    if isinstance(value, Mapping) or hasattr(value, "items"):
        items = value.items()
    elif isinstance(value, Iterable) and not isinstance(value, str):
        items = value
    else:
        msg = f"logger_levels must be a mapping or a sequence of pairs, got {type(value).__name__}"
        raise ConfigValidationError(msg)

    pairs = []
    for item in items:
        try:
            name, level = item
        except (TypeError, ValueError) as e:
            msg = f"logger_levels entries must be (name, level) pairs, got {item!r}"
            raise ConfigValidationError(msg) from e
        pairs.append((name, level_name(level)))
    return tuple(pairs)


def check_hashable(obj: Any, class_name: str) -> None:
    """Shared ``__check_init__`` logic for all config classes."""
    try:
        hash(obj)
    except TypeError as e:
        msg = f"{class_name} must be hashable: {e}"
        raise ValueError(msg) from e
