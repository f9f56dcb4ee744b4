from __future__ import annotations

from typing import Any

import equinox as eqx
from loguru import logger
from omegaconf import DictConfig

from ..constants import (
    DEFAULT_PLACEHOLDER_LEVEL,
    DEFAULT_ROOT_HANDLER_LEVEL,
    DEFAULT_ROOT_LEVEL,
    HANDLER_ERROR_POLICIES,
    ROOT_HANDLER_CHOICES,
)
from ..types import Severity
from .validation import (
    ConfigValidationError,
    check_hashable,
    ensure_level_pairs,
    level_name,
    validate_logger_name,
    validate_severity,
    validate_string_choice,
)


class RegistryConfig(eqx.Module):
    """Configuration for a logger registry.

    The registry reads this once, at construction, to seed the root logger,
    to pick the threshold of auto-created placeholder loggers and to decide
    how handler failures are treated during dispatch.

    Attributes:
        root_level: Threshold of the root logger
        placeholder_level: Threshold given to loggers created on first access
        root_handler: Kind of handler attached to the root ("stream", "rich", "none")
        root_handler_level: Minimum severity of the root handler
        handler_errors: "raise" propagates the first handler failure,
            "isolate" reports it and keeps dispatching
        internal_diagnostics: Enable arborlog's own loguru diagnostics
        logger_levels: ``(name, level)`` pairs applied when the registry is built

    Examples:
        ```python
        config = RegistryConfig(
            root_level="INFO",
            handler_errors="isolate",
            logger_levels={"app.db": "DEBUG"},
        )
        ```
    """

    root_level: str = DEFAULT_ROOT_LEVEL
    placeholder_level: str = DEFAULT_PLACEHOLDER_LEVEL
    root_handler: str = "stream"
    root_handler_level: str = DEFAULT_ROOT_HANDLER_LEVEL
    handler_errors: str = "raise"
    internal_diagnostics: bool = False
    logger_levels: tuple[tuple[str, str], ...] = ()

    def __init__(self, **kwargs: Any):
        self.root_level = level_name(kwargs.get("root_level", DEFAULT_ROOT_LEVEL))
        self.placeholder_level = level_name(
            kwargs.get("placeholder_level", DEFAULT_PLACEHOLDER_LEVEL)
        )
        self.root_handler = kwargs.get("root_handler", "stream")
        self.root_handler_level = level_name(
            kwargs.get("root_handler_level", DEFAULT_ROOT_HANDLER_LEVEL)
        )
        self.handler_errors = kwargs.get("handler_errors", "raise")
        self.internal_diagnostics = bool(kwargs.get("internal_diagnostics", False))
        self.logger_levels = ensure_level_pairs(kwargs.get("logger_levels"))

    def validate(self) -> tuple[str, ...]:
        """Validate registry configuration and return tuple of errors."""
        errors: list[str] = []

        for field_name in ("root_level", "placeholder_level", "root_handler_level"):
            try:
                validate_severity(getattr(self, field_name), field_name)
            except ConfigValidationError as e:
                errors.append(str(e))

        try:
            validate_string_choice(
                self.root_handler, "root_handler", ROOT_HANDLER_CHOICES
            )
        except ConfigValidationError as e:
            errors.append(str(e))

        try:
            validate_string_choice(
                self.handler_errors, "handler_errors", HANDLER_ERROR_POLICIES
            )
        except ConfigValidationError as e:
            errors.append(str(e))

        seen: set[str] = set()
        for i, (name, level) in enumerate(self.logger_levels):
            try:
                validate_logger_name(name, f"logger_levels[{i}].name")
                validate_severity(level, f"logger_levels[{i}].level")
            except ConfigValidationError as e:
                errors.append(str(e))
                continue
            if name in seen:
                errors.append(f"logger_levels contains duplicate logger '{name}'")
            seen.add(name)

        if (
            not errors
            and self.root_handler != "none"
            and self.root_handler_severity > self.root_severity
        ):
            logger.warning(
                "root_handler_level is above root_level - descendant loggers with lower "
                "thresholds will not reach the root handler"
            )

        return tuple(errors)

    def __check_init__(self):
        check_hashable(self, "RegistryConfig")
        errors = self.validate()
        if errors:
            raise ConfigValidationError("; ".join(errors))

    # Parsed accessors used by the registry

    @property
    def root_severity(self) -> Severity:
        return Severity.parse(self.root_level)

    @property
    def placeholder_severity(self) -> Severity:
        return Severity.parse(self.placeholder_level)

    @property
    def root_handler_severity(self) -> Severity:
        return Severity.parse(self.root_handler_level)

    @classmethod
    def from_hydra(cls, cfg: DictConfig) -> RegistryConfig:
        """Create registry config from an OmegaConf DictConfig."""
        return cls(
            root_level=cfg.get("root_level", DEFAULT_ROOT_LEVEL),
            placeholder_level=cfg.get("placeholder_level", DEFAULT_PLACEHOLDER_LEVEL),
            root_handler=cfg.get("root_handler", "stream"),
            root_handler_level=cfg.get(
                "root_handler_level", DEFAULT_ROOT_HANDLER_LEVEL
            ),
            handler_errors=cfg.get("handler_errors", "raise"),
            internal_diagnostics=cfg.get("internal_diagnostics", False),
            logger_levels=cfg.get("logger_levels"),
        )
