"""Configuration for arborlog registries."""

from __future__ import annotations

from .loader import load_config
from .registry_config import RegistryConfig
from .validation import ConfigValidationError

__all__ = [
    "ConfigValidationError",
    "RegistryConfig",
    "load_config",
]
