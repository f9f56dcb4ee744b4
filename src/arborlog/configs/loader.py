"""Load a ``RegistryConfig`` from YAML files, mappings or OmegaConf configs."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

from loguru import logger
from omegaconf import DictConfig, OmegaConf

from .registry_config import RegistryConfig
from .validation import ConfigValidationError

ConfigSource = Union[str, Path, Mapping[str, Any], DictConfig, RegistryConfig, None]


def load_config(source: ConfigSource = None) -> RegistryConfig:
    """Build a ``RegistryConfig`` from any supported source.

    Args:
        source: Path to a YAML file, a plain mapping, a DictConfig, an
            existing RegistryConfig (returned unchanged) or None for defaults.
            A top-level ``arborlog`` key is unwrapped if present.

    Returns:
        Validated RegistryConfig

    Raises:
        ConfigValidationError: If the file is missing or the values are invalid
    """
    if source is None:
        return RegistryConfig()
    if isinstance(source, RegistryConfig):
        return source

    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.exists():
            msg = f"Config file does not exist: {path}"
            raise ConfigValidationError(msg)
        cfg = OmegaConf.load(path)
        logger.debug(f"Loaded registry config from {path}")
    elif isinstance(source, DictConfig):
        cfg = source
    else:
        cfg = OmegaConf.create(dict(source))

    if not isinstance(cfg, DictConfig):
        msg = f"Registry config must be a mapping, got {type(cfg).__name__}"
        raise ConfigValidationError(msg)

    if "arborlog" in cfg:
        cfg = cfg.arborlog

    return RegistryConfig.from_hydra(cfg)
