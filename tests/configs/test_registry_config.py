"""Tests for RegistryConfig construction and validation."""

from __future__ import annotations

import pytest
from omegaconf import DictConfig, OmegaConf

from arborlog.configs import ConfigValidationError, RegistryConfig
from arborlog.types import Severity


class TestRegistryConfig:
    def test_defaults(self):
        config = RegistryConfig()
        assert config.root_level == "WARNING"
        assert config.placeholder_level == "WARNING"
        assert config.root_handler == "stream"
        assert config.root_handler_level == "DEBUG"
        assert config.handler_errors == "raise"
        assert config.internal_diagnostics is False
        assert config.logger_levels == ()
        assert config.validate() == ()

    def test_levels_normalised(self):
        config = RegistryConfig(root_level="info", placeholder_level=Severity.ERROR)
        assert config.root_level == "INFO"
        assert config.placeholder_level == "ERROR"
        assert config.root_severity is Severity.INFO
        assert config.placeholder_severity is Severity.ERROR

    def test_logger_levels_from_mapping(self):
        config = RegistryConfig(logger_levels={"a": "debug", "a.b": 4})
        assert config.logger_levels == (("a", "DEBUG"), ("a.b", "ERROR"))

    def test_logger_levels_from_pairs(self):
        config = RegistryConfig(logger_levels=[("x", "notice")])
        assert config.logger_levels == (("x", "NOTICE"),)

    def test_hashable(self):
        config = RegistryConfig(logger_levels={"a": "DEBUG"})
        assert hash(config) == hash(RegistryConfig(logger_levels={"a": "DEBUG"}))

    @pytest.mark.parametrize(
        "kwargs,fragment",
        [
            ({"root_level": "loud"}, "root_level"),
            ({"placeholder_level": 99}, "placeholder_level"),
            ({"root_handler": "syslog"}, "root_handler"),
            ({"handler_errors": "ignore"}, "handler_errors"),
            ({"logger_levels": {"a": "verbose"}}, "logger_levels[0].level"),
            ({"logger_levels": [(1, "DEBUG")]}, "logger_levels[0].name"),
        ],
    )
    def test_invalid_values_rejected(self, kwargs, fragment):
        with pytest.raises(ConfigValidationError, match=fragment.replace("[", r"\[")):
            RegistryConfig(**kwargs)

    def test_duplicate_logger_levels_rejected(self):
        with pytest.raises(ConfigValidationError, match="duplicate"):
            RegistryConfig(logger_levels=[("a", "DEBUG"), ("a", "INFO")])

    def test_malformed_logger_levels(self):
        with pytest.raises(ConfigValidationError):
            RegistryConfig(logger_levels=["not-a-pair-of-two"])

    def test_from_hydra(self):
        cfg = OmegaConf.create(
            {
                "root_level": "ERROR",
                "root_handler": "none",
                "handler_errors": "isolate",
                "logger_levels": {"app": "INFO"},
            }
        )
        config = RegistryConfig.from_hydra(cfg)
        assert config.root_level == "ERROR"
        assert config.root_handler == "none"
        assert config.handler_errors == "isolate"
        assert config.logger_levels == (("app", "INFO"),)

    def test_from_hydra_empty(self):
        assert RegistryConfig.from_hydra(DictConfig({})) == RegistryConfig()
