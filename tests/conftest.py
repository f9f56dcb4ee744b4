"""
Pytest configuration and shared fixtures for arborlog testing.

This module provides recording handlers, fresh registries and hypothesis
profiles for all tests in the arborlog project.
"""

from __future__ import annotations

import pytest
from hypothesis import settings

import arborlog.registry as registry_module
from arborlog.configs import RegistryConfig
from arborlog.handlers import BaseHandler
from arborlog.registry import LoggerRegistry
from arborlog.types import Severity

# Configure Hypothesis for reasonable test performance
settings.register_profile("ci", max_examples=50, deadline=5000)
settings.register_profile("dev", max_examples=10, deadline=1000)
settings.load_profile("dev")


class RecordingHandler(BaseHandler):
    """Handler that records every emitted message.

    Emits are also appended to ``journal`` (shared between handlers) as
    ``(label, severity, message)`` so tests can check call order.
    """

    def __init__(self, label="handler", level=Severity.DEBUG, journal=None):
        super().__init__(level)
        self.label = label
        self.records = []
        self.journal = journal if journal is not None else []

    def emit(self, severity, message):
        self.records.append((severity, message))
        self.journal.append((self.label, severity, message))

    def __repr__(self):
        return f"RecordingHandler({self.label!r})"


class FailingHandler(BaseHandler):
    """Handler whose emit always raises."""

    def __init__(self, level=Severity.DEBUG, exc_type=RuntimeError):
        super().__init__(level)
        self.exc_type = exc_type
        self.calls = 0

    def emit(self, severity, message):
        self.calls += 1
        raise self.exc_type(f"sink unavailable: {message}")


@pytest.fixture
def journal():
    """Shared call log for ordering assertions."""
    return []


@pytest.fixture
def make_recorder(journal):
    """Factory for RecordingHandlers sharing one journal."""

    def _make(label="handler", level=Severity.DEBUG):
        return RecordingHandler(label=label, level=level, journal=journal)

    return _make


@pytest.fixture
def make_failing():
    """Factory for FailingHandlers."""

    def _make(level=Severity.DEBUG, exc_type=RuntimeError):
        return FailingHandler(level=level, exc_type=exc_type)

    return _make


@pytest.fixture
def quiet_config():
    """Config whose root logger has no handlers."""
    return RegistryConfig(root_handler="none")


@pytest.fixture
def registry(quiet_config):
    """Fresh, isolated registry with a handler-less root."""
    return LoggerRegistry(quiet_config)


@pytest.fixture
def global_registry(quiet_config):
    """Install a fresh process registry for the test and restore the old one."""
    previous = registry_module._registry
    fresh = registry_module.reset_registry(quiet_config)
    yield fresh
    registry_module._registry = previous

