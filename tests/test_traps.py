"""Tests for exception trapping."""

from __future__ import annotations

import pytest

from arborlog.nodes import add_handler, set_level
from arborlog.traps import (
    Failure,
    Success,
    capture,
    describe_exception,
    trap_message,
    trapped,
    traplogging,
)
from arborlog.types import Severity


class ParseError(Exception):
    pass


@pytest.fixture
def listener(registry, make_recorder):
    handler = make_recorder()
    registry.save(add_handler(handler, set_level(Severity.DEBUG, registry.get("L"))))
    return handler


def test_capture_success():
    assert capture(lambda x: x * 2, 21) == Success(42)


def test_capture_failure():
    error = ValueError("bad")

    def action():
        raise error

    outcome = capture(action)
    assert isinstance(outcome, Failure)
    assert outcome.error is error


def test_capture_lets_keyboard_interrupt_through():
    def action():
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        capture(action)


def test_describe_exception():
    assert describe_exception(ValueError("bad input")) == "ValueError: bad input"
    assert describe_exception(ParseError()) == "ParseError"


def test_trap_message_without_prefix():
    assert trap_message("", KeyError("k")) == "KeyError: 'k'"


def test_traplogging_returns_result(registry, listener):
    result = traplogging("L", Severity.ERROR, "ctx", lambda: "done", registry=registry)
    assert result == "done"
    assert listener.records == []


def test_traplogging_passes_arguments(registry, listener):
    result = traplogging(
        "L", Severity.ERROR, "ctx", divmod, 7, 2, registry=registry
    )
    assert result == (3, 1)


def test_traplogging_logs_once_and_reraises_same_error(registry, listener):
    error = ParseError("unexpected token")

    def action():
        raise error

    with pytest.raises(ParseError) as excinfo:
        traplogging("L", Severity.ERROR, "ctx", action, registry=registry)

    assert excinfo.value is error
    assert listener.records == [(Severity.ERROR, "ctx: ParseError: unexpected token")]


def test_traplogging_empty_prefix(registry, listener):
    def action():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        traplogging("L", Severity.CRITICAL, "", action, registry=registry)

    assert listener.records == [(Severity.CRITICAL, "RuntimeError: boom")]


def test_traplogging_respects_logger_threshold(registry, make_recorder):
    handler = make_recorder()
    registry.save(add_handler(handler, set_level(Severity.CRITICAL, registry.get("M"))))

    def action():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        traplogging("M", Severity.ERROR, "ctx", action, registry=registry)

    assert handler.records == []


def test_traplogging_uses_process_registry(global_registry, make_recorder):
    handler = make_recorder()
    global_registry.save(add_handler(handler, global_registry.get_root()))

    with pytest.raises(ZeroDivisionError):
        traplogging("calc", Severity.ERROR, "dividing", lambda: 1 / 0)

    assert handler.records == [
        (Severity.ERROR, "dividing: ZeroDivisionError: division by zero")
    ]


def test_trapped_decorator(registry, listener):
    @trapped("L", Severity.WARNING, "job", registry=registry)
    def job(value):
        if value < 0:
            raise ValueError("negative")
        return value + 1

    assert job(1) == 2
    assert job.__name__ == "job"
    with pytest.raises(ValueError, match="negative"):
        job(-1)
    assert listener.records == [(Severity.WARNING, "job: ValueError: negative")]


def test_traplogging_forwards_keywords_and_keeps_registry(registry, listener):
    from functools import partial

    seen = {}

    def action(*, registry, scale=1):
        seen["registry"] = registry
        return scale * 2

    result = traplogging(
        "L",
        Severity.ERROR,
        "ctx",
        partial(action, registry="target"),
        scale=5,
        registry=registry,
    )

    assert result == 10
    assert seen["registry"] == "target"
