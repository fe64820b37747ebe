"""Tests for the Logger call surface, child loggers and configuration."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from logcase import (
    ConsoleOutput,
    LogFormat,
    Logger,
    LoggerConfig,
    LoggerOptions,
    MemoryOutput,
    Severity,
    create_logger,
    get_default_logger,
    reset_default_logger,
    set_default_logger,
)


def _json_logger(out: MemoryOutput, **kw: object) -> Logger:
    return create_logger(format="json", output=out, timestamp=False, **kw)


def _parsed(out: MemoryOutput, i: int = 0) -> dict:
    return json.loads(out.messages[i])


# ═════════════════════════════════════════════════════════════════════════════
# Error Logging
# ═════════════════════════════════════════════════════════════════════════════


def test_error_object_as_message(out: MemoryOutput) -> None:
    """An exception in the message position supplies the text and the error."""
    _json_logger(out).error(RuntimeError("boom"))

    parsed = _parsed(out)
    assert parsed["message"] == "boom"
    assert parsed["error"]["name"] == "RuntimeError"
    assert parsed["error"]["message"] == "boom"
    assert isinstance(parsed["error"]["stack"], str) and parsed["error"]["stack"]


def test_error_as_second_argument(out: MemoryOutput) -> None:
    _json_logger(out).error("something failed", ValueError("test error"))

    parsed = _parsed(out)
    assert parsed["message"] == "something failed"
    assert "context" not in parsed
    assert parsed["error"] == {"name": "ValueError", "message": "test error", "stack": "ValueError: test error"}


def test_message_context_and_error(out: MemoryOutput) -> None:
    _json_logger(out).error("operation failed", {"operation": "save"}, OSError("nested error"))

    parsed = _parsed(out)
    assert parsed["message"] == "operation failed"
    assert parsed["context"] == {"operation": "save"}
    assert parsed["error"]["message"] == "nested error"


def test_raised_exception_stack_includes_traceback(out: MemoryOutput) -> None:
    log = _json_logger(out)
    try:
        raise ZeroDivisionError("division by zero")
    except ZeroDivisionError as e:
        log.error("math failed", e)

    stack = _parsed(out)["error"]["stack"]
    assert stack.startswith("Traceback (most recent call last):")
    assert stack.endswith("ZeroDivisionError: division by zero")


def test_exception_attaches_current_exception(out: MemoryOutput) -> None:
    log = _json_logger(out)
    try:
        {}["missing"]
    except KeyError:
        log.exception("lookup failed", {"key": "missing"})

    parsed = _parsed(out)
    assert parsed["level"] == "error"
    assert parsed["context"] == {"key": "missing"}
    assert parsed["error"]["name"] == "KeyError"


def test_error_args_accepted_at_every_severity(out: MemoryOutput) -> None:
    log = _json_logger(out, level="debug")
    log.debug("d", ValueError("x"))
    log.warn(ValueError("w"))

    assert _parsed(out, 0)["error"]["name"] == "ValueError"
    assert _parsed(out, 1)["message"] == "w"


def test_error_shaped_mapping_is_treated_as_error(out: MemoryOutput) -> None:
    _json_logger(out).error("failed", {"name": "HttpError", "message": "503", "stack": "at fetch()"})

    parsed = _parsed(out)
    assert "context" not in parsed
    assert parsed["error"] == {"name": "HttpError", "message": "503", "stack": "at fetch()"}


def test_odd_arguments_degrade_gracefully(out: MemoryOutput) -> None:
    log = _json_logger(out)
    log.info(404, "not-a-mapping", "not-an-error")

    assert _parsed(out) == {"level": "info", "message": "404"}


class _Unprintable(Exception):
    def __str__(self) -> str:
        raise RuntimeError("no str")


def test_error_with_broken_str(out: MemoryOutput) -> None:
    """An exception whose __str__ raises still logs."""
    log = _json_logger(out)
    log.error("m", _Unprintable())
    log.error(_Unprintable())

    first, second = _parsed(out, 0), _parsed(out, 1)
    assert first["message"] == "m"
    assert first["error"]["name"] == "_Unprintable"
    assert first["error"]["message"] == "<_Unprintable str() failed>"
    assert first["error"]["stack"]
    assert second["message"] == "<_Unprintable str() failed>"


def test_message_with_broken_str(out: MemoryOutput) -> None:
    class Opaque:
        def __str__(self) -> str:
            raise ValueError("no str")

    create_logger(output=out, timestamp=False).warn(Opaque())
    assert out.messages == ["WARN: <Opaque str() failed>"]


def test_keyword_fields_merge_into_context(out: MemoryOutput) -> None:
    _json_logger(out, context={"a": 1}).info("m", {"b": 2, "c": 3}, c=4)
    assert _parsed(out)["context"] == {"a": 1, "b": 2, "c": 4}


def test_keyword_error_argument(out: MemoryOutput) -> None:
    _json_logger(out).warn("retrying", error=TimeoutError("slow"), attempt=2)

    parsed = _parsed(out)
    assert parsed["context"] == {"attempt": 2}
    assert parsed["error"]["name"] == "TimeoutError"


def test_log_with_runtime_severity(out: MemoryOutput) -> None:
    _json_logger(out).log("warning", "w")
    assert out.at(Severity.WARN) and _parsed(out)["level"] == "warn"


def test_warning_alias(out: MemoryOutput) -> None:
    _json_logger(out).warning("careful")
    assert len(out.at("warn")) == 1


def test_output_failure_propagates() -> None:
    class BrokenOutput:
        def debug(self, message: str) -> None: raise BrokenPipeError
        def info(self, message: str) -> None: raise BrokenPipeError
        def warn(self, message: str) -> None: raise BrokenPipeError
        def error(self, message: str) -> None: raise BrokenPipeError

    log = create_logger(output=BrokenOutput())
    with pytest.raises(BrokenPipeError):
        log.info("lost")


# ═════════════════════════════════════════════════════════════════════════════
# Child Loggers
# ═════════════════════════════════════════════════════════════════════════════


def test_child_merges_context(out: MemoryOutput) -> None:
    parent = _json_logger(out, context={"service": "api"})
    parent.child({"requestId": "123"}).info("handling request")

    assert _parsed(out)["context"] == {"service": "api", "requestId": "123"}


def test_child_keys_override_parent(out: MemoryOutput) -> None:
    parent = _json_logger(out, context={"a": 1, "b": 1})
    parent.child({"b": 2}, c=3).info("m")
    assert _parsed(out)["context"] == {"a": 1, "b": 2, "c": 3}


def test_child_does_not_affect_parent(out: MemoryOutput) -> None:
    parent = _json_logger(out, context={"a": 1})
    child = parent.child({"b": 2})

    child.info("child log")
    parent.info("parent log")

    assert _parsed(out, 0)["context"] == {"a": 1, "b": 2}
    assert _parsed(out, 1)["context"] == {"a": 1}


def test_parent_configure_does_not_alter_child(out: MemoryOutput) -> None:
    parent = _json_logger(out, context={"a": 1})
    child = parent.child({"b": 2})

    parent.configure(context={"a": 99, "z": 0}, format="text")
    child.info("m")

    assert _parsed(out)["context"] == {"a": 1, "b": 2}


def test_child_configure_does_not_alter_parent(out: MemoryOutput) -> None:
    parent = _json_logger(out, context={"a": 1})
    child = parent.child({"b": 2})

    child.configure(context={"c": 3}, level="error")
    parent.info("m")

    assert _parsed(out)["context"] == {"a": 1}
    assert parent.get_level() is Severity.INFO


def test_child_inherits_and_snapshots_level(out: MemoryOutput) -> None:
    parent = create_logger(level="warn", output=out, timestamp=False)
    child = parent.child({"requestId": "123"})

    child.info("should not appear")
    child.warn("should appear")
    assert out.messages == ['WARN: should appear {"requestId":"123"}']

    parent.set_level("debug")
    assert child.get_level() is Severity.WARN


def test_child_inherits_scalar_config(out: MemoryOutput) -> None:
    parent = create_logger(format="json", output=out, timestamp=False, service="svc")
    child = parent.child()

    assert child.format is LogFormat.JSON
    assert child.service == "svc"
    assert child.output is out


def test_caller_dicts_are_not_aliased(out: MemoryOutput) -> None:
    ctx = {"a": 1}
    log = _json_logger(out, context=ctx)
    extra = {"b": 2}
    child = log.child(extra)

    ctx["leak"] = True
    extra["leak"] = True
    log.context["leak"] = True
    child.info("m")

    assert _parsed(out)["context"] == {"a": 1, "b": 2}


# ═════════════════════════════════════════════════════════════════════════════
# Configure
# ═════════════════════════════════════════════════════════════════════════════


def test_configure_updates_at_runtime(out: MemoryOutput) -> None:
    log = create_logger(level="info", format="text", output=out, timestamp=False)
    log.configure(format="json", level="debug")
    log.debug("test message")

    assert _parsed(out)["level"] == "debug"


def test_configure_merges_context(out: MemoryOutput) -> None:
    log = _json_logger(out, context={"env": "test"})
    log.configure(context={"version": "1.0"})
    log.info("test")

    assert _parsed(out)["context"] == {"env": "test", "version": "1.0"}


def test_configure_accepts_options_record(out: MemoryOutput) -> None:
    log = _json_logger(out)
    log.configure(LoggerOptions(service="billing"), timestamp=False)
    log.info("m")

    assert _parsed(out)["service"] == "billing"


def test_configure_none_means_not_given(out: MemoryOutput) -> None:
    log = _json_logger(out, level="warn", service="svc")
    log.configure({"level": None, "service": None})

    assert log.get_level() is Severity.WARN
    assert log.service == "svc"


def test_configure_swaps_output() -> None:
    first, second = MemoryOutput(), MemoryOutput()
    log = create_logger(output=first, timestamp=False)
    log.configure(output=second)
    log.info("m")

    assert len(first) == 0 and second.messages == ["INFO: m"]


def test_configure_rejects_unknown_options() -> None:
    log = create_logger()
    with pytest.raises(ValidationError):
        log.configure(colour=True)
    with pytest.raises(ValidationError):
        log.configure(format="xml")


def test_configure_accepts_nested_json_context(out: MemoryOutput) -> None:
    log = _json_logger(out)
    log.configure(context={"tags": ["a", 1, 2.5, True, None], "meta": {"deep": {"k": "v"}}})
    log.info("m")

    assert _parsed(out)["context"] == {"tags": ["a", 1, 2.5, True, None], "meta": {"deep": {"k": "v"}}}


def test_configure_rejects_non_json_context() -> None:
    log = create_logger(context={"a": 1})
    with pytest.raises(ValidationError):
        log.configure(context={"obj": object()})
    with pytest.raises(ValidationError):
        create_logger(context={"nested": {"obj": object()}})
    assert log.context == {"a": 1}


# ═════════════════════════════════════════════════════════════════════════════
# Factory & Default Logger
# ═════════════════════════════════════════════════════════════════════════════


def test_create_logger_defaults() -> None:
    log = create_logger()
    cfg = log.config

    assert isinstance(log, Logger)
    assert cfg.level is Severity.INFO
    assert cfg.format is LogFormat.TEXT
    assert cfg.timestamp is True
    assert cfg.service is None
    assert cfg.context == {}
    assert isinstance(cfg.output, ConsoleOutput)


def test_create_logger_custom() -> None:
    log = create_logger(level="debug", format="json", service="test-service")
    assert log.get_level() is Severity.DEBUG
    assert log.is_debug_enabled()


def test_logger_from_config_copies_it(out: MemoryOutput) -> None:
    cfg = LoggerConfig(output=out, timestamp=False, context={"a": 1})
    log = Logger(cfg, level="debug")
    cfg.context["b"] = 2
    log.debug("m")

    assert out.messages == ['DEBUG: m {"a":1}']
    assert cfg.level is Severity.INFO


def test_default_logger_is_cached_and_replaceable(out: MemoryOutput) -> None:
    default = get_default_logger()
    assert isinstance(default, Logger)
    assert default.get_level() is Severity.INFO
    assert get_default_logger() is default

    mine = create_logger(output=out)
    set_default_logger(mine)
    assert get_default_logger() is mine

    reset_default_logger()
    assert get_default_logger() is not mine


def test_default_logger_writes_to_console(capsys: pytest.CaptureFixture[str]) -> None:
    log = get_default_logger()
    log.configure(timestamp=False)
    log.info("hello")
    log.error("bad")

    captured = capsys.readouterr()
    assert captured.out == "INFO: hello\n"
    assert captured.err == "ERROR: bad\n"
