"""Structured logger with severity gating, text/JSON rendering and child context.

Quick Start:
    >>> from logcase import create_logger
    >>>
    >>> log = create_logger(service="api", format="json")
    >>> log.info("processing request", {"user_id": 123})
    >>>
    >>> # Child loggers carry merged context, isolated from the parent
    >>> req = log.child({"request_id": "abc123"})
    >>> req.warn("slow upstream", latency_ms=812)
    >>>
    >>> # Errors go in any position
    >>> log.error(exc)
    >>> log.error("save failed", {"op": "save"}, exc)

Per call: level gate -> argument classification -> context merge
(persistent, then per-call mapping, then keyword fields) -> render ->
`output.<severity>(line)`. Suppressed calls return before any of the
rendering work happens.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import Any

from ..foundation.config import LogcaseSettings, get_settings
from ..foundation.types import JsonDict, JsonValue, LogFormat, Severity, should_log
from .classify import resolve_call
from .config import LoggerConfig, LoggerOptions
from .output import LogOutput
from .render import LogRecord, get_renderer, now


class Logger:
    """Logger owning one LoggerConfig.

    Configuration is mutable through `configure`/`set_level`. Children copy
    the configuration by value at creation and never observe later changes
    to the parent (nor the parent to them).
    """

    __slots__ = ("_config",)

    def __init__(self, config: LoggerConfig | None = None, /, **options: Any) -> None:
        base = config.snapshot() if config is not None else LoggerConfig()
        self._config = base.merged(LoggerOptions.coerce(**options)) if options else base

    @classmethod
    def from_settings(cls, settings: LogcaseSettings | None = None, /, **options: Any) -> Logger:
        """Build from environment settings; explicit options override them."""
        settings = settings or get_settings()
        return cls(**{**settings.to_options(), **options})

    # ─────────────────────────────────────────────────────────────────────────
    # Logging
    # ─────────────────────────────────────────────────────────────────────────

    def _log(self, severity: Severity, message: object, second: object, error: object,
             fields: Mapping[str, JsonValue]) -> None:
        cfg = self._config
        if not should_log(severity, cfg.level):
            return
        call = resolve_call(message, second, error)
        record = LogRecord(
            severity=severity,
            message=call.message,
            context={**cfg.context, **call.context, **fields},
            error=call.error,
            timestamp=now() if cfg.timestamp else None,
            service=cfg.service,
        )
        line = get_renderer(cfg.format).render(record)
        getattr(cfg.output, severity.value)(line)

    def debug(self, message: object, context: object = None, error: object = None, **fields: JsonValue) -> None:
        self._log(Severity.DEBUG, message, context, error, fields)

    def info(self, message: object, context: object = None, error: object = None, **fields: JsonValue) -> None:
        self._log(Severity.INFO, message, context, error, fields)

    def warn(self, message: object, context: object = None, error: object = None, **fields: JsonValue) -> None:
        self._log(Severity.WARN, message, context, error, fields)

    warning = warn

    def error(self, message: object, context: object = None, error: object = None, **fields: JsonValue) -> None:
        """Log at error severity.

        `message` may be an exception (its text becomes the message and it is
        attached as the error). `context` may itself be an exception, in which
        case it is treated as the error rather than as context.
        """
        self._log(Severity.ERROR, message, context, error, fields)

    def exception(self, message: object, context: object = None, **fields: JsonValue) -> None:
        """Log at error severity with the exception currently being handled."""
        self._log(Severity.ERROR, message, context, sys.exc_info()[1], fields)

    def log(self, severity: Severity | str, message: object, context: object = None, error: object = None,
            **fields: JsonValue) -> None:
        """Log at a severity chosen at runtime."""
        self._log(Severity.parse(severity), message, context, error, fields)

    # ─────────────────────────────────────────────────────────────────────────
    # Context & Configuration
    # ─────────────────────────────────────────────────────────────────────────

    def child(self, context: Mapping[str, JsonValue] | None = None, /, **fields: JsonValue) -> Logger:
        """Create a logger whose context is this one's merged with `context` (child wins)."""
        return Logger(self._config.snapshot({**(context or {}), **fields}))

    def configure(self, options: LoggerOptions | Mapping[str, Any] | None = None, /, **kw: Any) -> None:
        """Update configuration in place. Context is merged, never replaced."""
        self._config = self._config.merged(LoggerOptions.coerce(options, **kw))

    @property
    def config(self) -> LoggerConfig:
        """Copy of the current configuration."""
        return self._config.snapshot()

    @property
    def context(self) -> JsonDict:
        """Copy of the persistent context."""
        return dict(self._config.context)

    @property
    def format(self) -> LogFormat:
        return self._config.format

    @property
    def service(self) -> str | None:
        return self._config.service

    @property
    def output(self) -> LogOutput:
        return self._config.output

    # ─────────────────────────────────────────────────────────────────────────
    # Level Gate
    # ─────────────────────────────────────────────────────────────────────────

    def get_level(self) -> Severity:
        return self._config.level

    def set_level(self, level: Severity | str) -> None:
        """Takes effect immediately for this logger only."""
        self._config.level = level  # type: ignore[assignment]  # validated on assignment

    level = property(get_level, set_level)

    def is_enabled_for(self, severity: Severity | str) -> bool:
        return should_log(Severity.parse(severity), self._config.level)

    def is_debug_enabled(self) -> bool: return should_log(Severity.DEBUG, self._config.level)
    def is_info_enabled(self) -> bool: return should_log(Severity.INFO, self._config.level)
    def is_warn_enabled(self) -> bool: return should_log(Severity.WARN, self._config.level)
    def is_error_enabled(self) -> bool: return should_log(Severity.ERROR, self._config.level)

    def __repr__(self) -> str:
        cfg = self._config
        svc = f", service={cfg.service!r}" if cfg.service else ""
        return f"Logger(level={cfg.level.value!r}, format={cfg.format.value!r}{svc}, context={cfg.context!r})"


def create_logger(options: LoggerOptions | Mapping[str, Any] | None = None, /, **kw: Any) -> Logger:
    """Create a logger from an options record and/or keyword options.

    Example:
        >>> log = create_logger(level="debug", format="json", service="auth-service")
        >>> log.is_debug_enabled()
        True
    """
    opts = LoggerOptions.coerce(options, **kw)
    return Logger(LoggerConfig().merged(opts))


# ─────────────────────────────────────────────────────────────────────────────
# Default Logger
# ─────────────────────────────────────────────────────────────────────────────

_default: Logger | None = None


def get_default_logger() -> Logger:
    """Get the default logger (built from LOGCASE_* settings on first use)."""
    global _default
    if _default is None:
        _default = Logger.from_settings()
    return _default


def set_default_logger(logger: Logger) -> None:
    """Install an application-owned logger as the default."""
    global _default
    _default = logger


def reset_default_logger() -> None:
    """Drop the default logger (useful for testing)."""
    global _default
    _default = None
