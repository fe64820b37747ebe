"""Renderers: turn a LogRecord into the final output line.

Two pipelines, selected by LogFormat:
- TextRenderer: `[ts] [service] LEVEL: message {"k":"v"} Name: msg\\nstack`
- JsonRenderer: `{"level":..,"message":..,"timestamp":..,"service":..,"context":{..},"error":{..}}`

Neither appends a trailing newline; the output decides line termination.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol, runtime_checkable

import orjson

from ..foundation.errors import ErrorInfo, safe_str
from ..foundation.types import JsonDict, LogFormat, Severity


@dataclass(slots=True)
class LogRecord:
    """Ephemeral record for a single logging call."""

    severity: Severity
    message: str
    context: JsonDict
    error: ErrorInfo | None = None
    timestamp: datetime | None = None
    service: str | None = None

    @property
    def ts_iso(self) -> str | None:
        """ISO-8601 UTC timestamp with milliseconds, e.g. 2024-01-01T00:00:00.000Z."""
        if self.timestamp is None:
            return None
        return self.timestamp.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now() -> datetime:
    """Current instant (UTC). Module-level so tests can pin the clock."""
    return datetime.now(UTC)


_INT_MIN, _INT_MAX = -(2**63), 2**64 - 1  # orjson integer range


def dumps(value: object) -> str:
    """Compact JSON. Non-native values fall back to str().

    orjson rejects ints outside 64 bits and strings with lone surrogates
    before `default` is consulted; those are re-encoded and retried.
    """
    try:
        return orjson.dumps(value, default=_fallback, option=orjson.OPT_NON_STR_KEYS).decode()
    except orjson.JSONEncodeError:
        return orjson.dumps(_sanitize(value, set()), default=_fallback, option=orjson.OPT_NON_STR_KEYS).decode()


def _clean(text: str) -> str:
    """Replace lone surrogates with backslash escapes."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def _fallback(value: object) -> str:
    return _clean(safe_str(value))


def _sanitize(value: object, path: set[int]) -> object:
    """Copy with out-of-range ints and all keys as strings, surrogates escaped, cycles cut."""
    match value:
        case str():
            return _clean(value)
        case bool() | float() | None:
            return value
        case int():
            return value if _INT_MIN <= value <= _INT_MAX else str(value)
        case dict() | list() | tuple():
            if id(value) in path:
                return "<cycle>"
            path.add(id(value))
            try:
                if isinstance(value, dict):
                    return {_fallback(k): _sanitize(v, path) for k, v in value.items()}
                return [_sanitize(v, path) for v in value]
            finally:
                path.discard(id(value))
        case _:
            return _fallback(value)


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    """Protocol for record renderers."""

    def render(self, record: LogRecord) -> str: ...


@dataclass(slots=True, frozen=True)
class TextRenderer:
    """Human-readable single entry (multi-line only when a stack is attached)."""

    def render(self, record: LogRecord) -> str:
        parts = [f"[{ts}] " if (ts := record.ts_iso) else "",
                 f"[{record.service}] " if record.service else "",
                 f"{record.severity.value.upper()}: {record.message}"]
        if record.context:
            parts.append(f" {dumps(record.context)}")
        if (err := record.error) is not None:
            parts.append(f" {err.name}: {err.message}")
            if err.stack:
                parts.append(f"\n{err.stack}")
        return "".join(parts)


@dataclass(slots=True, frozen=True)
class JsonRenderer:
    """Single-line JSON object for log aggregation."""

    def render(self, record: LogRecord) -> str:
        data: JsonDict = {"level": record.severity.value, "message": record.message}
        if (ts := record.ts_iso) is not None:
            data["timestamp"] = ts
        if record.service:
            data["service"] = record.service
        if record.context:
            data["context"] = record.context
        if record.error is not None:
            data["error"] = record.error.to_dict()
        return dumps(data)


_RENDERERS: dict[LogFormat, LogRenderer] = {LogFormat.TEXT: TextRenderer(), LogFormat.JSON: JsonRenderer()}


def get_renderer(format: LogFormat | str) -> LogRenderer:  # noqa: A002 - matches the config option name
    """Shared renderer instance for a format."""
    try:
        return _RENDERERS[LogFormat(format)]
    except ValueError:
        raise ValueError(f"Unknown format: {format}. Use 'text' or 'json'") from None
