"""Core value types: JSON aliases, severities, output formats and the level gate."""

from __future__ import annotations

from enum import StrEnum
from typing import Self, Union

from typing_extensions import TypeAliasType

# ═══════════════════════════════════════════════════════════════════════════════
# Type Aliases
# ═══════════════════════════════════════════════════════════════════════════════

# Closed recursive JSON type; pydantic validates it at config boundaries
JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = TypeAliasType(
    "JsonValue",
    Union[dict[str, "JsonValue"], list["JsonValue"], str, int, float, bool, None],
)
JsonDict = dict[str, JsonValue]

# ═══════════════════════════════════════════════════════════════════════════════
# Severity & Format
# ═══════════════════════════════════════════════════════════════════════════════

_ALIASES = {"warning": "warn"}


class Severity(StrEnum):
    """Log severity, ordered debug < info < warn < error.

    Values serialize as lowercase strings. Ordering goes through `rank`
    since StrEnum comparison is plain string comparison.
    """

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @classmethod
    def parse(cls, value: str | Self) -> Self:
        """Parse case-insensitively; accepts the stdlib spelling 'warning'."""
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        try:
            return cls(_ALIASES.get(name, name))
        except ValueError:
            raise ValueError(f"Unknown severity: {value!r}. Use 'debug', 'info', 'warn' or 'error'") from None


_RANKS: dict[Severity, int] = {s: i for i, s in enumerate(Severity)}


class LogFormat(StrEnum):
    """Rendering pipeline selector."""

    TEXT = "text"
    JSON = "json"


def should_log(severity: Severity, threshold: Severity) -> bool:
    """True iff a message at `severity` passes a gate set to `threshold`."""
    return severity.rank >= threshold.rank
