"""Logger configuration models.

LoggerConfig is the full value owned by one logger. LoggerOptions is the
partial record accepted at construction and by `Logger.configure`; a field
left as None counts as "not given".
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from ..foundation.types import JsonDict, LogFormat, Severity
from .output import ConsoleOutput, LogOutput


def _parse_level(v: object) -> object:
    return Severity.parse(v) if isinstance(v, str) else v  # type: ignore[arg-type]


def _parse_format(v: object) -> object:
    return v.strip().lower() if isinstance(v, str) else v


Level = Annotated[Severity, BeforeValidator(_parse_level)]
Format = Annotated[LogFormat, BeforeValidator(_parse_format)]


class LoggerConfig(BaseModel):
    """Complete configuration of a single logger."""

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True, extra="forbid")

    level: Level = Severity.INFO
    format: Format = LogFormat.TEXT
    timestamp: bool = True
    service: str | None = None
    context: JsonDict = Field(default_factory=dict)
    output: LogOutput = Field(default_factory=ConsoleOutput)

    def merged(self, options: LoggerOptions) -> LoggerConfig:
        """New config with scalar options replaced and context merged."""
        updates = options.model_dump(exclude_none=True, exclude={"context", "output"})
        if options.output is not None:
            updates["output"] = options.output
        updates["context"] = {**self.context, **(options.context or {})}
        return self.model_copy(update=updates)

    def snapshot(self, extra_context: Mapping[str, Any] | None = None) -> LoggerConfig:
        """Copy by value with a fresh context dict (for child loggers)."""
        return self.model_copy(update={"context": {**self.context, **(extra_context or {})}})


class LoggerOptions(BaseModel):
    """Partial logger configuration; unknown option names are rejected."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    level: Level | None = None
    format: Format | None = None
    timestamp: bool | None = None
    service: str | None = None
    context: JsonDict | None = None
    output: LogOutput | None = None

    @classmethod
    def coerce(cls, options: LoggerOptions | Mapping[str, Any] | None = None, **kw: Any) -> LoggerOptions:
        """Accept an options model, a mapping, keywords, or a mix (keywords win)."""
        match options:
            case None:
                base: dict[str, Any] = {}
            case LoggerOptions():
                base = options.model_dump(exclude_none=True, exclude={"output"})
                if options.output is not None:
                    base["output"] = options.output
            case _:
                base = dict(options)
        return cls.model_validate({**base, **kw})
