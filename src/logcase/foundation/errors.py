"""Error normalization for log records.

Any error value - a raised or unraised exception, an ErrorInfo, or a foreign
object/mapping carrying name, message and stack - is normalized into an
ErrorInfo before rendering. Normalization never raises.
"""

from __future__ import annotations

import traceback
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from .types import JsonDict

_ERROR_FIELDS = ("name", "message", "stack")


def safe_str(value: object) -> str:
    """str() that never raises; mirrors traceback's placeholder for broken __str__."""
    try:
        return str(value)
    except Exception:
        return f"<{type(value).__name__} str() failed>"


class ErrorInfo(BaseModel):
    """Serializable error record attached to a log entry."""

    model_config = ConfigDict(frozen=True, extra="forbid", revalidate_instances="never")

    name: str
    message: str
    stack: str = Field(default="", repr=False)  # Often verbose, hide from repr

    @classmethod
    def from_exception(cls, exc: BaseException) -> ErrorInfo:
        """Build from an exception. Unraised exceptions get a one-line stack."""
        stack = "".join(traceback.format_exception(exc)).rstrip("\n")
        return cls.model_construct(name=type(exc).__name__, message=safe_str(exc), stack=stack)

    def to_dict(self) -> JsonDict:
        return {"name": self.name, "message": self.message, "stack": self.stack}


def is_error_like(value: object) -> bool:
    """True for exceptions, ErrorInfo, and anything exposing name+message+stack."""
    match value:
        case BaseException() | ErrorInfo():
            return True
        case str() | bytes() | None:
            return False
        case Mapping():
            return all(k in value for k in _ERROR_FIELDS)
        case _:
            return all(hasattr(value, k) for k in _ERROR_FIELDS)


def to_error_info(value: object) -> ErrorInfo:
    """Normalize an error-like value. Call only after `is_error_like` accepted it."""
    match value:
        case ErrorInfo():
            return value
        case BaseException():
            return ErrorInfo.from_exception(value)
        case Mapping():
            name, message, stack = (value.get(k) for k in _ERROR_FIELDS)
        case _:
            name, message, stack = (getattr(value, k, None) for k in _ERROR_FIELDS)
    return ErrorInfo.model_construct(
        name=safe_str(name) if name is not None else "Error",
        message=safe_str(message) if message is not None else "",
        stack=safe_str(stack) if stack else "",
    )
