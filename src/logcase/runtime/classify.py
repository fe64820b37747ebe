"""Call-argument classification.

Logging methods accept `(message, context_or_error, error)`. The shape of
the first two positions is resolved once per call into tagged variants:

    message:  PlainMessage | ErrorAsMessage
    second:   ContextArg | ErrorArg | Absent

The classifiers are pure and never raise.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from ..foundation.errors import ErrorInfo, is_error_like, safe_str, to_error_info
from ..foundation.types import JsonDict


@dataclass(frozen=True, slots=True)
class PlainMessage:
    text: str


@dataclass(frozen=True, slots=True)
class ErrorAsMessage:
    error: ErrorInfo

    @property
    def text(self) -> str:
        return self.error.message


MessageInput: TypeAlias = PlainMessage | ErrorAsMessage


@dataclass(frozen=True, slots=True)
class ContextArg:
    context: JsonDict


@dataclass(frozen=True, slots=True)
class ErrorArg:
    error: ErrorInfo


@dataclass(frozen=True, slots=True)
class Absent:
    pass


SecondArg: TypeAlias = ContextArg | ErrorArg | Absent

_ABSENT = Absent()


@dataclass(frozen=True, slots=True)
class ResolvedCall:
    """Message text, per-call context and error for one logging call."""

    message: str
    context: JsonDict
    error: ErrorInfo | None


def classify_message(value: object) -> MessageInput:
    """Error values become ErrorAsMessage; anything else is stringified."""
    if isinstance(value, str):
        return PlainMessage(value)
    if is_error_like(value):
        return ErrorAsMessage(to_error_info(value))
    return PlainMessage(safe_str(value))


def classify_second(value: object) -> SecondArg:
    """Error-shaped values are the error; mappings are context; the rest is dropped."""
    if value is None:
        return _ABSENT
    if is_error_like(value):
        return ErrorArg(to_error_info(value))
    if isinstance(value, Mapping):
        return ContextArg(dict(value)) if value else _ABSENT
    return _ABSENT


def resolve_call(message: object, second: object = None, error: object = None) -> ResolvedCall:
    """Combine the classified arguments.

    Error precedence: an error in the second position, then the explicit
    `error` argument, then an error passed as the message.
    """
    msg = classify_message(message)
    explicit = to_error_info(error) if error is not None and is_error_like(error) else None
    match classify_second(second):
        case ErrorArg(error=err):
            return ResolvedCall(msg.text, {}, err)
        case ContextArg(context=ctx):
            context = ctx
        case Absent():
            context = {}
    match msg:
        case ErrorAsMessage(error=err):
            return ResolvedCall(msg.text, context, explicit or err)
        case PlainMessage(text=text):
            return ResolvedCall(text, context, explicit)
