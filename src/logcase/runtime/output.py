"""Output capabilities: where rendered log lines go.

An output exposes one method per severity, each taking the final rendered
string. The logger calls it synchronously and does not catch its failures.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Protocol, TextIO, runtime_checkable

from ..foundation.types import Severity


@runtime_checkable
class LogOutput(Protocol):
    """Protocol for log destinations."""

    def debug(self, message: str) -> None: ...
    def info(self, message: str) -> None: ...
    def warn(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...


class ConsoleOutput:
    """Default sink: error to stderr, everything else to stdout.

    Streams are looked up at write time so redirected/captured
    sys.stdout and sys.stderr are honored.
    """

    __slots__ = ()

    def debug(self, message: str) -> None: print(message, file=sys.stdout)
    def info(self, message: str) -> None: print(message, file=sys.stdout)
    def warn(self, message: str) -> None: print(message, file=sys.stdout)
    def error(self, message: str) -> None: print(message, file=sys.stderr)

    def __repr__(self) -> str:
        return "ConsoleOutput()"


@dataclass(slots=True)
class StreamOutput:
    """Every severity to a single text stream, one line per call."""

    stream: TextIO

    def _write(self, message: str) -> None:
        self.stream.write(message + "\n")

    def debug(self, message: str) -> None: self._write(message)
    def info(self, message: str) -> None: self._write(message)
    def warn(self, message: str) -> None: self._write(message)
    def error(self, message: str) -> None: self._write(message)


@dataclass(slots=True)
class MemoryOutput:
    """Collects (severity, message) pairs in memory.

    Example:
        >>> out = MemoryOutput()
        >>> create_logger(output=out, timestamp=False).info("ready")
        >>> out.messages
        ['INFO: ready']
    """

    records: list[tuple[Severity, str]] = field(default_factory=list)

    def debug(self, message: str) -> None: self.records.append((Severity.DEBUG, message))
    def info(self, message: str) -> None: self.records.append((Severity.INFO, message))
    def warn(self, message: str) -> None: self.records.append((Severity.WARN, message))
    def error(self, message: str) -> None: self.records.append((Severity.ERROR, message))

    @property
    def messages(self) -> list[str]:
        return [m for _, m in self.records]

    def at(self, severity: Severity | str) -> list[str]:
        """Messages written at one severity."""
        sev = Severity.parse(severity)
        return [m for s, m in self.records if s is sev]

    def clear(self) -> None:
        self.records.clear()

    def __len__(self) -> int:
        return len(self.records)


class NullOutput:
    """Silent sink."""

    __slots__ = ()

    def debug(self, message: str) -> None: pass
    def info(self, message: str) -> None: pass
    def warn(self, message: str) -> None: pass
    def error(self, message: str) -> None: pass


_STDLIB_LEVELS = {
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


@dataclass(slots=True)
class StdlibOutput:
    """Forward rendered lines to a stdlib logging.Logger at the matching level.

    Lets an application keep its existing handlers while formatting
    happens here. Pair with a bare "%(message)s" formatter to avoid
    double prefixes.

    Example:
        >>> log = create_logger(output=StdlibOutput(logging.getLogger("app")), format="json")
    """

    log: logging.Logger = field(default_factory=lambda: logging.getLogger("logcase"))

    def _emit(self, severity: Severity, message: str) -> None:
        self.log.log(_STDLIB_LEVELS[severity], message)

    def debug(self, message: str) -> None: self._emit(Severity.DEBUG, message)
    def info(self, message: str) -> None: self._emit(Severity.INFO, message)
    def warn(self, message: str) -> None: self._emit(Severity.WARN, message)
    def error(self, message: str) -> None: self._emit(Severity.ERROR, message)
