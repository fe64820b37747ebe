"""Logcase - structured logging with severity gating, text/JSON output and child context.

Quick Start:
    >>> from logcase import create_logger
    >>>
    >>> log = create_logger(level="debug", format="json", service="billing")
    >>> log.info("invoice created", {"invoice_id": 42})
    # => {"level":"info","message":"invoice created","timestamp":"...","service":"billing","context":{"invoice_id":42}}

Child Loggers:
    >>> req = log.child({"request_id": "abc123"})
    >>> req.warn("retrying")  # context includes request_id; log's does not

Errors:
    >>> try:
    ...     charge()
    ... except PaymentError as e:
    ...     log.error("charge failed", {"invoice_id": 42}, e)

Outputs:
    >>> from logcase import MemoryOutput, StdlibOutput
    >>> log = create_logger(output=MemoryOutput())
    >>> log = create_logger(output=StdlibOutput(logging.getLogger("app")))

Default Logger (configured from LOGCASE_* environment variables):
    >>> from logcase import get_default_logger, set_default_logger
    >>> get_default_logger().info("started")
"""

from __future__ import annotations

__version__ = "0.1.0"

# Foundation
from .foundation import (
    ErrorInfo,
    JsonDict,
    JsonValue,
    LogcaseSettings,
    LogFormat,
    Severity,
    clear_settings_cache,
    get_settings,
    should_log,
)

# Runtime
from .runtime import (
    ConsoleOutput,
    JsonRenderer,
    Logger,
    LoggerConfig,
    LoggerOptions,
    LogOutput,
    LogRecord,
    LogRenderer,
    MemoryOutput,
    NullOutput,
    StdlibOutput,
    StreamOutput,
    TextRenderer,
    create_logger,
    get_default_logger,
    get_renderer,
    reset_default_logger,
    set_default_logger,
)

__all__ = [
    "__version__",
    # Logger
    "Logger", "create_logger", "get_default_logger", "set_default_logger", "reset_default_logger",
    # Config
    "LoggerConfig", "LoggerOptions", "LogcaseSettings", "get_settings", "clear_settings_cache",
    # Types
    "Severity", "LogFormat", "JsonValue", "JsonDict", "ErrorInfo", "should_log",
    # Outputs
    "LogOutput", "ConsoleOutput", "StreamOutput", "MemoryOutput", "NullOutput", "StdlibOutput",
    # Rendering
    "LogRecord", "LogRenderer", "TextRenderer", "JsonRenderer", "get_renderer",
]
