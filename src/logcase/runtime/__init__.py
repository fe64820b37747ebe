"""Runtime: argument classification, rendering, outputs and the logger."""

from .classify import (
    Absent,
    ContextArg,
    ErrorArg,
    ErrorAsMessage,
    MessageInput,
    PlainMessage,
    ResolvedCall,
    SecondArg,
    classify_message,
    classify_second,
    resolve_call,
)
from .config import LoggerConfig, LoggerOptions
from .logger import Logger, create_logger, get_default_logger, reset_default_logger, set_default_logger
from .output import ConsoleOutput, LogOutput, MemoryOutput, NullOutput, StdlibOutput, StreamOutput
from .render import JsonRenderer, LogRecord, LogRenderer, TextRenderer, get_renderer

__all__ = [
    # Logger
    "Logger", "create_logger", "get_default_logger", "set_default_logger", "reset_default_logger",
    # Config
    "LoggerConfig", "LoggerOptions",
    # Outputs
    "LogOutput", "ConsoleOutput", "StreamOutput", "MemoryOutput", "NullOutput", "StdlibOutput",
    # Rendering
    "LogRecord", "LogRenderer", "TextRenderer", "JsonRenderer", "get_renderer",
    # Classification
    "MessageInput", "PlainMessage", "ErrorAsMessage", "SecondArg", "ContextArg", "ErrorArg", "Absent",
    "ResolvedCall", "classify_message", "classify_second", "resolve_call",
]
