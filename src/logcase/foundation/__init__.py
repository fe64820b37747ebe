"""Foundation: value types, error normalization and environment settings."""

from .config import LogcaseSettings, clear_settings_cache, get_settings
from .errors import ErrorInfo, is_error_like, safe_str, to_error_info
from .types import JsonDict, JsonPrimitive, JsonValue, LogFormat, Severity, should_log

__all__ = [
    # Types
    "JsonDict", "JsonPrimitive", "JsonValue", "LogFormat", "Severity", "should_log",
    # Errors
    "ErrorInfo", "is_error_like", "safe_str", "to_error_info",
    # Settings
    "LogcaseSettings", "clear_settings_cache", "get_settings",
]
