"""
Logging utilities for safe structured logging.

Context values are rendered to short strings before they reach a handler,
so chunk text and raw blob bytes never end up in logs in full.

Dependencies: logging (stdlib), smartdocs.observability.correlation
System role: Logging helper functions
"""

import logging
from enum import Enum
from typing import Any

from smartdocs.observability.correlation import get_correlation_id

# LogRecord attributes that cannot be passed through `extra`.
_RESERVED = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Convert any value to a bounded string for logging.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    if value is None:
        return "None"
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, (bytes, bytearray)):
        return f"bytes({len(value)})"
    if isinstance(value, (list, tuple, set)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"

    try:
        text = str(value)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"

    if len(text) > max_length:
        return text[:max_length] + f"... (truncated, {len(text)} total)"
    return text


def _context_extra(context: dict[str, Any]) -> dict[str, str]:
    extra = {
        (f"ctx_{key}" if key in _RESERVED else key): safe_log_value(val)
        for key, val in context.items()
    }
    correlation_id = get_correlation_id()
    if correlation_id:
        extra.setdefault("correlation_id", correlation_id)
    return extra


def _format_context(extra: dict[str, str]) -> str:
    pairs = [f"{k}={v}" for k, v in extra.items() if k != "correlation_id"]
    return f" ({', '.join(pairs)})" if pairs else ""


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Context is attached to the record as attributes and appended to the
    message as key=value pairs.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Arbitrary key-value pairs
    """
    if not logger.isEnabledFor(level):
        return
    extra = _context_extra(context)
    logger.log(level, f"{message}{_format_context(extra)}", extra=extra)


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log an exception with full context and traceback.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional key-value pairs
    """
    extra = _context_extra(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(exc)
    logger.error(f"{message}{_format_context(extra)}", extra=extra, exc_info=exc)
