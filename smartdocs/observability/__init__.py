"""
Observability module.

Provides structured logging and correlation ID tracking.
"""

from smartdocs.observability.correlation import (
    CorrelationIdFilter,
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from smartdocs.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from smartdocs.observability.logger import configure_logging, get_logger

__all__ = [
    "CorrelationIdFilter",
    "clear_correlation_id",
    "configure_logging",
    "get_correlation_id",
    "get_logger",
    "log_exception_with_context",
    "log_with_context",
    "safe_log_value",
    "set_correlation_id",
]
