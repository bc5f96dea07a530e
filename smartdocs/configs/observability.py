"""
Observability configuration settings.

Settings for logging and request correlation.

Dependencies: pydantic_settings
System role: Observability configuration for logging
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from smartdocs.configs.base import settings_config


class ObservabilitySettings(BaseSettings):
    """Logging and correlation configuration."""

    model_config = settings_config("OBSERVABILITY_")

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    correlation_header: str = Field(
        default="X-Correlation-ID",
        description="HTTP header carrying the request correlation ID",
    )
    log_requests: bool = Field(
        default=True,
        description="Log every HTTP request with timing",
    )
