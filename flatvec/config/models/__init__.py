"""Configuration models for each settings section."""

from flatvec.config.models.observability import (
    LogFormat,
    LoggingConfig,
    LogLevel,
    ObservabilityConfig,
)
from flatvec.config.models.search import SearchConfig

__all__ = [
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ObservabilityConfig",
    "SearchConfig",
]
