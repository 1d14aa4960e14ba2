"""Core infrastructure for retried."""

from .config import (
    DEFAULT_JITTER_MAX,
    GlobalConfig,
    configure_logging,
    get_config,
    reload_config,
)
from .exceptions import ConfigurationError, RetriedError
from .models import RetryConfig, RetryOptions, resolve_config
from .types import BackoffStrategy

__all__ = [
    # Types
    "BackoffStrategy",
    # Exceptions
    "RetriedError",
    "ConfigurationError",
    # Models
    "RetryConfig",
    "RetryOptions",
    "resolve_config",
    # Config
    "DEFAULT_JITTER_MAX",
    "GlobalConfig",
    "configure_logging",
    "get_config",
    "reload_config",
]
