"""retried - Retry asynchronous operations with backoff and jitter."""

from .core import (
    # Types
    BackoffStrategy,
    # Exceptions
    ConfigurationError,
    RetriedError,
    # Models
    RetryConfig,
    RetryOptions,
    resolve_config,
    # Config
    GlobalConfig,
    configure_logging,
    get_config,
    reload_config,
)
from .resilience import DelayFn, compute_jitter, default_delay, retry, retrying

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Retry
    "retry",
    "retrying",
    "DelayFn",
    "compute_jitter",
    "default_delay",
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
    "GlobalConfig",
    "configure_logging",
    "get_config",
    "reload_config",
]
