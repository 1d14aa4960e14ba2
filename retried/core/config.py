"""Configuration management for retried."""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from .env file
load_dotenv()

DEFAULT_JITTER_MAX = 1000


class GlobalConfig(BaseModel):
    """Global runtime configuration.

    Retry policy defaults are not read from the environment; they live on
    RetryConfig. Only process-wide runtime knobs are configured here.
    """

    # Delay
    jitter_max: int = Field(
        default_factory=lambda: int(
            os.getenv("RETRIED_JITTER_MAX", str(DEFAULT_JITTER_MAX))
        ),
        ge=0,
    )

    # Logging
    log_level: str = Field(
        default_factory=lambda: os.getenv("RETRIED_LOG_LEVEL", "WARNING")
    )
    log_format: str = Field(
        default_factory=lambda: os.getenv(
            "RETRIED_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )


# Global configuration instance
config = GlobalConfig()


def get_config() -> GlobalConfig:
    """Get global configuration instance."""
    return config


def reload_config() -> GlobalConfig:
    """Reload configuration from environment."""
    load_dotenv(override=True)
    global config
    config = GlobalConfig()
    return config


def configure_logging() -> logging.Logger:
    """Attach a stream handler to the package logger using the global config.

    Calling this more than once replaces the handler installed by the
    previous call rather than stacking a new one.

    Returns:
        The configured ``retried`` logger
    """
    logger = logging.getLogger("retried")
    for handler in list(logger.handlers):
        if getattr(handler, "_retried_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.log_format))
    handler._retried_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(config.log_level.upper())
    return logger
