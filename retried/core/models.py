"""Core Pydantic data models for retried."""

from typing import Any, Callable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigurationError
from .types import BackoffStrategy

DEFAULT_RETRIES = 3
DEFAULT_BASE_TIMEOUT = 1000
DEFAULT_MAX_TIMEOUT = 5 * 60 * 1000  # 5 minutes

OnRetry = Callable[[Exception], Any]


class RetryConfig(BaseModel):
    """Resolved retry configuration used by the retry loop.

    All timeouts are in milliseconds.
    """

    model_config = ConfigDict(frozen=True)

    retries: int = Field(
        default=DEFAULT_RETRIES,
        ge=1,
        description="Total attempts allowed, the initial attempt included",
    )
    strategy: BackoffStrategy = Field(
        default=BackoffStrategy.EXPONENTIAL, description="Backoff strategy"
    )
    base_timeout: int = Field(
        default=DEFAULT_BASE_TIMEOUT, ge=0, description="Delay before the first retry"
    )
    max_timeout: int = Field(
        default=DEFAULT_MAX_TIMEOUT,
        ge=0,
        description="Retrying stops once the current delay reaches this value",
    )
    on_retry: Optional[OnRetry] = Field(
        default=None, description="Called with the error before each retry"
    )


class RetryOptions(BaseModel):
    """Partial override of RetryConfig.

    Fields left unset, or set to None, fall back to the RetryConfig default.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    retries: Optional[int] = None
    strategy: Optional[BackoffStrategy] = None
    base_timeout: Optional[int] = None
    max_timeout: Optional[int] = None
    on_retry: Optional[OnRetry] = None


def resolve_config(
    options: Union[RetryOptions, Mapping[str, Any], None] = None,
) -> RetryConfig:
    """Merge options over the defaults into a fresh RetryConfig.

    Args:
        options: RetryOptions, a mapping with the same keys, or None

    Returns:
        Fully populated RetryConfig

    Raises:
        ConfigurationError: If the merged configuration is invalid

    Example:
        >>> config = resolve_config({"retries": 5, "strategy": "fixed"})
        >>> config.retries, config.base_timeout
        (5, 1000)
    """
    if options is None:
        return RetryConfig()

    if not isinstance(options, (RetryOptions, Mapping)):
        raise ConfigurationError(
            f"Retry options must be RetryOptions or a mapping, got {type(options).__name__}"
        )

    try:
        if not isinstance(options, RetryOptions):
            options = RetryOptions.model_validate(dict(options))

        overrides = {
            name: getattr(options, name)
            for name in RetryOptions.model_fields
            if getattr(options, name) is not None
        }
        return RetryConfig(**overrides)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid retry options:\n{e}") from e
