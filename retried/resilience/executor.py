"""Retry asynchronous operations with exponential or fixed backoff.

Every exception raised by the operation is treated as retryable. The error
from the last attempt is re-raised unchanged once attempts run out or the
backoff reaches ``max_timeout``.
"""

import functools
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional, TypeVar, Union

from retried.core.models import RetryOptions, resolve_config
from retried.core.types import BackoffStrategy

from .delay import DelayFn, default_delay

logger = logging.getLogger(__name__)

T = TypeVar("T")

Options = Union[RetryOptions, Mapping[str, Any], None]


async def retry(
    operation: Callable[[], Awaitable[T]],
    options: Options = None,
    delay_fn: Optional[DelayFn] = None,
) -> T:
    """Execute an async operation, retrying it on failure.

    Args:
        operation: Zero-argument callable returning an awaitable
        options: Partial retry configuration merged over the defaults
        delay_fn: Async delay taking milliseconds, defaults to jittered sleep

    Returns:
        Result from the first successful attempt

    Raises:
        ConfigurationError: If options are invalid (before any attempt)
        Exception: The error from the final attempt, unchanged

    Example:
        ```python
        result = await retry(
            lambda: client.get("/health"),
            {"retries": 5, "strategy": "fixed", "base_timeout": 500},
        )
        ```
    """
    config = resolve_config(options)
    delay = delay_fn or default_delay

    attempt = 1
    timeout = config.base_timeout

    while True:
        logger.debug(f"Attempt {attempt} of {config.retries}")
        try:
            return await operation()
        except Exception as e:
            logger.debug(f"Attempt {attempt} failed: {type(e).__name__}: {e}")
            last_error = e
            attempt += 1

            if attempt > config.retries:
                logger.debug("Reached maximum retries, request failed")
                raise
            if timeout >= config.max_timeout:
                logger.debug("Reached maximum timeout, request failed")
                raise

        # Runs outside the except block: no __context__ on delay or on_retry errors
        logger.debug(f"Retrying in {timeout} ms")
        await delay(timeout)

        if config.strategy == BackoffStrategy.EXPONENTIAL:
            timeout *= 2

        if config.on_retry is not None:
            config.on_retry(last_error)


def retrying(
    options: Options = None,
    delay_fn: Optional[DelayFn] = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorate an async function so every call goes through ``retry``.

    Example:
        ```python
        @retrying({"retries": 5})
        async def fetch(url: str) -> bytes:
            ...
        ```
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            return await retry(lambda: func(*args, **kwargs), options, delay_fn)

        return wrapper

    return decorator
