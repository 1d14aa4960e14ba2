"""Resilience patterns for retried.

- Retry with exponential or fixed backoff
- Jittered delay between attempts
"""

from .delay import DEFAULT_JITTER_MAX, DelayFn, compute_jitter, default_delay
from .executor import retry, retrying

__all__ = [
    "DEFAULT_JITTER_MAX",
    "DelayFn",
    "compute_jitter",
    "default_delay",
    "retry",
    "retrying",
]
