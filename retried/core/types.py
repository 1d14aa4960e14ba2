"""Core type definitions and enums for retried."""

from enum import Enum


class BackoffStrategy(str, Enum):
    """How the delay between attempts evolves."""

    EXPONENTIAL = "exponential"  # Delay doubles after every retry
    FIXED = "fixed"  # Delay stays at base_timeout
