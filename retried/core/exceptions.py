"""Custom exceptions for retried.

Failures raised by the wrapped operation are never wrapped in these types;
they propagate unchanged. These classes cover errors raised by the library
itself.
"""


class RetriedError(Exception):
    """Base exception for all retried errors."""

    pass


class ConfigurationError(RetriedError):
    """Raised when retry options are invalid."""

    pass
