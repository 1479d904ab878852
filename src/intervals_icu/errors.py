"""Error types raised by the Intervals.icu client.

Every failed request surfaces as an IntervalsAPIError. Failures with a
well-known cause use a subclass and carry a symbolic ErrorCode.
"""

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Symbolic error codes. Members compare equal to their string values."""
    AUTH_FAILED = "AUTH_FAILED"
    NOT_FOUND = "NOT_FOUND"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    TIMEOUT = "TIMEOUT"

    def __str__(self) -> str:
        return self.value


class IntervalsAPIError(RuntimeError):
    """Base error for Intervals.icu API failures.

    Attributes:
        message: Human-readable description
        status: HTTP status code, None when no response was received
        code: Symbolic code, None for uncategorised failures
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        code: Optional[ErrorCode] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status={self.status!r}, code={self.code!r})"
        )


class AuthFailedError(IntervalsAPIError):
    """HTTP 401: the API key was rejected."""

    def __init__(self, message: str = "Invalid API key or authentication failed") -> None:
        super().__init__(message, status=401, code=ErrorCode.AUTH_FAILED)


class NotFoundError(IntervalsAPIError):
    """HTTP 404: the athlete, event, activity, etc. does not exist."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, status=404, code=ErrorCode.NOT_FOUND)


class RateLimitExceededError(IntervalsAPIError):
    """HTTP 429: too many requests."""

    def __init__(self, message: str = "Rate limit exceeded.") -> None:
        super().__init__(message, status=429, code=ErrorCode.RATE_LIMIT_EXCEEDED)


class RequestTimeoutError(IntervalsAPIError):
    """No response arrived before the configured timeout."""

    def __init__(self, message: str = "Request timeout") -> None:
        super().__init__(message, status=None, code=ErrorCode.TIMEOUT)


__all__ = [
    "ErrorCode",
    "IntervalsAPIError",
    "AuthFailedError",
    "NotFoundError",
    "RateLimitExceededError",
    "RequestTimeoutError",
]
