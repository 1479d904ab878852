"""
Python client for the Intervals.icu REST API.

Typed access to athletes, calendar events, wellness, workouts and
activities, with uniform error reporting and rate-limit tracking.
"""

from intervals_icu.client import IntervalsClient
from intervals_icu.config import IntervalsConfig
from intervals_icu.errors import (
    AuthFailedError,
    ErrorCode,
    IntervalsAPIError,
    NotFoundError,
    RateLimitExceededError,
    RequestTimeoutError,
)
from intervals_icu.types import EventCategory, ListOptions, StreamFormat

__version__ = "0.1.0"

__all__ = [
    "IntervalsClient",
    "IntervalsConfig",
    "ErrorCode",
    "IntervalsAPIError",
    "AuthFailedError",
    "NotFoundError",
    "RateLimitExceededError",
    "RequestTimeoutError",
    "EventCategory",
    "ListOptions",
    "StreamFormat",
]
