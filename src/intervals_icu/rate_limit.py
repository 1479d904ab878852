"""Tracks the rate-limit headers returned by Intervals.icu."""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

REMAINING_HEADER = "x-ratelimit-remaining"
RESET_HEADER = "x-ratelimit-reset"


def _header(headers: Mapping[str, Any], name: str) -> Any:
    # requests gives a case-insensitive dict; plain dicts may not be
    value = headers.get(name)
    if value is None:
        for key, candidate in headers.items():
            if str(key).lower() == name:
                return candidate
    return value


def _parse_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


class RateLimitTracker:
    """Holds the most recent rate-limit state seen on any response.

    Values only move from unknown (None) to known and are then overwritten
    by each later response. Concurrent callers get last-write-wins.
    """

    def __init__(self) -> None:
        self._remaining: Optional[int] = None
        self._reset: Optional[datetime] = None

    def update(self, headers: Optional[Mapping[str, Any]]) -> None:
        """Record remaining/reset from response headers.

        Missing or non-numeric headers leave the stored value untouched.
        """
        if not headers:
            return

        raw_remaining = _header(headers, REMAINING_HEADER)
        remaining = _parse_int(raw_remaining)
        if remaining is not None:
            self._remaining = remaining
        elif raw_remaining is not None:
            logger.debug("Ignoring non-numeric %s header: %r", REMAINING_HEADER, raw_remaining)

        raw_reset = _header(headers, RESET_HEADER)
        reset = _parse_int(raw_reset)
        if reset is not None:
            try:
                self._reset = datetime.fromtimestamp(reset, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                logger.debug("Ignoring out-of-range %s header: %r", RESET_HEADER, raw_reset)
        elif raw_reset is not None:
            logger.debug("Ignoring non-numeric %s header: %r", RESET_HEADER, raw_reset)

    def get_remaining(self) -> Optional[int]:
        """Requests left in the current window, or None before the first response."""
        return self._remaining

    def get_reset(self) -> Optional[datetime]:
        """UTC time the window resets, or None before the first response."""
        return self._reset
