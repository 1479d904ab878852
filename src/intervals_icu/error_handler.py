"""
Translates failed HTTP exchanges into IntervalsAPIError.

The transport hands every requests exception to ErrorHandler.handle_error();
only the returned IntervalsAPIError is ever raised to callers.
"""

import logging
from typing import Any, Optional

import requests

from intervals_icu.errors import (
    AuthFailedError,
    IntervalsAPIError,
    NotFoundError,
    RateLimitExceededError,
    RequestTimeoutError,
)
from intervals_icu.rate_limit import RateLimitTracker

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


def _body_message(response: requests.Response) -> Optional[str]:
    """Return the 'message' field of a JSON error body, if any."""
    try:
        data: Any = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return None


class ErrorHandler:
    """Builds one IntervalsAPIError per failed request.

    Status-specific rules (429, 401, 404) are checked before the generic
    "has a response" rule, and any response beats the no-response rules.
    """

    def handle_error(
        self,
        error: requests.RequestException,
        rate_limit_tracker: RateLimitTracker,
    ) -> IntervalsAPIError:
        """
        Normalize a requests failure.

        Args:
            error: Exception raised by requests (HTTPError, Timeout, ConnectionError, ...)
            rate_limit_tracker: Tracker read for the reset time on 429

        Returns:
            IntervalsAPIError (or subclass) describing the failure
        """
        response = getattr(error, "response", None)

        if response is not None:
            normalized = self._from_response(response, rate_limit_tracker)
            if normalized.code is not None:
                logger.warning("%s %s: %s", normalized.status, normalized.code, normalized.message)
            else:
                logger.error("HTTP %s: %s", normalized.status, normalized.message)
            return normalized

        if isinstance(error, requests.Timeout):
            logger.warning("Request timed out: %s", error)
            return RequestTimeoutError()

        message = str(error) or UNKNOWN_ERROR_MESSAGE
        logger.error("Request failed without a response: %s", message)
        return IntervalsAPIError(message)

    @staticmethod
    def _from_response(
        response: requests.Response,
        rate_limit_tracker: RateLimitTracker,
    ) -> IntervalsAPIError:
        status = response.status_code

        if status == 429:
            message = "Rate limit exceeded."
            reset = rate_limit_tracker.get_reset()
            if reset is not None:
                message += f" Resets at {reset.isoformat()}"
            return RateLimitExceededError(message)

        if status == 401:
            return AuthFailedError()

        if status == 404:
            return NotFoundError()

        message = _body_message(response) or f"Request failed with status code {status}"
        return IntervalsAPIError(message, status=status)
