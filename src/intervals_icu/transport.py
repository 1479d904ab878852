"""
Intervals.icu HTTP transport.

Handles the base URL, API-key authentication, timeouts, rate-limit tracking
and error normalization. Resource-specific paths live in intervals_icu.services.
"""

import base64
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

import requests

from intervals_icu.config import IntervalsConfig
from intervals_icu.error_handler import ErrorHandler
from intervals_icu.errors import IntervalsAPIError
from intervals_icu.rate_limit import RateLimitTracker

logger = logging.getLogger(__name__)

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")


@dataclass
class RequestDescriptor:
    """One API call: method, path relative to the base URL, query and payload.

    body is sent as JSON. files switches the call to a multipart upload.
    """
    method: str
    path: str
    params: Dict[str, Any] = field(default_factory=dict)
    body: Any = None
    files: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        self.method = self.method.upper()
        if self.method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method}")

    def query(self) -> Dict[str, Any]:
        """Query parameters with unset (None) values dropped."""
        return {k: v for k, v in (self.params or {}).items() if v is not None}


class Transport(Protocol):
    """What the resource services need from a transport."""

    def request(self, descriptor: RequestDescriptor) -> Any:
        ...


def basic_auth_header(api_key: str) -> str:
    """Intervals.icu Basic auth: username 'API_KEY', password the key itself."""
    token = base64.b64encode(f"API_KEY:{api_key}".encode()).decode("ascii")
    return f"Basic {token}"


class RequestsTransport:
    """
    Transport built on a requests.Session.

    Every response, successful or not, updates the rate-limit tracker before
    anything else. Every failure is raised as an IntervalsAPIError.
    """

    def __init__(
        self,
        config: IntervalsConfig,
        error_handler: ErrorHandler,
        rate_limit_tracker: RateLimitTracker,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = config.base_url.rstrip("/")
        self._timeout = config.timeout_seconds
        self._error_handler = error_handler
        self._rate_limit_tracker = rate_limit_tracker

        self._session = session or requests.Session()
        self._session.headers.update({
            "Authorization": basic_auth_header(config.api_key),
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

    @property
    def base_url(self) -> str:
        return self._base_url

    def request(self, descriptor: RequestDescriptor) -> Any:
        """
        Perform one API call.

        Args:
            descriptor: Method, path, query params and payload

        Returns:
            Decoded JSON body (whatever the Content-Type), text for CSV
            and other non-JSON bodies,
            or None for empty bodies (e.g. 204 on delete)

        Raises:
            IntervalsAPIError: On any HTTP error status or transport failure
        """
        url = f"{self._base_url}{descriptor.path}"
        kwargs: Dict[str, Any] = {
            "params": descriptor.query() or None,
            "timeout": self._timeout,
        }
        if descriptor.files is not None:
            # Let requests set the multipart boundary content type
            kwargs["files"] = descriptor.files
            kwargs["headers"] = {"Content-Type": None}
        elif descriptor.body is not None:
            kwargs["json"] = descriptor.body

        logger.debug("%s %s params=%s", descriptor.method, url, kwargs["params"])

        try:
            response = self._session.request(descriptor.method, url, **kwargs)
        except requests.RequestException as e:
            failed_response = getattr(e, "response", None)
            if failed_response is not None:
                self._rate_limit_tracker.update(failed_response.headers)
            raise self._error_handler.handle_error(e, self._rate_limit_tracker) from e

        self._rate_limit_tracker.update(response.headers)

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise self._error_handler.handle_error(e, self._rate_limit_tracker) from e

        return self._decode(response, descriptor)

    @staticmethod
    def _decode(response: requests.Response, descriptor: RequestDescriptor) -> Any:
        if not response.content:
            return None
        content_type = response.headers.get("Content-Type", "")
        csv_download = descriptor.method == "GET" and descriptor.path.endswith(".csv")
        if "csv" in content_type or csv_download:
            return response.text
        try:
            return response.json()
        except ValueError as e:
            if "json" not in content_type:
                return response.text
            raise IntervalsAPIError(
                f"Invalid JSON in response: {e}", status=response.status_code
            ) from e

    def close(self) -> None:
        self._session.close()
