"""
Client configuration for the Intervals.icu API.

Settings are passed explicitly to the client as an IntervalsConfig.
from_env() builds one from INTERVALS_* environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "https://intervals.icu/api/v1"
DEFAULT_TIMEOUT_MS = 10000
DEFAULT_ATHLETE_ID = "me"

ENV_API_KEY = "INTERVALS_API_KEY"
ENV_ATHLETE_ID = "INTERVALS_ATHLETE_ID"
ENV_BASE_URL = "INTERVALS_BASE_URL"
ENV_TIMEOUT = "INTERVALS_TIMEOUT"


@dataclass(frozen=True)
class IntervalsConfig:
    """Connection settings for one IntervalsClient.

    Attributes:
        api_key: Intervals.icu API key (Settings > Developer)
        athlete_id: Athlete used when a call does not pass one; "me" is the
            key's owner
        base_url: API root, without trailing slash
        timeout: Request timeout in milliseconds
    """
    api_key: str
    athlete_id: str = DEFAULT_ATHLETE_ID
    base_url: str = DEFAULT_BASE_URL
    timeout: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self):
        if not self.api_key:
            raise ValueError("api_key is required")
        if not self.athlete_id:
            raise ValueError("athlete_id must not be empty")
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be a positive number of milliseconds")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000

    @classmethod
    def from_env(cls, api_key: Optional[str] = None) -> "IntervalsConfig":
        """
        Build a config from environment variables.

        Environment variables:
        - INTERVALS_API_KEY: API key (required unless api_key is given)
        - INTERVALS_ATHLETE_ID: default athlete (default: 'me')
        - INTERVALS_BASE_URL: API root (default: https://intervals.icu/api/v1)
        - INTERVALS_TIMEOUT: timeout in milliseconds (default: 10000)

        Raises:
            ValueError: If no API key is available or the timeout is not an integer
        """
        timeout = os.environ.get(ENV_TIMEOUT)
        try:
            timeout_ms = int(timeout) if timeout else DEFAULT_TIMEOUT_MS
        except ValueError:
            raise ValueError(f"{ENV_TIMEOUT} must be an integer, got {timeout!r}")

        return cls(
            api_key=api_key or os.environ.get(ENV_API_KEY, ""),
            athlete_id=os.environ.get(ENV_ATHLETE_ID) or DEFAULT_ATHLETE_ID,
            base_url=os.environ.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
            timeout=timeout_ms,
        )
