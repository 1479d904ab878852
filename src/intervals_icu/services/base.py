"""Shared plumbing for the resource services."""

from datetime import date
from typing import Any, Dict, Optional, Union

from intervals_icu.transport import RequestDescriptor, Transport
from intervals_icu.types import ListOptions


def format_date(value: Union[str, date]) -> str:
    """Return YYYY-MM-DD for a date, or the string unchanged."""
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return value


class ResourceService:
    """Base for services scoped under /athlete/{id}."""

    def __init__(self, transport: Transport, default_athlete_id: str):
        self._transport = transport
        self._default_athlete_id = default_athlete_id

    def _athlete_path(self, athlete_id: Optional[str], *parts: Any) -> str:
        path = f"/athlete/{athlete_id or self._default_athlete_id}"
        for part in parts:
            path += f"/{part}"
        return path

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Any = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return self._transport.request(
            RequestDescriptor(method, path, params=dict(params or {}), body=body, files=files)
        )

    @staticmethod
    def _list_params(options: Optional[ListOptions]) -> Dict[str, Any]:
        return dict(options or {})
