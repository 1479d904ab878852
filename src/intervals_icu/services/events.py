"""
Intervals.icu calendar events service.

Single-event CRUD plus the bulk endpoints (bulk create/upsert, delete by
reference, delete or update a date range).
"""

from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Union

from intervals_icu.services.base import ResourceService, format_date
from intervals_icu.types import (
    DeleteEventsResponse,
    DoomedEvent,
    Event,
    EventInput,
    ListOptions,
)


class EventService(ResourceService):

    def get_events(
        self, options: Optional[ListOptions] = None, athlete_id: Optional[str] = None
    ) -> List[Event]:
        """
        List calendar events.

        GET /athlete/{id}/events

        Args:
            options: oldest/newest/limit/offset filters
            athlete_id: Athlete ID (defaults to the configured athlete)

        Returns:
            List of events; 'type' is set on workout events (Run, Ride, ...)
        """
        return self._request(
            "GET",
            self._athlete_path(athlete_id, "events"),
            params=self._list_params(options),
        )

    def get_event(self, event_id: int, athlete_id: Optional[str] = None) -> Event:
        """GET /athlete/{id}/events/{eventId}"""
        return self._request("GET", self._athlete_path(athlete_id, "events", event_id))

    def create_event(self, data: EventInput, athlete_id: Optional[str] = None) -> Event:
        """
        Create an event.

        POST /athlete/{id}/events

        Args:
            data: Event fields; start_date_local is required by the server

        Returns:
            The created event, including its server-assigned id
        """
        return self._request("POST", self._athlete_path(athlete_id, "events"), body=data)

    def update_event(
        self, event_id: int, data: Dict[str, Any], athlete_id: Optional[str] = None
    ) -> Event:
        """PUT /athlete/{id}/events/{eventId}"""
        return self._request(
            "PUT", self._athlete_path(athlete_id, "events", event_id), body=data
        )

    def delete_event(self, event_id: int, athlete_id: Optional[str] = None) -> None:
        """DELETE /athlete/{id}/events/{eventId}"""
        self._request("DELETE", self._athlete_path(athlete_id, "events", event_id))

    def create_events(
        self,
        events: Sequence[EventInput],
        upsert: bool = False,
        athlete_id: Optional[str] = None,
    ) -> List[Event]:
        """
        Create several events in one call.

        POST /athlete/{id}/events/bulk

        Args:
            events: Events to create
            upsert: Update existing events matched on external_id/uid instead
                of creating duplicates
        """
        return self._request(
            "POST",
            self._athlete_path(athlete_id, "events", "bulk"),
            params={"upsert": "true"} if upsert else None,
            body=list(events),
        )

    def delete_events(
        self, events: Sequence[DoomedEvent], athlete_id: Optional[str] = None
    ) -> DeleteEventsResponse:
        """
        Delete several events by id or external_id.

        PUT /athlete/{id}/events/bulk-delete

        Returns:
            {deleted, ids, external_ids}
        """
        return self._request(
            "PUT",
            self._athlete_path(athlete_id, "events", "bulk-delete"),
            body=list(events),
        )

    def delete_events_range(
        self,
        oldest: Union[str, date],
        newest: Optional[Union[str, date]] = None,
        category: Optional[Union[str, Sequence[str]]] = None,
        athlete_id: Optional[str] = None,
    ) -> Any:
        """
        Delete every event in a date range, optionally limited to categories.

        DELETE /athlete/{id}/events?oldest=&newest=&category=
        """
        if category is not None and not isinstance(category, str):
            category = ",".join(category)
        params = {
            "oldest": format_date(oldest),
            "newest": format_date(newest) if newest is not None else None,
            "category": category,
        }
        return self._request("DELETE", self._athlete_path(athlete_id, "events"), params=params)

    def update_events_range(
        self,
        oldest: Union[str, date],
        newest: Union[str, date],
        data: Dict[str, Any],
        athlete_id: Optional[str] = None,
    ) -> List[Event]:
        """
        Apply the same partial update to every event in a date range.

        PUT /athlete/{id}/events?oldest=&newest=

        Returns:
            The updated events
        """
        return self._request(
            "PUT",
            self._athlete_path(athlete_id, "events"),
            params={"oldest": format_date(oldest), "newest": format_date(newest)},
            body=data,
        )
