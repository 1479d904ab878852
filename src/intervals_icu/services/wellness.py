"""
Intervals.icu wellness service.

Wellness entries are keyed by date rather than by id.
"""

from datetime import date
from typing import Any, Dict, List, Optional, Union

from intervals_icu.services.base import ResourceService, format_date
from intervals_icu.types import ListOptions, Wellness, WellnessInput


class WellnessService(ResourceService):

    def get_wellness(
        self, options: Optional[ListOptions] = None, athlete_id: Optional[str] = None
    ) -> List[Wellness]:
        """
        List wellness entries.

        GET /athlete/{id}/wellness

        Args:
            options: oldest/newest/limit/offset filters
            athlete_id: Athlete ID (defaults to the configured athlete)
        """
        return self._request(
            "GET",
            self._athlete_path(athlete_id, "wellness"),
            params=self._list_params(options),
        )

    def create_wellness(self, data: WellnessInput, athlete_id: Optional[str] = None) -> Wellness:
        """
        Create a wellness entry.

        POST /athlete/{id}/wellness
        """
        return self._request("POST", self._athlete_path(athlete_id, "wellness"), body=data)

    def update_wellness(
        self,
        day: Union[str, date],
        data: Dict[str, Any],
        athlete_id: Optional[str] = None,
    ) -> Wellness:
        """
        Update the wellness entry for one day.

        PUT /athlete/{id}/wellness/{date}

        Args:
            day: Entry date, YYYY-MM-DD string or date
            data: Fields to update
        """
        return self._request(
            "PUT",
            self._athlete_path(athlete_id, "wellness", format_date(day)),
            body=data,
        )

    def delete_wellness(self, day: Union[str, date], athlete_id: Optional[str] = None) -> None:
        """DELETE /athlete/{id}/wellness/{date}"""
        self._request("DELETE", self._athlete_path(athlete_id, "wellness", format_date(day)))

    def update_wellness_bulk(
        self, entries: List[WellnessInput], athlete_id: Optional[str] = None
    ) -> None:
        """
        Create or update several wellness entries in one call.

        PUT /athlete/{id}/wellness-bulk

        Each entry must carry its own date (the 'id' field on the server side).
        """
        self._request("PUT", self._athlete_path(athlete_id, "wellness-bulk"), body=list(entries))
