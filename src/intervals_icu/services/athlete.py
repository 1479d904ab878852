"""
Intervals.icu athlete service.

Profile and sport settings (thresholds, zones) for an athlete.
"""

from typing import Any, Dict, List, Optional

from intervals_icu.services.base import ResourceService
from intervals_icu.types import Athlete, SportSettings


class AthleteService(ResourceService):

    def get_athlete(self, athlete_id: Optional[str] = None) -> Athlete:
        """
        Get athlete information.

        GET /athlete/{id}

        Args:
            athlete_id: Athlete ID (defaults to the configured athlete, 'me')
        """
        return self._request("GET", self._athlete_path(athlete_id))

    def update_athlete(
        self, data: Dict[str, Any], athlete_id: Optional[str] = None
    ) -> Athlete:
        """
        Update athlete fields (partial update).

        PUT /athlete/{id}

        Returns:
            The updated athlete
        """
        return self._request("PUT", self._athlete_path(athlete_id), body=data)

    def get_sport_settings(self, athlete_id: Optional[str] = None) -> List[SportSettings]:
        """
        Get sport settings, one entry per group of sport types.

        GET /athlete/{id}/sport-settings
        """
        return self._request("GET", self._athlete_path(athlete_id, "sport-settings"))
