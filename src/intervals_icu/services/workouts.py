"""
Intervals.icu workout library service.
"""

from typing import Any, Dict, List, Optional

from intervals_icu.services.base import ResourceService
from intervals_icu.types import ListOptions, Workout, WorkoutInput


class WorkoutService(ResourceService):

    def get_workouts(
        self, options: Optional[ListOptions] = None, athlete_id: Optional[str] = None
    ) -> List[Workout]:
        """
        List workouts.

        GET /athlete/{id}/workouts

        Args:
            options: oldest/newest/limit/offset filters
            athlete_id: Athlete ID (defaults to the configured athlete)
        """
        return self._request(
            "GET",
            self._athlete_path(athlete_id, "workouts"),
            params=self._list_params(options),
        )

    def get_workout(self, workout_id: int, athlete_id: Optional[str] = None) -> Workout:
        """GET /athlete/{id}/workouts/{workoutId}"""
        return self._request("GET", self._athlete_path(athlete_id, "workouts", workout_id))

    def create_workout(self, data: WorkoutInput, athlete_id: Optional[str] = None) -> Workout:
        """
        Create a workout.

        POST /athlete/{id}/workouts

        Returns:
            The created workout, including its server-assigned id
        """
        return self._request("POST", self._athlete_path(athlete_id, "workouts"), body=data)

    def update_workout(
        self, workout_id: int, data: Dict[str, Any], athlete_id: Optional[str] = None
    ) -> Workout:
        """PUT /athlete/{id}/workouts/{workoutId}"""
        return self._request(
            "PUT", self._athlete_path(athlete_id, "workouts", workout_id), body=data
        )

    def delete_workout(self, workout_id: int, athlete_id: Optional[str] = None) -> None:
        """DELETE /athlete/{id}/workouts/{workoutId}"""
        self._request("DELETE", self._athlete_path(athlete_id, "workouts", workout_id))
