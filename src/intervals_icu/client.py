"""
Intervals.icu API client.

IntervalsClient wires one rate-limit tracker, error handler and transport
together and exposes every resource operation as a method.

Example:
    with IntervalsClient(api_key="...") as client:
        athlete = client.get_athlete()
        events = client.get_events({"oldest": "2024-01-01", "newest": "2024-01-31"})
        print(client.get_rate_limit_remaining())
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence, Union

import requests

from intervals_icu.config import DEFAULT_ATHLETE_ID, DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS, IntervalsConfig
from intervals_icu.error_handler import ErrorHandler
from intervals_icu.rate_limit import RateLimitTracker
from intervals_icu.services import (
    ActivityService,
    AthleteService,
    EventService,
    WellnessService,
    WorkoutService,
)
from intervals_icu.services.activities import ActivityId
from intervals_icu.transport import RequestsTransport
from intervals_icu.types import (
    Activity,
    ActivityInput,
    ActivityStream,
    Athlete,
    DeleteEventsResponse,
    DoomedEvent,
    Event,
    EventInput,
    Interval,
    IntervalsDTO,
    ListOptions,
    SportSettings,
    StreamFormat,
    UpdateStreamsResult,
    Wellness,
    WellnessInput,
    Workout,
    WorkoutInput,
)


class IntervalsClient:
    """
    Intervals.icu API client.

    Every method performs exactly one HTTP request. Failures raise
    IntervalsAPIError; the client stays usable afterwards.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        athlete_id: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        config: Optional[IntervalsConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            api_key: Intervals.icu API key (required unless config is given)
            athlete_id: Default athlete for calls that don't pass one (default 'me')
            base_url: API root (default https://intervals.icu/api/v1)
            timeout: Request timeout in milliseconds (default 10000)
            config: Complete configuration; takes precedence over the keyword args
            session: requests.Session to use instead of a fresh one
        """
        if config is None:
            config = IntervalsConfig(
                api_key=api_key or "",
                athlete_id=DEFAULT_ATHLETE_ID if athlete_id is None else athlete_id,
                base_url=DEFAULT_BASE_URL if base_url is None else base_url,
                timeout=DEFAULT_TIMEOUT_MS if timeout is None else timeout,
            )
        self._config = config

        self._rate_limit_tracker = RateLimitTracker()
        self._transport = RequestsTransport(
            config, ErrorHandler(), self._rate_limit_tracker, session=session
        )

        self.athletes = AthleteService(self._transport, config.athlete_id)
        self.events = EventService(self._transport, config.athlete_id)
        self.wellness = WellnessService(self._transport, config.athlete_id)
        self.workouts = WorkoutService(self._transport, config.athlete_id)
        self.activities = ActivityService(self._transport, config.athlete_id)

    @classmethod
    def from_env(cls, session: Optional[requests.Session] = None) -> "IntervalsClient":
        """Create a client from INTERVALS_* environment variables."""
        return cls(config=IntervalsConfig.from_env(), session=session)

    @property
    def config(self) -> IntervalsConfig:
        return self._config

    # ── Rate limit ───────────────────────────────────────────────────────

    def get_rate_limit_remaining(self) -> Optional[int]:
        """Remaining requests in the current window, None until the first response."""
        return self._rate_limit_tracker.get_remaining()

    def get_rate_limit_reset(self) -> Optional[datetime]:
        """When the rate-limit window resets (UTC), None until the first response."""
        return self._rate_limit_tracker.get_reset()

    # ── Lifecycle ────────────────────────────────────────────────────────

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._transport.close()

    def __enter__(self) -> "IntervalsClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ── Athlete ──────────────────────────────────────────────────────────

    def get_athlete(self, athlete_id: Optional[str] = None) -> Athlete:
        return self.athletes.get_athlete(athlete_id)

    def update_athlete(self, data: Dict[str, Any], athlete_id: Optional[str] = None) -> Athlete:
        return self.athletes.update_athlete(data, athlete_id)

    def get_sport_settings(self, athlete_id: Optional[str] = None) -> List[SportSettings]:
        return self.athletes.get_sport_settings(athlete_id)

    # ── Events ───────────────────────────────────────────────────────────

    def get_events(
        self, options: Optional[ListOptions] = None, athlete_id: Optional[str] = None
    ) -> List[Event]:
        return self.events.get_events(options, athlete_id)

    def get_event(self, event_id: int, athlete_id: Optional[str] = None) -> Event:
        return self.events.get_event(event_id, athlete_id)

    def create_event(self, data: EventInput, athlete_id: Optional[str] = None) -> Event:
        return self.events.create_event(data, athlete_id)

    def update_event(
        self, event_id: int, data: Dict[str, Any], athlete_id: Optional[str] = None
    ) -> Event:
        return self.events.update_event(event_id, data, athlete_id)

    def delete_event(self, event_id: int, athlete_id: Optional[str] = None) -> None:
        return self.events.delete_event(event_id, athlete_id)

    def create_events(
        self,
        events: Sequence[EventInput],
        upsert: bool = False,
        athlete_id: Optional[str] = None,
    ) -> List[Event]:
        return self.events.create_events(events, upsert, athlete_id)

    def delete_events(
        self, events: Sequence[DoomedEvent], athlete_id: Optional[str] = None
    ) -> DeleteEventsResponse:
        return self.events.delete_events(events, athlete_id)

    def delete_events_range(
        self,
        oldest: Union[str, date],
        newest: Optional[Union[str, date]] = None,
        category: Optional[Union[str, Sequence[str]]] = None,
        athlete_id: Optional[str] = None,
    ) -> Any:
        return self.events.delete_events_range(oldest, newest, category, athlete_id)

    def update_events_range(
        self,
        oldest: Union[str, date],
        newest: Union[str, date],
        data: Dict[str, Any],
        athlete_id: Optional[str] = None,
    ) -> List[Event]:
        return self.events.update_events_range(oldest, newest, data, athlete_id)

    # ── Wellness ─────────────────────────────────────────────────────────

    def get_wellness(
        self, options: Optional[ListOptions] = None, athlete_id: Optional[str] = None
    ) -> List[Wellness]:
        return self.wellness.get_wellness(options, athlete_id)

    def create_wellness(self, data: WellnessInput, athlete_id: Optional[str] = None) -> Wellness:
        return self.wellness.create_wellness(data, athlete_id)

    def update_wellness(
        self, day: Union[str, date], data: Dict[str, Any], athlete_id: Optional[str] = None
    ) -> Wellness:
        return self.wellness.update_wellness(day, data, athlete_id)

    def delete_wellness(self, day: Union[str, date], athlete_id: Optional[str] = None) -> None:
        return self.wellness.delete_wellness(day, athlete_id)

    def update_wellness_bulk(
        self, entries: List[WellnessInput], athlete_id: Optional[str] = None
    ) -> None:
        return self.wellness.update_wellness_bulk(entries, athlete_id)

    # ── Workouts ─────────────────────────────────────────────────────────

    def get_workouts(
        self, options: Optional[ListOptions] = None, athlete_id: Optional[str] = None
    ) -> List[Workout]:
        return self.workouts.get_workouts(options, athlete_id)

    def get_workout(self, workout_id: int, athlete_id: Optional[str] = None) -> Workout:
        return self.workouts.get_workout(workout_id, athlete_id)

    def create_workout(self, data: WorkoutInput, athlete_id: Optional[str] = None) -> Workout:
        return self.workouts.create_workout(data, athlete_id)

    def update_workout(
        self, workout_id: int, data: Dict[str, Any], athlete_id: Optional[str] = None
    ) -> Workout:
        return self.workouts.update_workout(workout_id, data, athlete_id)

    def delete_workout(self, workout_id: int, athlete_id: Optional[str] = None) -> None:
        return self.workouts.delete_workout(workout_id, athlete_id)

    # ── Activities ───────────────────────────────────────────────────────

    def get_activities(
        self, options: Optional[ListOptions] = None, athlete_id: Optional[str] = None
    ) -> List[Activity]:
        return self.activities.get_activities(options, athlete_id)

    def get_activity(self, activity_id: ActivityId, athlete_id: Optional[str] = None) -> Activity:
        return self.activities.get_activity(activity_id, athlete_id)

    def update_activity(
        self, activity_id: ActivityId, data: ActivityInput, athlete_id: Optional[str] = None
    ) -> Activity:
        return self.activities.update_activity(activity_id, data, athlete_id)

    def delete_activity(self, activity_id: ActivityId, athlete_id: Optional[str] = None) -> None:
        return self.activities.delete_activity(activity_id, athlete_id)

    def get_streams(
        self,
        activity_id: ActivityId,
        types: Optional[Union[str, Sequence[str]]] = None,
        include_defaults: Optional[bool] = None,
        fmt: StreamFormat = StreamFormat.JSON,
    ) -> Union[List[ActivityStream], str]:
        return self.activities.get_streams(activity_id, types, include_defaults, fmt)

    def update_streams(
        self, activity_id: ActivityId, streams: Sequence[ActivityStream]
    ) -> UpdateStreamsResult:
        return self.activities.update_streams(activity_id, streams)

    def upload_streams_csv(
        self, activity_id: ActivityId, csv_data: Union[str, bytes], filename: str = "streams.csv"
    ) -> UpdateStreamsResult:
        return self.activities.upload_streams_csv(activity_id, csv_data, filename)

    def get_intervals(self, activity_id: ActivityId) -> IntervalsDTO:
        return self.activities.get_intervals(activity_id)

    def update_intervals(
        self, activity_id: ActivityId, intervals: Sequence[Interval], replace_all: bool = True
    ) -> IntervalsDTO:
        return self.activities.update_intervals(activity_id, intervals, replace_all)

    def delete_intervals(self, activity_id: ActivityId, intervals: Sequence[Interval]) -> IntervalsDTO:
        return self.activities.delete_intervals(activity_id, intervals)

    def split_interval(self, activity_id: ActivityId, split_at: int) -> IntervalsDTO:
        return self.activities.split_interval(activity_id, split_at)

    def update_interval(
        self, activity_id: ActivityId, interval_id: int, data: Dict[str, Any]
    ) -> IntervalsDTO:
        return self.activities.update_interval(activity_id, interval_id, data)
