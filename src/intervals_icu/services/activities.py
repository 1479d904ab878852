"""
Intervals.icu activities service.

Activity CRUD lives under /athlete/{id}/activities; streams and intervals
live under /activity/{activityId} and need no athlete id.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from intervals_icu.services.base import ResourceService
from intervals_icu.types import (
    Activity,
    ActivityInput,
    ActivityStream,
    Interval,
    IntervalsDTO,
    ListOptions,
    STREAM_TYPES,
    StreamFormat,
    UpdateStreamsResult,
)

logger = logging.getLogger(__name__)

ActivityId = Union[int, str]


def _activity_path(activity_id: ActivityId, *parts: Any) -> str:
    path = f"/activity/{activity_id}"
    for part in parts:
        path += f"/{part}"
    return path


class ActivityService(ResourceService):

    def get_activities(
        self, options: Optional[ListOptions] = None, athlete_id: Optional[str] = None
    ) -> List[Activity]:
        """
        List activities.

        GET /athlete/{id}/activities

        Args:
            options: oldest/newest/limit/offset filters
            athlete_id: Athlete ID (defaults to the configured athlete)
        """
        return self._request(
            "GET",
            self._athlete_path(athlete_id, "activities"),
            params=self._list_params(options),
        )

    def get_activity(self, activity_id: ActivityId, athlete_id: Optional[str] = None) -> Activity:
        """GET /athlete/{id}/activities/{activityId}"""
        return self._request("GET", self._athlete_path(athlete_id, "activities", activity_id))

    def update_activity(
        self,
        activity_id: ActivityId,
        data: ActivityInput,
        athlete_id: Optional[str] = None,
    ) -> Activity:
        """
        Update editable activity fields (name, description, feel, ...).

        PUT /athlete/{id}/activities/{activityId}
        """
        return self._request(
            "PUT", self._athlete_path(athlete_id, "activities", activity_id), body=data
        )

    def delete_activity(self, activity_id: ActivityId, athlete_id: Optional[str] = None) -> None:
        """DELETE /athlete/{id}/activities/{activityId}"""
        self._request("DELETE", self._athlete_path(athlete_id, "activities", activity_id))

    # ── Streams ──────────────────────────────────────────────────────────

    def get_streams(
        self,
        activity_id: ActivityId,
        types: Optional[Union[str, Sequence[str]]] = None,
        include_defaults: Optional[bool] = None,
        fmt: StreamFormat = StreamFormat.JSON,
    ) -> Union[List[ActivityStream], str]:
        """
        Get time-series streams for an activity.

        GET /activity/{id}/streams  (or /streams.csv)

        Args:
            activity_id: Activity ID
            types: Stream types to return, usually from STREAM_TYPES
                (e.g. ["watts", "heartrate"]); all if omitted
            include_defaults: Also return the default streams (time, distance, ...)
            fmt: StreamFormat.JSON for a list of streams, StreamFormat.CSV for raw CSV text

        Returns:
            List of {type, data} dicts, or CSV text
        """
        fmt = StreamFormat(fmt)
        if types is not None:
            names = types.split(",") if isinstance(types, str) else list(types)
            unknown = [name for name in names if name not in STREAM_TYPES]
            if unknown:
                # Custom streams are valid too, so these are still sent
                logger.debug("Requesting non-standard stream types: %s", unknown)
            types = ",".join(names)
        params: Dict[str, Any] = {"types": types}
        if include_defaults is not None:
            params["includeDefaults"] = "true" if include_defaults else "false"

        suffix = ".csv" if fmt is StreamFormat.CSV else ""
        return self._request("GET", _activity_path(activity_id, f"streams{suffix}"), params=params)

    def update_streams(
        self, activity_id: ActivityId, streams: Sequence[ActivityStream]
    ) -> UpdateStreamsResult:
        """
        Replace streams on an activity.

        PUT /activity/{id}/streams
        """
        return self._request("PUT", _activity_path(activity_id, "streams"), body=list(streams))

    def upload_streams_csv(
        self,
        activity_id: ActivityId,
        csv_data: Union[str, bytes],
        filename: str = "streams.csv",
    ) -> UpdateStreamsResult:
        """
        Upload streams as a CSV file (multipart form data).

        PUT /activity/{id}/streams.csv

        Args:
            csv_data: CSV content, one column per stream type
            filename: Name reported for the uploaded file
        """
        if isinstance(csv_data, str):
            csv_data = csv_data.encode("utf-8")
        return self._request(
            "PUT",
            _activity_path(activity_id, "streams.csv"),
            files={"file": (filename, csv_data, "text/csv")},
        )

    # ── Intervals ────────────────────────────────────────────────────────

    def get_intervals(self, activity_id: ActivityId) -> IntervalsDTO:
        """
        Get intervals (laps) for an activity.

        GET /activity/{id}/intervals
        """
        return self._request("GET", _activity_path(activity_id, "intervals"))

    def update_intervals(
        self,
        activity_id: ActivityId,
        intervals: Sequence[Interval],
        replace_all: bool = True,
    ) -> IntervalsDTO:
        """
        Set intervals on an activity.

        PUT /activity/{id}/intervals?all=

        Args:
            intervals: Intervals with start_index/end_index into the streams
            replace_all: Replace every existing interval (True) or merge (False)
        """
        return self._request(
            "PUT",
            _activity_path(activity_id, "intervals"),
            params={"all": "true" if replace_all else "false"},
            body=list(intervals),
        )

    def delete_intervals(
        self, activity_id: ActivityId, intervals: Sequence[Interval]
    ) -> IntervalsDTO:
        """PUT /activity/{id}/delete-intervals"""
        return self._request(
            "PUT", _activity_path(activity_id, "delete-intervals"), body=list(intervals)
        )

    def split_interval(self, activity_id: ActivityId, split_at: int) -> IntervalsDTO:
        """
        Split the interval containing a stream index in two.

        PUT /activity/{id}/split-interval?splitAt=
        """
        return self._request(
            "PUT",
            _activity_path(activity_id, "split-interval"),
            params={"splitAt": split_at},
        )

    def update_interval(
        self, activity_id: ActivityId, interval_id: int, data: Dict[str, Any]
    ) -> IntervalsDTO:
        """PUT /activity/{id}/intervals/{intervalId}"""
        return self._request(
            "PUT", _activity_path(activity_id, "intervals", interval_id), body=data
        )
