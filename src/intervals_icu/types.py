"""
Intervals.icu API types, enums, and constants.

Entities stay as plain dicts on the wire; the TypedDicts below describe
their usual keys for type checkers and IDEs. The server validates payloads,
the client does not.
"""

from enum import Enum
from typing import Any, List, TypedDict, Union


class EventCategory(str, Enum):
    """Calendar event categories."""
    WORKOUT = "WORKOUT"
    RACE_A = "RACE_A"
    RACE_B = "RACE_B"
    RACE_C = "RACE_C"
    NOTE = "NOTE"
    PLAN = "PLAN"
    HOLIDAY = "HOLIDAY"
    SICK = "SICK"
    INJURED = "INJURED"
    SET_EFTP = "SET_EFTP"
    FITNESS_DAYS = "FITNESS_DAYS"
    SEASON_START = "SEASON_START"
    TARGET = "TARGET"
    SET_FITNESS = "SET_FITNESS"


class StreamFormat(Enum):
    """Response format for activity streams."""
    JSON = "json"
    CSV = "csv"


# Activity stream types
STREAM_TYPES = (
    "watts",            # power, W
    "heartrate",        # bpm
    "cadence",          # rpm
    "speed",            # m/s
    "distance",         # m
    "altitude",         # m
    "latlng",           # [lat, lng] pairs
    "time",             # s
    "moving",           # 0/1
    "grade",            # %
    "velocity_smooth",  # m/s
    "temp",             # Celsius
    "watts_left",
    "watts_right",
    "watts_sample",
)


class ListOptions(TypedDict, total=False):
    """Filters for list endpoints, forwarded verbatim as query parameters.

    oldest/newest are ISO-8601 dates (YYYY-MM-DD).
    """
    oldest: str
    newest: str
    limit: int
    offset: int


class Athlete(TypedDict, total=False):
    id: str
    name: str
    email: str
    sex: str
    dob: str
    weight: float
    restingHR: int
    maxHR: int
    lthr: int
    ftp: int
    ftpWattsPerKg: float
    w1: int
    w2: int
    w3: int
    w4: int
    w5: int
    w6: int
    pMax: int
    icu_ftp: int
    icu_w1: int
    icu_w2: int
    icu_w3: int
    icu_w4: int
    icu_w5: int
    icu_w6: int
    icu_pm: int
    created: str
    updated: str


class SportSettings(TypedDict, total=False):
    """Thresholds and zones for one group of sport types."""
    id: int
    athlete_id: str
    types: List[str]
    ftp: int
    indoor_ftp: int
    w_prime: int
    p_max: int
    lthr: int
    max_hr: int
    threshold_pace: float
    pace_units: str
    power_zones: List[int]
    power_zone_names: List[str]
    hr_zones: List[int]
    hr_zone_names: List[str]
    pace_zones: List[float]
    pace_zone_names: List[str]


class _EventRequired(TypedDict):
    start_date_local: str


class EventInput(_EventRequired, total=False):
    """Fields accepted when creating or updating an event."""
    category: str
    type: str
    name: str
    description: str
    color: str
    show_as_note: bool
    athlete_cannot_edit: bool
    hide_from_athlete: bool
    external_id: str
    uid: str


class Event(EventInput, total=False):
    """Calendar entry: planned workout, race, note, ..."""
    id: int
    athlete_id: str
    created: str
    updated: str


class DoomedEvent(TypedDict, total=False):
    """Event reference for bulk deletion, by id or external_id."""
    id: int
    external_id: str


class DeleteEventsResponse(TypedDict, total=False):
    deleted: int
    ids: List[int]
    external_ids: List[str]


class _WellnessRequired(TypedDict):
    date: str


class WellnessInput(_WellnessRequired, total=False):
    """Daily wellness metrics, keyed by date (YYYY-MM-DD)."""
    restingHR: int
    hrv: float
    weight: float
    fatigue: int
    soreness: int
    stress: int
    mood: int
    motivation: int
    injury: int
    spO2: float
    systolic: int
    diastolic: int
    hydration: int
    hydrationVolume: float
    sleepSecs: int
    sleepQuality: int
    sleepScore: float
    menstrualPhase: int
    kcalConsumed: int
    carbs: float
    protein: float
    fat: float
    comments: str


class Wellness(WellnessInput, total=False):
    id: str
    athlete_id: str
    created: str
    updated: str


class _WorkoutRequired(TypedDict):
    start_date_local: str


class WorkoutInput(_WorkoutRequired, total=False):
    name: str
    description: str
    workout_doc: str
    workout_filename: str
    workout_type: str
    indoor: bool
    outdoor: bool
    show_as_note: bool
    category: str
    duration_secs: int
    distance_meters: float
    moving_time: int
    tss: float
    intensity: float


class Workout(WorkoutInput, total=False):
    """Planned training session definition."""
    id: int
    athlete_id: str
    created: str
    updated: str


class ActivityInput(TypedDict, total=False):
    """Editable activity fields (all optional)."""
    start_date_local: str
    type: str
    name: str
    description: str
    trainer: bool
    commute: bool
    icu_ignore_time: bool
    icu_ignore_hr: bool
    icu_ignore_watts: bool
    icu_ignore_pace: bool
    feel: int
    perceived_exertion: float


class Activity(ActivityInput, total=False):
    """Recorded training session with measured metrics."""
    id: Union[int, str]
    athlete_id: str
    distance: float
    moving_time: int
    elapsed_time: int
    total_elevation_gain: float
    max_speed: float
    average_speed: float
    max_watts: int
    average_watts: int
    weighted_average_watts: int
    max_heartrate: int
    average_heartrate: int
    tss: float
    trimp: float
    calories: int
    average_cadence: float
    max_cadence: float
    pace: float
    gap: float
    created: str
    updated: str


class _StreamRequired(TypedDict):
    type: str
    data: List[Any]


class ActivityStream(_StreamRequired, total=False):
    """Time series for one channel (power, heart rate, ...) of an activity."""
    sample_rate: float


class UpdateStreamsResult(TypedDict, total=False):
    success: bool
    updated: List[str]
    errors: List[str]


class _IntervalRequired(TypedDict):
    start_index: int
    end_index: int


class Interval(_IntervalRequired, total=False):
    """Interval/lap bounds (stream indexes) plus computed metrics."""
    id: int
    name: str
    elapsed_time: int
    moving_time: int
    distance: float
    average_watts: float
    average_heartrate: float
    average_cadence: float
    max_watts: float
    max_heartrate: float
    tss: float
    np: float
    intensity: float


class IntervalsDTO(TypedDict, total=False):
    activity_id: str
    intervals: List[Interval]
    count: int
