"""
Intervals.icu resource services.

Each service maps its operations 1:1 onto API endpoints and delegates the
HTTP exchange to a shared transport.
"""

from intervals_icu.services.activities import ActivityService
from intervals_icu.services.athlete import AthleteService
from intervals_icu.services.events import EventService
from intervals_icu.services.wellness import WellnessService
from intervals_icu.services.workouts import WorkoutService

__all__ = [
    "ActivityService",
    "AthleteService",
    "EventService",
    "WellnessService",
    "WorkoutService",
]
