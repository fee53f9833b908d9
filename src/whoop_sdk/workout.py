"""
WHOOP workouts.

Decoded workouts are named from the SPORTS table; a sport id missing from
the table leaves sport_name unset.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from whoop_sdk.models import Page, parse_datetime, parse_score, parse_score_state
from whoop_sdk.params import RequestParams
from whoop_sdk.service import CollectionService
from whoop_sdk.types import SPORTS, ScoreState

WORKOUT_ENDPOINT = "/activity/workout"


@dataclass
class ZoneDuration:
    """Time spent in each heart rate zone, in milliseconds.

    Zone zero is below 50% of max heart rate, zone five 90-100%.
    """
    zone_zero_milli: int = 0
    zone_one_milli: int = 0
    zone_two_milli: int = 0
    zone_three_milli: int = 0
    zone_four_milli: int = 0
    zone_five_milli: int = 0

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ZoneDuration":
        return cls(
            zone_zero_milli=d.get("zone_zero_milli", 0),
            zone_one_milli=d.get("zone_one_milli", 0),
            zone_two_milli=d.get("zone_two_milli", 0),
            zone_three_milli=d.get("zone_three_milli", 0),
            zone_four_milli=d.get("zone_four_milli", 0),
            zone_five_milli=d.get("zone_five_milli", 0),
        )


@dataclass
class WorkoutScore:
    zone_duration: ZoneDuration
    strain: float = 0.0  # 0 to 21
    average_heart_rate: int = 0
    max_heart_rate: int = 0
    kilojoule: float = 0.0
    percent_recorded: float = 0.0
    distance_meter: float = 0.0
    altitude_gain_meter: float = 0.0
    altitude_change_meter: float = 0.0

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "WorkoutScore":
        return cls(
            zone_duration=ZoneDuration.from_dict(d.get("zone_duration") or {}),
            strain=d.get("strain", 0.0),
            average_heart_rate=d.get("average_heart_rate", 0),
            max_heart_rate=d.get("max_heart_rate", 0),
            kilojoule=d.get("kilojoule", 0.0),
            percent_recorded=d.get("percent_recorded", 0.0),
            distance_meter=d.get("distance_meter", 0.0),
            altitude_gain_meter=d.get("altitude_gain_meter", 0.0),
            altitude_change_meter=d.get("altitude_change_meter", 0.0),
        )


@dataclass
class Workout:
    """A workout activity."""
    id: int
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    timezone_offset: Optional[str] = None
    sport_id: int = 0
    sport_name: Optional[str] = None
    score_state: Optional[ScoreState] = None
    score: Optional[WorkoutScore] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Workout":
        sport_id = d.get("sport_id", 0)
        return cls(
            id=d["id"],
            user_id=d["user_id"],
            created_at=parse_datetime(d.get("created_at")),
            updated_at=parse_datetime(d.get("updated_at")),
            start=parse_datetime(d.get("start")),
            end=parse_datetime(d.get("end")),
            timezone_offset=d.get("timezone_offset"),
            sport_id=sport_id,
            sport_name=get_sport_name(sport_id),
            score_state=parse_score_state(d.get("score_state")),
            score=parse_score(d, WorkoutScore.from_dict),
        )


def get_sport_name(sport_id: int) -> Optional[str]:
    """Display name for a WHOOP sport id, or None if unknown."""
    return SPORTS.get(sport_id)


class WorkoutService(CollectionService):
    """Workout endpoints."""

    def get_one(self, workout_id: int) -> Workout:
        """
        Get a single workout.

        GET /activity/workout/{workoutId}
        """
        return self._get(f"{WORKOUT_ENDPOINT}/{workout_id}", Workout.from_dict)

    def list_all(self, params: Optional[RequestParams] = None) -> Page[Workout]:
        """
        List workouts, newest first.

        GET /activity/workout
        """
        return self._list(WORKOUT_ENDPOINT, params, Workout.from_dict)
