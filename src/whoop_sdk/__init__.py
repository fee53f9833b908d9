"""
WHOOP API SDK.

Thin typed wrapper over the WHOOP developer API (read-only endpoints).
Each service method maps 1:1 to a WHOOP endpoint.
"""

from whoop_sdk.client import WhoopClient
from whoop_sdk.config import Settings
from whoop_sdk.cycle import Cycle, CycleScore
from whoop_sdk.errors import (
    APIError,
    DecodeError,
    RateLimitExceeded,
    SerializationError,
    URLError,
    WhoopError,
)
from whoop_sdk.models import Page
from whoop_sdk.params import RequestParams
from whoop_sdk.recovery import Recovery, RecoveryScore
from whoop_sdk.sleep import Sleep, SleepNeeded, SleepScore, SleepStageSummary
from whoop_sdk.types import SPORTS, Rate, ScoreState
from whoop_sdk.user import BodyMeasurement, UserProfile
from whoop_sdk.workout import Workout, WorkoutScore, ZoneDuration

__all__ = [
    "WhoopClient",
    "Settings",
    "RequestParams",
    "Page",
    "Rate",
    "ScoreState",
    "SPORTS",
    # Records
    "Cycle", "CycleScore",
    "Recovery", "RecoveryScore",
    "Sleep", "SleepScore", "SleepStageSummary", "SleepNeeded",
    "Workout", "WorkoutScore", "ZoneDuration",
    "UserProfile", "BodyMeasurement",
    # Errors
    "WhoopError", "URLError", "SerializationError", "DecodeError",
    "RateLimitExceeded", "APIError",
]
