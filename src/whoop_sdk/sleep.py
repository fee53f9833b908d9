"""
WHOOP sleep activities.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from whoop_sdk.models import Page, parse_datetime, parse_score, parse_score_state
from whoop_sdk.params import RequestParams
from whoop_sdk.service import CollectionService
from whoop_sdk.types import ScoreState

SLEEP_ENDPOINT = "/activity/sleep"


@dataclass
class SleepStageSummary:
    """Time spent in each sleep stage, in milliseconds."""
    total_in_bed_time_milli: int = 0
    total_awake_time_milli: int = 0
    total_no_data_time_milli: int = 0
    total_light_sleep_time_milli: int = 0
    total_slow_wave_sleep_time_milli: int = 0
    total_rem_sleep_time_milli: int = 0
    sleep_cycle_count: int = 0
    disturbance_count: int = 0

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SleepStageSummary":
        return cls(
            total_in_bed_time_milli=d.get("total_in_bed_time_milli", 0),
            total_awake_time_milli=d.get("total_awake_time_milli", 0),
            total_no_data_time_milli=d.get("total_no_data_time_milli", 0),
            total_light_sleep_time_milli=d.get("total_light_sleep_time_milli", 0),
            total_slow_wave_sleep_time_milli=d.get("total_slow_wave_sleep_time_milli", 0),
            total_rem_sleep_time_milli=d.get("total_rem_sleep_time_milli", 0),
            sleep_cycle_count=d.get("sleep_cycle_count", 0),
            disturbance_count=d.get("disturbance_count", 0),
        )


@dataclass
class SleepNeeded:
    """Breakdown of the sleep the member needed, in milliseconds.

    need_from_recent_nap_milli is zero or negative.
    """
    baseline_milli: int = 0
    need_from_sleep_debt_milli: int = 0
    need_from_recent_strain_milli: int = 0
    need_from_recent_nap_milli: int = 0

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SleepNeeded":
        return cls(
            baseline_milli=d.get("baseline_milli", 0),
            need_from_sleep_debt_milli=d.get("need_from_sleep_debt_milli", 0),
            need_from_recent_strain_milli=d.get("need_from_recent_strain_milli", 0),
            need_from_recent_nap_milli=d.get("need_from_recent_nap_milli", 0),
        )


@dataclass
class SleepScore:
    stage_summary: SleepStageSummary
    sleep_needed: SleepNeeded
    respiratory_rate: float = 0.0
    sleep_performance_percentage: float = 0.0
    sleep_consistency_percentage: float = 0.0
    sleep_efficiency_percentage: float = 0.0

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SleepScore":
        return cls(
            stage_summary=SleepStageSummary.from_dict(d.get("stage_summary") or {}),
            sleep_needed=SleepNeeded.from_dict(d.get("sleep_needed") or {}),
            respiratory_rate=d.get("respiratory_rate", 0.0),
            sleep_performance_percentage=d.get("sleep_performance_percentage", 0.0),
            sleep_consistency_percentage=d.get("sleep_consistency_percentage", 0.0),
            sleep_efficiency_percentage=d.get("sleep_efficiency_percentage", 0.0),
        )


@dataclass
class Sleep:
    """A sleep or nap."""
    id: int
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    timezone_offset: Optional[str] = None
    nap: bool = False
    score_state: Optional[ScoreState] = None
    score: Optional[SleepScore] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Sleep":
        return cls(
            id=d["id"],
            user_id=d["user_id"],
            created_at=parse_datetime(d.get("created_at")),
            updated_at=parse_datetime(d.get("updated_at")),
            start=parse_datetime(d.get("start")),
            end=parse_datetime(d.get("end")),
            timezone_offset=d.get("timezone_offset"),
            nap=d.get("nap", False),
            score_state=parse_score_state(d.get("score_state")),
            score=parse_score(d, SleepScore.from_dict),
        )


class SleepService(CollectionService):
    """Sleep endpoints."""

    def get_one(self, sleep_id: int) -> Sleep:
        """
        Get a single sleep.

        GET /activity/sleep/{sleepId}
        """
        return self._get(f"{SLEEP_ENDPOINT}/{sleep_id}", Sleep.from_dict)

    def list_all(self, params: Optional[RequestParams] = None) -> Page[Sleep]:
        """
        List sleeps, newest first.

        GET /activity/sleep
        """
        return self._list(SLEEP_ENDPOINT, params, Sleep.from_dict)
