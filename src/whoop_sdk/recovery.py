"""
WHOOP recovery.

Recovery is scored once per cycle, from the sleep that ends it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from whoop_sdk.cycle import CYCLE_ENDPOINT
from whoop_sdk.models import Page, parse_datetime, parse_score, parse_score_state
from whoop_sdk.params import RequestParams
from whoop_sdk.service import CollectionService
from whoop_sdk.types import ScoreState

RECOVERY_ENDPOINT = "/recovery"


@dataclass
class RecoveryScore:
    """WHOOP's recovery evaluation.

    spo2_percentage and skin_temp_celsius are only reported by WHOOP 4.0
    and later devices.
    """
    user_calibrating: bool = False
    recovery_score: float = 0.0  # 0-100%
    resting_heart_rate: float = 0.0
    hrv_rmssd_milli: float = 0.0
    spo2_percentage: float = 0.0
    skin_temp_celsius: float = 0.0

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "RecoveryScore":
        return cls(
            user_calibrating=d.get("user_calibrating", False),
            recovery_score=d.get("recovery_score", 0.0),
            resting_heart_rate=d.get("resting_heart_rate", 0.0),
            hrv_rmssd_milli=d.get("hrv_rmssd_milli", 0.0),
            spo2_percentage=d.get("spo2_percentage", 0.0),
            skin_temp_celsius=d.get("skin_temp_celsius", 0.0),
        )


@dataclass
class Recovery:
    """A member's recovery for one cycle."""
    cycle_id: int
    sleep_id: int
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    score_state: Optional[ScoreState] = None
    score: Optional[RecoveryScore] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Recovery":
        return cls(
            cycle_id=d["cycle_id"],
            sleep_id=d["sleep_id"],
            user_id=d["user_id"],
            created_at=parse_datetime(d.get("created_at")),
            updated_at=parse_datetime(d.get("updated_at")),
            score_state=parse_score_state(d.get("score_state")),
            score=parse_score(d, RecoveryScore.from_dict),
        )


class RecoveryService(CollectionService):
    """Recovery endpoints."""

    def get_one_by_cycle_id(self, cycle_id: int) -> Recovery:
        """
        Get the recovery for a cycle.

        GET /cycle/{cycleId}/recovery
        """
        return self._get(f"{CYCLE_ENDPOINT}/{cycle_id}{RECOVERY_ENDPOINT}", Recovery.from_dict)

    def list_all(self, params: Optional[RequestParams] = None) -> Page[Recovery]:
        """
        List recoveries, newest first.

        GET /recovery
        """
        return self._list(RECOVERY_ENDPOINT, params, Recovery.from_dict)
