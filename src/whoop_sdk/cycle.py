"""
WHOOP physiological cycles.

A cycle is a member's day as WHOOP measures it: it starts when the member
falls asleep and ends when they fall asleep again.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from whoop_sdk.models import Page, parse_datetime, parse_score, parse_score_state
from whoop_sdk.params import RequestParams
from whoop_sdk.service import CollectionService
from whoop_sdk.types import ScoreState

CYCLE_ENDPOINT = "/cycle"


@dataclass
class CycleScore:
    """WHOOP's measurements for a cycle. Strain is scored from 0 to 21."""
    strain: float = 0.0
    kilojoule: float = 0.0
    average_heart_rate: float = 0.0
    max_heart_rate: float = 0.0

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "CycleScore":
        return cls(
            strain=d.get("strain", 0.0),
            kilojoule=d.get("kilojoule", 0.0),
            average_heart_rate=d.get("average_heart_rate", 0.0),
            max_heart_rate=d.get("max_heart_rate", 0.0),
        )


@dataclass
class Cycle:
    """A member's physiological cycle.

    end is None while the member is still in this cycle.
    """
    id: int
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    timezone_offset: Optional[str] = None  # '+hh:mm', '-hh:mm' or 'Z'
    score_state: Optional[ScoreState] = None
    score: Optional[CycleScore] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Cycle":
        return cls(
            id=d["id"],
            user_id=d["user_id"],
            created_at=parse_datetime(d.get("created_at")),
            updated_at=parse_datetime(d.get("updated_at")),
            start=parse_datetime(d.get("start")),
            end=parse_datetime(d.get("end")),
            timezone_offset=d.get("timezone_offset"),
            score_state=parse_score_state(d.get("score_state")),
            score=parse_score(d, CycleScore.from_dict),
        )


class CycleService(CollectionService):
    """Cycle endpoints."""

    def get_one(self, cycle_id: int) -> Cycle:
        """
        Get a single physiological cycle.

        GET /cycle/{cycleId}
        """
        return self._get(f"{CYCLE_ENDPOINT}/{cycle_id}", Cycle.from_dict)

    def list_all(self, params: Optional[RequestParams] = None) -> Page[Cycle]:
        """
        List physiological cycles, newest first.

        GET /cycle

        Returns:
            Page of cycles; next_token is set when more pages exist
        """
        return self._list(CYCLE_ENDPOINT, params, Cycle.from_dict)
