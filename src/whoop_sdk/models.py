"""
Shared record plumbing: the paginated envelope and field parsers.

Resource records themselves live next to their service (cycle, sleep, ...).
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from whoop_sdk.errors import DecodeError
from whoop_sdk.types import ScoreState

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of a WHOOP collection.

    Records keep the server's order (newest start time first).
    A next_token of None means this is the last page.
    """
    records: List[T] = field(default_factory=list)
    next_token: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any], record: Callable[[Dict[str, Any]], T]) -> "Page[T]":
        records = d.get("records") or []
        if not isinstance(records, list):
            raise DecodeError(f"expected a list of records, got {type(records).__name__}")
        return cls(
            records=[record(r) for r in records],
            next_token=d.get("next_token") or None,
        )


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse a WHOOP ISO 8601 timestamp such as '2022-04-24T02:25:44.774Z'."""
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def parse_score_state(value: Optional[str]) -> Optional[ScoreState]:
    if value is None:
        return None
    try:
        return ScoreState(value)
    except ValueError:
        logger.debug("Unknown score_state %r", value)
        return None


def parse_score(d: Dict[str, Any], score: Callable[[Dict[str, Any]], T]) -> Optional[T]:
    """Build the nested score object, or None when the record carries none."""
    raw = d.get("score")
    if not raw:
        return None
    return score(raw)
