"""
Client-side rate limit tracking.

Each WhoopClient owns one RateLimitTracker. It remembers the rate limit the
server disclosed on the last response and refuses calls locally once that
limit is exhausted, until the reset time passes.
"""

import logging
import threading
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Mapping, Optional

from whoop_sdk.errors import RateLimitExceeded
from whoop_sdk.types import HEADER_RATE_REMAINING, HEADER_RATE_RESET, Rate

logger = logging.getLogger(__name__)


def parse_rate_limit(headers: Mapping[str, str], now: datetime) -> Rate:
    """
    Read the rate limit from response headers.

    A missing or unparsable remaining count reads as 0 and a missing or
    unparsable reset delta as an unknown reset time.
    """
    remaining = _parse_int(headers.get(HEADER_RATE_REMAINING))
    delta = _parse_int(headers.get(HEADER_RATE_RESET))
    return Rate(
        remaining=remaining or 0,
        reset=now + timedelta(seconds=delta) if delta is not None else None,
    )


def _parse_int(value: Optional[str]) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class RateLimitTracker:
    """Thread-safe holder of the last known Rate."""

    def __init__(self):
        self._lock = threading.Lock()
        self._rate = Rate()
        self._generation = 0

    @property
    def rate(self) -> Rate:
        with self._lock:
            return self._rate

    def check_before_call(self, now: datetime, method: str = "GET", url: str = "") -> Optional[int]:
        """
        Refuse the call if the rate limit is exhausted.

        Raises:
            RateLimitExceeded: if a reset time is known, no calls remain and
                the reset time is still ahead of `now`.

        An allowed call under a known limit takes one call off `remaining`
        so concurrent callers cannot both spend the last call. A token for
        release() is returned, or None when nothing was reserved.
        """
        with self._lock:
            rate = self._rate
            if rate.reset is None:
                return None
            if rate.remaining <= 0 and now < rate.reset:
                logger.debug("Rate limit exhausted until %s, skipping %s %s", rate.reset, method, url)
                raise RateLimitExceeded(rate, method, url)
            if rate.remaining <= 0:
                return None
            self._rate = replace(rate, remaining=rate.remaining - 1)
            return self._generation

    def release(self, reserved: Optional[int]) -> None:
        """
        Give back a call reserved by check_before_call when no response came.

        Nothing changes if a response has replaced the snapshot since.
        """
        if reserved is None:
            return
        with self._lock:
            if self._generation == reserved:
                self._rate = replace(self._rate, remaining=self._rate.remaining + 1)

    def update_from_headers(self, headers: Mapping[str, str], now: datetime) -> Rate:
        """Replace the snapshot with the limit disclosed by a response."""
        rate = parse_rate_limit(headers, now)
        with self._lock:
            self._rate = rate
            self._generation += 1
        return rate

    def reset_state(self) -> None:
        """Forget the last known limit, e.g. after switching credentials."""
        with self._lock:
            self._rate = Rate()
            self._generation += 1
