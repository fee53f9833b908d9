"""
WHOOP SDK settings.

Environment variables:
- WHOOP_API_BASE_URL: API root (default: https://api.prod.whoop.com/developer/)
- WHOOP_API_VERSION: Version path segment (default: v1)
- WHOOP_TIMEOUT: Request timeout in seconds (default: 30)
"""

import os
from dataclasses import dataclass
from typing import Optional


API_URL = "https://api.prod.whoop.com/developer/"
API_VERSION = "v1"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    """Where and how the client talks to the API."""
    base_url: str = API_URL
    api_version: str = API_VERSION
    timeout: Optional[float] = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Read settings from the environment.

        Raises:
            ValueError: If WHOOP_TIMEOUT is not a number
        """
        timeout = os.environ.get("WHOOP_TIMEOUT")
        return cls(
            base_url=os.environ.get("WHOOP_API_BASE_URL", API_URL),
            api_version=os.environ.get("WHOOP_API_VERSION", API_VERSION),
            timeout=_parse_timeout(timeout) if timeout else DEFAULT_TIMEOUT,
        )


def _parse_timeout(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"WHOOP_TIMEOUT must be a number of seconds, got {value!r}") from None
