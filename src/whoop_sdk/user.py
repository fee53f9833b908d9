"""
WHOOP user profile and body measurements.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from whoop_sdk.service import Service

USER_ENDPOINT = "/user"


@dataclass
class UserProfile:
    """Basic profile of the authenticated member."""
    user_id: Optional[int] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "UserProfile":
        return cls(
            user_id=d.get("user_id"),
            email=d.get("email"),
            first_name=d.get("first_name"),
            last_name=d.get("last_name"),
        )


@dataclass
class BodyMeasurement:
    height_meter: float = 0.0
    weight_kilogram: float = 0.0
    max_heart_rate: int = 0

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "BodyMeasurement":
        return cls(
            height_meter=d.get("height_meter", 0.0),
            weight_kilogram=d.get("weight_kilogram", 0.0),
            max_heart_rate=d.get("max_heart_rate", 0),
        )


class UserService(Service):
    """User endpoints."""

    def get_profile(self) -> UserProfile:
        """
        Get the authenticated member's name and email.

        GET /user/profile/basic
        """
        return self._get(f"{USER_ENDPOINT}/profile/basic", UserProfile.from_dict)

    def get_body_measurement(self) -> BodyMeasurement:
        """
        Get the authenticated member's height, weight and max heart rate.

        GET /user/measurement/body
        """
        return self._get(f"{USER_ENDPOINT}/measurement/body", BodyMeasurement.from_dict)
