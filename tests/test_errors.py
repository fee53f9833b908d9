"""Tests for the SDK exception hierarchy."""

from datetime import datetime, timezone

from whoop_sdk.errors import (
    APIError,
    DecodeError,
    RateLimitExceeded,
    SerializationError,
    URLError,
    WhoopError,
)
from whoop_sdk.types import Rate


class TestHierarchy:
    def test_all_derive_from_whoop_error(self):
        for cls in (URLError, SerializationError, DecodeError, RateLimitExceeded, APIError):
            assert issubclass(cls, WhoopError)

    def test_rate_limit_is_not_api_error(self):
        assert not issubclass(RateLimitExceeded, APIError)


class TestMessages:
    def test_api_error(self):
        err = APIError(404, "not found")
        assert str(err) == "404 error. not found"
        assert err.code == 404

    def test_rate_limit_unknown_reset(self):
        err = RateLimitExceeded(Rate(), "GET", "https://example.com/v1/cycle")
        assert "try again after unknown" in err.message

    def test_rate_limit(self):
        reset = datetime(2024, 1, 1, 13, 0, 0, tzinfo=timezone.utc)
        err = RateLimitExceeded(Rate(remaining=0, reset=reset), "GET", "https://example.com/v1/cycle")
        assert str(err) == (
            "GET https://example.com/v1/cycle: 429 API rate limit has been reached "
            "or exceeded. Please try again after 2024-01-01T13:00:00"
        )
