"""
WHOOP SDK exception hierarchy.

Every error raised by the SDK derives from WhoopError. Transport failures
from requests (timeouts, connection errors) are not wrapped.
"""

from typing import Optional

import requests

from whoop_sdk.types import Rate


class WhoopError(Exception):
    """Base exception for all whoop_sdk errors."""


class URLError(WhoopError, ValueError):
    """The base URL or a request path could not be parsed or joined."""


class SerializationError(WhoopError, ValueError):
    """A request body could not be encoded as JSON."""


class DecodeError(WhoopError, ValueError):
    """A response body was not the JSON the endpoint promises."""


class APIError(WhoopError):
    """A non-2xx response other than 429 Too Many Requests."""

    def __init__(self, code: int, message: str):
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code} error. {self.message}"


class RateLimitExceeded(WhoopError):
    """
    The API rate limit has been reached or exceeded.

    Raised either for a real 429 response or locally, without a network
    call, when the last known rate limit says no calls are left before the
    reset time. In the local case `response` is None.
    """

    status_code = 429

    def __init__(
        self,
        rate: Rate,
        method: str,
        url: str,
        response: Optional[requests.Response] = None,
    ):
        self.rate = rate
        self.method = method
        self.url = url
        self.response = response
        self.message = rate_limit_message(rate)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.method} {self.url}: {self.status_code} {self.message}"


def rate_limit_message(rate: Rate) -> str:
    reset = rate.reset.strftime("%Y-%m-%dT%H:%M:%S") if rate.reset else "unknown"
    return (
        "API rate limit has been reached or exceeded. "
        f"Please try again after {reset}"
    )
