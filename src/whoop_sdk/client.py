"""
WHOOP API HTTP Client.

Handles URL building, headers, rate limit tracking, and response checking.
Resource-specific calls live in the sibling modules (cycle, recovery, etc.).

Authentication is not handled here: pass a requests.Session that already
authenticates its requests (for example a requests_oauthlib.OAuth2Session).
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional, TypeVar
from urllib.parse import urljoin, urlsplit

import requests

from whoop_sdk.config import Settings
from whoop_sdk.cycle import CycleService
from whoop_sdk.errors import APIError, DecodeError, RateLimitExceeded, SerializationError, URLError
from whoop_sdk.rate_limit import RateLimitTracker, parse_rate_limit
from whoop_sdk.recovery import RecoveryService
from whoop_sdk.sleep import SleepService
from whoop_sdk.types import Rate
from whoop_sdk.user import UserService
from whoop_sdk.workout import WorkoutService

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WhoopClient:
    """
    WHOOP API client.

    Resource services are exposed as attributes:
    cycle, recovery, sleep, workout, user.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        settings: Optional[Settings] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._session = session if session is not None else requests.Session()
        self._settings = settings if settings is not None else Settings.from_env()
        self._clock = clock or _utcnow
        self._rate_limiter = RateLimitTracker()

        self.cycle = CycleService(self)
        self.recovery = RecoveryService(self)
        self.sleep = SleepService(self)
        self.user = UserService(self)
        self.workout = WorkoutService(self)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def rate_limit(self) -> Rate:
        """Rate limit as of the most recent response."""
        return self._rate_limiter.rate

    def new_request(self, method: str, path: str, body: Any = None) -> requests.Request:
        """
        Build a request for `path`, relative to the versioned API root.

        Args:
            method: HTTP method
            path: Endpoint path with a leading slash (e.g. "/cycle/1")
            body: Optional value to send JSON-encoded

        Raises:
            URLError: If the base URL or path cannot be parsed
            SerializationError: If body cannot be encoded as JSON
        """
        url = self._resolve(path)

        headers = {"Accept": "application/json"}
        data = None
        if body is not None:
            try:
                data = json.dumps(body)
            except (TypeError, ValueError) as e:
                raise SerializationError(f"cannot encode request body: {e}") from e
            headers["Content-Type"] = "application/json"

        return requests.Request(method, url, headers=headers, data=data)

    def _resolve(self, path: str) -> str:
        base_url = self._settings.base_url
        try:
            base = urlsplit(base_url)
            urlsplit(path)
        except ValueError as e:
            raise URLError(f"cannot join {base_url!r} and {path!r}: {e}") from e
        if not base.scheme or not base.netloc:
            raise URLError(f"invalid base URL {base_url!r}")
        if not path.startswith("/"):
            raise URLError(f"path {path!r} must start with /")
        api_version = self._settings.api_version.strip("/")
        if not api_version:
            raise URLError("API version must not be empty")

        if not base_url.endswith("/"):
            base_url += "/"
        return urljoin(base_url, api_version + path)

    def do(self, request: requests.Request, decode: Callable[[Any], T]) -> T:
        """
        Send a request and decode the JSON response with `decode`.

        The call is refused without touching the network when the last known
        rate limit is exhausted. The rate limit is refreshed from every
        response, including error responses.

        Raises:
            RateLimitExceeded: On a local rate limit hit or a 429 response
            APIError: On any other non-2xx response
            DecodeError: If the body is not the expected JSON
        """
        reserved = self._rate_limiter.check_before_call(self._clock(), request.method, request.url)

        logger.debug("%s %s", request.method, request.url)
        try:
            response = self._session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.data or None,
                timeout=self._settings.timeout,
            )
        except requests.RequestException:
            self._rate_limiter.release(reserved)
            raise
        now = self._clock()
        rate = self._rate_limiter.update_from_headers(response.headers, now)
        logger.debug(
            "%s %s -> %s (rate limit remaining=%s, reset=%s)",
            request.method, request.url, response.status_code, rate.remaining, rate.reset,
        )

        check_response(response, now, request.method, request.url)

        data = decode_json(response)
        try:
            return decode(data)
        except DecodeError:
            raise
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise DecodeError(f"unexpected response from {request.url}: {e}") from e

    def get(self, path: str, decode: Callable[[Any], T]) -> T:
        """Make a GET request to `path` and decode the response."""
        return self.do(self.new_request("GET", path), decode)


def check_response(response: requests.Response, now: datetime, method: str = "GET", url: str = "") -> None:
    """
    Raise the error matching a non-2xx response.

    Raises:
        RateLimitExceeded: On 429 Too Many Requests
        APIError: On any other status outside 200-299
    """
    status = response.status_code
    if 200 <= status <= 299:
        return
    if status == 429:
        raise RateLimitExceeded(parse_rate_limit(response.headers, now), method, url, response)
    try:
        message = response.text
    except (requests.RequestException, UnicodeDecodeError, LookupError):
        raise APIError(500, "could not decode error")
    raise APIError(status, message)


def decode_json(response: requests.Response) -> Any:
    """Parse the response body as JSON."""
    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(f"invalid JSON in response: {e}") from e
