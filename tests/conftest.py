"""
Shared pytest fixtures for WHOOP SDK testing.
"""
import json
from datetime import datetime, timezone
from unittest.mock import Mock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from whoop_sdk.client import WhoopClient
from whoop_sdk.config import Settings


NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
API_ROOT = "https://api.prod.whoop.com/developer/v1"


def make_response(status_code=200, body=None, headers=None):
    """Build a real requests.Response.

    Dicts and lists are JSON-encoded; strings are sent as-is.
    """
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    response = requests.Response()
    response.status_code = status_code
    response._content = (body or "").encode("utf-8")
    response.encoding = "utf-8"
    response.headers = CaseInsensitiveDict(headers or {})
    return response


def requested_url(session):
    """URL of the last request sent through a mock session."""
    return session.request.call_args[0][1]


@pytest.fixture
def mock_session():
    """A stand-in for an authenticated requests.Session."""
    session = Mock()
    session.request = Mock(return_value=make_response(200, {}))
    return session


@pytest.fixture
def client(mock_session):
    return WhoopClient(session=mock_session, settings=Settings(), clock=lambda: NOW)


@pytest.fixture
def cycle_json():
    return {
        "id": 93845,
        "user_id": 10129,
        "created_at": "2022-04-24T11:25:44.774Z",
        "updated_at": "2022-04-24T14:25:44.774Z",
        "start": "2022-04-24T02:25:44.774Z",
        "end": "2022-04-24T10:25:44.774Z",
        "timezone_offset": "-05:00",
        "score_state": "SCORED",
        "score": {
            "strain": 5.2951527,
            "kilojoule": 8288.297,
            "average_heart_rate": 68,
            "max_heart_rate": 141,
        },
    }


@pytest.fixture
def workout_json():
    return {
        "id": 1,
        "user_id": 1,
        "created_at": "2022-12-01T21:26:05.038Z",
        "updated_at": "2022-12-01T21:33:13.930Z",
        "start": "2022-12-01T21:09:54.896Z",
        "end": "2022-12-01T21:26:05.915Z",
        "timezone_offset": "-08:00",
        "sport_id": 27,
        "score_state": "SCORED",
        "score": {
            "strain": 5.1367,
            "average_heart_rate": 110,
            "max_heart_rate": 136,
            "kilojoule": 419.1227,
            "percent_recorded": 100.0,
            "distance_meter": 0.0,
            "altitude_gain_meter": 0.0,
            "altitude_change_meter": 0.0,
            "zone_duration": {
                "zone_zero_milli": 0,
                "zone_one_milli": 297044,
                "zone_two_milli": 650843,
                "zone_three_milli": 24032,
                "zone_four_milli": 0,
                "zone_five_milli": 0,
            },
        },
    }
