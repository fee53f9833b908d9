"""Tests for user endpoints."""

from whoop_sdk.user import BodyMeasurement, UserProfile
from tests.conftest import API_ROOT, make_response, requested_url


class TestGetProfile:
    def test_returns_profile(self, client, mock_session):
        mock_session.request.return_value = make_response(200, {
            "user_id": 10129,
            "email": "jsmith123@whoop.com",
            "first_name": "John",
            "last_name": "Smith",
        })
        profile = client.user.get_profile()

        assert requested_url(mock_session) == f"{API_ROOT}/user/profile/basic"
        assert profile == UserProfile(
            user_id=10129, email="jsmith123@whoop.com", first_name="John", last_name="Smith",
        )


class TestGetBodyMeasurement:
    def test_returns_measurement(self, client, mock_session):
        mock_session.request.return_value = make_response(200, {
            "height_meter": 1.8288,
            "weight_kilogram": 90.7185,
            "max_heart_rate": 200,
        })
        body = client.user.get_body_measurement()

        assert requested_url(mock_session) == f"{API_ROOT}/user/measurement/body"
        assert body == BodyMeasurement(height_meter=1.8288, weight_kilogram=90.7185, max_heart_rate=200)

    def test_missing_fields_default(self, client, mock_session):
        mock_session.request.return_value = make_response(200, {})
        assert client.user.get_body_measurement() == BodyMeasurement()
