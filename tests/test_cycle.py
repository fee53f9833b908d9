"""Tests for cycle endpoints."""

from datetime import datetime, timezone

import pytest

from whoop_sdk.cycle import Cycle
from whoop_sdk.errors import DecodeError
from whoop_sdk.params import RequestParams
from whoop_sdk.types import ScoreState
from tests.conftest import API_ROOT, make_response, requested_url


class TestGetOne:
    def test_returns_cycle(self, client, mock_session, cycle_json):
        mock_session.request.return_value = make_response(200, cycle_json)
        cycle = client.cycle.get_one(93845)

        assert requested_url(mock_session) == f"{API_ROOT}/cycle/93845"
        assert cycle.id == 93845
        assert cycle.user_id == 10129
        assert cycle.start == datetime(2022, 4, 24, 2, 25, 44, 774000, tzinfo=timezone.utc)
        assert cycle.timezone_offset == "-05:00"
        assert cycle.score_state is ScoreState.SCORED
        assert cycle.score.strain == pytest.approx(5.2951527)
        assert cycle.score.max_heart_rate == 141

    def test_minimal_record(self, client, mock_session):
        mock_session.request.return_value = make_response(200, {"id": 1, "user_id": 1})
        cycle = client.cycle.get_one(1)
        assert cycle == Cycle(id=1, user_id=1)

    def test_current_cycle_has_no_end(self, client, mock_session, cycle_json):
        del cycle_json["end"]
        cycle_json["score_state"] = "PENDING_SCORE"
        del cycle_json["score"]
        mock_session.request.return_value = make_response(200, cycle_json)
        cycle = client.cycle.get_one(93845)
        assert cycle.end is None
        assert cycle.score_state is ScoreState.PENDING_SCORE
        assert cycle.score is None

    def test_missing_id(self, client, mock_session):
        mock_session.request.return_value = make_response(200, {"user_id": 1})
        with pytest.raises(DecodeError):
            client.cycle.get_one(1)

    def test_bad_timestamp(self, client, mock_session):
        mock_session.request.return_value = make_response(
            200, {"id": 1, "user_id": 1, "start": "yesterday"},
        )
        with pytest.raises(DecodeError):
            client.cycle.get_one(1)


class TestListAll:
    def test_keeps_server_order(self, client, mock_session, cycle_json):
        older = dict(cycle_json, id=1, start="2022-04-23T02:25:44.774Z")
        newer = dict(cycle_json, id=2)
        mock_session.request.return_value = make_response(
            200, {"records": [newer, older], "next_token": None},
        )
        page = client.cycle.list_all()

        assert requested_url(mock_session) == f"{API_ROOT}/cycle"
        assert [c.id for c in page.records] == [2, 1]
        assert page.next_token is None

    def test_with_params(self, client, mock_session, cycle_json):
        mock_session.request.return_value = make_response(
            200, {"records": [cycle_json], "next_token": "MTIzOjEyMzEyMw"},
        )
        page = client.cycle.list_all(RequestParams(limit=1, next_token="abc"))

        assert requested_url(mock_session) == f"{API_ROOT}/cycle?limit=1&nextToken=abc"
        assert page.next_token == "MTIzOjEyMzEyMw"

    def test_empty_collection(self, client, mock_session):
        mock_session.request.return_value = make_response(200, {"records": []})
        page = client.cycle.list_all()
        assert page.records == []
        assert page.next_token is None

    def test_records_not_a_list(self, client, mock_session):
        mock_session.request.return_value = make_response(200, {"records": {"id": 1}})
        with pytest.raises(DecodeError):
            client.cycle.list_all()


class TestIterAll:
    def test_follows_next_token(self, client, mock_session, cycle_json):
        mock_session.request.side_effect = [
            make_response(200, {"records": [dict(cycle_json, id=3), dict(cycle_json, id=2)], "next_token": "page2"}),
            make_response(200, {"records": [dict(cycle_json, id=1)], "next_token": None}),
        ]
        ids = [c.id for c in client.cycle.iter_all(RequestParams(limit=2))]

        assert ids == [3, 2, 1]
        urls = [call[0][1] for call in mock_session.request.call_args_list]
        assert urls == [
            f"{API_ROOT}/cycle?limit=2",
            f"{API_ROOT}/cycle?limit=2&nextToken=page2",
        ]

    def test_single_page(self, client, mock_session, cycle_json):
        mock_session.request.return_value = make_response(
            200, {"records": [cycle_json], "next_token": None},
        )
        assert len(list(client.cycle.iter_all())) == 1
        assert mock_session.request.call_count == 1
