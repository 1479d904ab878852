"""Tests for IntervalsClient: construction, delegation and end-to-end flows."""

import base64
import inspect

import pytest
import requests

from intervals_icu import IntervalsClient, IntervalsConfig
from intervals_icu.errors import ErrorCode, IntervalsAPIError, NotFoundError
from intervals_icu.services import (
    ActivityService,
    AthleteService,
    EventService,
    WellnessService,
    WorkoutService,
)

from conftest import call_kwargs, make_response


class TestClientInit:
    def test_defaults(self, session):
        client = IntervalsClient(api_key="k", session=session)
        assert client.config.athlete_id == "me"
        assert client.config.base_url == "https://intervals.icu/api/v1"
        assert client.config.timeout == 10000

    def test_custom_settings(self, session):
        client = IntervalsClient(
            api_key="k",
            athlete_id="i12345",
            base_url="https://custom.intervals.icu/api/v1",
            timeout=5000,
            session=session,
        )
        client.get_athlete()
        _, url, kwargs = call_kwargs(session.request)
        assert url == "https://custom.intervals.icu/api/v1/athlete/i12345"
        assert kwargs["timeout"] == 5.0

    def test_config_object(self, session):
        client = IntervalsClient(config=IntervalsConfig(api_key="k", athlete_id="i1"), session=session)
        client.get_athlete()
        _, url, _ = call_kwargs(session.request)
        assert url.endswith("/athlete/i1")

    def test_zero_timeout_rejected(self, session):
        with pytest.raises(ValueError, match="timeout"):
            IntervalsClient(api_key="k", timeout=0, session=session)

    def test_empty_athlete_id_rejected(self, session):
        with pytest.raises(ValueError, match="athlete_id"):
            IntervalsClient(api_key="k", athlete_id="", session=session)

    def test_api_key_required(self, session):
        with pytest.raises(ValueError, match="api_key"):
            IntervalsClient(session=session)

    def test_rate_limit_unknown_before_first_request(self, client):
        assert client.get_rate_limit_remaining() is None
        assert client.get_rate_limit_reset() is None

    def test_from_env(self, monkeypatch, session):
        monkeypatch.setenv("INTERVALS_API_KEY", "env-key")
        monkeypatch.setenv("INTERVALS_ATHLETE_ID", "i77")
        client = IntervalsClient.from_env(session=session)
        assert client.config.api_key == "env-key"
        assert client.config.athlete_id == "i77"

    def test_context_manager_closes_session(self, session, monkeypatch):
        closed = []
        monkeypatch.setattr(session, "close", lambda: closed.append(True))
        with IntervalsClient(api_key="k", session=session) as client:
            assert isinstance(client, IntervalsClient)
        assert closed == [True]


class TestServicesShareTransport:
    def test_one_transport_for_all_services(self, client):
        services = [client.athletes, client.events, client.wellness, client.workouts, client.activities]
        assert [type(s) for s in services] == [
            AthleteService, EventService, WellnessService, WorkoutService, ActivityService,
        ]
        assert len({id(s._transport) for s in services}) == 1

    @pytest.mark.parametrize("service_cls", [
        AthleteService, EventService, WellnessService, WorkoutService, ActivityService,
    ])
    def test_every_service_operation_exposed(self, client, service_cls):
        for name, _ in inspect.getmembers(service_cls, inspect.isfunction):
            if not name.startswith("_"):
                assert callable(getattr(client, name)), name


class TestEndToEnd:
    def test_get_athlete(self, client, session):
        session.request.return_value = make_response(200, json_body={"id": "i1", "name": "A"})

        athlete = client.get_athlete()

        method, url, _ = call_kwargs(session.request)
        assert method == "GET"
        assert url == "https://intervals.icu/api/v1/athlete/me"
        assert session.headers["Authorization"] == "Basic " + base64.b64encode(b"API_KEY:k").decode()
        assert athlete == {"id": "i1", "name": "A"}

    def test_create_event(self, client, session):
        data = {"start_date_local": "2024-01-20", "name": "X", "category": "WORKOUT"}
        session.request.return_value = make_response(201, json_body={**data, "id": 100})

        event = client.create_event(data)

        method, url, kwargs = call_kwargs(session.request)
        assert method == "POST"
        assert url == "https://intervals.icu/api/v1/athlete/me/events"
        assert kwargs["json"] == data
        assert event["id"] == 100
        assert event["name"] == "X"

    def test_not_found_is_deterministic(self, client, session):
        session.request.return_value = make_response(404)

        for _ in range(2):
            with pytest.raises(NotFoundError) as exc_info:
                client.get_event(99999)
            assert exc_info.value.code == "NOT_FOUND"
            assert exc_info.value.status == 404

        _, url, _ = call_kwargs(session.request)
        assert url.endswith("/athlete/me/events/99999")

    def test_rate_limit_last_write_wins(self, client, session):
        session.request.side_effect = [
            make_response(200, json_body={}, headers={"X-RateLimit-Remaining": "98"}),
            make_response(200, json_body={}, headers={"X-RateLimit-Remaining": "50"}),
        ]
        client.get_athlete()
        client.get_events()
        assert client.get_rate_limit_remaining() == 50

    def test_rate_limit_reset_tracked(self, client, session):
        session.request.return_value = make_response(
            200, json_body={}, headers={"X-RateLimit-Remaining": "98", "X-RateLimit-Reset": "1640000000"}
        )
        client.get_athlete()
        assert client.get_rate_limit_remaining() == 98
        assert client.get_rate_limit_reset().timestamp() == 1640000000

    def test_missing_headers_keep_tracked_values(self, client, session):
        session.request.side_effect = [
            make_response(200, json_body={}, headers={"X-RateLimit-Remaining": "98"}),
            make_response(200, json_body={}),
        ]
        client.get_athlete()
        client.get_athlete()
        assert client.get_rate_limit_remaining() == 98

    def test_delete_returns_none(self, client, session):
        session.request.return_value = make_response(204)
        assert client.delete_event(1) is None
        assert client.delete_wellness("2024-01-15") is None

    def test_client_usable_after_error(self, client, session):
        session.request.side_effect = [
            requests.ReadTimeout("timed out"),
            make_response(200, json_body={"id": "i1"}),
        ]
        with pytest.raises(IntervalsAPIError) as exc_info:
            client.get_athlete()
        assert exc_info.value.code == ErrorCode.TIMEOUT
        assert exc_info.value.status is None
        assert client.get_athlete() == {"id": "i1"}

    def test_rate_limited_with_known_reset(self, client, session):
        session.request.side_effect = [
            make_response(200, json_body={}, headers={"X-RateLimit-Reset": "1640000000"}),
            make_response(429),
        ]
        client.get_athlete()
        with pytest.raises(IntervalsAPIError) as exc_info:
            client.get_athlete()
        assert exc_info.value.code == ErrorCode.RATE_LIMIT_EXCEEDED
        assert exc_info.value.status == 429
        assert client.get_rate_limit_reset().isoformat() in exc_info.value.message

    def test_auth_failed(self, client, session):
        session.request.return_value = make_response(401, json_body={"message": "Unauthorized"})
        with pytest.raises(IntervalsAPIError) as exc_info:
            client.get_athlete()
        assert exc_info.value.code == ErrorCode.AUTH_FAILED
        assert exc_info.value.status == 401

    def test_streams_csv_upload_is_multipart(self, client, session):
        session.request.return_value = make_response(200, json_body={"success": True, "updated": ["watts"]})
        result = client.upload_streams_csv("i1", "time,watts\n0,100\n")
        method, url, kwargs = call_kwargs(session.request)
        assert method == "PUT"
        assert url.endswith("/activity/i1/streams.csv")
        assert "file" in kwargs["files"]
        assert result["success"] is True
