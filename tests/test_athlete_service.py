"""Tests for the athlete service."""

import pytest
from unittest.mock import Mock

from intervals_icu.services.athlete import AthleteService


@pytest.fixture
def transport():
    return Mock()


@pytest.fixture
def service(transport):
    return AthleteService(transport, "me")


def sent(transport):
    return transport.request.call_args[0][0]


class TestGetAthlete:
    def test_default_athlete(self, service, transport):
        transport.request.return_value = {"id": "i1", "name": "A"}
        assert service.get_athlete() == {"id": "i1", "name": "A"}
        d = sent(transport)
        assert d.method == "GET"
        assert d.path == "/athlete/me"
        assert d.body is None

    def test_explicit_athlete(self, service, transport):
        service.get_athlete("i42")
        assert sent(transport).path == "/athlete/i42"

    def test_configured_default(self, transport):
        AthleteService(transport, "i7").get_athlete()
        assert sent(transport).path == "/athlete/i7"


class TestUpdateAthlete:
    def test_put_with_body(self, service, transport):
        transport.request.return_value = {"id": "i1", "ftp": 250}
        result = service.update_athlete({"ftp": 250})
        d = sent(transport)
        assert d.method == "PUT"
        assert d.path == "/athlete/me"
        assert d.body == {"ftp": 250}
        assert result["ftp"] == 250


class TestSportSettings:
    def test_path(self, service, transport):
        transport.request.return_value = [{"types": ["Run"], "threshold_pace": 4.2}]
        result = service.get_sport_settings()
        assert sent(transport).path == "/athlete/me/sport-settings"
        assert result[0]["types"] == ["Run"]
