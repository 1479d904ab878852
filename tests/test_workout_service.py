"""Tests for the workout library service."""

import pytest
from unittest.mock import Mock

from intervals_icu.services.workouts import WorkoutService


@pytest.fixture
def transport():
    return Mock()


@pytest.fixture
def service(transport):
    return WorkoutService(transport, "me")


def sent(transport):
    return transport.request.call_args[0][0]


class TestWorkouts:
    def test_get_workouts(self, service, transport):
        service.get_workouts({"limit": 20, "offset": 40})
        d = sent(transport)
        assert (d.method, d.path) == ("GET", "/athlete/me/workouts")
        assert d.params == {"limit": 20, "offset": 40}

    def test_get_workout(self, service, transport):
        service.get_workout(7)
        assert sent(transport).path == "/athlete/me/workouts/7"

    def test_create_workout(self, service, transport):
        data = {"start_date_local": "2024-01-15", "name": "Tempo Run", "description": "45 min tempo"}
        transport.request.return_value = {**data, "id": 55}
        assert service.create_workout(data)["id"] == 55
        d = sent(transport)
        assert (d.method, d.path, d.body) == ("POST", "/athlete/me/workouts", data)

    def test_update_workout(self, service, transport):
        service.update_workout(7, {"name": "Updated Tempo Run"})
        d = sent(transport)
        assert (d.method, d.path, d.body) == ("PUT", "/athlete/me/workouts/7", {"name": "Updated Tempo Run"})

    def test_delete_workout(self, service, transport):
        transport.request.return_value = None
        assert service.delete_workout(7) is None
        assert sent(transport).method == "DELETE"
