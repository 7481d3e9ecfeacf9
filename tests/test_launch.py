"""Tests for the launch lifecycle."""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from reportportal.exceptions import UnexpectedStatusError, InvalidStateError, RequestBuildError, ResponseDecodeError
from reportportal.models import LaunchMode, ItemStatus, ReportingState
from reportportal.services.launch import Launch
from tests.fixtures.report_portal_mocks import API_PATH

FIXED_NOW = datetime(2019, 1, 1, tzinfo=timezone.utc)


class TestNewLaunch:
    """Tests for Launch construction."""

    def test_is_pending(self, client):
        launch = Launch(client, "name")
        assert launch.id is None
        assert launch.state == ReportingState.PENDING
        assert launch.mode == LaunchMode.DEFAULT
        assert launch.tags == []
        assert launch.client is client


class TestStartLaunch:
    """Tests for Launch.start."""

    def test_successful_start(self, server, client):
        server.add("POST", f"{API_PATH}/launch", 201, {"id": "testid"})
        launch = Launch(client, "launch name", "launch description", LaunchMode.DEBUG, ["test", "tag", "test"])

        with patch("reportportal.services.launch.datetime") as mock_datetime:
            mock_datetime.now.return_value = FIXED_NOW
            launch.start()

        assert launch.id == "testid"
        assert launch.state == ReportingState.STARTED
        request = server.last_request
        assert request.method == "POST"
        assert request.url.path == f"{API_PATH}/launch"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Authorization"] == "Bearer 1234"
        assert server.last_json() == {
            "name": "launch name",
            "description": "launch description",
            "mode": "DEBUG",
            "tags": ["test", "tag", "test"],
            "start_time": 1546300800000,
        }

    def test_stores_launch_number(self, started_launch):
        assert started_launch.id == "launch123"
        assert started_launch.number == 7

    def test_omits_empty_tags(self, server, client):
        server.add("POST", f"{API_PATH}/launch", 201, {"id": "testid"})

        Launch(client, "launch name").start()

        assert "tags" not in server.last_json()

    def test_wrong_status_code(self, server, client):
        server.add("POST", f"{API_PATH}/launch", 200, {"id": "testid"})
        launch = Launch(client, "launch name")

        with pytest.raises(UnexpectedStatusError) as exc_info:
            launch.start()

        assert str(exc_info.value) == "failed with status 200 OK"
        assert launch.id is None
        assert launch.state == ReportingState.PENDING

    def test_undecodable_response(self, server, client):
        server.add("POST", f"{API_PATH}/launch", 201, content=b"created")
        launch = Launch(client, "launch name")

        with pytest.raises(ResponseDecodeError):
            launch.start()

        assert launch.id is None

    def test_invalid_mode_is_rejected_before_sending(self, server, client):
        launch = Launch(client, "launch name", mode="VERBOSE")

        with pytest.raises(RequestBuildError):
            launch.start()

        assert server.requests == []

    def test_start_twice(self, server, started_launch):
        with pytest.raises(InvalidStateError):
            started_launch.start()

        assert len(server.requests) == 1


class TestFinalizeLaunch:
    """Tests for Launch.stop and Launch.finish."""

    @pytest.mark.parametrize("method_name, action, final_state", [
        ("stop", "stop", ReportingState.STOPPED),
        ("finish", "finish", ReportingState.FINISHED),
    ])
    def test_successful_finalize(self, server, started_launch, method_name, action, final_state):
        server.add("PUT", f"{API_PATH}/launch/launch123/{action}", 200)

        getattr(started_launch, method_name)(ItemStatus.PASSED)

        request = server.last_request
        assert request.method == "PUT"
        assert request.headers["Content-Type"] == "application/json"
        body = server.last_json()
        assert body["status"] == "PASSED"
        assert isinstance(body["end_time"], int)
        assert started_launch.state == final_state

    def test_wrong_status_code(self, server, started_launch):
        server.add("PUT", f"{API_PATH}/launch/launch123/stop", 500)

        with pytest.raises(UnexpectedStatusError, match="^failed with status 500 Internal Server Error$"):
            started_launch.stop(ItemStatus.FAILED)

        assert started_launch.state == ReportingState.STARTED

    def test_finish_before_start(self, server, client):
        launch = Launch(client, "launch name")

        with pytest.raises(InvalidStateError):
            launch.finish(ItemStatus.PASSED)

        assert server.requests == []

    def test_finish_after_stop(self, server, started_launch):
        server.add("PUT", f"{API_PATH}/launch/launch123/stop", 200)
        started_launch.stop(ItemStatus.STOPPED)

        with pytest.raises(InvalidStateError):
            started_launch.finish(ItemStatus.PASSED)


class TestUpdateLaunch:
    """Tests for Launch.update."""

    def test_successful_update(self, server, started_launch):
        server.add("PUT", f"{API_PATH}/launch/launch123/update", 200)

        started_launch.update("new description", LaunchMode.DEBUG, ["new", "tags"])

        assert server.last_request.method == "PUT"
        assert server.last_json() == {"description": "new description", "mode": "DEBUG", "tags": ["new", "tags"]}
        assert started_launch.description == "launch description"

    def test_wrong_status_code(self, server, started_launch):
        server.add("PUT", f"{API_PATH}/launch/launch123/update", 500)

        with pytest.raises(UnexpectedStatusError, match="^failed with status 500 Internal Server Error$"):
            started_launch.update("", LaunchMode.DEFAULT, None)

    def test_update_before_start(self, client):
        with pytest.raises(InvalidStateError):
            Launch(client, "launch name").update("", LaunchMode.DEFAULT, None)


class TestDeleteLaunch:
    """Tests for Launch.delete."""

    def test_successful_delete(self, server, started_launch):
        server.add("DELETE", f"{API_PATH}/launch/launch123", 200)

        started_launch.delete()

        assert server.last_request.method == "DELETE"
        assert started_launch.state == ReportingState.DELETED

    def test_delete_finished_launch(self, server, started_launch):
        server.add("PUT", f"{API_PATH}/launch/launch123/finish", 200)
        server.add("DELETE", f"{API_PATH}/launch/launch123", 200)
        started_launch.finish(ItemStatus.PASSED)

        started_launch.delete()

        assert started_launch.state == ReportingState.DELETED

    def test_delete_twice(self, server, started_launch):
        server.add("DELETE", f"{API_PATH}/launch/launch123", 200)
        started_launch.delete()

        with pytest.raises(InvalidStateError):
            started_launch.delete()

    def test_wrong_status_code(self, server, started_launch):
        server.add("DELETE", f"{API_PATH}/launch/launch123", 404)

        with pytest.raises(UnexpectedStatusError, match="^failed with status 404 Not Found$"):
            started_launch.delete()

        assert started_launch.state == ReportingState.STARTED
