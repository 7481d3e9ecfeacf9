"""Shared fixtures for the ReportPortal client tests."""

import httpx
import pytest

from reportportal.services.client import Client
from reportportal.services.launch import Launch
from tests.fixtures.report_portal_mocks import MockReportPortal, API_PATH, PROJECT, TOKEN


@pytest.fixture
def server() -> MockReportPortal:
    return MockReportPortal()


@pytest.fixture
def client(server) -> Client:
    return Client("http://rp.test", PROJECT, TOKEN, transport=httpx.MockTransport(server))


@pytest.fixture
def started_launch(server, client) -> Launch:
    server.add("POST", f"{API_PATH}/launch", 201, {"id": "launch123", "number": 7})
    launch = Launch(client, "launch name", "launch description", tags=["tag1", "tag2"])
    launch.start()
    return launch
