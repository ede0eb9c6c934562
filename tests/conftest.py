"""Shared fixtures: a fixed config and an httpx mock transport that records requests."""
import sys
from pathlib import Path

import httpx
import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from gmaps_tools.config import MapsConfig  # noqa: E402
from gmaps_tools.logging_utils import configure_logging  # noqa: E402
from gmaps_tools.tools import RequestExecutor, ToolRegistry  # noqa: E402

TEST_KEY = "test-key"


class FakeUpstream:
    """httpx.MockTransport handler. Records every request and replies with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json_body = {"status": "OK"}
        self.content: bytes | None = None
        self.exc: Exception | None = None

    def reply(self, status_code=200, json_body=None, content=None):
        self.status_code = status_code
        self.json_body = json_body
        self.content = content

    def fail(self, exc: Exception):
        self.exc = exc

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json_body)


@pytest.fixture
def config():
    return MapsConfig(api_key=TEST_KEY, timeout_seconds=5.0)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def executor(config, upstream):
    return RequestExecutor(config, transport=httpx.MockTransport(upstream))


@pytest.fixture
def registry(config, upstream):
    return ToolRegistry(config, transport=httpx.MockTransport(upstream))


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Send structlog output to stderr at WARNING so stdout assertions see only results."""
    configure_logging("WARNING")
