"""Shared test fixtures."""

import json
from pathlib import Path
from typing import Any
from urllib.parse import parse_qsl, urlsplit

import pytest

from seclient.api.client import SolarEdgeClient
from seclient.api.transport import TransportResponse
from seclient.config.settings import Settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"

TEST_API_KEY = "test_api_key_12345"
TEST_BASE_URL = "https://monitoring.test"


class FakeTransport:
    """Transport that replays canned responses and records every request."""

    def __init__(
        self,
        status_code: int = 200,
        content: bytes = b"{}",
        error: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.content = content
        self.error = error
        self.calls: list[tuple[str, str, bytes | None]] = []

    def respond(self, content: bytes | dict[str, Any], status_code: int = 200) -> None:
        """Set the response returned by subsequent requests."""
        if isinstance(content, dict):
            content = json.dumps(content).encode()
        self.content = content
        self.status_code = status_code

    async def execute(
        self,
        method: str,
        url: str,
        body: bytes | None = None,
    ) -> TransportResponse:
        self.calls.append((method, url, body))
        if self.error is not None:
            raise self.error
        return TransportResponse(self.status_code, self.content)

    @property
    def last_url(self) -> str:
        return self.calls[-1][1]

    @property
    def last_path(self) -> str:
        return urlsplit(self.last_url).path

    @property
    def last_query(self) -> list[tuple[str, str]]:
        return parse_qsl(urlsplit(self.last_url).query, keep_blank_values=True)


def load_fixture(name: str) -> bytes:
    """Read a golden response body from tests/fixtures."""
    return (FIXTURES_DIR / f"{name}.json").read_bytes()


@pytest.fixture
def test_settings(monkeypatch) -> Settings:
    """Create test settings."""
    monkeypatch.delenv("SECLIENT_LOG_FILE", raising=False)
    return Settings(
        api_key=TEST_API_KEY,
        api_base_url=TEST_BASE_URL,
        log_level="DEBUG",
    )


@pytest.fixture
def transport() -> FakeTransport:
    """Create a recording fake transport."""
    return FakeTransport()


@pytest.fixture
def client(transport, test_settings) -> SolarEdgeClient:
    """Create a client wired to the fake transport."""
    return SolarEdgeClient.from_settings(transport, test_settings)


@pytest.fixture
def fixture_loader():
    """Return a loader for golden response bodies."""
    return load_fixture
