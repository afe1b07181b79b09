"""Pytest configuration and shared fixtures for all tests.

This module provides shared test fixtures including:
- A valid transaction request
- Client settings that ignore the local environment
- A recording mock transport standing in for the Chapa API
"""

from typing import Any

import httpx
import pytest
import pytest_asyncio
import structlog

from chapa_client.client import ChapaClient
from chapa_client.config import ChapaSettings

TEST_SECRET_KEY = "CHASECK_TEST-abcdef1234567890"


class RecordingTransport:
    """
    Mock transport that records every request and replies with a canned response.

    Usage:
        transport = RecordingTransport(status_code=400, json={"message": "invalid"})
        http_client = httpx.AsyncClient(transport=transport.mock)
    """

    def __init__(
        self,
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
    ):
        self.status_code = status_code
        self.json = {"status": "success"} if json is None and content is None else json
        self.content = content
        self.requests: list[httpx.Request] = []
        self.mock = httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after tests that reconfigure it."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings() -> ChapaSettings:
    """Settings with explicit values so CHAPA_* variables cannot leak in."""
    return ChapaSettings(
        base_url="https://api.chapa.co/v1",
        initialize_path="/transaction/initialize",
        verify_path="/transaction/verify/",
        timeout_seconds=5.0,
        secret_key="",
    )


@pytest.fixture
def valid_request() -> dict[str, Any]:
    """A complete initialize request with a caller-supplied tx_ref."""
    return {
        "amount": 100,
        "currency": "ETB",
        "email": "abebe@bikila.com",
        "first_name": "Abebe",
        "last_name": "Bikila",
        "callback_url": "https://example.com/callback",
        "tx_ref": "abc123",
    }


@pytest.fixture
def recording_transport() -> type[RecordingTransport]:
    """The RecordingTransport class, for tests needing a custom response."""
    return RecordingTransport


@pytest.fixture
def transport() -> RecordingTransport:
    """Transport answering 200 {"status": "success"}."""
    return RecordingTransport()


@pytest_asyncio.fixture
async def make_client(settings):
    """
    Factory building a ChapaClient on top of a recording transport.

    Every HTTP client the factory creates is closed after the test.
    """
    http_clients: list[httpx.AsyncClient] = []

    def _make_client(recording: RecordingTransport) -> ChapaClient:
        http_client = httpx.AsyncClient(transport=recording.mock)
        http_clients.append(http_client)
        return ChapaClient(TEST_SECRET_KEY, http_client=http_client, settings=settings)

    yield _make_client

    for http_client in http_clients:
        await http_client.aclose()


@pytest_asyncio.fixture
async def client(make_client, transport):
    """ChapaClient wired to the default success transport."""
    return make_client(transport)
