# tests/conftest.py
import asyncio
import os
import sys

import httpx
import pytest

# Add the project root directory to sys.path so that "import finnder" works
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from finnder.services.finnder_service import FinnderService  # noqa: E402

API_KEY = "test-key"
CCCODE = "ro-bucharest"


class FakeFinnder:
    """
    Stand-in for the Finnder API: answers every GET with a canned response
    and records the requests it received.
    """

    def __init__(self) -> None:
        self.status_code = 200
        self.body = b""
        self.requests: list[httpx.Request] = []

    def respond(self, body, status_code: int = 200) -> None:
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fake_finnder() -> FakeFinnder:
    return FakeFinnder()


@pytest.fixture
def service(fake_finnder: FakeFinnder):
    transport = httpx.MockTransport(fake_finnder.handler)
    client = httpx.Client(transport=transport)
    async_client = httpx.AsyncClient(transport=transport)
    yield FinnderService(API_KEY, CCCODE, client=client, async_client=async_client)
    client.close()
    asyncio.run(async_client.aclose())
