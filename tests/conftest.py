"""Shared fixtures: a WOPRBot wired to an in-memory httpx transport."""

import httpx
import pytest

from woprbot import WOPRBot
from woprbot.core.client import GatewayClient
from woprbot.core.config import ClientOptions


class ChunkedStream(httpx.AsyncByteStream):
    """Response body delivered as a fixed sequence of reads."""

    def __init__(self, chunks: list[bytes | str]):
        self.chunks = [c.encode("utf-8") if isinstance(c, str) else c for c in chunks]
        self.reads = 0
        self.close_count = 0

    async def __aiter__(self):
        for chunk in self.chunks:
            self.reads += 1
            yield chunk

    async def aclose(self) -> None:
        self.close_count += 1


@pytest.fixture
def chunked_stream():
    """Factory for ChunkedStream bodies."""
    return ChunkedStream


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def mock_http(sent_requests):
    """Build an httpx.AsyncClient that answers every request with ``reply``.

    ``reply`` is either an httpx.Response or a callable taking the request.
    """

    def _make(reply) -> httpx.AsyncClient:
        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if callable(reply):
                return reply(request)
            return reply

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def make_bot(mock_http):
    """Create a WOPRBot whose requests go to the mock transport."""

    def _make(reply, api_key: str = "test-key", **kwargs) -> WOPRBot:
        return WOPRBot(api_key=api_key, http_client=mock_http(reply), **kwargs)

    return _make


@pytest.fixture
def make_gateway_client(mock_http):
    """Create a bare GatewayClient against the mock transport."""

    def _make(reply, base_url: str = "https://gw.test/v1") -> GatewayClient:
        options = ClientOptions(api_key="test-key", base_url=base_url)
        return GatewayClient(options, mock_http(reply))

    return _make
