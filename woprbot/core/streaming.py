"""Server-sent event decoding for streamed gateway responses.

Handles the standard SSE framing used by the gateway::

    data: {"id":"...","choices":[...]}\\n\\n
    data: [DONE]\\n\\n
"""

import codecs
import json
import logging
from collections.abc import AsyncIterator
from typing import Any, Generic, TypeVar

import httpx

from woprbot.core.exceptions import GatewayTimeoutError, GatewayUnreachableError, StreamError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DATA_PREFIX = "data: "
DONE_SENTINEL = "[DONE]"


class SSEDecoderState:
    """Undecoded tail of one in-flight stream, carried between reads."""

    def __init__(self) -> None:
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self.buffer = ""
        self.done = False

    def feed(self, chunk: bytes) -> list[Any]:
        """Consume one read from the network and return the frames it completes.

        Frames after the ``[DONE]`` sentinel are never returned, and ``done``
        is set so the caller stops reading.
        """
        self.buffer += self._decoder.decode(chunk)
        *lines, self.buffer = self.buffer.split("\n")

        frames = []
        for line in lines:
            if not line.startswith(DATA_PREFIX):
                continue
            data = line[len(DATA_PREFIX):].strip()
            if data == DONE_SENTINEL:
                self.done = True
                self.buffer = ""
                break
            try:
                frames.append(json.loads(data))
            except json.JSONDecodeError:
                logger.debug("Skipping malformed stream frame: %.200s", data)
        return frames


def parse_sse_stream(response: httpx.Response | None) -> AsyncIterator[Any]:
    """Decode an open SSE response into an async iterator of JSON frames.

    Args:
        response: A successful response sent with ``stream=True``

    Returns:
        Async iterator yielding frames in wire order. The response is closed
        when the iterator finishes or is closed.

    Raises:
        StreamError: If the response has no readable body.
    """
    if response is None or not _has_readable_body(response):
        raise StreamError("Response body is not readable")
    return _iter_frames(response)


async def _iter_frames(response: httpx.Response) -> AsyncIterator[Any]:
    state = SSEDecoderState()
    url = _request_url(response)
    try:
        async for chunk in response.aiter_bytes():
            for frame in state.feed(chunk):
                yield frame
            if state.done:
                break

    except (httpx.ConnectError, httpx.NetworkError) as e:
        logger.error(f"Connection to gateway {url} lost mid-stream: {e}")
        raise GatewayUnreachableError(
            f"Connection to gateway failed: {str(e)}",
            url=url,
        ) from e

    except httpx.TimeoutException as e:
        logger.error(f"Timeout reading stream from gateway {url}: {e}")
        raise GatewayTimeoutError(
            "Gateway did not respond in time",
            url=url,
        ) from e

    finally:
        await response.aclose()


def _request_url(response: httpx.Response) -> str | None:
    try:
        return str(response.request.url)
    except RuntimeError:
        # Response built without a request
        return None


def _has_readable_body(response: httpx.Response) -> bool:
    try:
        response.content
    except httpx.ResponseNotRead:
        return not (response.is_stream_consumed or response.is_closed)
    return True


class Stream(Generic[T]):
    """Async iterable over the frames of one streamed response.

    Use it as an async context manager, or call ``aclose()``, when you may
    stop iterating early; the underlying connection is released then.

        async with await bot.chat.completions.create(..., stream=True) as stream:
            async for chunk in stream:
                ...
    """

    def __init__(self, iterator: AsyncIterator[T], response: httpx.Response | None = None):
        self._iterator = iterator
        self._response = response
        self._closed = False

    def __aiter__(self) -> "Stream[T]":
        return self

    async def __anext__(self) -> T:
        if self._closed:
            raise StopAsyncIteration
        try:
            return await self._iterator.__anext__()
        except StopAsyncIteration:
            await self.aclose()
            raise

    async def aclose(self) -> None:
        """Stop the stream and release the response. Safe to call repeatedly."""
        if self._closed:
            return
        self._closed = True
        aclose = getattr(self._iterator, "aclose", None)
        if aclose is not None:
            await aclose()
        # An iterator closed before its first frame never reaches its own cleanup
        if self._response is not None:
            await self._response.aclose()

    async def __aenter__(self) -> "Stream[T]":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
