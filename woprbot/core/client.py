"""Request dispatch to the WOPR gateway.

Every resource method funnels through ``GatewayClient``: one HTTP exchange
per call, bearer authentication on every request, and a single error path
that turns any non-2xx response into a classified ``WOPRError``.
"""

import json
import logging
import time
from typing import Any

import httpx
from pydantic import ValidationError

from woprbot.core.config import ClientOptions
from woprbot.core.exceptions import (
    GatewayTimeoutError,
    GatewayUnreachableError,
    InvalidResponseError,
    classify,
)
from woprbot.core.logging import generate_request_id, request_id_var
from woprbot.core.schemas import ErrorBody, fallback_error_body

logger = logging.getLogger(__name__)


class GatewayClient:
    """Sends requests to the gateway on behalf of resource facades.

    Args:
        options: Immutable client identity (api key and base URL)
        http_client: httpx client used to perform the exchanges
    """

    def __init__(self, options: ClientOptions, http_client: httpx.AsyncClient):
        self.options = options
        self._http = http_client

    @property
    def base_url(self) -> str:
        return self.options.base_url

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.options.api_key}"}

    def _json_headers(self) -> dict[str, str]:
        return {**self._auth_headers(), "Content-Type": "application/json"}

    async def post_json(self, path: str, body: Any) -> Any:
        """POST a JSON body and return the parsed JSON response."""
        response = await self._send("POST", path, json=body, headers=self._json_headers())
        return _parse_json(response)

    async def post_stream(self, path: str, body: Any) -> httpx.Response:
        """POST a JSON body and return the still-open response for stream decoding."""
        return await self._send(
            "POST", path, stream=True, json=body, headers=self._json_headers()
        )

    async def post_binary(self, path: str, body: Any) -> httpx.Response:
        """POST a JSON body and return the still-open response with its raw body.

        The caller owns the response and must read and close it, e.g.
        ``await response.aread()`` followed by ``await response.aclose()``.
        """
        return await self._send(
            "POST", path, stream=True, json=body, headers=self._json_headers()
        )

    async def post_form(
        self,
        path: str,
        data: dict[str, Any],
        files: dict[str, Any],
    ) -> Any:
        """POST a multipart form and return the parsed JSON response.

        Content-Type must not be set here; httpx derives it, boundary
        included, from the multipart payload. ``files`` must be non-empty
        or httpx falls back to a urlencoded body.
        """
        response = await self._send(
            "POST", path, data=data, files=files, headers=self._auth_headers()
        )
        return _parse_json(response)

    async def get(self, path: str) -> Any:
        """GET a resource and return the parsed JSON response."""
        response = await self._send("GET", path, headers=self._auth_headers())
        return _parse_json(response)

    async def delete(self, path: str) -> Any:
        """DELETE a resource and return the parsed JSON response."""
        response = await self._send("DELETE", path, headers=self._auth_headers())
        return _parse_json(response)

    async def _send(
        self,
        method: str,
        path: str,
        stream: bool = False,
        **request_kwargs: Any,
    ) -> httpx.Response:
        """
        Perform one exchange with the gateway.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            stream: Leave the response body unread and the response open
            **request_kwargs: Passed to ``httpx.AsyncClient.build_request``

        Returns:
            httpx.Response with a 2xx status

        Raises:
            WOPRError: If the gateway answers with a non-2xx status
            GatewayUnreachableError: If connection to the gateway fails
            GatewayTimeoutError: If the request times out
        """
        url = self.options.url_for(path)
        token = request_id_var.set(generate_request_id())
        start = time.perf_counter()
        try:
            request = self._http.build_request(method, url, **request_kwargs)
            logger.debug("%s %s", method, url)
            try:
                response = await self._http.send(request, stream=stream)
                elapsed_ms = (time.perf_counter() - start) * 1000
                logger.debug(
                    "%s %s -> %s (%.0f ms)", method, url, response.status_code, elapsed_ms
                )
                if not response.is_success:
                    await _raise_for_status(response)
                return response

            except (httpx.ConnectError, httpx.NetworkError) as e:
                logger.error(f"Connection error to gateway {url}: {e}")
                raise GatewayUnreachableError(
                    f"Connection to gateway failed: {str(e)}",
                    url=url,
                ) from e

            except httpx.TimeoutException as e:
                logger.error(f"Timeout error to gateway {url}: {e}")
                raise GatewayTimeoutError(
                    "Gateway did not respond in time",
                    url=url,
                ) from e
        finally:
            request_id_var.reset(token)


async def _raise_for_status(response: httpx.Response) -> None:
    """Read the error body, release the response and raise the classified error."""
    try:
        await response.aread()
    finally:
        await response.aclose()

    payload = parse_error_body(response)
    error = classify(response.status_code, payload)
    logger.warning(
        "Gateway returned %s (%s/%s): %s",
        response.status_code,
        error.kind.value,
        error.code,
        error.message,
    )
    raise error


def parse_error_body(response: httpx.Response) -> ErrorBody:
    """Parse a gateway error body, or synthesize one if it is missing or malformed."""
    try:
        return ErrorBody.model_validate_json(response.content)
    except ValidationError:
        return fallback_error_body(response.status_code, response.reason_phrase)


def _parse_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, ValueError) as e:
        logger.error(f"Failed to parse gateway response: {e}")
        raise InvalidResponseError("Gateway returned invalid JSON") from e
