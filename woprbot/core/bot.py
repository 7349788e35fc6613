"""The WOPRBot client: owns the identity and HTTP client, wires the namespaces."""

import logging
from typing import Any

import httpx

from woprbot.core.client import GatewayClient
from woprbot.core.config import DEFAULT_BASE_URL, ClientConfig, get_settings
from woprbot.resources.audio import Audio
from woprbot.resources.chat import Chat
from woprbot.resources.completions import Completions, Embeddings
from woprbot.resources.media import Images, Video
from woprbot.resources.messaging import Models, Sms
from woprbot.resources.phone import Phone

logger = logging.getLogger(__name__)


class WOPRBot:
    """Async client for the WOPR inference gateway.

    Args:
        api_key: WOPR service key (e.g. "wopr_sk_...")
        base_url: Gateway base URL (default: "https://api.wopr.bot/v1")
        timeout_s: Total timeout for gateway requests in seconds
        connect_timeout_s: Connection timeout for gateway requests in seconds
        http_client: Custom httpx client (for testing or custom transports).
            The caller keeps ownership of a client passed in here.

    Raises:
        ConfigurationError: If api_key is empty.

    Usage:
        >>> async with WOPRBot(api_key="wopr_sk_...") as bot:
        ...     completion = await bot.chat.completions.create(
        ...         model="gpt-4o", messages=[{"role": "user", "content": "Hi"}]
        ...     )
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_s: float = 300.0,
        connect_timeout_s: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.config = ClientConfig(
            api_key=api_key,
            base_url=base_url,
            timeout_s=timeout_s,
            connect_timeout_s=connect_timeout_s,
        )
        options = self.config.to_options()

        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(timeout_s, connect=connect_timeout_s)
            )
        self._http_client = http_client

        self._client = GatewayClient(options, http_client)
        self.chat = Chat(self._client)
        self.completions = Completions(self._client)
        self.embeddings = Embeddings(self._client)
        self.audio = Audio(self._client)
        self.images = Images(self._client)
        self.video = Video(self._client)
        self.phone = Phone(self._client)
        self.sms = Sms(self._client)
        self.models = Models(self._client)

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "WOPRBot":
        """Build a client from a ``ClientConfig``."""
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout_s=config.timeout_s,
            connect_timeout_s=config.connect_timeout_s,
            **kwargs,
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "WOPRBot":
        """Build a client from ``WOPR_*`` environment variables or a .env file."""
        return cls.from_config(get_settings().to_client_config(), **kwargs)

    @property
    def base_url(self) -> str:
        return self._client.base_url

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http_client.aclose()
            logger.debug("Closed HTTP client for %s", self.base_url)

    async def __aenter__(self) -> "WOPRBot":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
