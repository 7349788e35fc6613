"""woprbot - async Python client for the WOPR inference gateway.

Talks to the gateway's OpenAI-compatible endpoints (chat, completions,
embeddings, audio, images) and its own endpoints (video, phone, SMS,
model listing).

Usage:
    >>> from woprbot import WOPRBot
    >>>
    >>> async with WOPRBot(api_key="wopr_sk_...") as bot:
    ...     stream = await bot.chat.completions.create(
    ...         model="gpt-4o",
    ...         messages=[{"role": "user", "content": "Hello"}],
    ...         stream=True,
    ...     )
    ...     async with stream:
    ...         async for chunk in stream:
    ...             print(chunk["choices"][0]["delta"].get("content", ""), end="")
"""

__version__ = "0.1.0"

# Public library API exports
from woprbot.core.bot import WOPRBot
from woprbot.core.config import ClientConfig, ClientOptions, Settings, get_settings
from woprbot.core.logging import setup_logging
from woprbot.core.streaming import Stream

# Export exceptions for library users
from woprbot.core.exceptions import (
    ConfigurationError,
    ErrorKind,
    GatewayError,
    GatewayTimeoutError,
    GatewayUnreachableError,
    InvalidRequestError,
    InvalidResponseError,
    StreamError,
    TransportError,
    WOPRError,
    classify,
)

__all__ = [
    "__version__",
    # Client
    "WOPRBot",
    "Stream",
    # Configuration
    "ClientConfig",
    "ClientOptions",
    "Settings",
    "get_settings",
    "setup_logging",
    # Exceptions
    "GatewayError",
    "WOPRError",
    "ErrorKind",
    "classify",
    "TransportError",
    "GatewayTimeoutError",
    "GatewayUnreachableError",
    "ConfigurationError",
    "InvalidRequestError",
    "InvalidResponseError",
    "StreamError",
]
