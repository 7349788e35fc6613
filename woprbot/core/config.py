"""Client configuration: a plain dataclass for library use, and env-backed settings."""

import logging
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlparse

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from woprbot.core.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.wopr.bot/v1"


@dataclass(frozen=True)
class ClientOptions:
    """Identity shared read-only by every resource of one client.

    Args:
        api_key: Bearer credential sent on every request
        base_url: Gateway base URL; one trailing slash is stripped
    """

    api_key: str
    base_url: str

    def __post_init__(self) -> None:
        if self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url[:-1])

    def url_for(self, path: str) -> str:
        """Join a resource path onto the base URL."""
        return f"{self.base_url}{path}"


@dataclass
class ClientConfig:
    """Configuration for a WOPRBot client.

    This is the simple config for library usage without environment
    variable loading. See ``Settings`` for the env-backed variant.

    Args:
        api_key: WOPR service key (e.g. "wopr_sk_...")
        base_url: Gateway base URL
        timeout_s: Total timeout for gateway requests in seconds
        connect_timeout_s: Connection timeout for gateway requests in seconds
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = 300.0
    connect_timeout_s: float = 10.0

    def to_options(self) -> ClientOptions:
        """Freeze the identity part of this config."""
        if not self.api_key:
            raise ConfigurationError(
                "api_key is required. Get one at https://api.wopr.bot/settings"
            )
        return ClientOptions(api_key=self.api_key, base_url=self.base_url)


class Settings(BaseSettings):
    """Client settings loaded from ``WOPR_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WOPR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="WOPR service key sent as Authorization: Bearer <API_KEY>",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Gateway base URL",
    )
    timeout_s: float = Field(
        default=300.0,
        description="Total timeout for gateway requests (seconds)",
    )
    connect_timeout_s: float = Field(
        default=10.0,
        description="Connection timeout for gateway requests (seconds)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"URL must use http or https scheme, got {v}")
        if not parsed.netloc:
            raise ValueError(f"URL must have a valid host, got {v}")
        return v

    @field_validator("timeout_s", "connect_timeout_s")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}, got {v}")
        return v.upper()

    def get_log_level(self) -> int:
        """Convert log level string to logging constant."""
        return logging.getLevelName(self.log_level)

    def to_client_config(self) -> ClientConfig:
        """Convert settings into the library-level config."""
        return ClientConfig(
            api_key=self.api_key or "",
            base_url=self.base_url,
            timeout_s=self.timeout_s,
            connect_timeout_s=self.connect_timeout_s,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the settings singleton.

    Settings are loaded from environment variables and .env file on first call.
    Subsequent calls return the cached instance.

    Raises:
        ConfigurationError: If settings are invalid.

    Returns:
        Settings: The validated settings instance.
    """
    try:
        return Settings()
    except ValueError as e:
        raise ConfigurationError(
            f"Failed to load configuration: {e}\n"
            "Please check your WOPR_* environment variables or .env file."
        ) from e
