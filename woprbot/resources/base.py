"""Shared plumbing for resource facades."""

from typing import Any
from urllib.parse import urlparse

from pydantic import BaseModel, ValidationError

from woprbot.core.client import GatewayClient
from woprbot.core.exceptions import InvalidRequestError


class APIResource:
    """A group of gateway endpoints sharing one ``GatewayClient``."""

    def __init__(self, client: GatewayClient):
        self._client = client


def validate_params(schema: type[BaseModel], params: dict[str, Any]) -> dict[str, Any]:
    """
    Validate request parameters and return the wire body.

    Parameters passed as None are treated as absent, unknown keys are
    dropped, and unset optional fields are left out of the body.

    Raises:
        InvalidRequestError: If the parameters do not satisfy the schema
    """
    present = {key: value for key, value in params.items() if value is not None}
    try:
        model = schema.model_validate(present)
    except ValidationError as e:
        raise InvalidRequestError(f"Invalid {schema.__name__}: {e}") from e
    return model.model_dump(by_alias=True, exclude_none=True)


def check_url(v: str) -> str:
    """Validate an absolute URL."""
    parsed = urlparse(v)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"Invalid URL: {v}")
    return v
