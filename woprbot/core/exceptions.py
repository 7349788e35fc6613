"""Exceptions raised by the woprbot client, and HTTP error classification."""

from enum import Enum

from woprbot.core.schemas import ErrorBody


class GatewayError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ErrorKind(str, Enum):
    """Failure family of a non-2xx gateway response."""

    AUTHENTICATION = "authentication"
    INSUFFICIENT_CREDITS = "insufficient_credits"
    RATE_LIMIT = "rate_limit"
    PROVIDER = "provider"
    SERVER = "server"


class WOPRError(GatewayError):
    """A non-2xx response from the gateway, tagged with its ``kind``.

    The credit fields are only populated for ``ErrorKind.INSUFFICIENT_CREDITS``
    and are None for every other kind.
    """

    def __init__(
        self,
        status_code: int,
        kind: ErrorKind,
        message: str,
        error_type: str = "",
        code: str = "",
        needs_credits: bool | None = None,
        top_up_url: str | None = None,
        current_balance_cents: int | float | None = None,
        required_cents: int | float | None = None,
    ):
        self.status_code = status_code
        self.kind = kind
        self.error_type = error_type
        self.code = code
        self.needs_credits = needs_credits
        self.top_up_url = top_up_url
        self.current_balance_cents = current_balance_cents
        self.required_cents = required_cents
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"WOPRError(status_code={self.status_code}, kind={self.kind.value!r}, "
            f"code={self.code!r}, message={self.message!r})"
        )


class TransportError(GatewayError):
    """Base class for failures reaching the gateway at all."""

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        super().__init__(message)


class GatewayUnreachableError(TransportError):
    """Raised when the gateway cannot be connected to."""

    pass


class GatewayTimeoutError(TransportError):
    """Raised when a request to the gateway times out."""

    pass


class ConfigurationError(GatewayError):
    """Raised when there is a configuration problem."""

    pass


class InvalidRequestError(GatewayError):
    """Raised when request parameters fail client-side validation."""

    pass


class InvalidResponseError(GatewayError):
    """Raised when a successful response does not carry valid JSON."""

    pass


class StreamError(GatewayError):
    """Raised when a streamed response has no readable body."""

    pass


def classify(status_code: int, payload: ErrorBody) -> WOPRError:
    """Map a non-2xx status and its error payload to a classified error.

    Rules are evaluated in order, first match wins: 401, 402, 429, any
    other 4xx, then everything else.
    """
    detail = payload.error
    common = {
        "status_code": status_code,
        "message": detail.message,
        "error_type": detail.type,
        "code": detail.code,
    }

    if status_code == 401:
        return WOPRError(kind=ErrorKind.AUTHENTICATION, **common)
    if status_code == 402:
        return WOPRError(
            kind=ErrorKind.INSUFFICIENT_CREDITS,
            needs_credits=True if detail.needs_credits is None else detail.needs_credits,
            top_up_url=detail.top_up_url,
            current_balance_cents=detail.current_balance_cents,
            required_cents=detail.required_cents,
            **common,
        )
    if status_code == 429:
        return WOPRError(kind=ErrorKind.RATE_LIMIT, **common)
    if 400 <= status_code < 500:
        return WOPRError(kind=ErrorKind.PROVIDER, **common)
    return WOPRError(kind=ErrorKind.SERVER, **common)
