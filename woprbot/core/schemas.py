"""Schemas for the gateway's error response body."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ErrorDetail(BaseModel):
    """Error detail structure returned by the gateway."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(description="Human-readable error message")
    type: str = Field(default="", description="Error type identifier")
    code: str = Field(default="", description="Machine-readable error code")

    # Present on 402 credit errors
    needs_credits: bool | None = Field(default=None, alias="needsCredits")
    top_up_url: str | None = Field(default=None, alias="topUpUrl")
    current_balance_cents: int | float | None = Field(default=None, alias="currentBalanceCents")
    required_cents: int | float | None = Field(default=None, alias="requiredCents")

    @field_validator("type", "code", mode="before")
    @classmethod
    def normalize_identifier(cls, v: Any) -> Any:
        """Accept null and numeric identifiers, as OpenAI-style upstreams send them."""
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class ErrorBody(BaseModel):
    """Top-level error envelope: ``{"error": {...}}``."""

    error: ErrorDetail


def fallback_error_body(status_code: int, reason_phrase: str) -> ErrorBody:
    """Build the payload used when an error response body cannot be parsed."""
    return ErrorBody(
        error=ErrorDetail(
            message=f"HTTP {status_code}: {reason_phrase}",
            type="server_error",
            code="unknown_error",
        )
    )
