"""SMS/MMS messaging and model listing."""

from typing import Literal, TypedDict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from woprbot.resources.base import APIResource, check_url, validate_params


class SmsSendParams(BaseModel):
    """Request body for sending an SMS or MMS message."""

    model_config = ConfigDict(populate_by_name=True)

    to: str = Field(min_length=1, description="Phone number 'to' is required")
    body: str = Field(min_length=1, description="Message body is required")
    from_: str = Field(alias="from", min_length=1, description="Phone number 'from' is required")
    media_url: list[str] | None = None

    @field_validator("media_url")
    @classmethod
    def validate_media_url(cls, v: list[str] | None) -> list[str] | None:
        if v is not None:
            for url in v:
                check_url(url)
        return v


class SmsSendResponse(TypedDict):
    sid: str
    status: str
    capability: str


class ModelInfo(TypedDict):
    id: str
    object: Literal["model"]
    created: int
    owned_by: str
    capability: str
    tier: Literal["standard", "premium", "byok"]


class ModelsListResponse(TypedDict):
    object: Literal["list"]
    data: list[ModelInfo]


class Sms(APIResource):
    async def send(
        self,
        *,
        to: str,
        body: str,
        from_: str,
        media_url: list[str] | None = None,
    ) -> SmsSendResponse:
        """Send an SMS, or an MMS when ``media_url`` is given."""
        payload = validate_params(
            SmsSendParams,
            {"to": to, "body": body, "from_": from_, "media_url": media_url},
        )
        return await self._client.post_json("/messages/sms", payload)


class Models(APIResource):
    async def list(self) -> ModelsListResponse:
        """List all available models."""
        return await self._client.get("/models")
