"""Outbound phone calls and phone number provisioning."""

from typing import TypedDict
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, field_validator

from woprbot.core.client import GatewayClient
from woprbot.resources.base import APIResource, check_url, validate_params


class PhoneCallParams(BaseModel):
    """Request body for an outbound call."""

    model_config = ConfigDict(populate_by_name=True)

    to: str = Field(min_length=1, description="Phone number 'to' is required")
    from_: str = Field(alias="from", min_length=1, description="Phone number 'from' is required")
    webhook_url: str | None = None

    @field_validator("webhook_url")
    @classmethod
    def validate_webhook_url(cls, v: str | None) -> str | None:
        return v if v is None else check_url(v)


class PhoneCapabilities(BaseModel):
    sms: bool | None = None
    voice: bool | None = None
    mms: bool | None = None


class PhoneNumberProvisionParams(BaseModel):
    """Request body for provisioning a number."""

    area_code: str | None = None
    country: str = "US"
    capabilities: PhoneCapabilities | None = None


class PhoneCallResponse(TypedDict):
    status: str
    message: str


class PhoneNumberCapabilities(TypedDict):
    sms: bool
    voice: bool
    mms: bool


class PhoneNumber(TypedDict):
    id: str
    phone_number: str
    friendly_name: str
    capabilities: PhoneNumberCapabilities


class PhoneNumberListResponse(TypedDict):
    data: list[PhoneNumber]


class PhoneNumberReleaseResponse(TypedDict):
    status: str
    id: str


class PhoneNumbers(APIResource):
    async def provision(
        self,
        *,
        area_code: str | None = None,
        country: str | None = None,
        capabilities: dict[str, bool] | None = None,
    ) -> PhoneNumber:
        """Provision a new phone number. ``country`` defaults to "US"."""
        body = validate_params(
            PhoneNumberProvisionParams,
            {"area_code": area_code, "country": country, "capabilities": capabilities},
        )
        return await self._client.post_json("/phone/numbers", body)

    async def list(self) -> PhoneNumberListResponse:
        """List all phone numbers owned by this tenant."""
        return await self._client.get("/phone/numbers")

    async def release(self, number_id: str) -> PhoneNumberReleaseResponse:
        """Release (delete) a phone number."""
        return await self._client.delete(f"/phone/numbers/{quote(number_id, safe='')}")


class Phone(APIResource):
    """Namespace attached to WOPRBot as ``bot.phone``."""

    def __init__(self, client: GatewayClient):
        super().__init__(client)
        self.numbers = PhoneNumbers(client)

    async def call(
        self,
        *,
        to: str,
        from_: str,
        webhook_url: str | None = None,
    ) -> PhoneCallResponse:
        """Initiate an outbound phone call."""
        body = validate_params(
            PhoneCallParams, {"to": to, "from_": from_, "webhook_url": webhook_url}
        )
        return await self._client.post_json("/phone/outbound", body)
