"""Image and video generation."""

from typing import Any, TypedDict

from pydantic import BaseModel, Field

from woprbot.resources.base import APIResource, validate_params


class VideoGenerateParams(BaseModel):
    """Request body for video generation."""

    prompt: str = Field(min_length=1, description="Prompt is required")
    duration: int = Field(default=4, ge=1, le=60, description="Clip length in seconds")


class VideoData(TypedDict):
    url: str


class VideoGenerateResponse(TypedDict):
    created: int
    data: list[VideoData]


class Images(APIResource):
    async def generate(self, *, prompt: str, **params: Any) -> dict[str, Any]:
        """Generate images from a prompt."""
        body = {"prompt": prompt, **params}
        return await self._client.post_json("/images/generations", body)


class Video(APIResource):
    async def generate(self, *, prompt: str, duration: int | None = None) -> VideoGenerateResponse:
        """Generate a video from a prompt. ``duration`` defaults to 4 seconds."""
        body = validate_params(VideoGenerateParams, {"prompt": prompt, "duration": duration})
        return await self._client.post_json("/video/generations", body)
