"""Speech-to-text and text-to-speech."""

from typing import IO, Any

import httpx

from woprbot.core.client import GatewayClient
from woprbot.resources.base import APIResource

# bytes, a binary file object, or an httpx-style (filename, content, content_type) tuple
FileContent = bytes | IO[bytes] | tuple[str, Any, str] | tuple[str, Any]


class AudioTranscriptions(APIResource):
    async def create(
        self,
        *,
        file: FileContent,
        model: str,
        language: str | None = None,
        response_format: str | None = None,
    ) -> dict[str, Any]:
        """Transcribe audio to text.

        The audio is uploaded as a multipart form with the fields ``file``,
        ``model`` and, when given, ``language`` and ``response_format``.
        """
        data = {"model": model}
        if language:
            data["language"] = language
        if response_format:
            data["response_format"] = response_format
        return await self._client.post_form(
            "/audio/transcriptions", data=data, files={"file": file}
        )


class AudioSpeech(APIResource):
    async def create(self, *, model: str, input: str, voice: str, **params: Any) -> httpx.Response:
        """Generate speech from text.

        Returns the open response; its body is the binary audio (audio/mpeg by
        default). Read it with ``await response.aread()`` and close it with
        ``await response.aclose()``.
        """
        body = {"model": model, "input": input, "voice": voice, **params}
        return await self._client.post_binary("/audio/speech", body)


class Audio:
    """Namespace attached to WOPRBot as ``bot.audio``."""

    def __init__(self, client: GatewayClient):
        self.transcriptions = AudioTranscriptions(client)
        self.speech = AudioSpeech(client)
