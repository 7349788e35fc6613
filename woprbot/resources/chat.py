"""Chat completions, streaming or not."""

from typing import Any

from woprbot.core.client import GatewayClient
from woprbot.core.streaming import Stream, parse_sse_stream
from woprbot.resources.base import APIResource

ChatCompletion = dict[str, Any]
ChatCompletionChunk = dict[str, Any]


class ChatCompletions(APIResource):
    async def create(
        self,
        *,
        model: str,
        messages: list[dict[str, Any]],
        stream: bool | None = None,
        **params: Any,
    ) -> ChatCompletion | Stream[ChatCompletionChunk]:
        """Create a chat completion.

        Args:
            model: Model ID to use
            messages: OpenAI-style chat messages
            stream: If true, return a ``Stream`` of completion chunks
            **params: Any other OpenAI chat completion parameters

        Returns:
            The completion object, or a ``Stream`` of chunks when streaming.
        """
        body: dict[str, Any] = {"model": model, "messages": messages, **params}
        if stream is not None:
            body["stream"] = stream

        if stream:
            response = await self._client.post_stream("/chat/completions", body)
            return Stream(parse_sse_stream(response), response=response)
        return await self._client.post_json("/chat/completions", body)


class Chat:
    """Namespace attached to WOPRBot as ``bot.chat``."""

    def __init__(self, client: GatewayClient):
        self.completions = ChatCompletions(client)
