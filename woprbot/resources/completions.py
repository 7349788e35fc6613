"""Legacy text completions and embeddings."""

from typing import Any

from woprbot.resources.base import APIResource


class Completions(APIResource):
    async def create(self, *, model: str, prompt: Any, **params: Any) -> dict[str, Any]:
        """Create a text completion."""
        body = {"model": model, "prompt": prompt, **params}
        return await self._client.post_json("/completions", body)


class Embeddings(APIResource):
    async def create(self, *, model: str, input: Any, **params: Any) -> dict[str, Any]:
        """Create embeddings for a string or a list of strings."""
        body = {"model": model, "input": input, **params}
        return await self._client.post_json("/embeddings", body)
