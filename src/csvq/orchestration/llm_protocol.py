"""Streaming LLMClient protocol used by question agents."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LLMClient(Protocol):
    """Protocol for streamed chat completions yielding text fragments."""

    def chat_completions_stream(
        self,
        *,
        model: str,
        messages: list[dict[str, Any]],
    ) -> AsyncIterator[str]:
        """Return an async iterator over content fragments in arrival order."""
        ...


class OpenAILLMClient:
    """Adapter wrapping the OpenAI async SDK client."""

    def __init__(self, openai_client: Any | None = None) -> None:
        # Built on first stream so a missing key surfaces as a generation failure.
        self._client = openai_client

    def _get_client(self) -> Any:
        if self._client is None:
            from openai import AsyncOpenAI  # lazy import

            from csvq.config import settings

            api_key = settings.OPENAI_API_KEY.get_secret_value() if settings.OPENAI_API_KEY else None
            self._client = AsyncOpenAI(api_key=api_key)
        return self._client

    async def chat_completions_stream(
        self,
        *,
        model: str,
        messages: list[dict[str, Any]],
    ) -> AsyncIterator[str]:
        """Delegate to the OpenAI SDK with ``stream=True`` and yield deltas."""
        stream = await self._get_client().chat.completions.create(
            model=model,
            messages=messages,
            stream=True,
        )
        async for chunk in stream:
            if not chunk.choices:
                continue
            delta = chunk.choices[0].delta.content
            if delta:
                yield delta
