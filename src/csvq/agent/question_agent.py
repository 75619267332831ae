"""A named text-generation agent bound to a fixed system prompt."""
from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

from csvq.orchestration.llm_protocol import LLMClient


class QuestionAgent:
    def __init__(
        self,
        name: str,
        *,
        instructions: str,
        model: str,
        llm_client: LLMClient,
        description: str = "",
    ) -> None:
        self.name = name
        self.instructions = instructions
        self.model = model
        self.description = description
        self._llm_client = llm_client

    def stream(self, messages: list[dict[str, Any]]) -> AsyncIterator[str]:
        """Stream a reply to *messages* with the agent's instructions as system prompt."""
        full = [{"role": "system", "content": self.instructions}, *messages]
        return self._llm_client.chat_completions_stream(model=self.model, messages=full)
