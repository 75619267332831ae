"""CSV-to-questions use-case service backed by LangGraph orchestration."""
from __future__ import annotations

import httpx

from csvq.agent.registry import AgentRegistry, build_default_registry
from csvq.orchestration.graph import build_graph
from csvq.orchestration.state import QuestionsResult, init_state


class QuestionsService:
    def __init__(
        self,
        registry: AgentRegistry | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._registry = registry if registry is not None else build_default_registry()
        self._http_client = http_client

    async def generate(self, csv_url: str) -> QuestionsResult:
        """Run the pipeline once.  Hard failures raise ``CSVQError`` subclasses."""
        graph = build_graph(self._registry, http_client=self._http_client)
        final_state = await graph.ainvoke(init_state(csv_url))
        return QuestionsResult.model_validate(final_state["result"])
