"""LangGraph wiring for the CSV-to-questions pipeline."""

from __future__ import annotations

import httpx
from langgraph.graph import END, START, StateGraph

from csvq.agent.registry import AgentRegistry
from csvq.orchestration.nodes import make_nodes
from csvq.orchestration.state import PipelineState


def build_graph(
    registry: AgentRegistry,
    *,
    http_client: httpx.AsyncClient | None = None,
):
    """Compile the strictly sequential fetch -> generate -> extract graph."""
    nodes = make_nodes(registry, http_client=http_client)

    graph = StateGraph(PipelineState)
    for node_name in ("download_parse_csv", "generate_questions", "extract_questions"):
        graph.add_node(node_name, nodes[node_name])

    graph.add_edge(START, "download_parse_csv")
    graph.add_edge("download_parse_csv", "generate_questions")
    graph.add_edge("generate_questions", "extract_questions")
    graph.add_edge("extract_questions", END)

    return graph.compile()
