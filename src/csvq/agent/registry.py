"""Caller-owned lookup of agents by name."""
from __future__ import annotations

from csvq.agent.prompts import QUESTION_AGENT_INSTRUCTIONS
from csvq.agent.question_agent import QuestionAgent
from csvq.config import settings
from csvq.domain.exceptions import AgentNotFoundError
from csvq.orchestration.llm_protocol import LLMClient, OpenAILLMClient


class AgentRegistry:
    def __init__(self) -> None:
        self._agents: dict[str, QuestionAgent] = {}

    def register(self, agent: QuestionAgent, name: str | None = None) -> None:
        self._agents[name or agent.name] = agent

    def get(self, name: str) -> QuestionAgent:
        try:
            return self._agents[name]
        except KeyError:
            raise AgentNotFoundError(name) from None

    def names(self) -> list[str]:
        return sorted(self._agents)

    def __contains__(self, name: object) -> bool:
        return name in self._agents


def build_default_registry(llm_client: LLMClient | None = None) -> AgentRegistry:
    """Registry holding the CSV question agent under ``QUESTION_AGENT_NAME``."""
    registry = AgentRegistry()
    registry.register(
        QuestionAgent(
            settings.QUESTION_AGENT_NAME,
            instructions=QUESTION_AGENT_INSTRUCTIONS,
            model=settings.OPENAI_MODEL_AGENT,
            llm_client=llm_client or OpenAILLMClient(),
            description=(
                "An agent specialized in generating comprehensive questions "
                "from CSV data and tabular content"
            ),
        )
    )
    return registry
