"""FastAPI dependencies."""
from __future__ import annotations

from functools import lru_cache

from csvq.agent.registry import AgentRegistry, build_default_registry
from csvq.services.questions_service import QuestionsService


@lru_cache(maxsize=1)
def get_registry() -> AgentRegistry:
    """One registry per process; built on first request."""
    return build_default_registry()


def get_questions_service() -> QuestionsService:
    return QuestionsService(get_registry())
