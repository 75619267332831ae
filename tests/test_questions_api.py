"""Integration tests for POST /questions."""

from __future__ import annotations

from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from csvq.agent.question_agent import QuestionAgent
from csvq.agent.registry import AgentRegistry, build_default_registry
from csvq.api.app import create_app
from csvq.api.deps import get_questions_service, get_registry
from csvq.config import settings
from csvq.domain.exceptions import NoRowsError
from csvq.services.questions_service import QuestionsService


class ReplyLLM:
    def __init__(self, reply: str) -> None:
        self._reply = reply

    async def chat_completions_stream(self, *, model: str, messages: list[dict[str, Any]]):
        yield self._reply


def _registry(reply: str) -> AgentRegistry:
    registry = AgentRegistry()
    registry.register(
        QuestionAgent(
            settings.QUESTION_AGENT_NAME,
            instructions="You write questions.",
            model="fake-model",
            llm_client=ReplyLLM(reply),
        )
    )
    return registry


@pytest.fixture
def make_client(csv_transport):
    """Build a TestClient whose service uses a fake agent and mocked HTTP."""

    def _make(
        body: str = "a,b\n1,2",
        status_code: int = 200,
        reply: str = "1. What is the sum of a?\n2. Is b always larger than a?",
        registry: AgentRegistry | None = None,
    ) -> TestClient:
        http_client = httpx.AsyncClient(transport=csv_transport(body, status_code=status_code))
        service = QuestionsService(
            registry if registry is not None else _registry(reply),
            http_client=http_client,
        )
        app = create_app()
        app.dependency_overrides[get_questions_service] = lambda: service
        return TestClient(app)

    return _make


def test_health(make_client):
    resp = make_client().get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_generates_questions(make_client):
    resp = make_client().post("/questions", json={"csv_url": "https://example.com/ab.csv"})

    assert resp.status_code == 200
    assert resp.json() == {
        "questions": ["What is the sum of a?", "Is b always larger than a?"],
        "success": True,
        "failure_reason": None,
    }


def test_soft_failure_is_200_with_success_false(make_client):
    resp = make_client(reply="no").post("/questions", json={"csv_url": "https://example.com/ab.csv"})

    assert resp.status_code == 200
    assert resp.json()["success"] is False
    assert resp.json()["failure_reason"] == "too_short"


def test_blank_url_is_422(make_client):
    resp = make_client().post("/questions", json={"csv_url": "  "})
    assert resp.status_code == 422
    assert "empty" in resp.json()["detail"]


def test_empty_csv_is_422(make_client):
    resp = make_client(body="\n\n").post("/questions", json={"csv_url": "https://example.com/e.csv"})
    assert resp.status_code == 422
    assert resp.json()["detail"] == "CSV file is empty"


def test_upstream_error_is_502(make_client):
    resp = make_client(status_code=404).post(
        "/questions", json={"csv_url": "https://example.com/missing.csv"}
    )
    assert resp.status_code == 502
    assert resp.json()["upstream_status"] == 404


def test_missing_agent_is_500(make_client):
    resp = make_client(registry=AgentRegistry()).post(
        "/questions", json={"csv_url": "https://example.com/ab.csv"}
    )
    assert resp.status_code == 500
    assert settings.QUESTION_AGENT_NAME in resp.json()["detail"]


def test_no_rows_is_422():
    class NoRowsService:
        async def generate(self, csv_url: str):
            raise NoRowsError("CSV has no valid rows")

    app = create_app()
    app.dependency_overrides[get_questions_service] = lambda: NoRowsService()
    resp = TestClient(app).post("/questions", json={"csv_url": "https://example.com/x.csv"})

    assert resp.status_code == 422
    assert resp.json()["detail"] == "CSV has no valid rows"


@pytest.fixture
def fresh_registry():
    get_registry.cache_clear()
    yield
    get_registry.cache_clear()


def test_blank_url_without_api_key_is_422(no_api_key, fresh_registry):
    resp = TestClient(create_app()).post("/questions", json={"csv_url": "  "})

    assert resp.status_code == 422
    assert "Invalid CSV URL" in resp.json()["detail"]


def test_missing_api_key_is_200_with_generation_error(no_api_key, csv_transport):
    service = QuestionsService(
        build_default_registry(),
        http_client=httpx.AsyncClient(transport=csv_transport("a,b\n1,2")),
    )
    app = create_app()
    app.dependency_overrides[get_questions_service] = lambda: service

    resp = TestClient(app).post("/questions", json={"csv_url": "https://example.com/ab.csv"})

    assert resp.status_code == 200
    assert resp.json() == {"questions": [], "success": False, "failure_reason": "generation_error"}


def test_response_accepts_exactly_the_pipeline_failure_reasons():
    from typing import get_args

    from pydantic import ValidationError

    from csvq.api.schemas.questions import QuestionsResponse
    from csvq.orchestration.state import FailureReason

    for reason in get_args(FailureReason):
        assert QuestionsResponse(questions=[], success=False, failure_reason=reason).failure_reason == reason
    with pytest.raises(ValidationError):
        QuestionsResponse(questions=[], success=False, failure_reason="timeout")
