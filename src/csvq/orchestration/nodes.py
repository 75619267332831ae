"""Pipeline nodes for the CSV-to-questions graph.

Each node follows the LangGraph convention: receives PipelineState, returns a
partial state dict.  Use ``make_nodes(registry)`` to get the node coroutines
closed over an agent registry (and optionally an injected HTTP client),
keeping them testable without the network.

Hard failures (bad URL, fetch error, empty CSV, unknown agent) raise out of
the graph.  Generation problems are reported as data on ``GenerationResult``.
"""
from __future__ import annotations

import logging
from typing import Callable

import httpx

from csvq.agent.prompts import build_question_prompt
from csvq.agent.registry import AgentRegistry
from csvq.config import settings
from csvq.ingest.csv_summary import CsvSummary, summarize_csv_url
from csvq.orchestration.extract import parse_questions_from_text
from csvq.orchestration.state import GenerationResult, PipelineState, QuestionsResult

logger = logging.getLogger(__name__)

_PREVIEW_CHARS = 200


async def generate_from_summary(
    summary: CsvSummary,
    registry: AgentRegistry,
    *,
    agent_name: str | None = None,
    min_chars: int | None = None,
) -> GenerationResult:
    """Stream the question agent's reply to the summary prompt.

    Raises ``AgentNotFoundError`` when the agent is missing; every other
    failure comes back as ``success=False``.
    """
    threshold = min_chars if min_chars is not None else settings.MIN_GENERATED_CHARS

    if not summary.text:
        logger.error("Missing CSV data in question generation step")
        return GenerationResult(success=False, failure_reason="empty_summary")

    agent = registry.get(agent_name or settings.QUESTION_AGENT_NAME)
    prompt = build_question_prompt(summary.raw_row_count, summary.column_count, summary.text)

    parts: list[str] = []
    try:
        logger.info("Sending data to agent %r for question generation", agent.name)
        async for chunk in agent.stream([{"role": "user", "content": prompt}]):
            if chunk:
                parts.append(chunk)
    except Exception as e:
        logger.error("Question generation failed: %s", e, exc_info=True)
        _log_api_hint(str(e))
        return GenerationResult(
            raw_text="".join(parts),
            success=False,
            chunk_count=len(parts),
            failure_reason="generation_error",
        )

    content = "".join(parts)
    logger.info("Received %d chunks, total length: %d", len(parts), len(content))
    logger.debug("Generated content preview: %s", content[:_PREVIEW_CHARS])

    if len(content.strip()) > threshold:
        return GenerationResult(raw_text=content, success=True, chunk_count=len(parts))

    logger.warning("Generated content too short (%d chars): %r", len(content), content)
    if settings.OPENAI_API_KEY is None or not settings.OPENAI_API_KEY.get_secret_value():
        logger.error("OPENAI_API_KEY is not set; add it to the environment or .env")
    return GenerationResult(
        raw_text=content,
        success=False,
        chunk_count=len(parts),
        failure_reason="too_short",
    )


def _log_api_hint(message: str) -> None:
    if "401" in message:
        logger.error("Authentication error - check your OpenAI API key")
    elif "429" in message:
        logger.error("Rate limit exceeded - please try again later")
    elif "insufficient_quota" in message:
        logger.error("OpenAI API quota exceeded - check your billing")
    elif "api_key" in message or "OPENAI_API_KEY" in message:
        logger.error("OPENAI_API_KEY is not set; add it to the environment or .env")


def make_nodes(
    registry: AgentRegistry,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> dict[str, Callable]:
    """Return a dict of async node functions closed over *registry*."""

    # ------------------------------------------------------------------
    # Node 1: download_parse_csv
    # ------------------------------------------------------------------
    async def download_parse_csv(state: PipelineState) -> dict:
        summary = await summarize_csv_url(state["csv_url"], client=http_client)
        return {"summary": summary.model_dump()}

    # ------------------------------------------------------------------
    # Node 2: generate_questions
    # ------------------------------------------------------------------
    async def generate_questions(state: PipelineState) -> dict:
        summary = CsvSummary.model_validate(state["summary"])
        generation = await generate_from_summary(summary, registry)
        return {"generation": generation.model_dump()}

    # ------------------------------------------------------------------
    # Node 3: extract_questions
    # ------------------------------------------------------------------
    async def extract_questions(state: PipelineState) -> dict:
        generation = GenerationResult.model_validate(state["generation"])
        if not generation.success:
            result = QuestionsResult(success=False, failure_reason=generation.failure_reason)
        else:
            questions = parse_questions_from_text(generation.raw_text)
            logger.info("Generated %d questions", len(questions))
            result = QuestionsResult(questions=questions, success=True)
        return {"result": result.model_dump()}

    return {
        "download_parse_csv": download_parse_csv,
        "generate_questions": generate_questions,
        "extract_questions": extract_questions,
    }
