"""PipelineState and result models for the CSV-to-questions graph.

PipelineState is a TypedDict (LangGraph-native).  Stage outputs are
Pydantic models stored in state as plain dicts via ``.model_dump()`` and
rebuilt with ``.model_validate()`` inside nodes.
"""

from __future__ import annotations

from typing import Literal, TypedDict

from pydantic import BaseModel, Field, model_validator

FailureReason = Literal["empty_summary", "too_short", "generation_error"]


class GenerationResult(BaseModel):
    """Concatenated streamed output of the question agent."""

    raw_text: str = ""
    success: bool
    chunk_count: int = 0
    failure_reason: FailureReason | None = None

    @model_validator(mode="after")
    def validate_consistency(self) -> GenerationResult:
        if self.success and self.failure_reason is not None:
            raise ValueError("success=True must not carry a failure_reason")
        if not self.success and self.failure_reason is None:
            raise ValueError("success=False requires a failure_reason")
        return self


class QuestionsResult(BaseModel):
    questions: list[str] = Field(default_factory=list)
    success: bool
    failure_reason: FailureReason | None = None


class PipelineState(TypedDict, total=False):
    csv_url: str
    summary: dict  # CsvSummary.model_dump()
    generation: dict  # GenerationResult.model_dump()
    result: dict  # QuestionsResult.model_dump()


def init_state(csv_url: str) -> PipelineState:
    return PipelineState(csv_url=csv_url)
