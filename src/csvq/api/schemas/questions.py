"""Question generation DTOs, pure Pydantic."""
from __future__ import annotations

from pydantic import BaseModel

from csvq.orchestration.state import FailureReason


class QuestionsRequest(BaseModel):
    csv_url: str


class QuestionsResponse(BaseModel):
    questions: list[str]
    success: bool
    failure_reason: FailureReason | None = None
