"""Question generation endpoint."""
from fastapi import APIRouter, Depends

from csvq.api.deps import get_questions_service
from csvq.api.schemas.questions import QuestionsRequest, QuestionsResponse
from csvq.services.questions_service import QuestionsService

router = APIRouter(tags=["questions"])


@router.post("/questions", response_model=QuestionsResponse)
async def generate_questions(
    payload: QuestionsRequest,
    service: QuestionsService = Depends(get_questions_service),
) -> QuestionsResponse:
    result = await service.generate(payload.csv_url)
    return QuestionsResponse(**result.model_dump())
