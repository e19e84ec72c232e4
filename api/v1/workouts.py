# api/v1/workouts.py
from __future__ import annotations
from fastapi import APIRouter, Depends, status

from api.deps import get_extraction_service
from api.v1.schemas import WorkoutRequest, WorkoutResponse
from services.extraction import ExtractionService

router = APIRouter()


@router.post(
    "/generate",
    response_model=WorkoutResponse,
    status_code=status.HTTP_200_OK,
    summary="Generate today's workout plan from a profile snapshot",
)
def generate_workout(
    body: WorkoutRequest,
    service: ExtractionService = Depends(get_extraction_service),
) -> WorkoutResponse:
    plan = service.generate_workout(body.profile)
    return WorkoutResponse.model_validate(plan.model_dump())
