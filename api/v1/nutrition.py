# api/v1/nutrition.py
from __future__ import annotations
from fastapi import APIRouter, Depends, status

from api.deps import get_extraction_service
from api.v1.schemas import NutritionRequest, NutritionResponse
from services.extraction import ExtractionService

router = APIRouter()


@router.post(
    "/analyze",
    response_model=NutritionResponse,
    status_code=status.HTTP_200_OK,
    summary="Estimate calories and macros for a free-text meal",
)
def analyze_nutrition(
    body: NutritionRequest,
    service: ExtractionService = Depends(get_extraction_service),
) -> NutritionResponse:
    """
    The caller persists the estimate; nothing is stored here.
    """
    estimate = service.analyze_nutrition(body.food_description, body.meal_type)
    return NutritionResponse.model_validate(estimate.model_dump())
