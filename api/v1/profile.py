# api/v1/profile.py
from __future__ import annotations
from fastapi import APIRouter

from api.v1.schemas import MetricsRequest, MetricsResponse
from core.metrics import BodyMeasurements, compute_metrics

router = APIRouter()


@router.post("/metrics", response_model=MetricsResponse)
def profile_metrics(body: MetricsRequest) -> MetricsResponse:
    """BMI / BMR / daily calorie target; `metrics` is null until the profile is complete."""
    m = BodyMeasurements(**body.model_dump())
    return MetricsResponse(metrics=compute_metrics(m))
