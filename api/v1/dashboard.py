# api/v1/dashboard.py
from __future__ import annotations
from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import APIRouter

from api.v1.schemas import DashboardRequest, DashboardSummary
from core.stats import summarize

router = APIRouter()


@router.post("/summary", response_model=DashboardSummary)
def dashboard_summary(body: DashboardRequest) -> DashboardSummary:
    today = body.today or datetime.now(ZoneInfo(body.tz)).date()
    summary = summarize(
        [log.model_dump() for log in body.nutrition_logs],
        [plan.model_dump() for plan in body.workout_plans],
        today=today,
        tz=body.tz,
    )
    return DashboardSummary.model_validate(summary)
