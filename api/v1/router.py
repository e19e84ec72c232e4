# api/v1/router.py
from fastapi import APIRouter

from . import dashboard, nutrition, profile, workouts

api_router = APIRouter()

api_router.include_router(nutrition.router, prefix="/nutrition", tags=["Nutrition"])
api_router.include_router(workouts.router,  prefix="/workouts",  tags=["Workouts"])
api_router.include_router(profile.router,   prefix="/profile",   tags=["Profile"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
