# api/deps.py
"""FastAPI dependencies: the one place settings turn into collaborators."""
from __future__ import annotations

from fastapi import Depends

from config import get_settings
from services.extraction import ExtractionService
from services.gateway import GatewayClient


def get_gateway() -> GatewayClient:
    # a fresh client per request; nothing is shared between requests
    return GatewayClient.from_settings(get_settings())


def get_extraction_service(
    gateway: GatewayClient = Depends(get_gateway),
) -> ExtractionService:
    return ExtractionService(gateway)
