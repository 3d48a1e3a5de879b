"""
Health Check Router - SME Funding Compatibility Platform
fundmatch/routers/health.py
"""
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from fundmatch.config import settings

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str


@router.get("/health", response_model=HealthResponse, summary="Liveness check")
async def health() -> HealthResponse:
    # The engine has no external dependencies to probe
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
    )
