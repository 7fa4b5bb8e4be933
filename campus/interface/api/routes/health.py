"""Liveness endpoint."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from campus.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)

SERVICE_VERSION = "0.1.0"


class HealthResponse(BaseModel):
    status: str
    environment: str
    version: str
    git_sha: str
    checked_at: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the API process is up. Does not touch the database."""
    return HealthResponse(
        status="healthy",
        environment=settings.environment,
        version=SERVICE_VERSION,
        git_sha=settings.git_sha,
        checked_at=datetime.now(),
    )
