"""Liveness endpoint for load balancers and deploy checks."""

from datetime import datetime, timezone
from typing import Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from pawprint.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    checked_at: datetime
    git_sha: str
    environment: str


@router.get("/health", response_model=HealthResponse)
async def health(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is up and which build is running."""
    return HealthResponse(
        checked_at=datetime.now(timezone.utc),
        git_sha=settings.git_sha,
        environment=settings.environment,
    )
