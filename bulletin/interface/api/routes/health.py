"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from bulletin.config import Settings
from bulletin.domain.service import DatabaseSelector
from bulletin.domain.value import DatabaseType

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    environment: str
    default_database: DatabaseType


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    selector: FromDishka[DatabaseSelector],
) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        environment=settings.environment,
        default_database=selector.default,
    )
