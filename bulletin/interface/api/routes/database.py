"""Database selection routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from bulletin.application.usecase.database import (
    DatabaseTypeResponse,
    GetDatabaseTypeUseCase,
    SwitchDatabaseRequest,
    SwitchDatabaseResponse,
    SwitchDatabaseUseCase,
)
from bulletin.domain.error import ValidationError

router = APIRouter(prefix="/api/database", tags=["database"], route_class=DishkaRoute)


@router.get("/type", response_model=DatabaseTypeResponse)
async def get_database_type(
    get_database_type_use_case: FromDishka[GetDatabaseTypeUseCase],
) -> DatabaseTypeResponse:
    """Report the database this request was routed to.

    Send an X-Database-Type header to pick one for a single request.
    """
    return await get_database_type_use_case.execute()


@router.post("/switch", response_model=SwitchDatabaseResponse)
async def switch_database(
    switch_database_use_case: FromDishka[SwitchDatabaseUseCase],
    database_type: str = Query(),
) -> SwitchDatabaseResponse:
    """Change the default database for subsequent requests.

    Args:
        database_type: MARIADB or ORACLE, case-insensitive
    """
    try:
        return await switch_database_use_case.execute(
            SwitchDatabaseRequest(database_type=database_type)
        )
    except ValidationError as e:
        logfire.warn("Database switch rejected", requested=database_type)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
