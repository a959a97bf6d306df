"""Database type use cases."""

from pydantic import BaseModel

from bulletin.application.usecase.base import BaseUseCase
from bulletin.domain.service import DatabaseService
from bulletin.domain.value import DatabaseSelection, DatabaseType


class DatabaseTypeResponse(BaseModel):
    """Current database type response."""

    database_type: DatabaseType


class GetDatabaseTypeUseCase(BaseUseCase):
    """Use case for reporting which database the request runs against."""

    def __init__(
        self, database_service: DatabaseService, selection: DatabaseSelection
    ) -> None:
        self.database_service = database_service
        self.selection = selection

    async def execute(self, request: None = None) -> DatabaseTypeResponse:
        return DatabaseTypeResponse(
            database_type=self.database_service.get_current_database_type(
                self.selection
            )
        )


class SwitchDatabaseRequest(BaseModel):
    """Switch database request."""

    database_type: str


class SwitchDatabaseResponse(BaseModel):
    """Switch database response."""

    database_type: DatabaseType
    message: str


class SwitchDatabaseUseCase(BaseUseCase):
    """Use case for changing the default database."""

    def __init__(self, database_service: DatabaseService) -> None:
        self.database_service = database_service

    async def execute(self, request: SwitchDatabaseRequest) -> SwitchDatabaseResponse:
        """Execute switch flow.

        Raises:
            ValidationError: If the database type is unknown
        """
        database_type = self.database_service.switch_database(request.database_type)
        return SwitchDatabaseResponse(
            database_type=database_type,
            message=f"Successfully switched to {database_type.value}",
        )
