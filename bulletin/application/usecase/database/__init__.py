"""Database selection use cases."""

from .database_type import (
    DatabaseTypeResponse,
    GetDatabaseTypeUseCase,
    SwitchDatabaseRequest,
    SwitchDatabaseResponse,
    SwitchDatabaseUseCase,
)

__all__ = [
    "DatabaseTypeResponse",
    "GetDatabaseTypeUseCase",
    "SwitchDatabaseRequest",
    "SwitchDatabaseResponse",
    "SwitchDatabaseUseCase",
]
