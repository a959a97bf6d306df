"""Database selection domain service."""

import logfire

from bulletin.domain.error import ValidationError
from bulletin.domain.value import DatabaseSelection, DatabaseType

from .base import Service


class DatabaseSelector:
    """Holds the database used when a request does not pick one.

    One instance lives for the whole application. Requests never read it
    implicitly; each request turns it into a DatabaseSelection once.
    """

    def __init__(self, default: DatabaseType) -> None:
        self._default = default

    @property
    def default(self) -> DatabaseType:
        return self._default

    def set_default(self, database_type: DatabaseType) -> None:
        self._default = database_type

    def select(self, requested: str | None = None) -> DatabaseSelection:
        """Resolve the selection for one request.

        An unknown name falls back to the default.

        Args:
            requested: Database type name the client asked for, if any
        """
        if requested:
            try:
                return DatabaseSelection(database_type=DatabaseType.parse(requested))
            except ValueError:
                logfire.warn(
                    "Unknown database type requested, using default",
                    requested=requested,
                    default=self._default.value,
                )
        return DatabaseSelection(database_type=self._default)


class DatabaseService(Service):
    """Domain service for inspecting and switching the active database."""

    def __init__(self, selector: DatabaseSelector) -> None:
        self.selector = selector

    def get_current_database_type(self, selection: DatabaseSelection) -> DatabaseType:
        """Database type the current request runs against."""
        return selection.database_type

    def switch_database(self, name: str) -> DatabaseType:
        """Change the default database for subsequent requests.

        Raises:
            ValidationError: If name is not a known database type
        """
        with logfire.span("database_service.switch_database", requested=name):
            try:
                database_type = DatabaseType.parse(name)
            except ValueError as e:
                logfire.warn("Invalid database type", requested=name)
                raise ValidationError(str(e)) from e

            previous = self.selector.default
            self.selector.set_default(database_type)
            logfire.info(
                "Default database switched",
                previous=previous.value,
                current=database_type.value,
            )
            return database_type

    def is_valid_database_type(self, name: str | None) -> bool:
        """Whether name is a known database type, ignoring case."""
        if not name:
            return False
        try:
            DatabaseType.parse(name)
        except ValueError:
            return False
        return True
