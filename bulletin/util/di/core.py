"""Core DI providers (non-mockable)."""

from dishka import Scope, provide
from fastapi import Request

from bulletin.config import LimitSettings, Settings, UploadSettings
from bulletin.domain.service import DatabaseSelector
from bulletin.domain.value import DatabaseSelection, DatabaseType
from bulletin.util.di.base import ProviderBase

DATABASE_TYPE_HEADER = "X-Database-Type"


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_limit_settings(self, settings: Settings) -> LimitSettings:
        """Provide content limits."""
        return settings.limits

    @provide(scope=Scope.APP)
    def provide_upload_settings(self, settings: Settings) -> UploadSettings:
        """Provide upload settings."""
        return settings.upload

    @provide(scope=Scope.APP)
    def provide_database_selector(self, settings: Settings) -> DatabaseSelector:
        """Provide the application-wide default database holder."""
        return DatabaseSelector(default=DatabaseType.parse(settings.database.type))

    @provide(scope=Scope.REQUEST)
    def provide_database_selection(
        self, request: Request, selector: DatabaseSelector
    ) -> DatabaseSelection:
        """Resolve the database for this request from the X-Database-Type header."""
        return selector.select(request.headers.get(DATABASE_TYPE_HEADER))
