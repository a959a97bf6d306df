"""File storage infrastructure providers."""

from dishka import Scope, provide

from bulletin.adapter.storage.filesystem import LocalFileStore
from bulletin.config import Settings
from bulletin.domain.service import FileStore
from bulletin.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """File storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider writing to the upload directory."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_file_store(self, settings: Settings) -> FileStore:
        """Provide local filesystem file store."""
        return LocalFileStore(settings.upload.directory)
