"""Infrastructure layer errors."""

from bulletin.domain.error import StorageError


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class FileStoreError(AdapterError, StorageError):
    """File store I/O error."""

    pass
