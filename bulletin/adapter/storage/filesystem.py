"""File stores backing board attachments."""

import asyncio
from pathlib import Path

import logfire

from bulletin.adapter.error import FileStoreError
from bulletin.domain.service.file_service import FileStore

FALLBACK_DIRECTORY = "uploads"


def prepare_directory(directory: str | Path) -> Path:
    """Resolve and create the upload directory.

    Relative paths are resolved against the working directory. If the
    directory cannot be created, `<cwd>/uploads` is used instead.

    Raises:
        FileStoreError: If neither directory can be created
    """
    path = Path(directory).expanduser()
    if not path.is_absolute():
        path = Path.cwd() / path
    path = path.resolve()

    try:
        path.mkdir(parents=True, exist_ok=True)
        return path
    except OSError as e:
        fallback = (Path.cwd() / FALLBACK_DIRECTORY).resolve()
        logfire.warn(
            "Upload directory unavailable, using fallback",
            directory=str(path),
            fallback=str(fallback),
            error=str(e),
        )

    try:
        fallback.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileStoreError(f"Could not create upload directory: {fallback}") from e
    return fallback


class LocalFileStore(FileStore):
    """Stores uploaded files in a directory on the local filesystem."""

    def __init__(self, directory: str | Path) -> None:
        """Initialize local file store.

        Args:
            directory: Upload directory, created if missing
        """
        self.directory = prepare_directory(directory)
        logfire.info("Local file store ready", directory=str(self.directory))

    def _path(self, stored_filename: str) -> Path:
        path = (self.directory / stored_filename).resolve()
        if path.parent != self.directory:
            raise FileStoreError(f"Invalid stored filename: {stored_filename}")
        return path

    async def write(self, stored_filename: str, data: bytes) -> None:
        path = self._path(stored_filename)
        try:
            await asyncio.to_thread(path.write_bytes, data)
        except OSError as e:
            logfire.error("Failed to write file", path=str(path), error=str(e))
            raise FileStoreError(f"Failed to store file: {stored_filename}") from e

    async def read(self, stored_filename: str) -> bytes | None:
        path = self._path(stored_filename)
        if not path.is_file():
            return None
        try:
            return await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            logfire.error("Failed to read file", path=str(path), error=str(e))
            raise FileStoreError(f"Failed to read file: {stored_filename}") from e

    async def delete(self, stored_filename: str) -> bool:
        path = self._path(stored_filename)
        try:
            await asyncio.to_thread(path.unlink)
        except FileNotFoundError:
            return False
        except OSError as e:
            raise FileStoreError(f"Failed to delete file: {stored_filename}") from e
        return True


class InMemoryFileStore(FileStore):
    """Keeps uploaded files in a dict. Used by tests."""

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}

    async def write(self, stored_filename: str, data: bytes) -> None:
        self.files[stored_filename] = data

    async def read(self, stored_filename: str) -> bytes | None:
        return self.files.get(stored_filename)

    async def delete(self, stored_filename: str) -> bool:
        return self.files.pop(stored_filename, None) is not None
