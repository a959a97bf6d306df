"""File attachment domain service."""

from abc import ABC, abstractmethod
from uuid import uuid4

import logfire

from bulletin.config import UploadSettings
from bulletin.domain.error import NotFoundError, StorageError, ValidationError
from bulletin.domain.model.file_attachment import FileAttachment
from bulletin.domain.repository import FileAttachmentRepository
from bulletin.domain.value import BoardId, FileId, UploadedFile

from .base import Service


class FileStore(ABC):
    """Generic interface for the place uploaded bytes are kept."""

    @abstractmethod
    async def write(self, stored_filename: str, data: bytes) -> None:
        """Write bytes under a stored filename.

        Raises:
            StorageError: If the bytes cannot be written
        """
        pass

    @abstractmethod
    async def read(self, stored_filename: str) -> bytes | None:
        """Read the bytes stored under a filename.

        Returns:
            The bytes, or None if nothing is stored under that name

        Raises:
            StorageError: If the bytes exist but cannot be read
        """
        pass

    @abstractmethod
    async def delete(self, stored_filename: str) -> bool:
        """Remove stored bytes.

        Returns:
            True if something was removed, False if it was already gone
        """
        pass


class FileService(Service):
    """Domain service for board file attachments.

    Pairs each metadata row in the repository with bytes in the file store.
    """

    def __init__(
        self,
        file_attachment_repository: FileAttachmentRepository,
        file_store: FileStore,
        upload_settings: UploadSettings,
    ) -> None:
        """Initialize file service.

        Args:
            file_attachment_repository: Attachment metadata repository
            file_store: Store holding the uploaded bytes
            upload_settings: Upload limits
        """
        self.file_attachment_repository = file_attachment_repository
        self.file_store = file_store
        self.upload_settings = upload_settings

    def check_uploads(self, uploads: list[UploadedFile]) -> None:
        """Reject uploads over the maximum file size.

        Raises:
            ValidationError: If a file exceeds the maximum size
        """
        for upload in uploads:
            if upload.size > self.upload_settings.max_file_size:
                logfire.warn(
                    "Upload exceeds maximum size",
                    filename=upload.original_filename,
                    size=upload.size,
                    max_size=self.upload_settings.max_file_size,
                )
                raise ValidationError(
                    f"File {upload.original_filename} exceeds maximum size of "
                    f"{self.upload_settings.max_file_size} bytes"
                )

    async def store_files(
        self, board_id: BoardId, uploads: list[UploadedFile]
    ) -> list[FileAttachment]:
        """Store uploaded files and record their metadata for a board.

        Empty uploads are skipped. Each stored file gets a fresh random name
        that keeps the original extension. If a write fails, files already
        written by this call are removed again.

        Raises:
            ValidationError: If a file exceeds the maximum size
            StorageError: If writing a file fails
        """
        with logfire.span(
            "file_service.store_files", board_id=board_id, count=len(uploads)
        ):
            self.check_uploads(uploads)

            attachments: list[FileAttachment] = []
            for upload in uploads:
                if upload.is_empty:
                    logfire.info(
                        "Skipping empty upload", filename=upload.original_filename
                    )
                    continue

                stored_filename = f"{uuid4().hex}{upload.extension}"
                try:
                    await self.file_store.write(stored_filename, upload.data)
                except StorageError:
                    await self._discard_written(attachments)
                    raise
                attachments.append(
                    FileAttachment(
                        board_id=board_id,
                        original_filename=upload.original_filename,
                        stored_filename=stored_filename,
                        file_size=upload.size,
                        file_type=upload.content_type,
                    )
                )

            if not attachments:
                return []

            try:
                saved = await self.file_attachment_repository.insert_batch(
                    attachments
                )
            except Exception:
                await self._discard_written(attachments)
                raise
            logfire.info("Files stored", board_id=board_id, count=len(saved))
            return saved

    async def _discard_written(self, attachments: list[FileAttachment]) -> None:
        for written in attachments:
            await self._remove_bytes(written)

    async def list_files(self, board_id: BoardId) -> list[FileAttachment]:
        """List the attachments of a board."""
        return await self.file_attachment_repository.find_by_board(board_id)

    async def get_file(self, file_id: FileId) -> FileAttachment:
        """Get attachment metadata.

        Raises:
            NotFoundError: If the attachment does not exist
        """
        attachment = await self.file_attachment_repository.find_by_id(file_id)
        if not attachment:
            raise NotFoundError("File", file_id)
        return attachment

    async def read_file(self, file_id: FileId) -> tuple[FileAttachment, bytes]:
        """Get attachment metadata together with its bytes.

        Raises:
            NotFoundError: If the row or the stored bytes are missing
        """
        with logfire.span("file_service.read_file", file_id=file_id):
            attachment = await self.get_file(file_id)
            data = await self.file_store.read(attachment.stored_filename)
            if data is None:
                logfire.warn(
                    "Stored bytes missing for attachment",
                    file_id=file_id,
                    stored_filename=attachment.stored_filename,
                )
                raise NotFoundError("Stored file", attachment.stored_filename)
            return attachment, data

    async def delete_file(self, file_id: FileId) -> None:
        """Delete one attachment row and its stored bytes.

        Raises:
            NotFoundError: If the attachment does not exist
        """
        with logfire.span("file_service.delete_file", file_id=file_id):
            attachment = await self.get_file(file_id)
            await self.file_attachment_repository.delete_by_id(file_id)
            await self._remove_bytes(attachment)

    async def delete_board_files(self, board_id: BoardId) -> int:
        """Delete every attachment of a board.

        Rows are removed first; stored bytes are then removed best-effort,
        failures are logged and do not abort the operation.

        Returns:
            Number of attachment rows deleted
        """
        with logfire.span("file_service.delete_board_files", board_id=board_id):
            attachments = await self.file_attachment_repository.find_by_board(
                board_id
            )
            await self.file_attachment_repository.delete_by_board(board_id)
            for attachment in attachments:
                await self._remove_bytes(attachment)
            return len(attachments)

    async def _remove_bytes(self, attachment: FileAttachment) -> None:
        try:
            removed = await self.file_store.delete(attachment.stored_filename)
        except StorageError as e:
            logfire.warn(
                "Failed to remove stored file",
                file_id=attachment.id,
                stored_filename=attachment.stored_filename,
                error=str(e),
            )
            return
        if not removed:
            logfire.info(
                "Stored file already absent",
                file_id=attachment.id,
                stored_filename=attachment.stored_filename,
            )
