"""File attachment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from bulletin.domain.model.file_attachment import FileAttachment
from bulletin.domain.value import BoardId, FileId


class FileAttachmentRepository(ABC):
    """Repository for FileAttachment metadata rows."""

    @abstractmethod
    async def insert_batch(
        self, attachments: List[FileAttachment]
    ) -> List[FileAttachment]:
        """Insert several attachments and return them with assigned ids."""
        pass

    @abstractmethod
    async def find_by_id(self, file_id: FileId) -> Optional[FileAttachment]:
        """Find an attachment by ID."""
        pass

    @abstractmethod
    async def find_by_board(self, board_id: BoardId) -> List[FileAttachment]:
        """Find the attachments of a board, ascending by id."""
        pass

    @abstractmethod
    async def delete_by_id(self, file_id: FileId) -> None:
        """Delete an attachment row. No-op if it does not exist."""
        pass

    @abstractmethod
    async def delete_by_board(self, board_id: BoardId) -> None:
        """Delete every attachment row of a board."""
        pass
