"""In-memory file attachment repository for testing."""

from itertools import count
from typing import Optional

from bulletin.domain.model.file_attachment import FileAttachment
from bulletin.domain.repository.file_attachment import FileAttachmentRepository
from bulletin.domain.value import BoardId, FileId


class InMemoryFileAttachmentRepository(FileAttachmentRepository):
    """In-memory implementation of FileAttachmentRepository for testing."""

    def __init__(self) -> None:
        self._files: dict[FileId, FileAttachment] = {}
        self._ids = count(1)

    async def insert_batch(
        self, attachments: list[FileAttachment]
    ) -> list[FileAttachment]:
        saved = []
        for attachment in attachments:
            stored = attachment.model_copy(update={"id": FileId(next(self._ids))})
            self._files[stored.id] = stored
            saved.append(stored)
        return saved

    async def find_by_id(self, file_id: FileId) -> Optional[FileAttachment]:
        return self._files.get(file_id)

    async def find_by_board(self, board_id: BoardId) -> list[FileAttachment]:
        return sorted(
            (f for f in self._files.values() if f.board_id == board_id),
            key=lambda f: f.id,
        )

    async def delete_by_id(self, file_id: FileId) -> None:
        self._files.pop(file_id, None)

    async def delete_by_board(self, board_id: BoardId) -> None:
        for file_id in [f.id for f in self._files.values() if f.board_id == board_id]:
            del self._files[file_id]
