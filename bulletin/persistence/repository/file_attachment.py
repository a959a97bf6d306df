"""SQL implementation of FileAttachment repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bulletin.domain.model import FileAttachment
from bulletin.domain.repository import FileAttachmentRepository
from bulletin.domain.value import BoardId, FileId
from bulletin.persistence.mappers import (
    file_attachment_to_dict,
    row_to_file_attachment,
)
from bulletin.persistence.tables import file_attachments_table


class SqlFileAttachmentRepository(FileAttachmentRepository):
    """SQL implementation of FileAttachmentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert_batch(
        self, attachments: List[FileAttachment]
    ) -> List[FileAttachment]:
        """Insert attachments one statement each to collect their ids."""
        saved = []
        for attachment in attachments:
            stmt = file_attachments_table.insert().values(
                **file_attachment_to_dict(attachment)
            )
            result = await self.session.execute(stmt)
            saved.append(
                attachment.model_copy(
                    update={"id": FileId(result.inserted_primary_key[0])}
                )
            )
        await self.session.flush()
        return saved

    async def find_by_id(self, file_id: FileId) -> Optional[FileAttachment]:
        stmt = select(file_attachments_table).where(
            file_attachments_table.c.file_id == file_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_file_attachment(row._asdict()) if row else None

    async def find_by_board(self, board_id: BoardId) -> List[FileAttachment]:
        stmt = (
            select(file_attachments_table)
            .where(file_attachments_table.c.board_id == board_id)
            .order_by(file_attachments_table.c.file_id)
        )
        result = await self.session.execute(stmt)
        return [row_to_file_attachment(row._asdict()) for row in result.fetchall()]

    async def delete_by_id(self, file_id: FileId) -> None:
        stmt = file_attachments_table.delete().where(
            file_attachments_table.c.file_id == file_id
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_board(self, board_id: BoardId) -> None:
        stmt = file_attachments_table.delete().where(
            file_attachments_table.c.board_id == board_id
        )
        await self.session.execute(stmt)
        await self.session.flush()
