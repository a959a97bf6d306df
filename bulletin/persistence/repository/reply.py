"""SQL implementation of Reply repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bulletin.domain.model import Reply
from bulletin.domain.repository import ReplyRepository
from bulletin.domain.value import CommentId, ReplyId
from bulletin.persistence.mappers import reply_to_dict, row_to_reply
from bulletin.persistence.tables import replies_table


class SqlReplyRepository(ReplyRepository):
    """SQL implementation of ReplyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert(self, reply: Reply) -> Reply:
        """Insert a reply and return it with its assigned id."""
        stmt = replies_table.insert().values(**reply_to_dict(reply))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return reply.model_copy(update={"id": ReplyId(result.inserted_primary_key[0])})

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        stmt = select(replies_table).where(replies_table.c.reply_id == reply_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reply(row._asdict()) if row else None

    async def find_by_comment(self, comment_id: CommentId) -> List[Reply]:
        stmt = (
            select(replies_table)
            .where(replies_table.c.comment_id == comment_id)
            .order_by(replies_table.c.reply_id)
        )
        result = await self.session.execute(stmt)
        return [row_to_reply(row._asdict()) for row in result.fetchall()]

    async def update(self, reply: Reply) -> None:
        stmt = (
            replies_table.update()
            .where(replies_table.c.reply_id == reply.id)
            .values(
                content=reply.content,
                writer=reply.writer,
                modified_at=reply.modified_at,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_id(self, reply_id: ReplyId) -> None:
        stmt = replies_table.delete().where(replies_table.c.reply_id == reply_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_comment(self, comment_id: CommentId) -> None:
        stmt = replies_table.delete().where(replies_table.c.comment_id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()
