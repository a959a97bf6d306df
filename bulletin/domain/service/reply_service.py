"""Reply domain service."""

from datetime import datetime

import logfire

from bulletin.config import LimitSettings
from bulletin.domain.error import NotFoundError
from bulletin.domain.model.reply import Reply
from bulletin.domain.repository import CommentRepository, ReplyRepository
from bulletin.domain.value import CommentId, ReplyId

from .base import Service, ensure_content_length


class ReplyService(Service):
    """Domain service for replies on comments."""

    def __init__(
        self,
        reply_repository: ReplyRepository,
        comment_repository: CommentRepository,
        limits: LimitSettings,
    ) -> None:
        self.reply_repository = reply_repository
        self.comment_repository = comment_repository
        self.limits = limits

    async def create_reply(
        self, comment_id: CommentId, content: str, writer: str
    ) -> ReplyId:
        """Attach a reply to an existing comment.

        Raises:
            NotFoundError: If the comment does not exist
            ValidationError: If the content is too long
        """
        with logfire.span("reply_service.create_reply", comment_id=comment_id):
            ensure_content_length(content, self.limits.max_content_length)
            if not await self.comment_repository.find_by_id(comment_id):
                logfire.warn("Comment not found for reply", comment_id=comment_id)
                raise NotFoundError("Comment", comment_id)

            now = datetime.now()
            saved = await self.reply_repository.insert(
                Reply(
                    comment_id=comment_id,
                    content=content,
                    writer=writer,
                    created_at=now,
                    modified_at=now,
                )
            )
            logfire.info("Reply created", reply_id=saved.id, comment_id=comment_id)
            return saved.id

    async def get_reply(self, reply_id: ReplyId) -> Reply:
        """Get a reply by ID.

        Raises:
            NotFoundError: If the reply does not exist
        """
        reply = await self.reply_repository.find_by_id(reply_id)
        if not reply:
            raise NotFoundError("Reply", reply_id)
        return reply

    async def get_replies(self, comment_id: CommentId) -> list[Reply]:
        """List the replies of a comment, oldest first."""
        return await self.reply_repository.find_by_comment(comment_id)

    async def update_reply(self, reply_id: ReplyId, content: str, writer: str) -> Reply:
        """Replace the content and writer of a reply.

        Raises:
            NotFoundError: If the reply does not exist
            ValidationError: If the content is too long
        """
        with logfire.span("reply_service.update_reply", reply_id=reply_id):
            existing = await self.get_reply(reply_id)
            ensure_content_length(content, self.limits.max_content_length)
            updated = existing.model_copy(
                update={
                    "content": content,
                    "writer": writer,
                    "modified_at": datetime.now(),
                }
            )
            await self.reply_repository.update(updated)
            logfire.info("Reply updated", reply_id=reply_id)
            return updated

    async def delete_reply(self, reply_id: ReplyId) -> None:
        """Delete a reply.

        Raises:
            NotFoundError: If the reply does not exist
        """
        with logfire.span("reply_service.delete_reply", reply_id=reply_id):
            await self.get_reply(reply_id)
            await self.reply_repository.delete_by_id(reply_id)
            logfire.info("Reply deleted", reply_id=reply_id)
