"""Unit tests for ReplyService."""

import pytest

from bulletin.domain.error import NotFoundError
from bulletin.domain.repository import BoardRepository, ReplyRepository
from bulletin.domain.model import Board
from bulletin.domain.service import CommentService, ReplyService
from bulletin.domain.value import CommentId, ReplyId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _make_comment(unit_env) -> CommentId:
    board_repo = await unit_env.get(BoardRepository)
    comment_service = await unit_env.get(CommentService)
    board = await board_repo.insert(Board(title="T", content="B", writer="kim"))
    return await comment_service.create_top_level_comment(board.id, "C", "kim")


class TestReplyService:
    """Tests for reply CRUD."""

    @pytest.mark.asyncio
    async def test_create_and_list_replies_in_order(self, unit_env):
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        comment_id = await _make_comment(unit_env)

        # Act
        first = await reply_service.create_reply(comment_id, "First", "a")
        second = await reply_service.create_reply(comment_id, "Second", "b")

        # Assert
        replies = await reply_service.get_replies(comment_id)
        assert [r.id for r in replies] == [first, second]
        assert replies[0].content == "First"

    @pytest.mark.asyncio
    async def test_create_reply_on_missing_comment_raises_not_found(self, unit_env):
        reply_service = await unit_env.get(ReplyService)
        reply_repo = await unit_env.get(ReplyRepository)

        with pytest.raises(NotFoundError):
            await reply_service.create_reply(CommentId(99), "Orphan", "a")
        assert await reply_repo.find_by_comment(CommentId(99)) == []

    @pytest.mark.asyncio
    async def test_update_reply_replaces_content(self, unit_env):
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        comment_id = await _make_comment(unit_env)
        reply_id = await reply_service.create_reply(comment_id, "Before", "a")

        # Act
        await reply_service.update_reply(reply_id, "After", "b")

        # Assert
        reply = await reply_service.get_reply(reply_id)
        assert reply.content == "After"
        assert reply.writer == "b"

    @pytest.mark.asyncio
    async def test_delete_reply(self, unit_env):
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        comment_id = await _make_comment(unit_env)
        reply_id = await reply_service.create_reply(comment_id, "Bye", "a")

        # Act
        await reply_service.delete_reply(reply_id)

        # Assert
        with pytest.raises(NotFoundError):
            await reply_service.get_reply(reply_id)

    @pytest.mark.asyncio
    async def test_repository_delete_of_deleted_id_does_not_raise(self, unit_env):
        """delete_by_id on an id that is already gone is a no-op."""
        reply_repo = await unit_env.get(ReplyRepository)

        await reply_repo.delete_by_id(ReplyId(1))
        await reply_repo.delete_by_id(ReplyId(1))

    @pytest.mark.asyncio
    async def test_get_missing_reply_raises_not_found(self, unit_env):
        reply_service = await unit_env.get(ReplyService)

        with pytest.raises(NotFoundError):
            await reply_service.get_reply(ReplyId(404))
