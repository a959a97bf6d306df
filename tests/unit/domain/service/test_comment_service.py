"""Unit tests for CommentService."""

from unittest.mock import patch

import pytest

from bulletin.config import LimitSettings
from bulletin.domain.error import NotFoundError, ValidationError
from bulletin.domain.model import Board, Comment, Reply
from bulletin.domain.repository import (
    BoardRepository,
    CommentRepository,
    ReplyRepository,
)
from bulletin.domain.service import CommentService
from bulletin.domain.value import BoardId, CommentId
from bulletin.persistence.repository.inmemory import (
    InMemoryBoardRepository,
    InMemoryCommentRepository,
    InMemoryReplyRepository,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _make_board(board_repo: BoardRepository) -> BoardId:
    board = await board_repo.insert(
        Board(title="Question", content="How do I nest comments?", writer="kim")
    )
    return board.id


async def _make_reply(
    reply_repo: ReplyRepository, comment_id: CommentId, content: str = "Reply"
) -> Reply:
    return await reply_repo.insert(
        Reply(comment_id=comment_id, content=content, writer="lee")
    )


class RecordingCommentRepository(InMemoryCommentRepository):
    """Records comment deletes into a shared log."""

    def __init__(self, log: list) -> None:
        super().__init__()
        self.log = log

    async def delete_by_id(self, comment_id: CommentId) -> None:
        self.log.append(("comment", comment_id))
        await super().delete_by_id(comment_id)


class RecordingReplyRepository(InMemoryReplyRepository):
    """Records reply deletes into a shared log."""

    def __init__(self, log: list) -> None:
        super().__init__()
        self.log = log

    async def delete_by_comment(self, comment_id: CommentId) -> None:
        for reply in await self.find_by_comment(comment_id):
            self.log.append(("reply", reply.id))
        await super().delete_by_comment(comment_id)


class TestLoadTree:
    """Tests for assembling comment trees."""

    @pytest.mark.asyncio
    async def test_load_tree_empty_board_returns_empty_list(self, unit_env):
        """A board without comments has an empty tree."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        board_id = await _make_board(await unit_env.get(BoardRepository))

        # Act
        tree = await comment_service.load_tree(board_id)

        # Assert
        assert tree == []

    @pytest.mark.asyncio
    async def test_nested_comment_appears_under_parent_not_top_level(self, unit_env):
        """A nested comment is a descendant of its parent, never a root."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        board_id = await _make_board(await unit_env.get(BoardRepository))

        parent_id = await comment_service.create_top_level_comment(
            board_id, "Parent", "kim"
        )
        child_id = await comment_service.create_nested_comment(
            parent_id, "Child", "lee"
        )
        grandchild_id = await comment_service.create_nested_comment(
            child_id, "Grandchild", "park"
        )

        # Act
        tree = await comment_service.load_tree(board_id)

        # Assert
        assert [c.id for c in tree] == [parent_id]
        assert [c.id for c in tree[0].children] == [child_id]
        assert [c.id for c in tree[0].children[0].children] == [grandchild_id]
        assert tree[0].children[0].children[0].children == []

    @pytest.mark.asyncio
    async def test_load_tree_orders_top_level_by_id_and_attaches_replies(
        self, unit_env
    ):
        """Top-level comments come back in ascending id order with replies."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        reply_repo = await unit_env.get(ReplyRepository)
        board_id = await _make_board(await unit_env.get(BoardRepository))

        first = await comment_service.create_top_level_comment(board_id, "One", "a")
        second = await comment_service.create_top_level_comment(board_id, "Two", "b")
        reply = await _make_reply(reply_repo, second)

        # Act
        tree = await comment_service.get_comment_tree(board_id)

        # Assert
        assert [c.id for c in tree] == [first, second]
        assert tree[0].replies == []
        assert [r.id for r in tree[1].replies] == [reply.id]

    @pytest.mark.asyncio
    async def test_load_single_returns_sub_tree(self, unit_env):
        """A single comment is loaded with its descendants."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        board_id = await _make_board(await unit_env.get(BoardRepository))
        parent_id = await comment_service.create_top_level_comment(
            board_id, "Parent", "kim"
        )
        child_id = await comment_service.create_nested_comment(
            parent_id, "Child", "lee"
        )

        # Act
        comment = await comment_service.get_comment(parent_id)

        # Assert
        assert comment.id == parent_id
        assert [c.id for c in comment.children] == [child_id]

    @pytest.mark.asyncio
    async def test_load_single_missing_raises_not_found(self, unit_env):
        """Loading a missing comment raises NotFoundError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.load_single(CommentId(999))

    @pytest.mark.asyncio
    async def test_get_children_returns_direct_children_only(self, unit_env):
        """get_children lists direct children, each with its own sub-tree."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        board_id = await _make_board(await unit_env.get(BoardRepository))
        root = await comment_service.create_top_level_comment(board_id, "Root", "a")
        child_a = await comment_service.create_nested_comment(root, "A", "b")
        child_b = await comment_service.create_nested_comment(root, "B", "c")
        grandchild = await comment_service.create_nested_comment(child_a, "A1", "d")

        # Act
        children = await comment_service.get_children(root)

        # Assert
        assert [c.id for c in children] == [child_a, child_b]
        assert [c.id for c in children[0].children] == [grandchild]

    @pytest.mark.asyncio
    async def test_get_children_of_missing_parent_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.get_children(CommentId(42))


class TestCreateComment:
    """Tests for creating top-level and nested comments."""

    @pytest.mark.asyncio
    async def test_create_top_level_ignores_supplied_parent(self, unit_env):
        """create_top_level discards a parent_comment_id on the input."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        board_id = await _make_board(await unit_env.get(BoardRepository))

        # Act
        comment_id = await comment_service.create_top_level(
            Comment(
                board_id=board_id,
                parent_comment_id=CommentId(5),
                content="Hello",
                writer="kim",
            )
        )

        # Assert
        saved = await comment_repo.find_by_id(comment_id)
        assert saved is not None
        assert saved.parent_comment_id is None
        assert saved.is_top_level

    @pytest.mark.asyncio
    async def test_create_top_level_on_missing_board_raises_not_found(self, unit_env):
        """A top-level comment needs an existing board."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.create_top_level_comment(
                BoardId(404), "Hello", "kim"
            )

    @pytest.mark.asyncio
    async def test_create_nested_with_missing_parent_performs_no_insert(
        self, unit_env
    ):
        """A missing parent fails with NotFoundError before anything is written."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        board_id = await _make_board(await unit_env.get(BoardRepository))

        # Act / Assert
        with patch.object(comment_repo, "insert", wraps=comment_repo.insert) as insert:
            with pytest.raises(NotFoundError):
                await comment_service.create_nested(
                    Comment(
                        board_id=board_id,
                        parent_comment_id=CommentId(12345),
                        content="Orphan",
                        writer="kim",
                    )
                )
            insert.assert_not_called()

        assert await comment_repo.find_by_board(board_id) == []

    @pytest.mark.asyncio
    async def test_create_nested_without_parent_raises_validation_error(
        self, unit_env
    ):
        """A nested comment must name its parent."""
        comment_service = await unit_env.get(CommentService)
        board_id = await _make_board(await unit_env.get(BoardRepository))

        with pytest.raises(ValidationError):
            await comment_service.create_nested(
                Comment(board_id=board_id, content="No parent", writer="kim")
            )

    @pytest.mark.asyncio
    async def test_create_nested_comment_inherits_parent_board(self, unit_env):
        """create_nested_comment takes the board from the parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        board_id = await _make_board(await unit_env.get(BoardRepository))
        parent_id = await comment_service.create_top_level_comment(
            board_id, "Parent", "kim"
        )

        # Act
        child_id = await comment_service.create_nested_comment(
            parent_id, "Child", "lee"
        )

        # Assert
        child = await comment_repo.find_by_id(child_id)
        assert child.board_id == board_id
        assert child.parent_comment_id == parent_id

    @pytest.mark.asyncio
    async def test_create_nested_rejects_parent_from_other_board(self, unit_env):
        """Parent and child must live on the same board."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        board_repo = await unit_env.get(BoardRepository)
        board_a = await _make_board(board_repo)
        board_b = await _make_board(board_repo)
        parent_id = await comment_service.create_top_level_comment(
            board_a, "Parent", "kim"
        )

        # Act / Assert
        with pytest.raises(ValidationError):
            await comment_service.create_nested(
                Comment(
                    board_id=board_b,
                    parent_comment_id=parent_id,
                    content="Wrong board",
                    writer="lee",
                )
            )

    @pytest.mark.asyncio
    async def test_content_over_limit_raises_validation_error(self):
        """Content longer than the configured limit is rejected."""
        # Arrange
        board_repo = InMemoryBoardRepository()
        comment_service = CommentService(
            comment_repository=InMemoryCommentRepository(),
            reply_repository=InMemoryReplyRepository(),
            board_repository=board_repo,
            limits=LimitSettings(max_content_length=10),
        )
        board_id = await _make_board(board_repo)

        # Act / Assert
        with pytest.raises(ValidationError):
            await comment_service.create_top_level_comment(
                board_id, "x" * 11, "kim"
            )


class TestUpdateComment:
    """Tests for update_comment."""

    @pytest.mark.asyncio
    async def test_update_replaces_content_and_writer(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        board_id = await _make_board(await unit_env.get(BoardRepository))
        comment_id = await comment_service.create_top_level_comment(
            board_id, "Before", "kim"
        )
        before = await comment_repo.find_by_id(comment_id)

        # Act
        await comment_service.update_comment(comment_id, "After", "lee")

        # Assert
        after = await comment_repo.find_by_id(comment_id)
        assert after.content == "After"
        assert after.writer == "lee"
        assert after.modified_at >= before.modified_at
        assert after.created_at == before.created_at

    @pytest.mark.asyncio
    async def test_update_missing_comment_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.update_comment(CommentId(7), "After", "lee")


class TestDeleteSubtree:
    """Tests for deleting comment sub-trees."""

    @pytest.mark.asyncio
    async def test_delete_subtree_removes_descendants_and_replies(self, unit_env):
        """The root, every descendant and all their replies are removed."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        board_id = await _make_board(await unit_env.get(BoardRepository))

        root = await comment_service.create_top_level_comment(board_id, "Root", "a")
        child = await comment_service.create_nested_comment(root, "Child", "b")
        grandchild = await comment_service.create_nested_comment(child, "GC", "c")
        survivor = await comment_service.create_top_level_comment(
            board_id, "Survivor", "d"
        )
        for comment_id in (root, child, grandchild, survivor):
            await _make_reply(reply_repo, comment_id)

        # Act
        await comment_service.delete_subtree(root)

        # Assert
        for comment_id in (root, child, grandchild):
            assert await comment_repo.find_by_id(comment_id) is None
            assert await reply_repo.find_by_comment(comment_id) == []

        tree = await comment_service.load_tree(board_id)
        assert [c.id for c in tree] == [survivor]
        assert len(tree[0].replies) == 1

    @pytest.mark.asyncio
    async def test_delete_follows_dependency_order(self):
        """Replies go before their comment, children before their parent."""
        # Arrange
        log: list = []
        board_repo = InMemoryBoardRepository()
        reply_repo = RecordingReplyRepository(log)
        comment_service = CommentService(
            comment_repository=RecordingCommentRepository(log),
            reply_repository=reply_repo,
            board_repository=board_repo,
            limits=LimitSettings(),
        )
        board_id = await _make_board(board_repo)
        c1 = await comment_service.create_top_level_comment(board_id, "C1", "a")
        c2 = await comment_service.create_nested_comment(c1, "C2", "b")
        r1 = await _make_reply(reply_repo, c2)

        # Act
        await comment_service.delete_comment(c1)

        # Assert
        assert log == [("reply", r1.id), ("comment", c2), ("comment", c1)]
        assert await comment_service.load_tree(board_id) == []

    @pytest.mark.asyncio
    async def test_delete_comment_missing_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(CommentId(31337))

    @pytest.mark.asyncio
    async def test_delete_board_comments_clears_whole_board(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        board_id = await _make_board(await unit_env.get(BoardRepository))
        first = await comment_service.create_top_level_comment(board_id, "1", "a")
        await comment_service.create_top_level_comment(board_id, "2", "b")
        await comment_service.create_nested_comment(first, "1.1", "c")

        # Act
        deleted = await comment_service.delete_board_comments(board_id)

        # Assert
        assert deleted == 2
        assert await comment_repo.find_by_board(board_id) == []
