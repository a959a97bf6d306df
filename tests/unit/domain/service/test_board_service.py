"""Unit tests for BoardService."""

import pytest

from bulletin.domain.error import NotFoundError, ValidationError
from bulletin.domain.repository import (
    BoardRepository,
    CommentRepository,
    FileAttachmentRepository,
    ReplyRepository,
)
from bulletin.domain.model import Reply
from bulletin.domain.service import BoardService, CommentService, FileStore
from bulletin.domain.value import BoardId, UploadedFile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _upload(name: str = "notes.txt", data: bytes = b"hello") -> UploadedFile:
    return UploadedFile(original_filename=name, content_type="text/plain", data=data)


class TestCreateBoard:
    """Tests for create_board."""

    @pytest.mark.asyncio
    async def test_create_board_stores_non_empty_uploads(self, unit_env):
        """Non-empty uploads become attachments; empty ones are skipped."""
        # Arrange
        board_service = await unit_env.get(BoardService)
        file_repo = await unit_env.get(FileAttachmentRepository)
        file_store = await unit_env.get(FileStore)

        # Act
        board_id = await board_service.create_board(
            title="First question",
            content="Body",
            writer="kim",
            uploads=[_upload("a.txt"), _upload("empty.txt", b"")],
        )

        # Assert
        files = await file_repo.find_by_board(board_id)
        assert [f.original_filename for f in files] == ["a.txt"]
        assert files[0].stored_filename.endswith(".txt")
        assert file_store.files[files[0].stored_filename] == b"hello"

    @pytest.mark.asyncio
    async def test_create_board_rejects_oversize_upload_before_insert(
        self, unit_env
    ):
        """An oversize upload fails validation and no board is created."""
        # Arrange
        board_service = await unit_env.get(BoardService)
        board_repo = await unit_env.get(BoardRepository)
        too_big = b"x" * (board_service.file_service.upload_settings.max_file_size + 1)

        # Act / Assert
        with pytest.raises(ValidationError):
            await board_service.create_board(
                "Title", "Body", "kim", [_upload("big.bin", too_big)]
            )
        assert await board_repo.count() == 0


class TestGetBoard:
    """Tests for get_board."""

    @pytest.mark.asyncio
    async def test_get_board_counts_views_and_attaches_tree(self, unit_env):
        # Arrange
        board_service = await unit_env.get(BoardService)
        comment_service = await unit_env.get(CommentService)
        board_id = await board_service.create_board("T", "B", "kim", [_upload()])
        comment_id = await comment_service.create_top_level_comment(
            board_id, "Hi", "lee"
        )

        # Act
        first = await board_service.get_board(board_id)
        second = await board_service.get_board(board_id)

        # Assert
        assert first.view_count == 1
        assert second.view_count == 2
        assert len(second.files) == 1
        assert [c.id for c in second.comments] == [comment_id]

    @pytest.mark.asyncio
    async def test_get_missing_board_raises_not_found(self, unit_env):
        board_service = await unit_env.get(BoardService)

        with pytest.raises(NotFoundError):
            await board_service.get_board(BoardId(1))


class TestListBoards:
    """Tests for list_boards paging."""

    @pytest.mark.asyncio
    async def test_list_boards_pages_newest_first(self, unit_env):
        # Arrange
        board_service = await unit_env.get(BoardService)
        ids = [
            await board_service.create_board(f"Board {i}", "Body", "kim", [])
            for i in range(5)
        ]

        # Act
        page_one = await board_service.list_boards(page=1, size=2)
        page_three = await board_service.list_boards(page=3, size=2)

        # Assert
        assert [b.id for b in page_one.boards] == [ids[4], ids[3]]
        assert [b.id for b in page_three.boards] == [ids[0]]
        assert page_one.total_items == 5
        assert page_one.total_pages == 3

    @pytest.mark.asyncio
    async def test_list_boards_empty(self, unit_env):
        board_service = await unit_env.get(BoardService)

        page = await board_service.list_boards(page=1, size=10)

        assert page.boards == []
        assert page.total_items == 0
        assert page.total_pages == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page,size", [(0, 10), (1, 0), (1, 101)])
    async def test_list_boards_rejects_bad_paging(self, unit_env, page, size):
        board_service = await unit_env.get(BoardService)

        with pytest.raises(ValidationError):
            await board_service.list_boards(page=page, size=size)


class TestUpdateBoard:
    """Tests for update_board."""

    @pytest.mark.asyncio
    async def test_update_board_replaces_fields_and_appends_files(self, unit_env):
        # Arrange
        board_service = await unit_env.get(BoardService)
        file_repo = await unit_env.get(FileAttachmentRepository)
        board_id = await board_service.create_board(
            "Old", "Old body", "kim", [_upload("a.txt")]
        )

        # Act
        updated = await board_service.update_board(
            board_id, "New", "New body", "lee", [_upload("b.txt")]
        )

        # Assert
        assert updated.title == "New"
        assert updated.content == "New body"
        assert updated.writer == "lee"
        files = await file_repo.find_by_board(board_id)
        assert [f.original_filename for f in files] == ["a.txt", "b.txt"]

    @pytest.mark.asyncio
    async def test_update_missing_board_raises_not_found(self, unit_env):
        board_service = await unit_env.get(BoardService)

        with pytest.raises(NotFoundError):
            await board_service.update_board(BoardId(9), "T", "B", "kim", [])


class TestDeleteBoard:
    """Tests for the board deletion cascade."""

    @pytest.mark.asyncio
    async def test_delete_board_removes_files_comments_and_replies(self, unit_env):
        # Arrange
        board_service = await unit_env.get(BoardService)
        comment_service = await unit_env.get(CommentService)
        board_repo = await unit_env.get(BoardRepository)
        comment_repo = await unit_env.get(CommentRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        file_repo = await unit_env.get(FileAttachmentRepository)
        file_store = await unit_env.get(FileStore)

        board_id = await board_service.create_board("T", "B", "kim", [_upload()])
        root = await comment_service.create_top_level_comment(board_id, "C1", "a")
        child = await comment_service.create_nested_comment(root, "C2", "b")
        await reply_repo.insert(Reply(comment_id=child, content="R1", writer="c"))

        # Act
        await board_service.delete_board(board_id)

        # Assert
        assert await board_repo.find_by_id(board_id) is None
        assert await comment_repo.find_by_board(board_id) == []
        assert await reply_repo.find_by_comment(child) == []
        assert await file_repo.find_by_board(board_id) == []
        assert file_store.files == {}

    @pytest.mark.asyncio
    async def test_delete_board_tolerates_missing_physical_file(self, unit_env):
        """A stored file that is already gone does not abort the delete."""
        # Arrange
        board_service = await unit_env.get(BoardService)
        board_repo = await unit_env.get(BoardRepository)
        file_store = await unit_env.get(FileStore)
        board_id = await board_service.create_board("T", "B", "kim", [_upload()])
        file_store.files.clear()

        # Act
        await board_service.delete_board(board_id)

        # Assert
        assert await board_repo.find_by_id(board_id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_board_raises_not_found(self, unit_env):
        board_service = await unit_env.get(BoardService)

        with pytest.raises(NotFoundError):
            await board_service.delete_board(BoardId(77))
