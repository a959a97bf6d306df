"""Unit tests for CreateCommentUseCase."""

import pytest

from bulletin.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from bulletin.domain.error import NotFoundError, ValidationError
from bulletin.domain.model import Board
from bulletin.domain.repository import BoardRepository, CommentRepository
from bulletin.domain.service import CommentService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_board_only_creates_top_level_comment(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        board_repo = await unit_env.get(BoardRepository)
        comment_repo = await unit_env.get(CommentRepository)
        board = await board_repo.insert(Board(title="T", content="B", writer="kim"))

        # Act
        response = await use_case.execute(
            CreateCommentRequest(board_id=board.id, content="Hello", writer="lee")
        )

        # Assert
        assert response.message == "Comment created successfully"
        saved = await comment_repo.find_by_id(response.comment_id)
        assert saved.board_id == board.id
        assert saved.parent_comment_id is None

    @pytest.mark.asyncio
    async def test_parent_only_inherits_board_from_parent(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        board_repo = await unit_env.get(BoardRepository)
        comment_repo = await unit_env.get(CommentRepository)
        board = await board_repo.insert(Board(title="T", content="B", writer="kim"))
        parent_id = await comment_service.create_top_level_comment(
            board.id, "Parent", "kim"
        )

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                parent_comment_id=parent_id, content="Child", writer="lee"
            )
        )

        # Assert
        saved = await comment_repo.find_by_id(response.comment_id)
        assert saved.board_id == board.id
        assert saved.parent_comment_id == parent_id

    @pytest.mark.asyncio
    async def test_nested_comment_is_returned_inside_parent(self, unit_env):
        # Arrange
        create_use_case = await unit_env.get(CreateCommentUseCase)
        get_use_case = await unit_env.get(GetCommentsUseCase)
        board_repo = await unit_env.get(BoardRepository)
        board = await board_repo.insert(Board(title="T", content="B", writer="kim"))
        parent = await create_use_case.execute(
            CreateCommentRequest(board_id=board.id, content="Parent", writer="a")
        )
        child = await create_use_case.execute(
            CreateCommentRequest(
                board_id=board.id,
                parent_comment_id=parent.comment_id,
                content="Child",
                writer="b",
            )
        )

        # Act
        response = await get_use_case.execute(GetCommentsRequest(board_id=board.id))

        # Assert
        assert [c.comment_id for c in response.comments] == [parent.comment_id]
        assert [c.comment_id for c in response.comments[0].children] == [
            child.comment_id
        ]

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(parent_comment_id=5, content="x", writer="y")
            )

    @pytest.mark.asyncio
    async def test_no_board_and_no_parent_raises_validation_error(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(CreateCommentRequest(content="x", writer="y"))
