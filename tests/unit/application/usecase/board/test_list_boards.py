"""Unit tests for board use cases."""

import pytest

from bulletin.application.usecase.board import (
    CreateBoardRequest,
    CreateBoardUseCase,
    DeleteBoardRequest,
    DeleteBoardUseCase,
    GetBoardRequest,
    GetBoardUseCase,
    ListBoardsRequest,
    ListBoardsUseCase,
)
from bulletin.domain.error import NotFoundError
from bulletin.domain.value import UploadedFile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestBoardUseCases:
    """Tests for creating, listing, reading and deleting boards."""

    @pytest.mark.asyncio
    async def test_list_boards_reports_paging(self, unit_env):
        # Arrange
        create_use_case = await unit_env.get(CreateBoardUseCase)
        list_use_case = await unit_env.get(ListBoardsUseCase)
        for i in range(3):
            await create_use_case.execute(
                CreateBoardRequest(title=f"Board {i}", content="Body", writer="kim")
            )

        # Act
        response = await list_use_case.execute(ListBoardsRequest(page=2, size=2))

        # Assert
        assert response.current_page == 2
        assert response.total_items == 3
        assert response.total_pages == 2
        assert [b.title for b in response.boards] == ["Board 0"]

    @pytest.mark.asyncio
    async def test_get_board_includes_files(self, unit_env):
        # Arrange
        create_use_case = await unit_env.get(CreateBoardUseCase)
        get_use_case = await unit_env.get(GetBoardUseCase)
        created = await create_use_case.execute(
            CreateBoardRequest(
                title="With file",
                content="Body",
                writer="kim",
                files=[UploadedFile(original_filename="a.txt", data=b"abc")],
            )
        )

        # Act
        response = await get_use_case.execute(
            GetBoardRequest(board_id=created.board_id)
        )

        # Assert
        assert response.view_count == 1
        assert [f.original_filename for f in response.files] == ["a.txt"]
        assert response.files[0].file_size == 3
        assert response.comments == []

    @pytest.mark.asyncio
    async def test_delete_board_then_get_raises_not_found(self, unit_env):
        # Arrange
        create_use_case = await unit_env.get(CreateBoardUseCase)
        delete_use_case = await unit_env.get(DeleteBoardUseCase)
        get_use_case = await unit_env.get(GetBoardUseCase)
        created = await create_use_case.execute(
            CreateBoardRequest(title="Gone", content="Body", writer="kim")
        )

        # Act
        response = await delete_use_case.execute(
            DeleteBoardRequest(board_id=created.board_id)
        )

        # Assert
        assert response.board_id == created.board_id
        with pytest.raises(NotFoundError):
            await get_use_case.execute(GetBoardRequest(board_id=created.board_id))
