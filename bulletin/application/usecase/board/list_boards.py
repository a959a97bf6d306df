"""List boards use case."""

from datetime import datetime

from pydantic import BaseModel

from bulletin.application.usecase.base import BaseUseCase
from bulletin.domain.service import BoardService


class BoardListItem(BaseModel):
    """Board list item in response."""

    board_id: int
    title: str
    writer: str
    view_count: int
    created_at: datetime
    modified_at: datetime


class ListBoardsRequest(BaseModel):
    """List boards request."""

    page: int = 1
    size: int = 10


class ListBoardsResponse(BaseModel):
    """List boards response."""

    boards: list[BoardListItem]
    current_page: int
    total_items: int
    total_pages: int


class ListBoardsUseCase(BaseUseCase):
    """Use case for listing boards page by page, newest first."""

    def __init__(self, board_service: BoardService) -> None:
        self.board_service = board_service

    async def execute(self, request: ListBoardsRequest) -> ListBoardsResponse:
        """Execute list boards flow.

        Raises:
            ValidationError: If page or size is out of range
        """
        page = await self.board_service.list_boards(request.page, request.size)
        return ListBoardsResponse(
            boards=[
                BoardListItem(
                    board_id=board.id,
                    title=board.title,
                    writer=board.writer,
                    view_count=board.view_count,
                    created_at=board.created_at,
                    modified_at=board.modified_at,
                )
                for board in page.boards
            ],
            current_page=page.page,
            total_items=page.total_items,
            total_pages=page.total_pages,
        )
