"""Get board use case."""

from datetime import datetime

from pydantic import BaseModel

from bulletin.application.usecase.base import BaseUseCase
from bulletin.application.usecase.comment import CommentItem
from bulletin.application.usecase.comment.get_comments import to_comment_item
from bulletin.application.usecase.file import FileItem
from bulletin.application.usecase.file.list_files import to_file_item
from bulletin.domain.service import BoardService
from bulletin.domain.value import BoardId


class GetBoardRequest(BaseModel):
    """Get board request."""

    board_id: int


class GetBoardResponse(BaseModel):
    """Board with its attachments and nested comment tree."""

    board_id: int
    title: str
    content: str
    writer: str
    view_count: int
    created_at: datetime
    modified_at: datetime
    files: list[FileItem]
    comments: list[CommentItem]


class GetBoardUseCase(BaseUseCase):
    """Use case for reading a board."""

    def __init__(self, board_service: BoardService) -> None:
        self.board_service = board_service

    async def execute(self, request: GetBoardRequest) -> GetBoardResponse:
        """Execute get board flow.

        Each read counts as a view.

        Raises:
            NotFoundError: If the board does not exist
        """
        board = await self.board_service.get_board(BoardId(request.board_id))
        return GetBoardResponse(
            board_id=board.id,
            title=board.title,
            content=board.content,
            writer=board.writer,
            view_count=board.view_count,
            created_at=board.created_at,
            modified_at=board.modified_at,
            files=[to_file_item(f) for f in board.files],
            comments=[to_comment_item(c) for c in board.comments],
        )
