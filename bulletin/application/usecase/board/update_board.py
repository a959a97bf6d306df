"""Update and delete board use cases."""

from pydantic import BaseModel

from bulletin.application.usecase.base import BaseUseCase
from bulletin.application.usecase.board.create_board import BoardMessageResponse
from bulletin.domain.service import BoardService
from bulletin.domain.value import BoardId, UploadedFile


class UpdateBoardRequest(BaseModel):
    """Update board request."""

    board_id: int
    title: str
    content: str
    writer: str
    files: list[UploadedFile] = []  # Appended to existing attachments


class UpdateBoardUseCase(BaseUseCase):
    """Use case for replacing a board's fields and adding attachments."""

    def __init__(self, board_service: BoardService) -> None:
        self.board_service = board_service

    async def execute(self, request: UpdateBoardRequest) -> BoardMessageResponse:
        """Execute update board flow.

        Raises:
            NotFoundError: If the board does not exist
            ValidationError: If content is too long or a file too large
        """
        board = await self.board_service.update_board(
            board_id=BoardId(request.board_id),
            title=request.title,
            content=request.content,
            writer=request.writer,
            uploads=request.files,
        )
        return BoardMessageResponse(
            board_id=board.id, message="Board updated successfully"
        )


class DeleteBoardRequest(BaseModel):
    """Delete board request."""

    board_id: int


class DeleteBoardUseCase(BaseUseCase):
    """Use case for deleting a board with its attachments and comments."""

    def __init__(self, board_service: BoardService) -> None:
        self.board_service = board_service

    async def execute(self, request: DeleteBoardRequest) -> BoardMessageResponse:
        """Execute delete board flow.

        Raises:
            NotFoundError: If the board does not exist
        """
        await self.board_service.delete_board(BoardId(request.board_id))
        return BoardMessageResponse(
            board_id=request.board_id, message="Board deleted successfully"
        )
