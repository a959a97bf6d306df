"""Create board use case."""

from pydantic import BaseModel

from bulletin.application.usecase.base import BaseUseCase
from bulletin.domain.service import BoardService
from bulletin.domain.value import UploadedFile


class CreateBoardRequest(BaseModel):
    """Create board request."""

    title: str
    content: str
    writer: str
    files: list[UploadedFile] = []


class BoardMessageResponse(BaseModel):
    """Board mutation response."""

    board_id: int
    message: str


class CreateBoardUseCase(BaseUseCase):
    """Use case for creating a board with optional attachments."""

    def __init__(self, board_service: BoardService) -> None:
        """Initialize create board use case.

        Args:
            board_service: Board domain service
        """
        self.board_service = board_service

    async def execute(self, request: CreateBoardRequest) -> BoardMessageResponse:
        """Execute create board flow.

        Raises:
            ValidationError: If content is too long or a file too large
            StorageError: If a file cannot be written
        """
        board_id = await self.board_service.create_board(
            title=request.title,
            content=request.content,
            writer=request.writer,
            uploads=request.files,
        )
        return BoardMessageResponse(
            board_id=board_id, message="Board created successfully"
        )
