"""Board domain service."""

import math
from dataclasses import dataclass
from datetime import datetime

import logfire

from bulletin.config import LimitSettings
from bulletin.domain.error import NotFoundError, ValidationError
from bulletin.domain.model.board import Board
from bulletin.domain.repository import BoardRepository
from bulletin.domain.value import BoardId, UploadedFile

from .base import Service, ensure_content_length
from .comment_service import CommentService
from .file_service import FileService

MAX_PAGE_SIZE = 100


@dataclass
class BoardPage:
    """One page of boards plus paging totals."""

    boards: list[Board]
    page: int
    total_items: int
    total_pages: int


class BoardService(Service):
    """Domain service for boards.

    A board owns its attachments and its comment tree; deleting a board
    tears both down before the board row itself.
    """

    def __init__(
        self,
        board_repository: BoardRepository,
        comment_service: CommentService,
        file_service: FileService,
        limits: LimitSettings,
    ) -> None:
        """Initialize board service.

        Args:
            board_repository: Board repository
            comment_service: Comment tree service
            file_service: Attachment service
            limits: Content limits
        """
        self.board_repository = board_repository
        self.comment_service = comment_service
        self.file_service = file_service
        self.limits = limits

    async def create_board(
        self, title: str, content: str, writer: str, uploads: list[UploadedFile]
    ) -> BoardId:
        """Create a board and store its uploads.

        Raises:
            ValidationError: If the content is too long or a file too large
            StorageError: If writing a file fails
        """
        with logfire.span("board_service.create_board", files=len(uploads)):
            ensure_content_length(content, self.limits.max_content_length)
            self.file_service.check_uploads(uploads)

            now = datetime.now()
            board = await self.board_repository.insert(
                Board(
                    title=title,
                    content=content,
                    writer=writer,
                    created_at=now,
                    modified_at=now,
                )
            )
            await self.file_service.store_files(board.id, uploads)

            logfire.info("Board created", board_id=board.id)
            return board.id

    async def get_board(self, board_id: BoardId) -> Board:
        """Read a board, counting the view.

        Returns:
            The board with its files and nested comment tree attached

        Raises:
            NotFoundError: If the board does not exist
        """
        with logfire.span("board_service.get_board", board_id=board_id):
            board = await self._require_board(board_id)
            await self.board_repository.increment_view_count(board_id)

            files = await self.file_service.list_files(board_id)
            comments = await self.comment_service.load_tree(board_id)
            return board.model_copy(
                update={
                    "view_count": board.view_count + 1,
                    "files": files,
                    "comments": comments,
                }
            )

    async def list_boards(self, page: int, size: int) -> BoardPage:
        """List one page of boards, newest first.

        Raises:
            ValidationError: If page < 1 or size outside 1..100
        """
        if page < 1:
            raise ValidationError("Page must be 1 or greater")
        if size < 1 or size > MAX_PAGE_SIZE:
            raise ValidationError(f"Size must be between 1 and {MAX_PAGE_SIZE}")

        with logfire.span("board_service.list_boards", page=page, size=size):
            total = await self.board_repository.count()
            boards = await self.board_repository.find_page(
                offset=(page - 1) * size, limit=size
            )
            return BoardPage(
                boards=boards,
                page=page,
                total_items=total,
                total_pages=math.ceil(total / size),
            )

    async def update_board(
        self,
        board_id: BoardId,
        title: str,
        content: str,
        writer: str,
        uploads: list[UploadedFile],
    ) -> Board:
        """Replace title, content and writer; append any new uploads.

        Raises:
            NotFoundError: If the board does not exist
            ValidationError: If the content is too long or a file too large
        """
        with logfire.span("board_service.update_board", board_id=board_id):
            existing = await self._require_board(board_id)
            ensure_content_length(content, self.limits.max_content_length)
            self.file_service.check_uploads(uploads)

            updated = existing.model_copy(
                update={
                    "title": title,
                    "content": content,
                    "writer": writer,
                    "modified_at": datetime.now(),
                }
            )
            await self.board_repository.update(updated)
            await self.file_service.store_files(board_id, uploads)

            logfire.info("Board updated", board_id=board_id)
            return updated

    async def delete_board(self, board_id: BoardId) -> None:
        """Delete a board with its attachments and comment tree.

        Raises:
            NotFoundError: If the board does not exist
        """
        with logfire.span("board_service.delete_board", board_id=board_id):
            await self._require_board(board_id)

            top_level = await self.comment_service.delete_board_comments(board_id)
            files = await self.file_service.delete_board_files(board_id)
            await self.board_repository.delete_by_id(board_id)
            logfire.info(
                "Board deleted",
                board_id=board_id,
                files=files,
                top_level_comments=top_level,
            )

    async def _require_board(self, board_id: BoardId) -> Board:
        board = await self.board_repository.find_by_id(board_id)
        if not board:
            logfire.warn("Board not found", board_id=board_id)
            raise NotFoundError("Board", board_id)
        return board
