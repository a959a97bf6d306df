"""Board routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, HTTPException, Query, UploadFile, status

from bulletin.application.usecase.board import (
    BoardMessageResponse,
    CreateBoardRequest,
    CreateBoardUseCase,
    DeleteBoardRequest,
    DeleteBoardUseCase,
    GetBoardRequest,
    GetBoardResponse,
    GetBoardUseCase,
    ListBoardsRequest,
    ListBoardsResponse,
    ListBoardsUseCase,
    UpdateBoardRequest,
    UpdateBoardUseCase,
)
from bulletin.domain.error import NotFoundError, StorageError, ValidationError
from bulletin.domain.value import UploadedFile

router = APIRouter(prefix="/api/boards", tags=["boards"], route_class=DishkaRoute)


async def _read_uploads(files: list[UploadFile] | None) -> list[UploadedFile]:
    """Read multipart uploads into memory, ignoring parts without a filename."""
    uploads = []
    for file in files or []:
        if not file.filename:
            continue
        uploads.append(
            UploadedFile(
                original_filename=file.filename,
                content_type=file.content_type,
                data=await file.read(),
            )
        )
    return uploads


@router.post(
    "", response_model=BoardMessageResponse, status_code=status.HTTP_201_CREATED
)
async def create_board(
    create_board_use_case: FromDishka[CreateBoardUseCase],
    title: str = Form(min_length=1, max_length=255),
    content: str = Form(),
    writer: str = Form(min_length=1, max_length=100),
    files: list[UploadFile] | None = File(default=None),
) -> BoardMessageResponse:
    """Create a board from a multipart form with optional file attachments.

    Returns:
        Created board ID

    Raises:
        HTTPException: If validation fails
    """
    try:
        return await create_board_use_case.execute(
            CreateBoardRequest(
                title=title,
                content=content,
                writer=writer,
                files=await _read_uploads(files),
            )
        )
    except (ValidationError, ValueError) as e:
        logfire.warn("Board creation rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StorageError as e:
        logfire.error("Storing board attachments failed", error=str(e))
        raise


@router.get("", response_model=ListBoardsResponse)
async def list_boards(
    list_boards_use_case: FromDishka[ListBoardsUseCase],
    page: int = Query(default=1),
    size: int = Query(default=10),
) -> ListBoardsResponse:
    """List boards, newest first.

    Args:
        page: 1-based page number
        size: Page size (1-100)
        list_boards_use_case: List boards use case from DI
    """
    try:
        return await list_boards_use_case.execute(
            ListBoardsRequest(page=page, size=size)
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/{board_id}", response_model=GetBoardResponse)
async def get_board(
    board_id: int,
    get_board_use_case: FromDishka[GetBoardUseCase],
) -> GetBoardResponse:
    """Get a board with its attachments and comment tree.

    Each call counts as a view.
    """
    try:
        return await get_board_use_case.execute(GetBoardRequest(board_id=board_id))
    except NotFoundError as e:
        logfire.warn("Board not found", board_id=board_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.put("/{board_id}", response_model=BoardMessageResponse)
async def update_board(
    board_id: int,
    update_board_use_case: FromDishka[UpdateBoardUseCase],
    title: str = Form(min_length=1, max_length=255),
    content: str = Form(),
    writer: str = Form(min_length=1, max_length=100),
    files: list[UploadFile] | None = File(default=None),
) -> BoardMessageResponse:
    """Replace a board's title, content and writer; append new attachments."""
    try:
        return await update_board_use_case.execute(
            UpdateBoardRequest(
                board_id=board_id,
                title=title,
                content=content,
                writer=writer,
                files=await _read_uploads(files),
            )
        )
    except NotFoundError as e:
        logfire.warn("Board update failed - board not found", board_id=board_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except (ValidationError, ValueError) as e:
        logfire.warn("Board update rejected", board_id=board_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StorageError as e:
        logfire.error(
            "Storing board attachments failed", board_id=board_id, error=str(e)
        )
        raise


@router.delete("/{board_id}", response_model=BoardMessageResponse)
async def delete_board(
    board_id: int,
    delete_board_use_case: FromDishka[DeleteBoardUseCase],
) -> BoardMessageResponse:
    """Delete a board with its attachments, comments and replies."""
    try:
        return await delete_board_use_case.execute(
            DeleteBoardRequest(board_id=board_id)
        )
    except NotFoundError as e:
        logfire.warn("Board delete failed - board not found", board_id=board_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
