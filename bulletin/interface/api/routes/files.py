"""File attachment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Response, status

from bulletin.application.usecase.file import (
    DeleteFileRequest,
    DeleteFileUseCase,
    DownloadFileRequest,
    DownloadFileUseCase,
    ListFilesRequest,
    ListFilesResponse,
    ListFilesUseCase,
)
from bulletin.domain.error import NotFoundError, StorageError

router = APIRouter(prefix="/api/files", tags=["files"], route_class=DishkaRoute)


@router.get("/board/{board_id}", response_model=ListFilesResponse)
async def list_board_files(
    board_id: int,
    list_files_use_case: FromDishka[ListFilesUseCase],
) -> ListFilesResponse:
    """List the attachments of a board."""
    return await list_files_use_case.execute(ListFilesRequest(board_id=board_id))


@router.get("/{file_id}")
async def download_file(
    file_id: int,
    download_file_use_case: FromDishka[DownloadFileUseCase],
) -> Response:
    """Download an attachment under its original filename."""
    try:
        download = await download_file_use_case.execute(
            DownloadFileRequest(file_id=file_id)
        )
    except NotFoundError as e:
        logfire.warn("File download failed - not found", file_id=file_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except StorageError as e:
        logfire.error("File download failed", file_id=file_id, error=str(e))
        raise

    return Response(
        content=download.content,
        media_type=download.content_type,
        headers={"Content-Disposition": download.content_disposition},
    )


@router.delete("/{file_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_file(
    file_id: int,
    delete_file_use_case: FromDishka[DeleteFileUseCase],
) -> Response:
    """Delete an attachment and its stored bytes."""
    try:
        await delete_file_use_case.execute(DeleteFileRequest(file_id=file_id))
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
