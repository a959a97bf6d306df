"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from bulletin.application.usecase.comment import (
    CommentItem,
    CommentMessageResponse,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetChildCommentsResponse,
    GetChildCommentsUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from bulletin.domain.error import NotFoundError, ValidationError

router = APIRouter(prefix="/api/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    board_id: int | None = None
    parent_comment_id: int | None = None  # Parent comment ID for nested comments
    content: str = Field(min_length=1)
    writer: str = Field(min_length=1, max_length=100)


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1)
    writer: str = Field(min_length=1, max_length=100)


@router.post(
    "", response_model=CreateCommentResponse, status_code=status.HTTP_201_CREATED
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Create a top-level comment, or a nested one when parent_comment_id is set.

    Raises:
        HTTPException: 404 if the board or parent is missing, 400 on validation
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(**request.model_dump())
        )
    except NotFoundError as e:
        logfire.warn(
            "Comment creation failed - target not found",
            board_id=request.board_id,
            parent_comment_id=request.parent_comment_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except (ValidationError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/board/{board_id}", response_model=GetCommentsResponse)
async def get_board_comments(
    board_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get the nested comment tree of a board."""
    return await get_comments_use_case.execute(GetCommentsRequest(board_id=board_id))


@router.get("/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: int,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentItem:
    """Get a comment with its replies and descendants."""
    try:
        return await get_comment_use_case.execute(
            GetCommentRequest(comment_id=comment_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.get("/{comment_id}/children", response_model=GetChildCommentsResponse)
async def get_child_comments(
    comment_id: int,
    get_child_comments_use_case: FromDishka[GetChildCommentsUseCase],
) -> GetChildCommentsResponse:
    """Get the direct children of a comment, each with its sub-tree."""
    try:
        return await get_child_comments_use_case.execute(
            GetCommentRequest(comment_id=comment_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.put("/{comment_id}", response_model=CommentMessageResponse)
async def update_comment(
    comment_id: int,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> CommentMessageResponse:
    """Replace a comment's content and writer."""
    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=comment_id,
                content=request.content,
                writer=request.writer,
            )
        )
    except NotFoundError as e:
        logfire.warn("Comment update failed - not found", comment_id=comment_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/{comment_id}", response_model=CommentMessageResponse)
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> CommentMessageResponse:
    """Delete a comment with all of its descendants and their replies."""
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id)
        )
    except NotFoundError as e:
        logfire.warn("Comment delete failed - not found", comment_id=comment_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
