"""Reply routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from bulletin.application.usecase.reply import (
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
    GetReplyRequest,
    GetReplyUseCase,
    ReplyItem,
    ReplyMessageResponse,
    UpdateReplyRequest,
    UpdateReplyUseCase,
)
from bulletin.domain.error import NotFoundError, ValidationError

router = APIRouter(prefix="/api/replies", tags=["replies"], route_class=DishkaRoute)


class CreateReplyAPIRequest(BaseModel):
    """API request for creating a reply."""

    comment_id: int
    content: str = Field(min_length=1)
    writer: str = Field(min_length=1, max_length=100)


class UpdateReplyAPIRequest(BaseModel):
    """API request for updating a reply."""

    content: str = Field(min_length=1)
    writer: str = Field(min_length=1, max_length=100)


@router.post(
    "", response_model=ReplyMessageResponse, status_code=status.HTTP_201_CREATED
)
async def create_reply(
    request: CreateReplyAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
) -> ReplyMessageResponse:
    """Attach a reply to a comment."""
    try:
        return await create_reply_use_case.execute(
            CreateReplyRequest(**request.model_dump())
        )
    except NotFoundError as e:
        logfire.warn(
            "Reply creation failed - comment not found", comment_id=request.comment_id
        )
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/comment/{comment_id}", response_model=GetRepliesResponse)
async def get_comment_replies(
    comment_id: int,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
) -> GetRepliesResponse:
    """List the replies of a comment, oldest first."""
    return await get_replies_use_case.execute(GetRepliesRequest(comment_id=comment_id))


@router.get("/{reply_id}", response_model=ReplyItem)
async def get_reply(
    reply_id: int,
    get_reply_use_case: FromDishka[GetReplyUseCase],
) -> ReplyItem:
    """Get a reply."""
    try:
        return await get_reply_use_case.execute(GetReplyRequest(reply_id=reply_id))
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.put("/{reply_id}", response_model=ReplyMessageResponse)
async def update_reply(
    reply_id: int,
    request: UpdateReplyAPIRequest,
    update_reply_use_case: FromDishka[UpdateReplyUseCase],
) -> ReplyMessageResponse:
    """Replace a reply's content and writer."""
    try:
        return await update_reply_use_case.execute(
            UpdateReplyRequest(
                reply_id=reply_id,
                content=request.content,
                writer=request.writer,
            )
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/{reply_id}", response_model=ReplyMessageResponse)
async def delete_reply(
    reply_id: int,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
) -> ReplyMessageResponse:
    """Delete a reply."""
    try:
        return await delete_reply_use_case.execute(DeleteReplyRequest(reply_id=reply_id))
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
