"""Board use cases."""

from .create_board import BoardMessageResponse, CreateBoardRequest, CreateBoardUseCase
from .get_board import GetBoardRequest, GetBoardResponse, GetBoardUseCase
from .list_boards import (
    BoardListItem,
    ListBoardsRequest,
    ListBoardsResponse,
    ListBoardsUseCase,
)
from .update_board import (
    DeleteBoardRequest,
    DeleteBoardUseCase,
    UpdateBoardRequest,
    UpdateBoardUseCase,
)

__all__ = [
    "BoardListItem",
    "BoardMessageResponse",
    "CreateBoardRequest",
    "CreateBoardUseCase",
    "DeleteBoardRequest",
    "DeleteBoardUseCase",
    "GetBoardRequest",
    "GetBoardResponse",
    "GetBoardUseCase",
    "ListBoardsRequest",
    "ListBoardsResponse",
    "ListBoardsUseCase",
    "UpdateBoardRequest",
    "UpdateBoardUseCase",
]
