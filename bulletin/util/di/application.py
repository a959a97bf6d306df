"""Application layer DI providers."""

from dishka import Scope, provide

from bulletin.application.usecase.board import (
    CreateBoardUseCase,
    DeleteBoardUseCase,
    GetBoardUseCase,
    ListBoardsUseCase,
    UpdateBoardUseCase,
)
from bulletin.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetChildCommentsUseCase,
    GetCommentsUseCase,
    GetCommentUseCase,
    UpdateCommentUseCase,
)
from bulletin.application.usecase.database import (
    GetDatabaseTypeUseCase,
    SwitchDatabaseUseCase,
)
from bulletin.application.usecase.file import (
    DeleteFileUseCase,
    DownloadFileUseCase,
    ListFilesUseCase,
)
from bulletin.application.usecase.reply import (
    CreateReplyUseCase,
    DeleteReplyUseCase,
    GetRepliesUseCase,
    GetReplyUseCase,
    UpdateReplyUseCase,
)
from bulletin.application.usecase.screen_layout import (
    CreateLayoutUseCase,
    DeleteLayoutUseCase,
    GetLayoutUseCase,
    ListLayoutsUseCase,
    UpdateLayoutUseCase,
)
from bulletin.domain.service import (
    BoardService,
    CommentService,
    DatabaseService,
    FileService,
    ReplyService,
    ScreenLayoutService,
)
from bulletin.domain.value import DatabaseSelection
from bulletin.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Board use cases
    @provide
    def get_create_board_use_case(
        self, board_service: BoardService
    ) -> CreateBoardUseCase:
        return CreateBoardUseCase(board_service=board_service)

    @provide
    def get_get_board_use_case(self, board_service: BoardService) -> GetBoardUseCase:
        return GetBoardUseCase(board_service=board_service)

    @provide
    def get_list_boards_use_case(
        self, board_service: BoardService
    ) -> ListBoardsUseCase:
        return ListBoardsUseCase(board_service=board_service)

    @provide
    def get_update_board_use_case(
        self, board_service: BoardService
    ) -> UpdateBoardUseCase:
        return UpdateBoardUseCase(board_service=board_service)

    @provide
    def get_delete_board_use_case(
        self, board_service: BoardService
    ) -> DeleteBoardUseCase:
        return DeleteBoardUseCase(board_service=board_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        return GetCommentsUseCase(comment_service=comment_service)

    @provide
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        return GetCommentUseCase(comment_service=comment_service)

    @provide
    def get_get_child_comments_use_case(
        self, comment_service: CommentService
    ) -> GetChildCommentsUseCase:
        return GetChildCommentsUseCase(comment_service=comment_service)

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        return DeleteCommentUseCase(comment_service=comment_service)

    # Reply use cases
    @provide
    def get_create_reply_use_case(
        self, reply_service: ReplyService
    ) -> CreateReplyUseCase:
        return CreateReplyUseCase(reply_service=reply_service)

    @provide
    def get_get_replies_use_case(
        self, reply_service: ReplyService
    ) -> GetRepliesUseCase:
        return GetRepliesUseCase(reply_service=reply_service)

    @provide
    def get_get_reply_use_case(self, reply_service: ReplyService) -> GetReplyUseCase:
        return GetReplyUseCase(reply_service=reply_service)

    @provide
    def get_update_reply_use_case(
        self, reply_service: ReplyService
    ) -> UpdateReplyUseCase:
        return UpdateReplyUseCase(reply_service=reply_service)

    @provide
    def get_delete_reply_use_case(
        self, reply_service: ReplyService
    ) -> DeleteReplyUseCase:
        return DeleteReplyUseCase(reply_service=reply_service)

    # File use cases
    @provide
    def get_list_files_use_case(self, file_service: FileService) -> ListFilesUseCase:
        return ListFilesUseCase(file_service=file_service)

    @provide
    def get_download_file_use_case(
        self, file_service: FileService
    ) -> DownloadFileUseCase:
        return DownloadFileUseCase(file_service=file_service)

    @provide
    def get_delete_file_use_case(self, file_service: FileService) -> DeleteFileUseCase:
        return DeleteFileUseCase(file_service=file_service)

    # Screen layout use cases
    @provide
    def get_create_layout_use_case(
        self, screen_layout_service: ScreenLayoutService
    ) -> CreateLayoutUseCase:
        return CreateLayoutUseCase(screen_layout_service=screen_layout_service)

    @provide
    def get_get_layout_use_case(
        self, screen_layout_service: ScreenLayoutService
    ) -> GetLayoutUseCase:
        return GetLayoutUseCase(screen_layout_service=screen_layout_service)

    @provide
    def get_list_layouts_use_case(
        self, screen_layout_service: ScreenLayoutService
    ) -> ListLayoutsUseCase:
        return ListLayoutsUseCase(screen_layout_service=screen_layout_service)

    @provide
    def get_update_layout_use_case(
        self, screen_layout_service: ScreenLayoutService
    ) -> UpdateLayoutUseCase:
        return UpdateLayoutUseCase(screen_layout_service=screen_layout_service)

    @provide
    def get_delete_layout_use_case(
        self, screen_layout_service: ScreenLayoutService
    ) -> DeleteLayoutUseCase:
        return DeleteLayoutUseCase(screen_layout_service=screen_layout_service)

    # Database use cases
    @provide
    def get_get_database_type_use_case(
        self, database_service: DatabaseService, selection: DatabaseSelection
    ) -> GetDatabaseTypeUseCase:
        return GetDatabaseTypeUseCase(
            database_service=database_service, selection=selection
        )

    @provide
    def get_switch_database_use_case(
        self, database_service: DatabaseService
    ) -> SwitchDatabaseUseCase:
        return SwitchDatabaseUseCase(database_service=database_service)
