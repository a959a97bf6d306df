"""Domain layer DI providers."""

from dishka import Scope, provide

from bulletin.config import LimitSettings, UploadSettings
from bulletin.domain.repository import (
    BoardRepository,
    CardRepository,
    CentralMenuRepository,
    CommentRepository,
    FileAttachmentRepository,
    ReplyRepository,
    ScreenLayoutRepository,
)
from bulletin.domain.service import (
    BoardService,
    CommentService,
    DatabaseSelector,
    DatabaseService,
    FileService,
    FileStore,
    ReplyService,
    ScreenLayoutService,
)
from bulletin.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        board_repository: BoardRepository,
        limits: LimitSettings,
    ) -> CommentService:
        """Provide comment tree domain service."""
        return CommentService(
            comment_repository=comment_repository,
            reply_repository=reply_repository,
            board_repository=board_repository,
            limits=limits,
        )

    @provide
    def get_reply_service(
        self,
        reply_repository: ReplyRepository,
        comment_repository: CommentRepository,
        limits: LimitSettings,
    ) -> ReplyService:
        """Provide reply domain service."""
        return ReplyService(
            reply_repository=reply_repository,
            comment_repository=comment_repository,
            limits=limits,
        )

    @provide
    def get_file_service(
        self,
        file_attachment_repository: FileAttachmentRepository,
        file_store: FileStore,
        upload_settings: UploadSettings,
    ) -> FileService:
        """Provide file attachment domain service."""
        return FileService(
            file_attachment_repository=file_attachment_repository,
            file_store=file_store,
            upload_settings=upload_settings,
        )

    @provide
    def get_board_service(
        self,
        board_repository: BoardRepository,
        comment_service: CommentService,
        file_service: FileService,
        limits: LimitSettings,
    ) -> BoardService:
        """Provide board domain service."""
        return BoardService(
            board_repository=board_repository,
            comment_service=comment_service,
            file_service=file_service,
            limits=limits,
        )

    @provide
    def get_screen_layout_service(
        self,
        screen_layout_repository: ScreenLayoutRepository,
        card_repository: CardRepository,
        central_menu_repository: CentralMenuRepository,
    ) -> ScreenLayoutService:
        """Provide screen layout domain service."""
        return ScreenLayoutService(
            screen_layout_repository=screen_layout_repository,
            card_repository=card_repository,
            central_menu_repository=central_menu_repository,
        )

    @provide
    def get_database_service(self, selector: DatabaseSelector) -> DatabaseService:
        """Provide database selection domain service."""
        return DatabaseService(selector=selector)
