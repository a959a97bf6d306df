"""Persistence infrastructure providers."""

from collections.abc import AsyncGenerator, AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from bulletin.config import Settings
from bulletin.domain.repository import (
    BoardRepository,
    CardRepository,
    CentralMenuRepository,
    CommentRepository,
    FileAttachmentRepository,
    ReplyRepository,
    ScreenLayoutRepository,
)
from bulletin.domain.value import DatabaseSelection
from bulletin.persistence.repository import (
    SqlBoardRepository,
    SqlCardRepository,
    SqlCentralMenuRepository,
    SqlCommentRepository,
    SqlFileAttachmentRepository,
    SqlReplyRepository,
    SqlScreenLayoutRepository,
)
from bulletin.persistence.routing import DatabaseRouter
from bulletin.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider routing to MariaDB or Oracle."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_router(self, settings: Settings) -> AsyncIterator[DatabaseRouter]:
        """Provide the database router, disposing its engines on shutdown."""
        router = DatabaseRouter(settings)
        yield router
        await router.dispose()

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, router: DatabaseRouter, selection: DatabaseSelection
    ) -> AsyncGenerator[AsyncSession, BaseException | None]:
        """Provide database session for request scope.

        The session is opened on the database the request selected. It is
        committed at the end of the request if no exception occurred, or
        rolled back if an exception was raised.

        dishka sends the exception that closed the request scope into the
        generator instead of throwing it, so it arrives as the value of
        the yield.
        """
        session_factory = router.session_factory(selection)
        async with session_factory() as session:
            exc = yield session
            if exc is not None:
                logfire.warn(
                    "Session rollback",
                    database_type=selection.database_type.value,
                    error=str(exc),
                )
                await session.rollback()
                return

            try:
                await session.commit()
            except Exception as e:
                logfire.error(
                    "Session commit failed",
                    database_type=selection.database_type.value,
                    error=str(e),
                )
                await session.rollback()
                raise
            logfire.info(
                "Session committed",
                database_type=selection.database_type.value,
            )

    @provide(scope=Scope.REQUEST)
    def get_board_repository(self, session: AsyncSession) -> BoardRepository:
        """Provide Board repository."""
        return SqlBoardRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return SqlCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reply_repository(self, session: AsyncSession) -> ReplyRepository:
        """Provide Reply repository."""
        return SqlReplyRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_file_attachment_repository(
        self, session: AsyncSession
    ) -> FileAttachmentRepository:
        """Provide FileAttachment repository."""
        return SqlFileAttachmentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_screen_layout_repository(
        self, session: AsyncSession
    ) -> ScreenLayoutRepository:
        """Provide ScreenLayout repository."""
        return SqlScreenLayoutRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_card_repository(self, session: AsyncSession) -> CardRepository:
        """Provide Card repository."""
        return SqlCardRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_central_menu_repository(
        self, session: AsyncSession
    ) -> CentralMenuRepository:
        """Provide CentralMenu repository."""
        return SqlCentralMenuRepository(session)
