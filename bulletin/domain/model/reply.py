"""Reply entity."""

from datetime import datetime

from pydantic import Field

from bulletin.domain.model.common import DomainModel
from bulletin.domain.value import CommentId, ReplyId


class Reply(DomainModel):
    """Reply entity.

    A leaf-level annotation attached to exactly one comment. Replies are
    never nested further.
    """

    id: ReplyId | None = None  # Assigned by the store on insert
    comment_id: CommentId
    content: str = Field(min_length=1)
    writer: str = Field(min_length=1, max_length=100)
    created_at: datetime = Field(default_factory=datetime.now)
    modified_at: datetime = Field(default_factory=datetime.now)
