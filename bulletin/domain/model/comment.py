"""Comment entity.

Comments hang off a board and nest with unlimited depth through
parent_comment_id. The children/replies collections are not stored; they are
assembled by the comment service when a tree is loaded.
"""

from datetime import datetime

from pydantic import Field

from bulletin.domain.model.common import DomainModel
from bulletin.domain.model.reply import Reply
from bulletin.domain.value import BoardId, CommentId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_comment_id: Direct parent comment (None for top-level)
    - children: Direct child comments, populated when a tree is loaded
    - replies: Leaf replies, populated when a tree is loaded
    """

    id: CommentId | None = None  # Assigned by the store on insert
    board_id: BoardId
    parent_comment_id: CommentId | None = None
    content: str = Field(min_length=1)
    writer: str = Field(min_length=1, max_length=100)
    created_at: datetime = Field(default_factory=datetime.now)
    modified_at: datetime = Field(default_factory=datetime.now)

    # Transient
    replies: list[Reply] = Field(default_factory=list)
    children: list["Comment"] = Field(default_factory=list)

    @property
    def is_top_level(self) -> bool:
        return self.parent_comment_id is None
