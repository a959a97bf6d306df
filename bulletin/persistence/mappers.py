"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Transient collections
(files, comments, replies, children, cards, central_menu) never reach a row.
"""

from typing import Any, Dict

from bulletin.domain.model import (
    Board,
    Card,
    CentralMenu,
    Comment,
    FileAttachment,
    Reply,
    ScreenLayout,
)
from bulletin.domain.value import (
    BoardId,
    CardId,
    CardPosition,
    CommentId,
    FileId,
    LayoutId,
    MenuId,
    ReplyId,
)


def row_to_board(row: Dict[str, Any]) -> Board:
    """Convert database row to Board domain model."""
    return Board(
        id=BoardId(row["board_id"]),
        title=row["title"],
        content=row["content"],
        writer=row["writer"],
        view_count=row["view_count"] or 0,
        created_at=row["created_at"],
        modified_at=row["modified_at"],
    )


def board_to_dict(board: Board) -> Dict[str, Any]:
    """Convert Board domain model to database dict (without the key)."""
    return {
        "title": board.title,
        "content": board.content,
        "writer": board.writer,
        "view_count": board.view_count,
        "created_at": board.created_at,
        "modified_at": board.modified_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment with empty replies and children
    """
    parent = row.get("parent_comment_id")
    return Comment(
        id=CommentId(row["comment_id"]),
        board_id=BoardId(row["board_id"]),
        parent_comment_id=CommentId(parent) if parent is not None else None,
        content=row["content"],
        writer=row["writer"],
        created_at=row["created_at"],
        modified_at=row["modified_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict (without the key)."""
    return {
        "board_id": comment.board_id,
        "parent_comment_id": comment.parent_comment_id,
        "content": comment.content,
        "writer": comment.writer,
        "created_at": comment.created_at,
        "modified_at": comment.modified_at,
    }


def row_to_reply(row: Dict[str, Any]) -> Reply:
    """Convert database row to Reply domain model."""
    return Reply(
        id=ReplyId(row["reply_id"]),
        comment_id=CommentId(row["comment_id"]),
        content=row["content"],
        writer=row["writer"],
        created_at=row["created_at"],
        modified_at=row["modified_at"],
    )


def reply_to_dict(reply: Reply) -> Dict[str, Any]:
    return reply.model_dump(exclude={"id"})


def row_to_file_attachment(row: Dict[str, Any]) -> FileAttachment:
    """Convert database row to FileAttachment domain model."""
    return FileAttachment(
        id=FileId(row["file_id"]),
        board_id=BoardId(row["board_id"]),
        original_filename=row["original_filename"],
        stored_filename=row["stored_filename"],
        file_size=row["file_size"],
        file_type=row.get("file_type"),
        created_at=row["created_at"],
    )


def file_attachment_to_dict(attachment: FileAttachment) -> Dict[str, Any]:
    return attachment.model_dump(exclude={"id"})


def row_to_screen_layout(row: Dict[str, Any]) -> ScreenLayout:
    """Convert database row to ScreenLayout (no cards or menu)."""
    return ScreenLayout(
        id=LayoutId(row["layout_id"]),
        name=row["name"],
        created_at=row["created_at"],
        modified_at=row["modified_at"],
    )


def screen_layout_to_dict(layout: ScreenLayout) -> Dict[str, Any]:
    return layout.model_dump(exclude={"id", "cards", "central_menu"})


def row_to_card(row: Dict[str, Any]) -> Card:
    """Convert database row to Card domain model."""
    return Card(
        id=CardId(row["card_id"]),
        layout_id=LayoutId(row["layout_id"]),
        position=CardPosition(row["position"]),
        title=row.get("title"),
        horizontal_collapse=bool(row["horizontal_collapse"]),
        vertical_collapse=bool(row["vertical_collapse"]),
        title_only=bool(row["title_only"]),
        expanded=bool(row["expanded"]),
        created_at=row["created_at"],
        modified_at=row["modified_at"],
    )


def card_to_dict(card: Card) -> Dict[str, Any]:
    """Convert Card domain model to database dict (without the key)."""
    card_dict = card.model_dump(exclude={"id"})
    card_dict["position"] = card.position.value
    return card_dict


def row_to_central_menu(row: Dict[str, Any]) -> CentralMenu:
    """Convert database row to CentralMenu domain model."""
    return CentralMenu(
        id=MenuId(row["menu_id"]),
        layout_id=LayoutId(row["layout_id"]),
        priority=bool(row["priority"]),
        expanded=bool(row["expanded"]),
        created_at=row["created_at"],
        modified_at=row["modified_at"],
    )


def central_menu_to_dict(menu: CentralMenu) -> Dict[str, Any]:
    return menu.model_dump(exclude={"id"})
