"""initial_schema

Create the bulletin board schema, portable across MariaDB and Oracle:
- Boards with file attachments
- Comments (nested through parent_comment_id, unlimited depth)
- Replies (flat, attached to a comment)
- Screen layouts with cards and an optional central menu

Revision ID: 3c1f9a2d7b40
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import mysql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# LONGTEXT on MariaDB, CLOB on Oracle
LONG_TEXT = sa.Text().with_variant(mysql.LONGTEXT(), "mysql", "mariadb")


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # BOARDS table
    # ========================================================================
    op.create_table(
        "boards",
        sa.Column("board_id", sa.Integer(), sa.Identity(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("content", LONG_TEXT, nullable=False),
        sa.Column("writer", sa.String(length=100), nullable=False),
        sa.Column("view_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("modified_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("board_id"),
    )
    op.create_index("idx_boards_created_at", "boards", ["created_at"])

    # ========================================================================
    # FILE_ATTACHMENTS table
    # ========================================================================
    op.create_table(
        "file_attachments",
        sa.Column("file_id", sa.Integer(), sa.Identity(), nullable=False),
        sa.Column("board_id", sa.Integer(), nullable=False),
        sa.Column("original_filename", sa.String(length=255), nullable=False),
        sa.Column("stored_filename", sa.String(length=255), nullable=False),
        sa.Column("file_size", sa.BigInteger(), nullable=False),
        sa.Column("file_type", sa.String(length=100), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["board_id"], ["boards.board_id"]),
        sa.PrimaryKeyConstraint("file_id"),
        sa.UniqueConstraint("stored_filename"),
    )
    op.create_index(
        "idx_file_attachments_board_id", "file_attachments", ["board_id"]
    )

    # ========================================================================
    # COMMENTS table (self-referencing)
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("comment_id", sa.Integer(), sa.Identity(), nullable=False),
        sa.Column("board_id", sa.Integer(), nullable=False),
        sa.Column("parent_comment_id", sa.Integer(), nullable=True),
        sa.Column("content", LONG_TEXT, nullable=False),
        sa.Column("writer", sa.String(length=100), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("modified_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["board_id"], ["boards.board_id"]),
        sa.ForeignKeyConstraint(["parent_comment_id"], ["comments.comment_id"]),
        sa.PrimaryKeyConstraint("comment_id"),
    )
    op.create_index("idx_comments_board_id", "comments", ["board_id"])
    op.create_index(
        "idx_comments_parent_comment_id", "comments", ["parent_comment_id"]
    )

    # ========================================================================
    # REPLIES table
    # ========================================================================
    op.create_table(
        "replies",
        sa.Column("reply_id", sa.Integer(), sa.Identity(), nullable=False),
        sa.Column("comment_id", sa.Integer(), nullable=False),
        sa.Column("content", LONG_TEXT, nullable=False),
        sa.Column("writer", sa.String(length=100), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("modified_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.comment_id"]),
        sa.PrimaryKeyConstraint("reply_id"),
    )
    op.create_index("idx_replies_comment_id", "replies", ["comment_id"])

    # ========================================================================
    # SCREEN LAYOUT tables
    # ========================================================================
    op.create_table(
        "screen_layouts",
        sa.Column("layout_id", sa.Integer(), sa.Identity(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("modified_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("layout_id"),
    )

    op.create_table(
        "cards",
        sa.Column("card_id", sa.Integer(), sa.Identity(), nullable=False),
        sa.Column("layout_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.String(length=20), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=True),
        sa.Column("horizontal_collapse", sa.Boolean(), nullable=False),
        sa.Column("vertical_collapse", sa.Boolean(), nullable=False),
        sa.Column("title_only", sa.Boolean(), nullable=False),
        sa.Column("expanded", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("modified_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["layout_id"], ["screen_layouts.layout_id"]),
        sa.PrimaryKeyConstraint("card_id"),
    )
    op.create_index("idx_cards_layout_id", "cards", ["layout_id"])

    op.create_table(
        "central_menus",
        sa.Column("menu_id", sa.Integer(), sa.Identity(), nullable=False),
        sa.Column("layout_id", sa.Integer(), nullable=False),
        sa.Column("priority", sa.Boolean(), nullable=False),
        sa.Column("expanded", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("modified_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["layout_id"], ["screen_layouts.layout_id"]),
        sa.PrimaryKeyConstraint("menu_id"),
        sa.UniqueConstraint("layout_id"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("central_menus")
    op.drop_index("idx_cards_layout_id", table_name="cards")
    op.drop_table("cards")
    op.drop_table("screen_layouts")
    op.drop_index("idx_replies_comment_id", table_name="replies")
    op.drop_table("replies")
    op.drop_index("idx_comments_parent_comment_id", table_name="comments")
    op.drop_index("idx_comments_board_id", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_file_attachments_board_id", table_name="file_attachments")
    op.drop_table("file_attachments")
    op.drop_index("idx_boards_created_at", table_name="boards")
    op.drop_table("boards")
