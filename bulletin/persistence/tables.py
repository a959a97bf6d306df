"""SQLAlchemy table definitions for the bulletin board.

The same metadata is used for MariaDB and Oracle, so only portable column
types are used. Identity columns give store-assigned integer keys on both.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import mysql

# Metadata object for all tables
metadata = MetaData()

# Long text: LONGTEXT on MariaDB, CLOB on Oracle
LongText = Text().with_variant(mysql.LONGTEXT(), "mysql", "mariadb")

# ============================================================================
# BOARDS TABLE
# ============================================================================
boards_table = Table(
    "boards",
    metadata,
    Column("board_id", Integer, Identity(), primary_key=True),
    Column("title", String(255), nullable=False),
    Column("content", LongText, nullable=False),
    Column("writer", String(100), nullable=False),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column("created_at", DateTime, nullable=False),
    Column("modified_at", DateTime, nullable=False),
)

Index("idx_boards_created_at", boards_table.c.created_at)

# ============================================================================
# FILE ATTACHMENTS TABLE
# ============================================================================
file_attachments_table = Table(
    "file_attachments",
    metadata,
    Column("file_id", Integer, Identity(), primary_key=True),
    Column("board_id", Integer, ForeignKey("boards.board_id"), nullable=False),
    Column("original_filename", String(255), nullable=False),
    Column("stored_filename", String(255), nullable=False, unique=True),
    Column("file_size", BigInteger, nullable=False),
    Column("file_type", String(100), nullable=True),  # Content type
    Column("created_at", DateTime, nullable=False),
)

Index("idx_file_attachments_board_id", file_attachments_table.c.board_id)

# ============================================================================
# COMMENTS TABLE (self-referencing through parent_comment_id)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("comment_id", Integer, Identity(), primary_key=True),
    Column("board_id", Integer, ForeignKey("boards.board_id"), nullable=False),
    Column(
        "parent_comment_id",
        Integer,
        ForeignKey("comments.comment_id"),
        nullable=True,  # NULL = top-level comment
    ),
    Column("content", LongText, nullable=False),
    Column("writer", String(100), nullable=False),
    Column("created_at", DateTime, nullable=False),
    Column("modified_at", DateTime, nullable=False),
)

Index("idx_comments_board_id", comments_table.c.board_id)
Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)

# ============================================================================
# REPLIES TABLE
# ============================================================================
replies_table = Table(
    "replies",
    metadata,
    Column("reply_id", Integer, Identity(), primary_key=True),
    Column("comment_id", Integer, ForeignKey("comments.comment_id"), nullable=False),
    Column("content", LongText, nullable=False),
    Column("writer", String(100), nullable=False),
    Column("created_at", DateTime, nullable=False),
    Column("modified_at", DateTime, nullable=False),
)

Index("idx_replies_comment_id", replies_table.c.comment_id)

# ============================================================================
# SCREEN LAYOUT TABLES
# ============================================================================
screen_layouts_table = Table(
    "screen_layouts",
    metadata,
    Column("layout_id", Integer, Identity(), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("created_at", DateTime, nullable=False),
    Column("modified_at", DateTime, nullable=False),
)

cards_table = Table(
    "cards",
    metadata,
    Column("card_id", Integer, Identity(), primary_key=True),
    Column(
        "layout_id", Integer, ForeignKey("screen_layouts.layout_id"), nullable=False
    ),
    Column("position", String(20), nullable=False),  # LEFT_1, LEFT_2, RIGHT_1, RIGHT_2
    Column("title", String(255), nullable=True),
    Column("horizontal_collapse", Boolean, nullable=False, default=False),
    Column("vertical_collapse", Boolean, nullable=False, default=False),
    Column("title_only", Boolean, nullable=False, default=False),
    Column("expanded", Boolean, nullable=False, default=False),
    Column("created_at", DateTime, nullable=False),
    Column("modified_at", DateTime, nullable=False),
)

Index("idx_cards_layout_id", cards_table.c.layout_id)

central_menus_table = Table(
    "central_menus",
    metadata,
    Column("menu_id", Integer, Identity(), primary_key=True),
    Column(
        "layout_id",
        Integer,
        ForeignKey("screen_layouts.layout_id"),
        nullable=False,
        unique=True,  # At most one menu per layout
    ),
    Column("priority", Boolean, nullable=False, default=False),
    Column("expanded", Boolean, nullable=False, default=False),
    Column("created_at", DateTime, nullable=False),
    Column("modified_at", DateTime, nullable=False),
)
