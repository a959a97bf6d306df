"""Unit tests for row/model mappers."""

from datetime import datetime

from bulletin.domain.model import Card, Comment
from bulletin.domain.value import CardPosition
from bulletin.persistence.mappers import (
    card_to_dict,
    comment_to_dict,
    row_to_card,
    row_to_comment,
)

NOW = datetime(2024, 5, 1, 12, 0, 0)


class TestCommentMapping:
    """Tests for comment rows."""

    def test_row_without_parent_is_top_level(self):
        comment = row_to_comment(
            {
                "comment_id": 3,
                "board_id": 1,
                "parent_comment_id": None,
                "content": "Hi",
                "writer": "kim",
                "created_at": NOW,
                "modified_at": NOW,
            }
        )

        assert comment.id == 3
        assert comment.is_top_level
        assert comment.children == []
        assert comment.replies == []

    def test_transient_collections_never_reach_the_row(self):
        comment = Comment(
            board_id=1,
            parent_comment_id=2,
            content="Hi",
            writer="kim",
            children=[Comment(board_id=1, content="x", writer="y")],
        )

        row = comment_to_dict(comment)

        assert "children" not in row
        assert "replies" not in row
        assert "comment_id" not in row
        assert row["parent_comment_id"] == 2


class TestCardMapping:
    """Tests for card rows."""

    def test_position_is_stored_as_its_name(self):
        card = Card(layout_id=4, position=CardPosition.RIGHT_1, title="Stats")

        row = card_to_dict(card)

        assert row["position"] == "RIGHT_1"
        assert row["layout_id"] == 4
        assert "id" not in row

    def test_numeric_flags_are_read_as_booleans(self):
        """Oracle returns NUMBER(1) flags as integers."""
        card = row_to_card(
            {
                "card_id": 1,
                "layout_id": 4,
                "position": "LEFT_2",
                "title": None,
                "horizontal_collapse": 1,
                "vertical_collapse": 0,
                "title_only": 0,
                "expanded": 1,
                "created_at": NOW,
                "modified_at": NOW,
            }
        )

        assert card.position is CardPosition.LEFT_2
        assert card.horizontal_collapse is True
        assert card.vertical_collapse is False
        assert card.expanded is True
