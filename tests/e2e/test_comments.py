"""End-to-end tests for comment and reply endpoints."""

import pytest
from fastapi.testclient import TestClient

from bulletin.interface.api.app import create_app
from bulletin.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


@pytest.fixture
def board_id(client) -> int:
    response = client.post(
        "/api/boards",
        data={"title": "Question", "content": "Body", "writer": "kim"},
    )
    return response.json()["board_id"]


def _comment(client, **payload) -> int:
    response = client.post("/api/comments", json={"writer": "lee", **payload})
    assert response.status_code == 201
    return response.json()["comment_id"]


class TestCommentEndpoints:
    """End-to-end tests for comment API endpoints."""

    def test_nested_comments_form_a_tree(self, client, board_id):
        # Arrange
        root = _comment(client, board_id=board_id, content="Root")
        child = _comment(client, parent_comment_id=root, content="Child")
        grandchild = _comment(
            client, board_id=board_id, parent_comment_id=child, content="GC"
        )

        # Act
        response = client.get(f"/api/comments/board/{board_id}")

        # Assert
        assert response.status_code == 200
        tree = response.json()["comments"]
        assert [c["comment_id"] for c in tree] == [root]
        assert tree[0]["children"][0]["comment_id"] == child
        assert tree[0]["children"][0]["children"][0]["comment_id"] == grandchild

    def test_get_children(self, client, board_id):
        root = _comment(client, board_id=board_id, content="Root")
        child = _comment(client, parent_comment_id=root, content="Child")

        response = client.get(f"/api/comments/{root}/children")

        assert response.status_code == 200
        assert [c["comment_id"] for c in response.json()["children"]] == [child]

    def test_comment_on_missing_board_returns_404(self, client):
        response = client.post(
            "/api/comments", json={"board_id": 404, "content": "x", "writer": "y"}
        )

        assert response.status_code == 404

    def test_comment_with_missing_parent_returns_404(self, client, board_id):
        response = client.post(
            "/api/comments",
            json={
                "board_id": board_id,
                "parent_comment_id": 999,
                "content": "x",
                "writer": "y",
            },
        )

        assert response.status_code == 404
        assert client.get(f"/api/comments/board/{board_id}").json()["comments"] == []

    def test_comment_without_board_or_parent_returns_400(self, client):
        response = client.post("/api/comments", json={"content": "x", "writer": "y"})

        assert response.status_code == 400

    def test_update_comment(self, client, board_id):
        comment_id = _comment(client, board_id=board_id, content="Before")

        response = client.put(
            f"/api/comments/{comment_id}", json={"content": "After", "writer": "park"}
        )

        assert response.status_code == 200
        comment = client.get(f"/api/comments/{comment_id}").json()
        assert comment["content"] == "After"
        assert comment["writer"] == "park"

    def test_delete_comment_removes_subtree_and_replies(self, client, board_id):
        # Arrange
        root = _comment(client, board_id=board_id, content="C1")
        child = _comment(client, parent_comment_id=root, content="C2")
        reply = client.post(
            "/api/replies", json={"comment_id": child, "content": "R1", "writer": "a"}
        ).json()

        # Act
        response = client.delete(f"/api/comments/{root}")

        # Assert
        assert response.status_code == 200
        assert client.get(f"/api/comments/{child}").status_code == 404
        assert client.get(f"/api/replies/{reply['reply_id']}").status_code == 404
        assert client.get(f"/api/comments/board/{board_id}").json()["comments"] == []

    def test_delete_missing_comment_returns_404(self, client):
        response = client.delete("/api/comments/5")

        assert response.status_code == 404


class TestReplyEndpoints:
    """End-to-end tests for reply API endpoints."""

    def test_reply_crud(self, client, board_id):
        # Arrange
        comment_id = _comment(client, board_id=board_id, content="Question?")

        # Act - create
        created = client.post(
            "/api/replies",
            json={"comment_id": comment_id, "content": "Answer", "writer": "a"},
        )
        reply_id = created.json()["reply_id"]

        # Assert - create and list
        assert created.status_code == 201
        listed = client.get(f"/api/replies/comment/{comment_id}").json()
        assert [r["reply_id"] for r in listed["replies"]] == [reply_id]

        # Act / Assert - update
        updated = client.put(
            f"/api/replies/{reply_id}", json={"content": "Better", "writer": "b"}
        )
        assert updated.status_code == 200
        assert client.get(f"/api/replies/{reply_id}").json()["content"] == "Better"

        # Act / Assert - delete
        assert client.delete(f"/api/replies/{reply_id}").status_code == 200
        assert client.get(f"/api/replies/{reply_id}").status_code == 404

    def test_reply_to_missing_comment_returns_404(self, client):
        response = client.post(
            "/api/replies", json={"comment_id": 77, "content": "x", "writer": "y"}
        )

        assert response.status_code == 404

    def test_replies_are_part_of_comment_tree(self, client, board_id):
        comment_id = _comment(client, board_id=board_id, content="Q")
        client.post(
            "/api/replies",
            json={"comment_id": comment_id, "content": "A", "writer": "b"},
        )

        tree = client.get(f"/api/comments/board/{board_id}").json()["comments"]

        assert [r["content"] for r in tree[0]["replies"]] == ["A"]
