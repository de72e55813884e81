"""End-to-end tests for comment threads."""

from uuid import uuid4

import pytest


class TestCommentsAPI:
    """Comment create, list and delete over HTTP."""

    def test_create_requires_auth(self, client):
        response = client.post(
            f"/blogs/{uuid4()}/comments", json={"body": "Nice post"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication required to create comments"

    def test_invalid_token_is_anonymous(self, client):
        response = client.post(
            f"/blogs/{uuid4()}/comments",
            json={"body": "Nice post"},
            headers={"Cookie": "auth_token=not-a-jwt"},
        )

        assert response.status_code == 401

    def test_thread_lifecycle(self, client, login, publish):
        # Arrange
        author_id, author = login("author")
        _, reader = login("reader")
        blog = publish(author)

        # Act
        top = client.post(
            f"/blogs/{blog['blog_id']}/comments",
            json={"body": "Great read", "blog_author_id": author_id},
            headers=reader,
        )
        reply = client.post(
            f"/blogs/{blog['blog_id']}/comments",
            json={"body": "Thanks!", "parent_comment_id": top.json()["comment_id"]},
            headers=author,
        )
        listed = client.get(f"/blogs/{blog['blog_id']}/comments")
        replies = client.get(f"/comments/{top.json()['comment_id']}/replies")

        # Assert
        assert top.status_code == 201
        assert reply.status_code == 201
        assert reply.json()["is_reply"] is True
        assert [c["comment_id"] for c in listed.json()["comments"]] == [
            top.json()["comment_id"]
        ]
        assert listed.json()["comments"][0]["child_ids"] == [reply.json()["comment_id"]]
        assert [r["body"] for r in replies.json()["replies"]] == ["Thanks!"]

        activity = client.get(
            f"/blogs/{blog['slug']}", params={"mode": "edit"}, headers=author
        ).json()["activity"]
        assert activity["total_comments"] == 2
        assert activity["total_parent_comments"] == 1

    def test_delete_removes_subtree(self, client, login, publish):
        _, author = login("author")
        _, reader = login("reader")
        blog = publish(author)
        top = client.post(
            f"/blogs/{blog['blog_id']}/comments",
            json={"body": "First"},
            headers=reader,
        ).json()
        client.post(
            f"/blogs/{blog['blog_id']}/comments",
            json={"body": "Second", "parent_comment_id": top["comment_id"]},
            headers=author,
        )

        response = client.delete(f"/comments/{top['comment_id']}", headers=reader)

        assert response.status_code == 200
        assert response.json()["status"] == "done"
        assert response.json()["deleted_count"] == 2
        assert client.get(f"/blogs/{blog['blog_id']}/comments").json()["comments"] == []
        activity = client.get(
            f"/blogs/{blog['slug']}", params={"mode": "edit"}, headers=author
        ).json()["activity"]
        assert activity["total_comments"] == 0
        assert activity["total_parent_comments"] == 0

    def test_stranger_cannot_delete(self, client, login, publish):
        _, author = login("author")
        _, reader = login("reader")
        _, stranger = login("stranger")
        blog = publish(author)
        top = client.post(
            f"/blogs/{blog['blog_id']}/comments",
            json={"body": "Mine"},
            headers=reader,
        ).json()

        response = client.delete(f"/comments/{top['comment_id']}", headers=stranger)

        assert response.status_code == 403
        assert response.json()["error"] == "not_authorized"

    def test_empty_body_rejected(self, client, login, publish):
        _, author = login("author")
        blog = publish(author)

        response = client.post(
            f"/blogs/{blog['blog_id']}/comments", json={"body": "   "}, headers=author
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation"

    def test_unknown_blog(self, client, login):
        _, reader = login("reader")

        response = client.post(
            f"/blogs/{uuid4()}/comments", json={"body": "Hello?"}, headers=reader
        )

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    def test_malformed_id(self, client):
        response = client.get("/blogs/not-a-uuid/comments")

        assert response.status_code == 422

    @pytest.mark.parametrize(
        "field", ["parent_comment_id", "blog_author_id", "notification_id"]
    )
    def test_malformed_id_in_body(self, client, login, publish, field):
        _, author = login("author")
        blog = publish(author)

        response = client.post(
            f"/blogs/{blog['blog_id']}/comments",
            json={"body": "Hello", field: "not-a-uuid"},
            headers=author,
        )
        thread = client.get(f"/blogs/{blog['blog_id']}/comments")

        assert response.status_code == 422
        assert thread.json()["comments"] == []

    def test_negative_skip(self, client):
        response = client.get(f"/blogs/{uuid4()}/comments", params={"skip": -1})

        assert response.status_code == 422
