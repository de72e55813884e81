"""End-to-end tests for the notification feed."""


class TestNotificationsAPI:
    """Notification routes over HTTP."""

    def test_routes_require_auth(self, client):
        for path in ("/notifications", "/notifications/count", "/notifications/unseen"):
            response = client.get(path)

            assert response.status_code == 401
            assert response.json()["detail"] == (
                "Authentication required to read notifications"
            )

    def test_comment_and_like_reach_author(self, client, login, publish):
        # Arrange
        _, author = login("author")
        _, reader = login("reader")
        blog = publish(author)
        client.post(
            f"/blogs/{blog['blog_id']}/comments",
            json={"body": "Loved it"},
            headers=reader,
        )
        client.post(f"/blogs/{blog['blog_id']}/like", headers=reader)

        # Act
        unseen = client.get("/notifications/unseen", headers=author)
        count = client.get("/notifications/count", headers=author)
        likes = client.get(
            "/notifications/count", params={"filter": "like"}, headers=author
        )
        feed = client.get("/notifications", headers=author)
        after = client.get("/notifications/unseen", headers=author)

        # Assert
        assert unseen.json()["new_notification_available"] is True
        assert count.json()["total_docs"] == 2
        assert likes.json()["total_docs"] == 1
        items = feed.json()["notifications"]
        assert {item["type"] for item in items} == {"comment", "like"}
        assert all(item["blog_slug"] == blog["slug"] for item in items)
        comment_item = next(item for item in items if item["type"] == "comment")
        assert comment_item["comment_body"] == "Loved it"
        assert after.json()["new_notification_available"] is False

    def test_own_actions_do_not_notify(self, client, login, publish):
        _, author = login("author")
        blog = publish(author)
        client.post(
            f"/blogs/{blog['blog_id']}/comments",
            json={"body": "Note to self"},
            headers=author,
        )

        response = client.get("/notifications/unseen", headers=author)

        assert response.json()["new_notification_available"] is False

    def test_invalid_filter(self, client, login):
        _, user = login("user")

        response = client.get(
            "/notifications", params={"filter": "bogus"}, headers=user
        )

        assert response.status_code == 422
