"""End-to-end tests for the account directory."""


class TestUsersAPI:
    """Profile lookup and username search over HTTP."""

    def test_profile_by_username(self, client, seed_user):
        user = seed_user("ada", email="ada@example.com")

        response = client.get("/users/ada")

        assert response.status_code == 200
        assert response.json()["user_id"] == str(user.id)
        assert response.json()["total_posts"] == 0
        assert "email" not in response.json()

    def test_unknown_profile(self, client):
        response = client.get("/users/ghost")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    def test_search_is_case_insensitive(self, client, seed_user):
        seed_user("Grace")
        seed_user("hopper")

        response = client.get("/users/search", params={"query": "grac"})

        assert response.status_code == 200
        assert [u["username"] for u in response.json()["users"]] == ["Grace"]

    def test_search_requires_query(self, client):
        missing = client.get("/users/search")
        blank = client.get("/users/search", params={"query": "  "})

        assert missing.status_code == 422
        assert blank.status_code == 400
