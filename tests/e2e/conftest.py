"""Shared fixtures for end-to-end API tests."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from inkwell.config import Settings
from inkwell.domain.model import User
from inkwell.interface.api.app import create_app
from inkwell.persistence.repository.inmemory import InMemoryStore
from tests.auth import mint_token
from tests.conftest import make_user
from tests.di import build_test_container

CONTENT = {"blocks": [{"type": "paragraph", "data": {"text": "Hello"}}]}


@pytest.fixture
def container():
    """Fresh in-memory container for one test."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Test client over the in-memory container."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def seed_user(client, container):
    """Return a helper that adds an account to the app's directory.

    Accounts are created outside this API, so tests write them straight into
    the in-memory store the app reads from.
    """
    store = client.portal.call(container.get, InMemoryStore)

    def _seed_user(username: str, **overrides) -> User:
        user = make_user(username, **overrides)
        store.users[user.id] = user
        return user

    return _seed_user


@pytest.fixture
def login():
    """Return auth headers for a new user id.

    Tokens are signed with the same settings the app verifies with.
    """
    auth_settings = Settings().auth

    def _login(username: str = "writer") -> tuple[str, dict[str, str]]:
        user_id = str(uuid4())
        token = mint_token(user_id, username, auth_settings)
        return user_id, {"Cookie": f"auth_token={token}"}

    return _login


@pytest.fixture
def publish(client):
    """Return a helper that publishes a blog and returns the response body."""

    def _publish(headers: dict[str, str], **overrides) -> dict:
        body = {
            "title": "Hello World",
            "description": "A first post",
            "banner_url": "https://img.example/banner.png",
            "content": CONTENT,
            "tags": ["python"],
        }
        body.update(overrides)
        response = client.post("/blogs", json=body, headers=headers)
        assert response.status_code == 200, response.text
        return response.json()

    return _publish
