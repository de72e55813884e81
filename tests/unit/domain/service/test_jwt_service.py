"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from inkwell.config import AuthSettings
from inkwell.domain.service import JWTService
from inkwell.util.jwt import JWTError
from tests.auth import mint_token

SECRET = "unit-test-secret-0123456789abcdef"
OTHER_SECRET = "other-test-secret-0123456789abcdef"


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret=SECRET)


@pytest.fixture
def jwt_service(auth_settings):
    return JWTService(auth_settings=auth_settings)


class TestJWTService:
    """Tests for token verification at the route edge."""

    def test_token_yields_user_id(self, jwt_service, auth_settings):
        user_id = str(uuid4())
        token = mint_token(user_id, "alice", auth_settings)

        assert jwt_service.get_user_id_from_token(token) == user_id
        assert jwt_service.verify_token(token).username == "alice"

    def test_missing_token_yields_none(self, jwt_service):
        assert jwt_service.get_user_id_from_token(None) is None
        assert jwt_service.get_user_id_from_token("") is None

    def test_garbage_token_yields_none(self, jwt_service):
        assert jwt_service.get_user_id_from_token("not-a-jwt") is None

    def test_token_signed_with_other_secret_rejected(self, jwt_service):
        token = mint_token(
            str(uuid4()), "mallory", AuthSettings(jwt_secret=OTHER_SECRET)
        )

        with pytest.raises(JWTError):
            jwt_service.verify_token(token)
        assert jwt_service.get_user_id_from_token(token) is None

    def test_expired_token_rejected(self, jwt_service, auth_settings):
        token = mint_token(
            str(uuid4()), "alice", auth_settings, expires_in=timedelta(minutes=-1)
        )

        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)
        assert jwt_service.get_user_id_from_token(token) is None

    def test_service_only_verifies(self):
        assert not hasattr(JWTService, "create_token")
