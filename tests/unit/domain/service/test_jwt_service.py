"""Unit tests for JWTService."""

from uuid import uuid4

import jwt
import pytest

from campus.config import AuthSettings
from campus.domain.service import JWTService
from campus.domain.value import UserId
from campus.util.jwt import JWTError


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(AuthSettings(jwt_secret="test-secret"))


class TestJWTService:
    """Tests for token creation and actor resolution."""

    def test_round_trip_carries_admin_flag(self, jwt_service):
        # Arrange
        user_id = UserId(uuid4())

        # Act
        token = jwt_service.create_token(user_id, is_admin=True)
        actor = jwt_service.get_actor_from_token(token)

        # Assert
        assert actor.user_id == user_id
        assert actor.is_admin is True

    def test_missing_token_is_anonymous(self, jwt_service):
        assert jwt_service.get_actor_from_token(None) is None
        assert jwt_service.get_actor_from_token("") is None

    def test_token_signed_with_other_secret_rejected(self, jwt_service):
        # Arrange
        other = JWTService(AuthSettings(jwt_secret="other-secret"))
        token = other.create_token(UserId(uuid4()))

        # Act / Assert
        with pytest.raises(JWTError, match="Invalid token"):
            jwt_service.verify_token(token)
        assert jwt_service.get_actor_from_token(token) is None

    def test_expired_token_rejected(self):
        # Arrange
        service = JWTService(AuthSettings(jwt_secret="test-secret", jwt_expiry_days=-1))
        token = service.create_token(UserId(uuid4()))

        # Act / Assert
        with pytest.raises(JWTError, match="expired"):
            service.verify_token(token)

    def test_malformed_user_id_is_anonymous(self, jwt_service):
        # Arrange
        token = jwt.encode(
            {"user_id": "not-a-uuid", "exp": 4102444800},
            "test-secret",
            algorithm="HS256",
        )

        # Act / Assert
        assert jwt_service.get_actor_from_token(token) is None
