"""Unit tests for JWT helpers and JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from logus.config import AuthSettings
from logus.domain.service import JWTService
from logus.util.jwt import JWTError, create_token, verify_token


@pytest.fixture
def auth_settings() -> AuthSettings:
    return AuthSettings(jwt_secret="test-secret")


class TestTokens:
    """Tests for token encoding and verification."""

    def test_token_carries_user(self, auth_settings):
        """A freshly created token verifies to the same user."""
        token = create_token(42, "ada", auth_settings)

        payload = verify_token(token, auth_settings)

        assert payload.user_id == 42
        assert payload.username == "ada"
        assert payload.exp > datetime.now(timezone.utc)

    def test_wrong_secret_rejected(self, auth_settings):
        """Tokens signed with another secret are invalid."""
        token = create_token(42, "ada", AuthSettings(jwt_secret="other"))

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, auth_settings)

    def test_expired_token_rejected(self, auth_settings):
        """Expired tokens are reported as such."""
        token = jwt.encode(
            {
                "sub": "42",
                "username": "ada",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, auth_settings)

    def test_non_numeric_subject_rejected(self, auth_settings):
        """Subjects must be integer user ids."""
        token = jwt.encode(
            {
                "sub": "not-a-number",
                "username": "ada",
                "exp": datetime.now(timezone.utc) + timedelta(days=1),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError):
            verify_token(token, auth_settings)


class TestJWTService:
    """Tests for the cookie-facing helper."""

    def test_user_id_from_valid_token(self, auth_settings):
        service = JWTService(auth_settings)
        token = service.create_token(7, "grace")

        assert service.get_user_id_from_token(token) == 7

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_missing_or_invalid_token_gives_none(self, auth_settings, token):
        service = JWTService(auth_settings)

        assert service.get_user_id_from_token(token) is None
