"""
Unit tests for JWT token utilities.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch
from uuid import uuid4

import pytest
from jose import ExpiredSignatureError, JWTError, jwt

from src.ridehail.config import Settings
from src.ridehail.security.jwt import (
    SUBJECT_CLAIM,
    create_access_token,
    create_user_token,
    decode_access_token,
)


class TestJWTUtils:
    """Test JWT token creation and validation."""

    @pytest.fixture
    def mock_settings(self):
        """Mock settings for testing."""
        return Settings(
            secret_key="test-secret-key",
            algorithm="HS256",
            access_token_expire_minutes=30,
        )

    def test_create_access_token_uses_settings(self, mock_settings):
        with patch("src.ridehail.security.jwt.get_settings", return_value=mock_settings):
            token = create_access_token({"role": "rider"})

        decoded = jwt.decode(token, "test-secret-key", algorithms=["HS256"])
        assert decoded["role"] == "rider"
        assert "exp" in decoded
        assert "iat" in decoded

        exp_time = datetime.fromtimestamp(decoded["exp"], tz=timezone.utc)
        expected_exp = datetime.now(timezone.utc) + timedelta(minutes=30)
        assert abs((exp_time - expected_exp).total_seconds()) < 5

    def test_create_access_token_with_custom_expiry(self, mock_settings):
        with patch("src.ridehail.security.jwt.get_settings", return_value=mock_settings):
            token = create_access_token({"role": "rider"}, expires_delta=timedelta(hours=1))

        decoded = jwt.decode(token, "test-secret-key", algorithms=["HS256"])
        exp_time = datetime.fromtimestamp(decoded["exp"], tz=timezone.utc)
        expected_exp = datetime.now(timezone.utc) + timedelta(hours=1)
        assert abs((exp_time - expected_exp).total_seconds()) < 5

    def test_explicit_secret_overrides_settings(self, mock_settings):
        with patch("src.ridehail.security.jwt.get_settings", return_value=mock_settings):
            token = create_access_token({"role": "rider"}, secret_key="other", algorithm="HS512")

        assert jwt.decode(token, "other", algorithms=["HS512"])["role"] == "rider"

    def test_create_user_token_subject(self, mock_settings):
        user_id = uuid4()
        with patch("src.ridehail.security.jwt.get_settings", return_value=mock_settings):
            token = create_user_token(user_id)

        claims = decode_access_token(token, "test-secret-key", "HS256")
        assert claims[SUBJECT_CLAIM] == str(user_id)

    def test_decode_wrong_secret(self):
        token = create_user_token(uuid4(), secret_key="a", algorithm="HS256")
        with pytest.raises(JWTError):
            decode_access_token(token, "b", "HS256")

    def test_decode_garbage(self):
        with pytest.raises(JWTError):
            decode_access_token("invalid.token.here", "a", "HS256")

    def test_decode_expired(self):
        token = create_user_token(
            uuid4(), secret_key="a", algorithm="HS256", expires_delta=timedelta(seconds=-1)
        )
        with pytest.raises(ExpiredSignatureError):
            decode_access_token(token, "a", "HS256")

    def test_decode_requires_expiry(self):
        token = jwt.encode({SUBJECT_CLAIM: str(uuid4())}, "a", algorithm="HS256")
        with pytest.raises(JWTError):
            decode_access_token(token, "a", "HS256")
