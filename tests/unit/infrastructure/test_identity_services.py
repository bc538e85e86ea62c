"""Tests for the password and token services."""

import jwt
import pytest

from vagaflow.infrastructure.identity.services import (
    BcryptPasswordService,
    JwtTokenService,
    TokenClaims,
)
from vagaflow.infrastructure.identity.services.token_service import ALGORITHM

SECRET = "unit-test-secret-key-that-is-long-enough"


@pytest.fixture(scope="module")
def password_service() -> BcryptPasswordService:
    return BcryptPasswordService(rounds=4)


@pytest.fixture
def token_service() -> JwtTokenService:
    return JwtTokenService(secret_key=SECRET, expire_minutes=15)


class TestPasswordService:
    def test_hash_and_verify(self, password_service: BcryptPasswordService) -> None:
        hashed = password_service.hash_password("secret123")

        assert hashed != "secret123"
        assert hashed.startswith("$2b$")
        assert password_service.verify_password("secret123", hashed)
        assert not password_service.verify_password("secret124", hashed)

    def test_verify_against_garbage_hash_is_false(
        self, password_service: BcryptPasswordService
    ) -> None:
        assert not password_service.verify_password("secret123", "not-a-bcrypt-hash")

    def test_dummy_hash_is_a_real_hash(self, password_service: BcryptPasswordService) -> None:
        dummy = password_service.get_dummy_hash()

        assert dummy.startswith("$2b$")
        assert not password_service.verify_password("secret123", dummy)


class TestTokenService:
    def test_round_trip(self, token_service: JwtTokenService) -> None:
        token = token_service.create_access_token("user-1", "CANDIDATE")

        claims = token_service.verify_access_token(token.access_token)

        assert token.token_type == "bearer"
        assert token.expires_in == 15 * 60
        assert claims == TokenClaims(user_id="user-1", role="CANDIDATE")

    def test_tampered_token_is_rejected(self, token_service: JwtTokenService) -> None:
        token = token_service.create_access_token("user-1", "CANDIDATE").access_token

        assert token_service.verify_access_token(token + "x") is None

    def test_token_signed_with_other_key_is_rejected(self, token_service: JwtTokenService) -> None:
        other = JwtTokenService(
            secret_key="another-secret-key-that-is-long-enough", expire_minutes=15
        )
        forged = other.create_access_token("user-1", "COMPANY").access_token

        assert token_service.verify_access_token(forged) is None

    def test_expired_token_is_rejected(self) -> None:
        expired = JwtTokenService(secret_key=SECRET, expire_minutes=-1)
        token = expired.create_access_token("user-1", "CANDIDATE").access_token

        assert expired.verify_access_token(token) is None

    def test_non_access_token_is_rejected(self, token_service: JwtTokenService) -> None:
        refresh_like = jwt.encode({"sub": "user-1", "type": "refresh"}, SECRET, algorithm=ALGORITHM)

        assert token_service.verify_access_token(refresh_like) is None

    def test_missing_secret_key(self) -> None:
        with pytest.raises(ValueError, match="SECRET_KEY must be set"):
            JwtTokenService(secret_key="", expire_minutes=15)
