"""JWT access tokens."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError

from vagaflow.application.identity.protocols.token_service import AccessToken

ALGORITHM = "HS256"
TOKEN_TYPE = "access"


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified access token."""

    user_id: str
    role: str


class JwtTokenService:
    """Issues and verifies HS256 access tokens carrying the user id and role."""

    def __init__(self, secret_key: str, expire_minutes: int) -> None:
        if not secret_key:
            raise ValueError("SECRET_KEY must be set to sign access tokens")
        self.secret_key = secret_key
        self.expire_minutes = expire_minutes

    def create_access_token(self, user_id: str, role: str) -> AccessToken:
        expire = datetime.now(UTC) + timedelta(minutes=self.expire_minutes)
        claims = {"sub": user_id, "role": role, "exp": expire, "type": TOKEN_TYPE}
        return AccessToken(
            access_token=jwt.encode(claims, self.secret_key, algorithm=ALGORITHM),
            token_type="bearer",  # noqa: S106
            expires_in=self.expire_minutes * 60,
        )

    def verify_access_token(self, token: str) -> TokenClaims | None:
        """
        Verify a token's signature, expiry and type.

        Returns:
            The token's claims, or None if the token is not a valid access token
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[ALGORITHM])
        except InvalidTokenError:
            return None
        if payload.get("type") != TOKEN_TYPE or not payload.get("sub"):
            return None
        return TokenClaims(user_id=str(payload["sub"]), role=str(payload.get("role", "")))
