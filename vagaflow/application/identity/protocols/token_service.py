from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class AccessToken:
    """Signed access token handed to a client after login or registration."""

    access_token: str
    token_type: str
    expires_in: int


class TokenServiceProtocol(Protocol):
    def create_access_token(self, user_id: str, role: str) -> AccessToken: ...
