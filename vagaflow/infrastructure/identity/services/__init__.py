from .password_service import BcryptPasswordService
from .token_service import JwtTokenService, TokenClaims

__all__ = ["BcryptPasswordService", "JwtTokenService", "TokenClaims"]
