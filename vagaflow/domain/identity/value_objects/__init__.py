from .email import Email
from .password_hash import PasswordHash, PasswordHasher

__all__ = ["Email", "PasswordHash", "PasswordHasher"]
