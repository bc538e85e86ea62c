"""bcrypt password hashing."""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.bcrypt import BcryptHasher

BCRYPT_ROUNDS = 10


class BcryptPasswordService:
    """
    Hashes and verifies passwords with bcrypt.

    Also holds a real hash of a throwaway password, so a login for an unknown
    email can spend the same time verifying as one for a known email.
    """

    def __init__(self, rounds: int = BCRYPT_ROUNDS) -> None:
        self._hasher = PasswordHash((BcryptHasher(rounds=rounds),))
        self._dummy_hash = self._hasher.hash("dummy_password_for_timing_attack_prevention")

    def hash_password(self, plain_password: str) -> str:
        return self._hasher.hash(plain_password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Check a password against a stored hash. Unreadable hashes never match."""
        # bcrypt raises ValueError for inputs longer than 72 bytes
        try:
            return self._hasher.verify(plain_password, hashed_password)
        except (UnknownHashError, ValueError):
            return False

    def get_dummy_hash(self) -> str:
        return self._dummy_hash
