"""
Password hashing and verification using bcrypt.

bcrypt only reads the first 72 bytes of its input, so passwords are first
reduced to their SHA256 hex digest (64 bytes); every byte of a long
password still counts.
"""

import hashlib

import bcrypt

from ..domain.auth import PasswordHasher

# bcrypt cost factor (2^rounds iterations)
BCRYPT_ROUNDS = 12


def _prehash(password: str) -> bytes:
    return hashlib.sha256(password.encode("utf-8")).hexdigest().encode("ascii")


class BcryptPasswordHasher(PasswordHasher):
    """Salted, cost-tunable password digests."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """
        Hash a password using bcrypt.

        Example:
            >>> hasher = BcryptPasswordHasher(rounds=4)
            >>> hasher.hash("my_password").startswith("$2b$")
            True
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_prehash(password), salt).decode("utf-8")

    def verify(self, password: str, digest: str) -> bool:
        """
        Verify a password against its hash.

        Malformed digests never match.
        """
        try:
            return bcrypt.checkpw(_prehash(password), digest.encode("utf-8"))
        except (ValueError, TypeError):
            return False
