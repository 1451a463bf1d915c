# app/core/security.py
"""
Credential hashing (PBKDF2-SHA256 via passlib).
"""

from passlib.context import CryptContext


class PasswordHasher:
    """Password hashing and verification."""

    def __init__(self, rounds: int = 29000):
        self._context = CryptContext(
            schemes=["pbkdf2_sha256"],
            deprecated="auto",
            pbkdf2_sha256__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against a stored hash.

        Malformed hashes count as a mismatch rather than an error.
        """
        try:
            return self._context.verify(plain_password, hashed_password)
        except ValueError:
            return False


password_hasher = PasswordHasher()
