"""
Adapter: Password hashing using bcrypt.

Implements PasswordHasher port on top of passlib's CryptContext.
"""

from passlib.context import CryptContext

from app.domain.blogging.ports import PasswordHasher

DEFAULT_ROUNDS = 10


class BcryptPasswordHasher(PasswordHasher):
    """Password hashing and verification using bcrypt."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """
        Hash a password using bcrypt.

        Args:
            password: Plain text password to hash

        Returns:
            Hashed password string, salt and cost factor included
        """
        return self._context.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        """
        Verify a password against a hash.

        Returns:
            True if password matches, False otherwise
        """
        return self._context.verify(password, hashed)
