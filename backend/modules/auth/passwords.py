"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic salting and a work
factor fixed at construction time.
"""

import bcrypt


class PasswordHasher:
    """bcrypt hasher with a fixed cost factor."""

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds
        # Digest compared against when the account does not exist, so the
        # unknown-email path pays the same bcrypt cost as a wrong password.
        self._dummy_hash = bcrypt.hashpw(
            b"dummy-password", bcrypt.gensalt(rounds=rounds)
        ).decode()

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a password with bcrypt (random salt embedded in the digest)."""
        return bcrypt.hashpw(
            password.encode("utf-8"), bcrypt.gensalt(rounds=self._rounds)
        ).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time comparison against a bcrypt hash."""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode())
        except (ValueError, TypeError):
            return False

    def verify_dummy(self, password: str) -> bool:
        """Burn one verification for a user that does not exist. Always False."""
        self.verify(password, self._dummy_hash)
        return False
