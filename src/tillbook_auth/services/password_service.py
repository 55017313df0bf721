"""bcrypt password hashing."""

import bcrypt

from tillbook_auth.exceptions import WeakPasswordError


class PasswordHashingService:
    """Hash and check passwords with bcrypt.

    Passwords must be between ``MIN_LENGTH`` and ``MAX_LENGTH`` characters.
    bcrypt itself only looks at the first 72 bytes.
    """

    MIN_LENGTH = 8
    MAX_LENGTH = 128

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Return the bcrypt hash of ``password``.

        Raises
        ------
        WeakPasswordError
            If the password is outside the allowed length.
        """
        self.validate_strength(password)
        digest = bcrypt.hashpw(
            password.encode("utf-8")[:72],
            bcrypt.gensalt(rounds=self._rounds),
        )
        return digest.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8")[:72],
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Corrupt or foreign hash format
            return False

    def validate_strength(self, password: str) -> None:
        if not password or len(password) < self.MIN_LENGTH:
            raise WeakPasswordError(
                f"Password must be at least {self.MIN_LENGTH} characters",
            )
        if len(password) > self.MAX_LENGTH:
            raise WeakPasswordError(
                f"Password cannot exceed {self.MAX_LENGTH} characters",
            )
