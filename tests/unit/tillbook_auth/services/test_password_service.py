"""Unit tests for PasswordHashingService."""

import pytest

from tillbook_auth.exceptions import WeakPasswordError
from tillbook_auth.services import PasswordHashingService


class TestPasswordHashingService:
    def setup_method(self):
        # Minimum bcrypt cost keeps the suite fast
        self.service = PasswordHashingService(rounds=4)

    def test_hash_and_verify(self):
        password_hash = self.service.hash("correct horse battery")

        assert password_hash.startswith("$2")
        assert self.service.verify("correct horse battery", password_hash)
        assert not self.service.verify("wrong password", password_hash)

    def test_hashes_are_salted(self):
        assert self.service.hash("samepassword") != self.service.hash("samepassword")

    def test_short_password_is_rejected(self):
        with pytest.raises(WeakPasswordError, match="at least 8"):
            self.service.hash("short")

    def test_long_password_is_rejected(self):
        with pytest.raises(WeakPasswordError, match="exceed 128"):
            self.service.hash("x" * 129)

    def test_verify_with_corrupt_hash_returns_false(self):
        assert not self.service.verify("whatever1", "not-a-bcrypt-hash")
