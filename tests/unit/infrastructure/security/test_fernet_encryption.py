"""Unit tests for FernetEncryptionService."""

import pytest

from tillbook.domain.security import DecryptionError
from tillbook.infrastructure.security import FernetEncryptionService


class TestFernetEncryptionService:
    def setup_method(self):
        self.service = FernetEncryptionService(FernetEncryptionService.generate_key())

    def test_round_trip(self):
        ciphertext = self.service.encrypt("access-sandbox-de3ce8ef")

        assert isinstance(ciphertext, bytes)
        assert b"access-sandbox" not in ciphertext
        assert self.service.decrypt(ciphertext) == "access-sandbox-de3ce8ef"

    def test_wrong_key_fails(self):
        other = FernetEncryptionService(FernetEncryptionService.generate_key())
        ciphertext = other.encrypt("secret")

        with pytest.raises(DecryptionError, match="wrong key"):
            self.service.decrypt(ciphertext)

    def test_tampered_data_fails(self):
        ciphertext = bytearray(self.service.encrypt("secret"))
        ciphertext[-5] ^= 0x01

        with pytest.raises(DecryptionError):
            self.service.decrypt(bytes(ciphertext))

    def test_invalid_key_is_rejected(self):
        with pytest.raises(ValueError, match="Invalid Fernet"):
            FernetEncryptionService("too-short")
