"""Fernet (AES-128-CBC + HMAC) implementation of EncryptionService."""

from cryptography.fernet import Fernet, InvalidToken

from tillbook.domain.security import (
    DecryptionError,
    EncryptionError,
    EncryptionService,
)


class FernetEncryptionService(EncryptionService):
    def __init__(self, encryption_key: str | bytes):
        key = encryption_key.encode("ascii") if isinstance(encryption_key, str) else encryption_key
        try:
            self._fernet = Fernet(key)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Invalid Fernet encryption key: {e}") from e

    def encrypt(self, plaintext: str) -> bytes:
        try:
            return self._fernet.encrypt(plaintext.encode("utf-8"))
        except (TypeError, AttributeError) as e:
            raise EncryptionError(f"Encryption failed: {e}") from e

    def decrypt(self, ciphertext: bytes) -> str:
        try:
            return self._fernet.decrypt(ciphertext).decode("utf-8")
        except InvalidToken as e:
            raise DecryptionError(
                "Decryption failed: wrong key or tampered data",
            ) from e
        except (TypeError, UnicodeDecodeError) as e:
            raise DecryptionError(f"Decryption failed: {e}") from e

    @staticmethod
    def generate_key() -> str:
        return Fernet.generate_key().decode("ascii")
