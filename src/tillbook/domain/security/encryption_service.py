"""Symmetric encryption for secrets stored at rest."""

from abc import ABC, abstractmethod


class EncryptionService(ABC):
    @abstractmethod
    def encrypt(self, plaintext: str) -> bytes:
        """
        Parameters
        ----------
        plaintext
            Secret to protect, e.g. an aggregator access token

        Raises
        ------
        EncryptionError
            If encryption fails
        """

    @abstractmethod
    def decrypt(self, ciphertext: bytes) -> str:
        """
        Raises
        ------
        DecryptionError
            If the key does not match or the data was tampered with
        """
