from tillbook.domain.security.encryption_service import EncryptionService
from tillbook.domain.security.exceptions import DecryptionError, EncryptionError

__all__ = ["DecryptionError", "EncryptionError", "EncryptionService"]
