from tillbook.infrastructure.security.encryption_service_fernet import (
    FernetEncryptionService,
)

__all__ = ["FernetEncryptionService"]
