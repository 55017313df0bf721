from tillbook_auth.repositories.user_credential_repository import (
    CredentialRecord,
    LockoutPolicy,
    UserCredentialRepository,
)

__all__ = ["CredentialRecord", "LockoutPolicy", "UserCredentialRepository"]
