"""SQLAlchemy credential storage.

``AuthBase.metadata`` has to be created alongside the application's own
metadata; see ``tillbook.infrastructure.persistence.sqlalchemy.init_db``.
"""

from tillbook_auth.persistence.sqlalchemy.base import AuthBase
from tillbook_auth.persistence.sqlalchemy.user_credential_model import (
    UserCredentialModel,
)
from tillbook_auth.persistence.sqlalchemy.user_credential_repository import (
    UserCredentialRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
]
