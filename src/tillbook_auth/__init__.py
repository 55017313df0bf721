"""Tillbook Auth - credential and token handling.

Independent of the bookkeeping domain. Covers:
- Password hashing (bcrypt)
- JWT access/refresh tokens (PyJWT)
- Credential storage with lockout bookkeeping

Layout:
    tillbook_auth/
    ├── services/           # password hashing, JWT
    ├── repositories/       # abstract credential store
    ├── persistence/        # SQLAlchemy credential store
    ├── schemas.py
    └── exceptions.py
"""

from tillbook_auth.exceptions import (
    AccountLockedError,
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from tillbook_auth.repositories import (
    CredentialRecord,
    LockoutPolicy,
    UserCredentialRepository,
)
from tillbook_auth.schemas import TokenPair, TokenPayload, TokenType
from tillbook_auth.services import JWTService, PasswordHashingService

__all__ = [
    "AccountLockedError",
    "AuthError",
    "CredentialRecord",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "JWTService",
    "LockoutPolicy",
    "PasswordHashingService",
    "TokenPair",
    "TokenPayload",
    "TokenType",
    "UserCredentialRepository",
    "WeakPasswordError",
]
