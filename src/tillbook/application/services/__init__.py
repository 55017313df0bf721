from tillbook.application.services.authentication_service import (
    DEV_USER_EMAIL,
    AuthenticationService,
    AuthResult,
)

__all__ = ["DEV_USER_EMAIL", "AuthResult", "AuthenticationService"]
