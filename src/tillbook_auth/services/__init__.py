from tillbook_auth.services.jwt_service import JWTService
from tillbook_auth.services.password_service import PasswordHashingService

__all__ = ["JWTService", "PasswordHashingService"]
