"""JWT issuing and verification."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from tillbook_auth.exceptions import InvalidTokenError
from tillbook_auth.schemas import TokenPair, TokenPayload, TokenType


class JWTService:
    """Issue and verify HS256-signed access and refresh tokens.

    Access tokens are short lived and sent as bearer tokens; refresh
    tokens are long lived and only accepted by the refresh endpoint.

    Examples
    --------
    >>> service = JWTService(secret_key="change-me")
    >>> pair = service.issue_pair(user_id, "owner@example.com")
    >>> service.verify_access_token(pair.access_token).email
    'owner@example.com'
    """

    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = 1,
        refresh_token_expire_days: int = 7,
    ):
        """
        Parameters
        ----------
        secret_key
            Signing secret. Must not be empty.
        access_token_expire_hours
            Lifetime of access tokens.
        refresh_token_expire_days
            Lifetime of refresh tokens.
        """
        if not secret_key:
            raise ValueError("JWT secret key cannot be empty")

        self._secret_key = secret_key
        self._lifetimes = {
            TokenType.ACCESS: timedelta(hours=access_token_expire_hours),
            TokenType.REFRESH: timedelta(days=refresh_token_expire_days),
        }

    @property
    def access_token_lifetime_seconds(self) -> int:
        return int(self._lifetimes[TokenType.ACCESS].total_seconds())

    def create_access_token(self, user_id: UUID, email: str) -> str:
        return self._encode(user_id, email, TokenType.ACCESS)

    def create_refresh_token(self, user_id: UUID, email: str) -> str:
        return self._encode(user_id, email, TokenType.REFRESH)

    def issue_pair(self, user_id: UUID, email: str) -> TokenPair:
        return TokenPair(
            access_token=self.create_access_token(user_id, email),
            refresh_token=self.create_refresh_token(user_id, email),
            expires_in=self.access_token_lifetime_seconds,
        )

    def verify_token(self, token: str) -> TokenPayload:
        """Decode a token of either type.

        Raises
        ------
        InvalidTokenError
            When the signature, expiry or claims are not valid.
        """
        try:
            claims = jwt.decode(token, self._secret_key, algorithms=[self.ALGORITHM])
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        try:
            return TokenPayload(
                user_id=UUID(claims["sub"]),
                email=claims["email"],
                token_type=TokenType(claims.get("type", TokenType.ACCESS.value)),
                expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
            )
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

    def verify_access_token(self, token: str) -> TokenPayload:
        payload = self.verify_token(token)
        if not payload.is_access_token:
            raise InvalidTokenError("Expected an access token")
        return payload

    def verify_refresh_token(self, token: str) -> TokenPayload:
        payload = self.verify_token(token)
        if not payload.is_refresh_token:
            raise InvalidTokenError("Expected a refresh token")
        return payload

    def _encode(self, user_id: UUID, email: str, token_type: TokenType) -> str:
        issued_at = datetime.now(tz=timezone.utc)
        claims = {
            "sub": str(user_id),
            "email": email,
            "type": token_type.value,
            "iat": issued_at,
            "exp": issued_at + self._lifetimes[token_type],
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.ALGORITHM)
