"""Token value types."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class TokenType(str, Enum):
    ACCESS = "access"
    REFRESH = "refresh"


@dataclass(frozen=True)
class TokenPayload:
    """Claims decoded from a verified JWT."""

    user_id: UUID
    email: str
    token_type: TokenType
    expires_at: datetime

    @property
    def is_access_token(self) -> bool:
        return self.token_type is TokenType.ACCESS

    @property
    def is_refresh_token(self) -> bool:
        return self.token_type is TokenType.REFRESH


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str
    expires_in: int  # access token lifetime in seconds
